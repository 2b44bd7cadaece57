"""
Domain error taxonomy and its HTTP mapping.

Every failure a money-movement operation can report is one of the
``BankingError`` subclasses below. Services raise them; the API layer
turns them into ``{"detail": ..., "code": ...}`` responses.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

log = logging.getLogger(__name__)


class BankingError(Exception):
    """Base class for errors reported to callers."""

    code = "banking_error"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Request could not be processed"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(BankingError):
    """Bad input shape or range. Raised before any row is locked."""

    code = "validation_error"
    default_message = "Invalid request"


class NotFoundError(BankingError):
    """Referenced account or loan is absent, inactive, or not the caller's."""

    code = "not_found"
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class InsufficientFundsError(BankingError):
    code = "insufficient_funds"
    default_message = "Insufficient balance"


class SameAccountError(BankingError):
    code = "same_account"
    default_message = "Cannot transfer to the same account"


class PermissionDeniedError(BankingError):
    """Caller's role does not grant the operation."""

    code = "permission_denied"
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "You do not have permission to perform this action"


class AlreadyProcessedError(BankingError):
    code = "already_processed"
    status_code = status.HTTP_409_CONFLICT
    default_message = "Loan has already been processed"


class NoEligibleAccountError(BankingError):
    code = "no_eligible_account"
    default_message = "Customer has no active checking account"


class DuplicatePendingLoanError(BankingError):
    code = "duplicate_pending_loan"
    status_code = status.HTTP_409_CONFLICT
    default_message = "You already have a pending loan application"


class InternalError(BankingError):
    """Store-level failure. The message never carries store details."""

    code = "internal_error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal error"

    def __init__(self, message=None):
        super().__init__(self.default_message)


async def banking_error_handler(request: Request, exc: BankingError) -> JSONResponse:
    if exc.status_code >= 500:
        log.error("%s %s failed: %s", request.method, request.url.path, exc.code)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "code": exc.code},
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are reported like any other ValidationError."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return JSONResponse(
        status_code=ValidationError.status_code,
        content={"detail": "; ".join(problems) or ValidationError.default_message, "code": ValidationError.code},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BankingError, banking_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
