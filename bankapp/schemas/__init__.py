"""
Pydantic schemas package.
"""

from bankapp.schemas.account import AccountResponse
from bankapp.schemas.transaction import (
    TransferRequest,
    TransferResult,
    BillPaymentRequest,
    BillPaymentResult,
    TransactionResponse,
)
from bankapp.schemas.loan import (
    LoanDecision,
    LoanApplicationRequest,
    LoanApplicationResult,
    LoanDecisionRequest,
    LoanDecisionResult,
    LoanResponse,
    LoanApplicationReview,
)

__all__ = [
    "AccountResponse",
    "TransferRequest",
    "TransferResult",
    "BillPaymentRequest",
    "BillPaymentResult",
    "TransactionResponse",
    "LoanDecision",
    "LoanApplicationRequest",
    "LoanApplicationResult",
    "LoanDecisionRequest",
    "LoanDecisionResult",
    "LoanResponse",
    "LoanApplicationReview",
]
