"""
Loan application intake and the loan decision workflow.

A loan moves Pending -> Approved | Rejected. Approval disburses the
principal into the customer's primary checking account in the same atomic
unit as the status change.
"""

import logging

from sqlalchemy.orm import Session

from bankapp.core.config import settings
from bankapp.core.errors import (
    AlreadyProcessedError,
    BankingError,
    DuplicatePendingLoanError,
    NoEligibleAccountError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from bankapp.core.security import Caller
from bankapp.database import atomic_unit
from bankapp.models.customer import Customer
from bankapp.models.loan import Loan, LoanStatus
from bankapp.models.transaction import TransactionType
from bankapp.schemas.loan import LoanDecision
from bankapp.services.ledger import (
    append_entry,
    coerce_amount,
    credit,
    lock_primary_checking_account,
    require_id,
)

log = logging.getLogger(__name__)

DISBURSEMENT_DESCRIPTION = "Loan disbursement"


def apply_for_loan(db: Session, customer_id: int, loan_amount, term_months: int) -> int:
    """
    Record a new Pending loan application and return its loan_id.

    A customer may hold only one Pending application; the customer row is
    locked while that is checked so concurrent applications serialize.
    """
    amount = coerce_amount(loan_amount, "loan_amount")
    if not settings.LOAN_MIN_AMOUNT <= amount <= settings.LOAN_MAX_AMOUNT:
        raise ValidationError(
            f"Invalid loan amount. Must be between ${settings.LOAN_MIN_AMOUNT:,} and ${settings.LOAN_MAX_AMOUNT:,}"
        )
    if isinstance(term_months, bool) or term_months not in settings.LOAN_TERMS_MONTHS:
        raise ValidationError("Invalid loan term")

    try:
        with atomic_unit(db):
            customer = db.query(Customer).filter(
                Customer.customer_id == customer_id
            ).with_for_update().one_or_none()
            if customer is None:
                raise NotFoundError("Customer not found")

            pending = db.query(Loan.loan_id).filter(
                Loan.customer_id == customer_id,
                Loan.status == LoanStatus.PENDING
            ).first()
            if pending is not None:
                raise DuplicatePendingLoanError()

            loan = Loan(
                customer_id=customer_id,
                loan_amount=amount,
                interest_rate=settings.LOAN_INTEREST_RATE,
                term_months=term_months,
                status=LoanStatus.PENDING
            )
            db.add(loan)
            db.flush()
            loan_id = loan.loan_id
    except BankingError as exc:
        log.info("Loan application by customer %s rejected: %s", customer_id, exc.code)
        raise

    log.info("Loan %s submitted by customer %s for %s over %s months", loan_id, customer_id, amount, term_months)
    return loan_id


def disburse_loan(db: Session, loan: Loan) -> int:
    """
    Credit the loan principal to the customer's primary checking account.

    Must run inside the atomic unit that approves ``loan``. Returns the
    Deposit ledger entry's transaction_id.
    """
    account = lock_primary_checking_account(db, loan.customer_id)
    if account is None:
        raise NoEligibleAccountError()

    credit(account, loan.loan_amount)

    entry = append_entry(
        db,
        transaction_type=TransactionType.DEPOSIT,
        amount=loan.loan_amount,
        to_account_id=account.account_id,
        description=DISBURSEMENT_DESCRIPTION
    )
    return entry.transaction_id


def decide_loan(db: Session, caller: Caller, loan_id: int, decision) -> Loan:
    """
    Approve or reject a Pending loan on behalf of a loan officer or admin.

    Approval and its disbursement commit together. Deciding a loan that is
    no longer Pending raises ``AlreadyProcessedError`` and changes nothing.
    """
    if not caller.can_decide_loans():
        raise PermissionDeniedError("You do not have permission to approve loans")

    loan_id = require_id(loan_id, "loan_id")
    try:
        decision = LoanDecision(decision)
    except ValueError:
        raise ValidationError("Invalid decision")

    new_status = LoanStatus.APPROVED if decision is LoanDecision.APPROVE else LoanStatus.REJECTED

    try:
        with atomic_unit(db):
            loan = db.query(Loan).filter(
                Loan.loan_id == loan_id
            ).with_for_update().populate_existing().one_or_none()

            if loan is None:
                raise NotFoundError("Loan not found")
            if loan.status != LoanStatus.PENDING:
                raise AlreadyProcessedError()

            loan.transition_to(new_status)
            loan.approved_by_employee_id = caller.user_id

            if new_status == LoanStatus.APPROVED:
                disburse_loan(db, loan)
    except BankingError as exc:
        log.info("Decision on loan %s by employee %s rejected: %s", loan_id, caller.user_id, exc.code)
        raise

    log.info("Loan %s %s by employee %s", loan_id, new_status.value, caller.user_id)
    return loan
