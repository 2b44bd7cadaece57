"""
Loan endpoints.
Customers apply for and track loans; employees review and decide them.
"""

from decimal import Decimal

from fastapi import APIRouter, Depends, status
from sqlalchemy import func
from sqlalchemy.orm import Session
from typing import List

from bankapp.core.security import Caller, require_customer, require_employee
from bankapp.database import get_db
from bankapp.models.account import Account
from bankapp.models.customer import Customer
from bankapp.models.loan import Loan, LoanStatus
from bankapp.schemas.loan import (
    LoanApplicationRequest,
    LoanApplicationResult,
    LoanApplicationReview,
    LoanDecision,
    LoanDecisionRequest,
    LoanDecisionResult,
    LoanResponse,
)
from bankapp import services

router = APIRouter(prefix="/loans", tags=["Loans"])
admin_router = APIRouter(prefix="/admin", tags=["Loan Administration"])


@router.get("/", response_model=List[LoanResponse])
def list_loans(
    caller: Caller = Depends(require_customer),
    db: Session = Depends(get_db)
):
    """
    List the caller's loans, newest application first.
    """
    return db.query(Loan).filter(
        Loan.customer_id == caller.user_id
    ).order_by(Loan.application_date.desc(), Loan.loan_id.desc()).all()


@router.post("/", response_model=LoanApplicationResult, status_code=status.HTTP_201_CREATED)
def apply_for_loan(
    application: LoanApplicationRequest,
    caller: Caller = Depends(require_customer),
    db: Session = Depends(get_db)
):
    """
    Submit a loan application.

    - **loan_amount**: Requested principal
    - **term_months**: One of the offered terms (12, 24, 36, 48 or 60 by default)
    """
    loan_id = services.apply_for_loan(
        db,
        customer_id=caller.user_id,
        loan_amount=application.loan_amount,
        term_months=application.term_months
    )
    return LoanApplicationResult(loan_id=loan_id)


@admin_router.get("/loan-applications/", response_model=List[LoanApplicationReview])
def list_loan_applications(
    caller: Caller = Depends(require_employee),
    db: Session = Depends(get_db)
):
    """
    Pending applications, oldest first, with the applicant's balance and
    number of approved loans.
    """
    balances = db.query(
        Account.customer_id,
        func.coalesce(func.sum(Account.balance), 0).label("total_balance")
    ).group_by(Account.customer_id).subquery()

    approved = db.query(
        Loan.customer_id,
        func.count(Loan.loan_id).label("active_loans_count")
    ).filter(Loan.status == LoanStatus.APPROVED).group_by(Loan.customer_id).subquery()

    rows = db.query(
        Loan,
        Customer,
        balances.c.total_balance,
        approved.c.active_loans_count
    ).join(
        Customer, Customer.customer_id == Loan.customer_id
    ).outerjoin(
        balances, balances.c.customer_id == Loan.customer_id
    ).outerjoin(
        approved, approved.c.customer_id == Loan.customer_id
    ).filter(
        Loan.status == LoanStatus.PENDING
    ).order_by(Loan.application_date, Loan.loan_id).all()

    return [
        LoanApplicationReview(
            loan_id=loan.loan_id,
            customer_id=customer.customer_id,
            customer_name=customer.full_name,
            customer_email=customer.email,
            loan_amount=loan.loan_amount,
            interest_rate=loan.interest_rate,
            term_months=loan.term_months,
            status=loan.status,
            application_date=loan.application_date,
            total_balance=Decimal(str(total_balance or 0)),
            active_loans_count=active_loans_count or 0
        )
        for loan, customer, total_balance, active_loans_count in rows
    ]


@admin_router.put("/loans/{loan_id}", response_model=LoanDecisionResult)
def decide_loan(
    loan_id: int,
    decision_data: LoanDecisionRequest,
    caller: Caller = Depends(require_employee),
    db: Session = Depends(get_db)
):
    """
    Approve or reject a pending loan. Approval deposits the principal into
    the customer's primary checking account.
    """
    loan = services.decide_loan(db, caller, loan_id, decision_data.decision)
    verb = "approved" if decision_data.decision is LoanDecision.APPROVE else "rejected"
    return LoanDecisionResult(
        message=f"Loan {verb} successfully",
        loan_id=loan.loan_id,
        status=loan.status
    )
