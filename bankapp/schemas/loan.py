"""
Pydantic schemas for loan applications and decisions.
"""

import enum
from pydantic import BaseModel, Field, ConfigDict
from decimal import Decimal
from datetime import datetime

from bankapp.models.loan import LoanStatus


class LoanDecision(str, enum.Enum):
    APPROVE = "approve"
    REJECT = "reject"


class LoanApplicationRequest(BaseModel):
    """Schema for a customer's loan application."""
    loan_amount: Decimal = Field(..., gt=0, max_digits=15, decimal_places=2, description="Requested principal")
    term_months: int = Field(..., gt=0, description="Repayment term in months")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "loan_amount": 10000.00,
                "term_months": 36
            }
        }
    )


class LoanApplicationResult(BaseModel):
    message: str = "Loan application submitted successfully"
    loan_id: int


class LoanDecisionRequest(BaseModel):
    """Schema for an employee's decision on a pending loan."""
    decision: LoanDecision


class LoanDecisionResult(BaseModel):
    message: str
    loan_id: int
    status: LoanStatus


class LoanResponse(BaseModel):
    """Schema for loan response."""
    loan_id: int
    loan_amount: Decimal
    interest_rate: Decimal
    term_months: int
    status: LoanStatus
    application_date: datetime

    model_config = ConfigDict(from_attributes=True)


class LoanApplicationReview(LoanResponse):
    """Pending application with the figures a loan officer reviews."""
    customer_id: int
    customer_name: str
    customer_email: str
    total_balance: Decimal
    active_loans_count: int
