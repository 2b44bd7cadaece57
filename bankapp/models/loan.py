"""
Loan database model.
Represents loan applications and their decision state.
"""

import enum
from datetime import datetime, timezone

from sqlalchemy import Column, Numeric, DateTime, Integer, ForeignKey, Enum as SQLEnum
from sqlalchemy.orm import relationship

from bankapp.database import Base


class LoanStatus(enum.Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    PAID_OFF = "Paid Off"


# Allowed status transitions; Rejected and Paid Off are terminal
LOAN_TRANSITIONS = {
    LoanStatus.PENDING: frozenset({LoanStatus.APPROVED, LoanStatus.REJECTED}),
    LoanStatus.APPROVED: frozenset({LoanStatus.PAID_OFF}),
    LoanStatus.REJECTED: frozenset(),
    LoanStatus.PAID_OFF: frozenset(),
}


class Loan(Base):
    """
    Loan table - one row per application.
    """
    __tablename__ = "loans"
    __table_args__ = {"sqlite_autoincrement": True}

    loan_id = Column(Integer, primary_key=True, autoincrement=True)
    customer_id = Column(Integer, ForeignKey("customers.customer_id"), index=True, nullable=False)
    loan_amount = Column(Numeric(precision=15, scale=2), nullable=False)
    interest_rate = Column(Numeric(precision=5, scale=2), nullable=False)
    term_months = Column(Integer, nullable=False)
    status = Column(
        SQLEnum(LoanStatus, name="loan_status", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=LoanStatus.PENDING,
        index=True,
    )
    application_date = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)
    approved_by_employee_id = Column(Integer, ForeignKey("employees.employee_id"), nullable=True)

    customer = relationship("Customer", back_populates="loans")
    approved_by = relationship("Employee")

    def can_transition(self, new_status):
        return new_status in LOAN_TRANSITIONS[self.status]

    def transition_to(self, new_status):
        if not self.can_transition(new_status):
            raise ValueError(f"Loan {self.loan_id} cannot move from {self.status.value} to {new_status.value}")
        self.status = new_status

    def __repr__(self):
        return f"<Loan(loan_id={self.loan_id}, customer={self.customer_id}, amount={self.loan_amount}, status={self.status})>"
