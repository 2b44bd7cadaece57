"""
Account database model.
Represents customer bank accounts.
"""

import enum
from datetime import datetime, timezone

from sqlalchemy import Column, String, Numeric, DateTime, Integer, ForeignKey, CheckConstraint, Enum as SQLEnum
from sqlalchemy.orm import relationship

from bankapp.database import Base


class AccountType(enum.Enum):
    CHECKING = "Checking"
    SAVINGS = "Savings"


class AccountStatus(enum.Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    CLOSED = "Closed"


class Account(Base):
    """
    Account table - balances mutated only by money-movement operations.
    Accounts are never deleted; closed accounts stay for history.
    """
    __tablename__ = "accounts"
    __table_args__ = (
        CheckConstraint("balance >= 0", name="ck_accounts_balance_non_negative"),
    )

    account_id = Column(Integer, primary_key=True, autoincrement=True)
    customer_id = Column(Integer, ForeignKey("customers.customer_id"), index=True, nullable=False)
    account_number = Column(String(20), unique=True, index=True, nullable=False)
    account_type = Column(
        SQLEnum(AccountType, name="account_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    balance = Column(Numeric(precision=15, scale=2), nullable=False, default=0)
    status = Column(
        SQLEnum(AccountStatus, name="account_status", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=AccountStatus.ACTIVE,
    )
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)

    customer = relationship("Customer", back_populates="accounts")

    @property
    def is_active(self):
        return self.status == AccountStatus.ACTIVE

    def __repr__(self):
        return f"<Account(account_id={self.account_id}, number={self.account_number}, balance={self.balance})>"
