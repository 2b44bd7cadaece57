"""
Ledger database models.
Transactions and bill payments are append-only: rows are inserted by
money-movement operations and never updated or deleted.
"""

import enum
from datetime import datetime, timezone

from sqlalchemy import (
    Column, String, Numeric, DateTime, Integer, ForeignKey, CheckConstraint, Enum as SQLEnum, event,
)
from sqlalchemy.exc import InvalidRequestError
from sqlalchemy.orm import relationship

from bankapp.database import Base


class TransactionType(enum.Enum):
    """Kinds of value movement recorded in the ledger."""
    TRANSFER = "Transfer"
    DEPOSIT = "Deposit"
    WITHDRAWAL = "Withdrawal"
    BILL_PAYMENT = "Bill Payment"


class Transaction(Base):
    """
    Transaction table - one row per balance movement.
    A null side means money entered or left the bank.
    """
    __tablename__ = "transactions"
    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_transactions_positive_amount"),
        CheckConstraint(
            "from_account_id IS NOT NULL OR to_account_id IS NOT NULL",
            name="ck_transactions_has_account",
        ),
        {"sqlite_autoincrement": True},
    )

    transaction_id = Column(Integer, primary_key=True, autoincrement=True)
    from_account_id = Column(Integer, ForeignKey("accounts.account_id"), index=True, nullable=True)
    to_account_id = Column(Integer, ForeignKey("accounts.account_id"), index=True, nullable=True)
    amount = Column(Numeric(precision=15, scale=2), nullable=False)
    transaction_type = Column(
        SQLEnum(TransactionType, name="transaction_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    description = Column(String(500), nullable=True)
    transaction_date = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), index=True, nullable=False)

    # Relationships
    from_account = relationship("Account", foreign_keys=[from_account_id])
    to_account = relationship("Account", foreign_keys=[to_account_id])

    @property
    def from_account_number(self):
        return self.from_account.account_number if self.from_account else None

    @property
    def to_account_number(self):
        return self.to_account.account_number if self.to_account else None

    def __repr__(self):
        return f"<Transaction(id={self.transaction_id}, from={self.from_account_id}, to={self.to_account_id}, amount={self.amount})>"


class BillPayment(Base):
    """
    Bill payment table - paired 1:1 with a Bill Payment ledger row.
    """
    __tablename__ = "billpayments"
    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_billpayments_positive_amount"),
        {"sqlite_autoincrement": True},
    )

    payment_id = Column(Integer, primary_key=True, autoincrement=True)
    account_id = Column(Integer, ForeignKey("accounts.account_id"), index=True, nullable=False)
    transaction_id = Column(Integer, ForeignKey("transactions.transaction_id"), unique=True, nullable=False)
    biller_name = Column(String(100), nullable=False)
    biller_account_number = Column(String(50), nullable=False)
    amount = Column(Numeric(precision=15, scale=2), nullable=False)
    payment_date = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)

    account = relationship("Account")
    transaction = relationship("Transaction")

    def __repr__(self):
        return f"<BillPayment(id={self.payment_id}, account={self.account_id}, biller={self.biller_name}, amount={self.amount})>"


@event.listens_for(Transaction, "before_update")
@event.listens_for(Transaction, "before_delete")
@event.listens_for(BillPayment, "before_update")
@event.listens_for(BillPayment, "before_delete")
def _reject_ledger_rewrite(mapper, connection, target):
    raise InvalidRequestError(f"{target!r} is append-only")
