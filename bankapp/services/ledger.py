"""
Account access and ledger helpers shared by the money-movement operations.

These helpers never open or close a transaction themselves; callers run
them inside ``atomic_unit``.
"""

from decimal import Decimal, InvalidOperation
from typing import Dict, Iterable, Optional

from sqlalchemy.orm import Session

from bankapp.core.errors import InsufficientFundsError, ValidationError
from bankapp.models.account import Account, AccountStatus, AccountType
from bankapp.models.transaction import Transaction, TransactionType

CENT = Decimal("0.01")

# Largest value a Numeric(15, 2) column holds
MAX_AMOUNT = Decimal("9999999999999.99")


def coerce_amount(value, field: str = "amount") -> Decimal:
    """
    Convert a caller-supplied amount into a positive two-place Decimal.

    Floats are read through their string form so ``0.1`` means one dime.
    Anything that is not a finite, positive, whole number of cents raises
    ``ValidationError``.
    """
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field} is required")

    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field} must be a number")

    if not amount.is_finite() or amount <= 0:
        raise ValidationError(f"{field} must be a positive number")
    # Bounded first so quantize stays within decimal context precision
    if amount > MAX_AMOUNT:
        raise ValidationError(f"{field} is too large")
    if amount != amount.quantize(CENT):
        raise ValidationError(f"{field} cannot have fractions of a cent")

    return amount.quantize(CENT)


def require_id(value, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(f"{field} is required")
    return value


def require_text(value, field: str, max_length: int) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} is required")
    value = value.strip()
    if len(value) > max_length:
        raise ValidationError(f"{field} must be at most {max_length} characters")
    return value


def optional_text(value, field: str, max_length: int) -> Optional[str]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return require_text(value, field, max_length)


def find_account_id_by_number(db: Session, account_number: str) -> Optional[int]:
    """Resolve an Active account's id by number without locking it."""
    return db.query(Account.account_id).filter(
        Account.account_number == account_number,
        Account.status == AccountStatus.ACTIVE
    ).scalar()


def lock_accounts(db: Session, account_ids: Iterable[int]) -> Dict[int, Account]:
    """
    Lock account rows (SELECT ... FOR UPDATE) and return them keyed by id.

    Rows are always locked in ascending account_id order so two operations
    touching the same pair of accounts cannot deadlock. Ids with no row are
    absent from the result.
    """
    locked = {}
    for account_id in sorted(set(account_ids)):
        account = db.query(Account).filter(
            Account.account_id == account_id
        ).with_for_update().populate_existing().one_or_none()

        if account is not None:
            locked[account_id] = account
    return locked


def lock_primary_checking_account(db: Session, customer_id: int) -> Optional[Account]:
    """Lock the customer's lowest-numbered Active Checking account."""
    return db.query(Account).filter(
        Account.customer_id == customer_id,
        Account.account_type == AccountType.CHECKING,
        Account.status == AccountStatus.ACTIVE
    ).order_by(Account.account_id).with_for_update().populate_existing().first()


def debit(account: Account, amount: Decimal) -> None:
    if account.balance < amount:
        raise InsufficientFundsError()
    account.balance = account.balance - amount


def credit(account: Account, amount: Decimal) -> None:
    account.balance = account.balance + amount


def append_entry(
    db: Session,
    *,
    transaction_type: TransactionType,
    amount: Decimal,
    from_account_id: Optional[int] = None,
    to_account_id: Optional[int] = None,
    description: Optional[str] = None,
) -> Transaction:
    """Insert a ledger row and flush so its store-generated id is set."""
    entry = Transaction(
        from_account_id=from_account_id,
        to_account_id=to_account_id,
        amount=amount,
        transaction_type=transaction_type,
        description=description
    )
    db.add(entry)
    db.flush()
    return entry
