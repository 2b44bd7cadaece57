"""
Funds transfer between two accounts.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from bankapp.core.errors import BankingError, NotFoundError, SameAccountError
from bankapp.database import atomic_unit
from bankapp.models.transaction import TransactionType
from bankapp.services.ledger import (
    append_entry,
    coerce_amount,
    credit,
    debit,
    find_account_id_by_number,
    lock_accounts,
    optional_text,
    require_id,
    require_text,
)

log = logging.getLogger(__name__)


def transfer(
    db: Session,
    customer_id: int,
    from_account_id: int,
    to_account_number: str,
    amount,
    description: Optional[str] = None,
) -> int:
    """
    Move ``amount`` from one of the customer's accounts to the account
    numbered ``to_account_number``.

    Both rows are locked in account_id order, the source is debited, the
    destination credited, and one Transfer ledger entry appended, all in one
    atomic unit.

    Returns:
        The new ledger entry's transaction_id

    Raises:
        ValidationError: missing field, or amount not a positive cent amount
        NotFoundError: source not the caller's Active account, or no Active
            account with that number
        SameAccountError: destination is the source account
        InsufficientFundsError: source balance below amount
        InternalError: the store failed; nothing was applied
    """
    amount = coerce_amount(amount)
    from_account_id = require_id(from_account_id, "from_account_id")
    to_account_number = require_text(to_account_number, "to_account_number", 20)
    description = optional_text(description, "description", 500) or f"Transfer to {to_account_number}"

    try:
        with atomic_unit(db):
            destination_id = find_account_id_by_number(db, to_account_number)

            locked = lock_accounts(db, [from_account_id] + ([destination_id] if destination_id is not None else []))

            source = locked.get(from_account_id)
            if source is None or source.customer_id != customer_id or not source.is_active:
                raise NotFoundError("Invalid source account")

            if destination_id == source.account_id:
                raise SameAccountError()

            debit(source, amount)

            # Status can change between the lookup and the lock
            destination = locked.get(destination_id)
            if destination is None or not destination.is_active:
                raise NotFoundError("Recipient account not found")

            credit(destination, amount)

            entry = append_entry(
                db,
                transaction_type=TransactionType.TRANSFER,
                amount=amount,
                from_account_id=source.account_id,
                to_account_id=destination.account_id,
                description=description
            )
            transaction_id = entry.transaction_id
    except BankingError as exc:
        log.info("Transfer of %s from account %s rejected: %s", amount, from_account_id, exc.code)
        raise

    log.info(
        "Transfer %s committed: %s from account %s to %s",
        transaction_id, amount, from_account_id, to_account_number
    )
    return transaction_id
