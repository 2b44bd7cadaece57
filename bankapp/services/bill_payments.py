"""
Bill payment from a customer's account to an external biller.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from bankapp.core.errors import BankingError, NotFoundError
from bankapp.database import atomic_unit
from bankapp.models.transaction import BillPayment, TransactionType
from bankapp.services.ledger import (
    append_entry,
    coerce_amount,
    debit,
    lock_accounts,
    optional_text,
    require_id,
    require_text,
)

log = logging.getLogger(__name__)


def pay_bill(
    db: Session,
    customer_id: int,
    account_id: int,
    biller_name: str,
    biller_account_number: str,
    amount,
    description: Optional[str] = None,
) -> int:
    """
    Debit the customer's account and record the bill payment.

    The debit, the Bill Payment ledger entry and the BillPayment row commit
    together or not at all. Returns the new payment_id.
    """
    amount = coerce_amount(amount)
    account_id = require_id(account_id, "account_id")
    biller_name = require_text(biller_name, "biller_name", 100)
    biller_account_number = require_text(biller_account_number, "biller_account_number", 50)
    description = optional_text(description, "description", 500) or f"Bill payment to {biller_name}"

    try:
        with atomic_unit(db):
            account = lock_accounts(db, [account_id]).get(account_id)
            if account is None or account.customer_id != customer_id or not account.is_active:
                raise NotFoundError("Invalid account")

            debit(account, amount)

            entry = append_entry(
                db,
                transaction_type=TransactionType.BILL_PAYMENT,
                amount=amount,
                from_account_id=account.account_id,
                description=description
            )

            payment = BillPayment(
                account_id=account.account_id,
                transaction_id=entry.transaction_id,
                biller_name=biller_name,
                biller_account_number=biller_account_number,
                amount=amount
            )
            db.add(payment)
            db.flush()
            payment_id = payment.payment_id
    except BankingError as exc:
        log.info("Bill payment of %s from account %s rejected: %s", amount, account_id, exc.code)
        raise

    log.info("Bill payment %s committed: %s from account %s to %s", payment_id, amount, account_id, biller_name)
    return payment_id
