"""
Transaction history endpoints.
Lists ledger entries touching the caller's accounts.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload
from typing import List, Optional

from bankapp.core.config import settings
from bankapp.core.errors import NotFoundError
from bankapp.core.security import Caller, require_customer
from bankapp.database import get_db
from bankapp.models.account import Account
from bankapp.models.transaction import Transaction
from bankapp.schemas.transaction import TransactionResponse

router = APIRouter(prefix="/transactions", tags=["Transactions"])


@router.get("/", response_model=List[TransactionResponse])
def list_transactions(
    account_id: Optional[int] = None,
    limit: int = Query(settings.TRANSACTION_HISTORY_LIMIT, ge=1, le=500),
    caller: Caller = Depends(require_customer),
    db: Session = Depends(get_db)
):
    """
    Recent ledger entries, newest first.

    - **account_id**: Restrict to one of the caller's accounts (default: all of them)
    - **limit**: Maximum number of entries to return
    """
    owned = db.query(Account.account_id).filter(Account.customer_id == caller.user_id)
    if account_id is not None:
        owned = owned.filter(Account.account_id == account_id)

    account_ids = [row.account_id for row in owned.all()]
    if not account_ids:
        if account_id is not None:
            raise NotFoundError("Account not found")
        return []

    return db.query(Transaction).options(
        joinedload(Transaction.from_account),
        joinedload(Transaction.to_account)
    ).filter(
        or_(
            Transaction.from_account_id.in_(account_ids),
            Transaction.to_account_id.in_(account_ids)
        )
    ).order_by(
        Transaction.transaction_date.desc(),
        Transaction.transaction_id.desc()
    ).limit(limit).all()
