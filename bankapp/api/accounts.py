"""
Account API endpoints.
Read-only views of the caller's own accounts.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from bankapp.core.errors import NotFoundError
from bankapp.core.security import Caller, require_customer
from bankapp.database import get_db
from bankapp.models.account import Account
from bankapp.schemas.account import AccountResponse

router = APIRouter(prefix="/accounts", tags=["Accounts"])


@router.get("/", response_model=List[AccountResponse])
def list_accounts(
    caller: Caller = Depends(require_customer),
    db: Session = Depends(get_db)
):
    """
    List the caller's accounts, checking before savings.
    """
    return db.query(Account).filter(
        Account.customer_id == caller.user_id
    ).order_by(Account.account_type, Account.account_id).all()


@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: int,
    caller: Caller = Depends(require_customer),
    db: Session = Depends(get_db)
):
    """
    Get one of the caller's accounts by ID.
    """
    account = db.query(Account).filter(
        Account.account_id == account_id,
        Account.customer_id == caller.user_id
    ).first()

    if not account:
        raise NotFoundError("Account not found")

    return account
