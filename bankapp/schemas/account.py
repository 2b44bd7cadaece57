"""
Pydantic schemas for Account API responses.
"""

from pydantic import BaseModel, ConfigDict
from decimal import Decimal

from bankapp.models.account import AccountType, AccountStatus


class AccountResponse(BaseModel):
    """Schema for account response."""
    account_id: int
    account_number: str
    account_type: AccountType
    balance: Decimal
    status: AccountStatus

    model_config = ConfigDict(from_attributes=True)
