"""
Pydantic schemas for transfer and bill payment requests and responses.
"""

from pydantic import BaseModel, Field, ConfigDict
from decimal import Decimal
from datetime import datetime
from typing import Optional

from bankapp.models.transaction import TransactionType


class TransferRequest(BaseModel):
    """Schema for initiating a transfer."""
    from_account_id: int = Field(..., gt=0, description="Source account ID (must belong to the caller)")
    to_account_number: str = Field(..., min_length=1, max_length=20, description="Destination account number")
    amount: Decimal = Field(..., gt=0, max_digits=15, decimal_places=2, description="Transfer amount (must be positive)")
    description: Optional[str] = Field(None, max_length=500, description="Optional transfer description")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "from_account_id": 1,
                "to_account_number": "CHK-1002",
                "amount": 250.00,
                "description": "Rent share"
            }
        }
    )


class TransferResult(BaseModel):
    """Schema for a completed transfer."""
    message: str = "Transfer successful"
    transaction_id: int


class BillPaymentRequest(BaseModel):
    """Schema for paying a bill from one of the caller's accounts."""
    account_id: int = Field(..., gt=0, description="Paying account ID (must belong to the caller)")
    biller_name: str = Field(..., min_length=1, max_length=100, description="Name of the biller")
    biller_account_number: str = Field(..., min_length=1, max_length=50, description="Caller's account number at the biller")
    amount: Decimal = Field(..., gt=0, max_digits=15, decimal_places=2, description="Payment amount (must be positive)")
    description: Optional[str] = Field(None, max_length=500, description="Optional payment description")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "account_id": 1,
                "biller_name": "Electric Co",
                "biller_account_number": "EL-77812",
                "amount": 30.00
            }
        }
    )


class BillPaymentResult(BaseModel):
    """Schema for a completed bill payment."""
    message: str = "Bill payment successful"
    payment_id: int


class TransactionResponse(BaseModel):
    """Schema for a ledger entry with counterpart account numbers."""
    transaction_id: int
    from_account_id: Optional[int]
    to_account_id: Optional[int]
    from_account_number: Optional[str] = None
    to_account_number: Optional[str] = None
    amount: Decimal
    transaction_type: TransactionType
    description: Optional[str]
    transaction_date: datetime

    model_config = ConfigDict(from_attributes=True)
