"""
Money movement endpoints.
Transfers between accounts and bill payments to external billers.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from bankapp.core.security import Caller, require_customer
from bankapp.database import get_db
from bankapp.schemas.transaction import (
    BillPaymentRequest,
    BillPaymentResult,
    TransferRequest,
    TransferResult,
)
from bankapp import services

router = APIRouter(tags=["Payments"])


@router.post("/transfers/", response_model=TransferResult, status_code=status.HTTP_201_CREATED)
def create_transfer(
    transfer_data: TransferRequest,
    caller: Caller = Depends(require_customer),
    db: Session = Depends(get_db)
):
    """
    Transfer money from one of the caller's accounts to any active account.

    - **from_account_id**: Source account (must belong to the caller)
    - **to_account_number**: Destination account number
    - **amount**: Transfer amount (must be positive)
    - **description**: Optional description (default: "Transfer to {to_account_number}")
    """
    transaction_id = services.transfer(
        db,
        customer_id=caller.user_id,
        from_account_id=transfer_data.from_account_id,
        to_account_number=transfer_data.to_account_number,
        amount=transfer_data.amount,
        description=transfer_data.description
    )
    return TransferResult(transaction_id=transaction_id)


@router.post("/bill-payments/", response_model=BillPaymentResult, status_code=status.HTTP_201_CREATED)
def create_bill_payment(
    payment_data: BillPaymentRequest,
    caller: Caller = Depends(require_customer),
    db: Session = Depends(get_db)
):
    """
    Pay a bill from one of the caller's accounts.

    - **account_id**: Paying account (must belong to the caller)
    - **biller_name**: Biller receiving the payment
    - **biller_account_number**: Caller's reference at the biller
    - **amount**: Payment amount (must be positive)
    """
    payment_id = services.pay_bill(
        db,
        customer_id=caller.user_id,
        account_id=payment_data.account_id,
        biller_name=payment_data.biller_name,
        biller_account_number=payment_data.biller_account_number,
        amount=payment_data.amount,
        description=payment_data.description
    )
    return BillPaymentResult(payment_id=payment_id)
