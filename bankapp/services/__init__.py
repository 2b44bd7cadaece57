"""
Money-movement engine and loan workflow.

Each operation runs inside a single ``atomic_unit``: rows it will mutate
are locked, balances change, a ledger entry is appended, and everything
commits together or not at all.
"""

from bankapp.services.transfers import transfer
from bankapp.services.bill_payments import pay_bill
from bankapp.services.loans import apply_for_loan, decide_loan

__all__ = ["transfer", "pay_bill", "apply_for_loan", "decide_loan"]
