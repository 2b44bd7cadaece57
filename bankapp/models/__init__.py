"""
Database models package.
"""

from bankapp.models.customer import Customer, Employee
from bankapp.models.account import Account, AccountType, AccountStatus
from bankapp.models.transaction import Transaction, TransactionType, BillPayment
from bankapp.models.loan import Loan, LoanStatus, LOAN_TRANSITIONS

__all__ = [
    "Customer",
    "Employee",
    "Account",
    "AccountType",
    "AccountStatus",
    "Transaction",
    "TransactionType",
    "BillPayment",
    "Loan",
    "LoanStatus",
    "LOAN_TRANSITIONS",
]
