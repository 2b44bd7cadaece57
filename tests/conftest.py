"""
Shared fixtures for the banking API tests.
Runs against an in-memory SQLite database recreated for every test.
"""

import pytest
from decimal import Decimal
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from bankapp.main import app
from bankapp.database import Base, get_db
from bankapp.core.security import Caller, EmployeeRole, UserType
from bankapp.models import Account, AccountStatus, AccountType, Customer, Employee, Loan, LoanStatus

SQLALCHEMY_DATABASE_URL = "sqlite://"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    """Override database dependency for testing."""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def setup_database():
    """Create fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


# ==================== DATA HELPERS ====================

def make_customer(db, first_name="Alice", last_name="Smith", email=None):
    customer = Customer(
        first_name=first_name,
        last_name=last_name,
        email=email or f"{first_name.lower()}.{last_name.lower()}@example.com"
    )
    db.add(customer)
    db.commit()
    return customer


def make_account(db, customer, account_number, balance="0.00",
                 account_type=AccountType.CHECKING, status=AccountStatus.ACTIVE):
    account = Account(
        customer_id=customer.customer_id,
        account_number=account_number,
        account_type=account_type,
        balance=Decimal(balance),
        status=status
    )
    db.add(account)
    db.commit()
    return account


def make_employee(db, role=EmployeeRole.LOAN_OFFICER, email="officer@bank.example"):
    employee = Employee(first_name="Olivia", last_name="Officer", email=email, role=role)
    db.add(employee)
    db.commit()
    return employee


def make_loan(db, customer, amount="10000.00", status=LoanStatus.PENDING, term_months=36):
    loan = Loan(
        customer_id=customer.customer_id,
        loan_amount=Decimal(amount),
        interest_rate=Decimal("5.50"),
        term_months=term_months,
        status=status
    )
    db.add(loan)
    db.commit()
    return loan


def employee_caller(employee):
    return Caller(user_id=employee.employee_id, user_type=UserType.EMPLOYEE, role=employee.role)


def customer_headers(customer):
    return {"X-User-Id": str(customer.customer_id), "X-User-Type": "customer"}


def employee_headers(employee):
    return {
        "X-User-Id": str(employee.employee_id),
        "X-User-Type": "employee",
        "X-Employee-Role": employee.role.value,
    }
