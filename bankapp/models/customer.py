"""
Customer and employee database models.
Only the columns the banking core reads are mapped; credentials live
with the authentication service.
"""

from sqlalchemy import Column, String, Integer, Enum as SQLEnum
from sqlalchemy.orm import relationship

from bankapp.core.security import EmployeeRole
from bankapp.database import Base


class Customer(Base):
    """
    Customer table - account holders and loan applicants.
    """
    __tablename__ = "customers"

    customer_id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(100), unique=True, index=True, nullable=False)

    accounts = relationship("Account", back_populates="customer")
    loans = relationship("Loan", back_populates="customer")

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"

    def __repr__(self):
        return f"<Customer(customer_id={self.customer_id}, email={self.email})>"


class Employee(Base):
    """
    Employee table - staff who review loan applications.
    """
    __tablename__ = "employees"

    employee_id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(100), unique=True, index=True, nullable=False)
    role = Column(
        SQLEnum(EmployeeRole, name="employee_role", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )

    def __repr__(self):
        return f"<Employee(employee_id={self.employee_id}, role={self.role})>"
