"""
Caller identity as asserted by the upstream session layer.

Credentials are verified before a request reaches this service; the
gateway forwards the authenticated identity in request headers. This
module turns those headers into a ``Caller`` and holds the role checks.
"""

import enum
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Header, HTTPException, status


class UserType(str, enum.Enum):
    CUSTOMER = "customer"
    EMPLOYEE = "employee"


class EmployeeRole(str, enum.Enum):
    ADMIN = "Admin"
    CUSTOMER_SERVICE = "Customer Service"
    LOAN_OFFICER = "Loan Officer"


# Roles allowed to approve or reject loan applications
LOAN_DECISION_ROLES = frozenset({EmployeeRole.LOAN_OFFICER, EmployeeRole.ADMIN})


@dataclass(frozen=True)
class Caller:
    """An authenticated customer or employee."""

    user_id: int
    user_type: UserType
    role: Optional[EmployeeRole] = None

    @property
    def is_customer(self) -> bool:
        return self.user_type is UserType.CUSTOMER

    @property
    def is_employee(self) -> bool:
        return self.user_type is UserType.EMPLOYEE

    def can_decide_loans(self) -> bool:
        return self.is_employee and self.role in LOAN_DECISION_ROLES


def _unauthorized() -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")


def get_current_caller(
    x_user_id: Optional[str] = Header(None),
    x_user_type: Optional[str] = Header(None),
    x_employee_role: Optional[str] = Header(None),
) -> Caller:
    """
    Dependency resolving the caller from the forwarded identity headers.

    - **X-User-Id**: numeric customer or employee id
    - **X-User-Type**: ``customer`` or ``employee``
    - **X-Employee-Role**: employee role name (employees only)
    """
    if not x_user_id or not x_user_type:
        raise _unauthorized()

    try:
        user_id = int(x_user_id)
        user_type = UserType(x_user_type.lower())
    except ValueError:
        raise _unauthorized()

    role = None
    if user_type is UserType.EMPLOYEE and x_employee_role:
        try:
            role = EmployeeRole(x_employee_role)
        except ValueError:
            raise _unauthorized()

    return Caller(user_id=user_id, user_type=user_type, role=role)


def require_customer(caller: Caller = Depends(get_current_caller)) -> Caller:
    if not caller.is_customer:
        raise _unauthorized()
    return caller


def require_employee(caller: Caller = Depends(get_current_caller)) -> Caller:
    if not caller.is_employee:
        raise _unauthorized()
    return caller
