"""
Field rules for employee records.

Rules are checked in a fixed order and the first violation wins, so callers
always get one specific message back.
"""

import re
from enum import Enum
from typing import Any, Optional

MAX_NAME_LENGTH = 100

EMAIL_PATTERN = re.compile(r"^[\w.-]+@([\w-]+\.)+[\w-]{2,4}$")


class Department(str, Enum):
    IT = "IT"
    HR = "HR"
    SALES = "Sales"
    MANAGER = "Manager"


DEPARTMENT_NAMES = [d.value for d in Department]
_DEPARTMENTS_BY_KEY = {d.value.lower(): d for d in Department}


class EmployeeValidationError(ValueError):
    """A candidate employee record broke one of the field rules."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def parse_department(value: Optional[str]) -> Optional[Department]:
    """Case-insensitive lookup; returns None for unknown departments.

    Surrounding whitespace is not ignored, so " IT " is unknown.
    """
    if value is None:
        return None
    return _DEPARTMENTS_BY_KEY.get(value.lower())


def validate_employee(candidate: Any) -> None:
    """
    Check a candidate record (anything with name, email and department
    attributes) and raise EmployeeValidationError on the first failed rule.
    """
    name = candidate.name
    if _is_blank(name):
        raise EmployeeValidationError("Name is required!")
    if len(name) > MAX_NAME_LENGTH:
        raise EmployeeValidationError(f"Employee name cannot exceed {MAX_NAME_LENGTH} characters")

    email = candidate.email
    if _is_blank(email):
        raise EmployeeValidationError("Email is required!")
    if not EMAIL_PATTERN.fullmatch(email):
        raise EmployeeValidationError("Invalid email, please input the correct format!")

    department = candidate.department
    if _is_blank(department):
        raise EmployeeValidationError("Department is required!")
    if parse_department(department) is None:
        raise EmployeeValidationError(
            "Invalid department, please select the following department: "
            + ", ".join(DEPARTMENT_NAMES)
        )
