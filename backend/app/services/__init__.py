# Services Package

from app.services.employee_validator import (
    Department,
    EmployeeValidationError,
    validate_employee,
)
from app.services.employee_service import EmployeeService, PAGE_SIZE

__all__ = [
    "Department",
    "EmployeeValidationError",
    "validate_employee",
    "EmployeeService",
    "PAGE_SIZE",
]
