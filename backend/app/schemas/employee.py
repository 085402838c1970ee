import math
from datetime import date
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class EmployeeBase(BaseModel):
    # Defaults are empty so missing fields reach the employee validator
    # and come back with its messages instead of a schema error.
    name: Optional[str] = ""
    email: Optional[str] = ""
    department: Optional[str] = ""
    dateOfBirth: Optional[date] = None


class EmployeeCreate(EmployeeBase):
    pass


class EmployeeUpdate(EmployeeBase):
    """Full replacement of an employee's editable fields."""


class EmployeeDto(BaseModel):
    id: int
    name: str
    email: str
    department: str
    dateOfBirth: Optional[date] = None

    @classmethod
    def from_employee(cls, employee) -> "EmployeeDto":
        return cls(
            id=employee.id,
            name=employee.name,
            email=employee.email,
            department=employee.department,
            dateOfBirth=employee.date_of_birth,
        )


class Pagination(BaseModel, Generic[T]):
    items: List[T]
    totalItems: int
    pageIndex: int
    pageSize: int
    totalPages: int

    @classmethod
    def create(cls, items: List[T], count: int, page_index: int, page_size: int) -> "Pagination[T]":
        return cls(
            items=items,
            totalItems=count,
            pageIndex=page_index,
            pageSize=page_size,
            totalPages=math.ceil(count / page_size),
        )


class MessageResponse(BaseModel):
    message: str


class EmployeeCreatedResponse(BaseModel):
    message: str
    createdEmployee: EmployeeDto


class EmployeeUpdatedResponse(BaseModel):
    message: str
    updatedEmployee: EmployeeDto
