from typing import Any

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.core.config import settings
from app.schemas.employee import (
    EmployeeCreate,
    EmployeeCreatedResponse,
    EmployeeDto,
    EmployeeUpdate,
    EmployeeUpdatedResponse,
    MessageResponse,
    Pagination,
)
from app.services.employee_service import EmployeeService

router = APIRouter()

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": MessageResponse}}
_INVALID = {status.HTTP_400_BAD_REQUEST: {"model": MessageResponse}}


def _not_found(message: str) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": message})


@router.get("", response_model=Pagination[EmployeeDto])
async def get_all_employees(
    page: int = 1,
    db: AsyncSession = Depends(get_db),
) -> Any:
    """
    List active employees, newest first, ten per page.
    """
    return await EmployeeService(db).list_employees(page)


@router.get("/get-employee-by-id/{employee_id}", response_model=EmployeeDto, responses=_NOT_FOUND)
async def get_employee_by_id(
    employee_id: int,
    db: AsyncSession = Depends(get_db),
) -> Any:
    employee = await EmployeeService(db).get_by_id(employee_id)
    if employee is None:
        return _not_found(f"Employee with ID {employee_id} is not found")
    return employee


@router.get("/get-employee-by-department", response_model=Pagination[EmployeeDto])
async def get_employees_by_department(
    department: str = "",
    page: int = 1,
    db: AsyncSession = Depends(get_db),
) -> Any:
    """
    List active employees of one department (exact match), newest first.
    """
    return await EmployeeService(db).list_by_department(department, page)


@router.post(
    "",
    response_model=EmployeeCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_INVALID,
)
async def create_employee(
    employee_in: EmployeeCreate,
    response: Response,
    db: AsyncSession = Depends(get_db),
) -> Any:
    """
    Create an employee. Validation failures are turned into 400 responses
    by the application's EmployeeValidationError handler.
    """
    created = await EmployeeService(db).create(employee_in)
    response.headers["Location"] = f"{settings.API_PREFIX}/employees/get-employee-by-id/{created.id}"
    return EmployeeCreatedResponse(message="Employee Created!", createdEmployee=created)


@router.put(
    "/{employee_id}",
    response_model=EmployeeUpdatedResponse,
    responses={**_NOT_FOUND, **_INVALID},
)
async def update_employee(
    employee_id: int,
    employee_in: EmployeeUpdate,
    db: AsyncSession = Depends(get_db),
) -> Any:
    updated = await EmployeeService(db).update(employee_id, employee_in)
    if updated is None:
        return _not_found(f"Update fail, employee with ID {employee_id} is not found!")
    return EmployeeUpdatedResponse(
        message=f"Employee {updated.name} is updated",
        updatedEmployee=updated,
    )


@router.delete("/{employee_id}", response_model=MessageResponse, responses=_NOT_FOUND)
async def delete_employee(
    employee_id: int,
    db: AsyncSession = Depends(get_db),
) -> Any:
    deleted = await EmployeeService(db).delete(employee_id)
    if not deleted:
        return _not_found(f"Delete fail, employee with ID {employee_id} is not found!")
    return MessageResponse(message="Employee deleted!")
