"""
Employee CRUD service with pagination and soft delete.

Works on an injected AsyncSession; the session is owned by the caller and is
never closed here.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.employee import Employee
from app.schemas.employee import EmployeeBase, EmployeeDto, Pagination
from app.services.employee_validator import parse_department, validate_employee

logger = logging.getLogger("employee_management.employees")

PAGE_SIZE = 10


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EmployeeService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_employees(self, page: int = 1) -> Pagination[EmployeeDto]:
        return await self._paginate(self._active_query(), page)

    async def list_by_department(self, department: str, page: int = 1) -> Pagination[EmployeeDto]:
        query = self._active_query().where(Employee.department == department)
        return await self._paginate(query, page)

    async def get_by_id(self, employee_id: int) -> Optional[EmployeeDto]:
        employee = await self._get_active(employee_id)
        if employee is None:
            return None
        return EmployeeDto.from_employee(employee)

    async def create(self, candidate: EmployeeBase) -> EmployeeDto:
        validate_employee(candidate)

        employee = Employee(
            name=candidate.name,
            email=candidate.email,
            department=parse_department(candidate.department).value,
            date_of_birth=candidate.dateOfBirth,
            created_at=_utcnow(),
            is_deleted=False,
        )
        self.db.add(employee)
        await self.db.commit()
        await self.db.refresh(employee)

        logger.info(f"Created employee {employee.id}")
        return EmployeeDto.from_employee(employee)

    async def update(self, employee_id: int, candidate: EmployeeBase) -> Optional[EmployeeDto]:
        employee = await self._get_active(employee_id)
        if employee is None:
            return None

        validate_employee(candidate)

        employee.name = candidate.name
        employee.email = candidate.email
        employee.department = parse_department(candidate.department).value
        employee.date_of_birth = candidate.dateOfBirth
        await self.db.commit()
        await self.db.refresh(employee)

        logger.info(f"Updated employee {employee.id}")
        return EmployeeDto.from_employee(employee)

    async def delete(self, employee_id: int) -> bool:
        employee = await self._get_active(employee_id)
        if employee is None:
            return False

        employee.is_deleted = True
        employee.deleted_at = _utcnow()
        await self.db.commit()

        logger.info(f"Soft-deleted employee {employee_id}")
        return True

    async def _get_active(self, employee_id: int) -> Optional[Employee]:
        employee = await self.db.get(Employee, employee_id)
        if employee is None or employee.is_deleted:
            return None
        return employee

    @staticmethod
    def _active_query():
        return select(Employee).where(Employee.is_deleted.is_(False))

    async def _paginate(self, query, page: int) -> Pagination[EmployeeDto]:
        page = max(page, 1)

        total = await self.db.scalar(
            select(func.count()).select_from(query.subquery())
        ) or 0
        offset = (page - 1) * PAGE_SIZE

        # Offsets at or past the row count never reach the driver.
        items = []
        if offset < total:
            result = await self.db.execute(
                query.order_by(Employee.created_at.desc(), Employee.id.desc())
                .offset(offset)
                .limit(PAGE_SIZE)
            )
            items = [EmployeeDto.from_employee(e) for e in result.scalars().all()]

        return Pagination[EmployeeDto].create(
            items=items,
            count=total,
            page_index=page,
            page_size=PAGE_SIZE,
        )
