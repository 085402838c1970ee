"""
Shared test fixtures and configuration for the Employee Management backend tests.
"""
import os
from datetime import date, datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Set test environment before importing app modules
os.environ["ENVIRONMENT"] = "development"
os.environ["DEBUG"] = "true"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["AUTO_CREATE_TABLES"] = "false"

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
BASE_CREATED_AT = datetime(2020, 1, 1, 9, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def mock_db_session():
    """Create a mock async database session."""
    session = AsyncMock(spec=AsyncSession)
    session.execute = AsyncMock()
    session.scalar = AsyncMock()
    session.get = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.refresh = AsyncMock()
    session.add = MagicMock()
    session.close = AsyncMock()
    return session


@pytest.fixture
def mock_employee():
    """A persisted, active employee row."""
    employee = MagicMock()
    employee.id = 7
    employee.name = "Joey"
    employee.email = "joey@gmail.com"
    employee.department = "IT"
    employee.date_of_birth = date(2000, 6, 7)
    employee.created_at = BASE_CREATED_AT
    employee.is_deleted = False
    employee.deleted_at = None
    return employee


@pytest.fixture
def mock_request():
    """Create a mock FastAPI request object."""
    request = MagicMock()
    request.cookies = {}
    request.client = MagicMock()
    request.client.host = "127.0.0.1"
    request.headers = {}
    request.url = MagicMock()
    request.url.path = "/api/employees"
    request.method = "GET"
    return request


@pytest.fixture
def valid_employee_payload():
    return {
        "name": "Joey",
        "email": "joey1@gmail.com",
        "department": "IT",
        "dateOfBirth": "2000-06-07",
    }


@pytest_asyncio.fixture
async def db_engine():
    """In-memory SQLite engine with the full schema, shared by one test."""
    from app.db.base import Base

    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine):
    session_factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def employee_factory(db_session):
    """
    Insert employee rows directly, bypassing the service.

    Row ``i`` gets ``created_at = BASE_CREATED_AT + i minutes`` so the
    newest-first ordering is predictable.
    """
    from app.models.employee import Employee

    async def _create(count: int = 1, department: str = "IT", deleted_indexes=(), start: int = 1):
        rows = []
        for i in range(start, start + count):
            deleted = i in deleted_indexes
            rows.append(
                Employee(
                    name=f"Employee {i}",
                    email=f"employee{i}@gmail.com",
                    department=department,
                    date_of_birth=date(1990, 1, 1),
                    created_at=BASE_CREATED_AT + timedelta(minutes=i),
                    is_deleted=deleted,
                    deleted_at=BASE_CREATED_AT + timedelta(days=1) if deleted else None,
                )
            )
        db_session.add_all(rows)
        await db_session.commit()
        return rows

    return _create
