from app.db.base_class import Base
from sqlalchemy import Column, Integer, String, Boolean, Date, DateTime, false, func


class Employee(Base):
    __tablename__ = "employees"  # type: ignore[assignment]

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    department = Column(String(50), nullable=False, index=True)
    date_of_birth = Column(Date, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    # Soft delete bookkeeping; deleted rows stay in the table
    is_deleted = Column(Boolean, nullable=False, default=False, server_default=false(), index=True)
    deleted_at = Column(DateTime(timezone=True), nullable=True)
