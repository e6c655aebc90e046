"""Employee model - washer/detailer who performs jobs."""
from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from database.base import Base
from database.models.mixins import DocumentIdMixin


class EmployeeModel(DocumentIdMixin, Base):
    """Employee model."""
    
    __tablename__ = "employees"
    
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    
    # Availability for new bookings
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    # Soft delete: hidden from selection lists, kept for history
    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    
    def __repr__(self) -> str:
        return f"<Employee(id={self.id}, name='{self.first_name} {self.last_name}')>"
