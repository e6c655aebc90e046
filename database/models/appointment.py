"""Appointment model - a scheduled or completed wash job."""
from datetime import datetime

from sqlalchemy import JSON, DateTime, Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from core.entities import AppointmentStatus, ClientType
from database.base import Base
from database.models.mixins import DocumentIdMixin


class AppointmentModel(DocumentIdMixin, Base):
    """Appointment model."""
    
    __tablename__ = "appointments"
    
    # Appointment details
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    client_type: Mapped[str] = mapped_column(
        String(20),
        default=ClientType.INDIVIDUAL.value,
        nullable=False
    )
    # Explicit NULL for individual clients
    organization_id: Mapped[str | None] = mapped_column(String(32), nullable=True, index=True)
    
    # Car and contact info
    car_number: Mapped[str] = mapped_column(String(20), default="", nullable=False)
    phone_number: Mapped[str] = mapped_column(String(32), default="", nullable=False)
    car_model: Mapped[str] = mapped_column(String(100), default="", nullable=False)
    notes: Mapped[str] = mapped_column(Text, default="", nullable=False)
    
    # Snapshots of {service_id, name, price, quantity} at booking time
    services: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    total_price: Mapped[float] = mapped_column(Float, default=0, nullable=False)
    employee_ids: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    
    # Status
    status: Mapped[str] = mapped_column(
        String(20),
        default=AppointmentStatus.PENDING.value,
        nullable=False,
        index=True
    )
    
    def __repr__(self) -> str:
        return (
            f"<Appointment(id={self.id}, date={self.date}, "
            f"total_price={self.total_price}, status='{self.status}')>"
        )
