"""Notification model - system event log entry."""
from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from core.entities import NotificationType
from database.base import Base
from database.models.mixins import DocumentIdMixin


class NotificationModel(DocumentIdMixin, Base):
    """Notification model."""
    
    __tablename__ = "notifications"
    
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(
        String(20),
        default=NotificationType.INFO.value,
        nullable=False
    )
    is_read: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, index=True)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    
    def __repr__(self) -> str:
        return f"<Notification(id={self.id}, type='{self.type}', is_read={self.is_read})>"
