"""Organization model - corporate client with a fleet."""
from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from database.base import Base
from database.models.mixins import DocumentIdMixin


class OrganizationModel(DocumentIdMixin, Base):
    """Organization model."""
    
    __tablename__ = "organizations"
    
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    contact_person: Mapped[str] = mapped_column(String(255), default="", nullable=False)
    phone_number: Mapped[str] = mapped_column(String(32), default="", nullable=False)
    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    
    def __repr__(self) -> str:
        return f"<Organization(id={self.id}, name='{self.name}')>"
