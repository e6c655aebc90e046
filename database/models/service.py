"""Service model - catalog entry of a wash/detailing service."""
from sqlalchemy import Boolean, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from database.base import Base
from database.models.mixins import DocumentIdMixin


class ServiceModel(DocumentIdMixin, Base):
    """Service model."""
    
    __tablename__ = "services"
    
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False, comment="Price in BYN")
    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    
    def __repr__(self) -> str:
        return f"<Service(id={self.id}, name='{self.name}', price={self.price})>"
