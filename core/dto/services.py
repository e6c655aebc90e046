"""Service DTOs for data validation."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CreateServiceDTO(BaseModel):
    """DTO for creating a new catalog service."""
    
    model_config = ConfigDict(extra="forbid")
    
    name: str = Field(..., description="Service name")
    price: float = Field(..., ge=0, description="Price in BYN")
    
    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Clean and validate service name."""
        v = v.strip()
        if len(v) < 3:
            raise ValueError("Название должно содержать минимум 3 символа")
        return v


class UpdateServiceDTO(BaseModel):
    """DTO for updating a catalog service."""
    
    model_config = ConfigDict(extra="forbid")
    
    name: Optional[str] = Field(None, description="New name")
    price: Optional[float] = Field(None, ge=0, description="New price")
    
    @field_validator('name')
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        """Clean service name if provided."""
        if v is None:
            return v
        v = v.strip()
        if len(v) < 3:
            raise ValueError("Название должно содержать минимум 3 символа")
        return v
