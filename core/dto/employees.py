"""Employee DTOs for data validation."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CreateEmployeeDTO(BaseModel):
    """DTO for creating a new employee."""
    
    model_config = ConfigDict(extra="forbid")
    
    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    is_active: bool = Field(True, description="Available for new bookings")
    
    @field_validator('first_name', 'last_name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Clean and validate name."""
        v = v.strip()
        if len(v) < 2:
            raise ValueError("Должно содержать минимум 2 символа")
        return v


class UpdateEmployeeDTO(BaseModel):
    """DTO for updating an employee."""
    
    model_config = ConfigDict(extra="forbid")
    
    first_name: Optional[str] = Field(None, description="New first name")
    last_name: Optional[str] = Field(None, description="New last name")
    is_active: Optional[bool] = Field(None, description="Active status")
    
    @field_validator('first_name', 'last_name')
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        """Clean and validate name if provided."""
        if v is None:
            return v
        v = v.strip()
        if len(v) < 2:
            raise ValueError("Должно содержать минимум 2 символа")
        return v
