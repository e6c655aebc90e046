"""Organization DTOs for data validation."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dashboard.utils.formatters import is_valid_phone_number


class CreateOrganizationDTO(BaseModel):
    """DTO for creating a partner organization."""
    
    model_config = ConfigDict(extra="forbid")
    
    name: str = Field(..., description="Organization name")
    contact_person: str = Field("", description="Contact person")
    phone_number: str = Field("", description="Contact phone")
    
    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 2:
            raise ValueError("Название должно содержать минимум 2 символа")
        return v
    
    @field_validator('contact_person')
    @classmethod
    def strip_contact(cls, v: str) -> str:
        return v.strip()
    
    @field_validator('phone_number')
    @classmethod
    def validate_phone(cls, v: str) -> str:
        """Phone is optional but must match +375 (xx) xxx-xx-xx when given."""
        v = v.strip()
        if v and not is_valid_phone_number(v):
            raise ValueError("Номер телефона должен быть в формате: +375 (xx) xxx-xx-xx")
        return v


class UpdateOrganizationDTO(BaseModel):
    """DTO for updating a partner organization."""
    
    model_config = ConfigDict(extra="forbid")
    
    name: Optional[str] = Field(None, description="New name")
    contact_person: Optional[str] = Field(None, description="New contact person")
    phone_number: Optional[str] = Field(None, description="New contact phone")
    
    @field_validator('name')
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if len(v) < 2:
            raise ValueError("Название должно содержать минимум 2 символа")
        return v
    
    @field_validator('phone_number')
    @classmethod
    def validate_phone(cls, v: Optional[str]) -> Optional[str]:
        if v and not is_valid_phone_number(v):
            raise ValueError("Номер телефона должен быть в формате: +375 (xx) xxx-xx-xx")
        return v
