"""Appointment DTOs for data validation."""
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from core.entities import AppointmentStatus, ClientType


class AppointmentServiceDTO(BaseModel):
    """Service snapshot line inside an appointment."""
    
    model_config = ConfigDict(extra="forbid")
    
    service_id: str = Field(..., min_length=1, description="Catalog service ID")
    name: str = Field(..., description="Service name at booking time")
    price: float = Field(..., ge=0, description="Unit price at booking time")
    quantity: int = Field(1, ge=1, description="Number of units")


class CreateAppointmentDTO(BaseModel):
    """DTO for creating a new appointment."""
    
    model_config = ConfigDict(extra="forbid")
    
    # Required fields first: errors are reported in declaration order
    date: Optional[datetime] = Field(None, validate_default=True, description="Appointment date and time")
    services: List[AppointmentServiceDTO] = Field(
        default_factory=list,
        validate_default=True,
        description="Service snapshots"
    )
    
    client_type: ClientType = Field(ClientType.INDIVIDUAL, description="Client type")
    organization_id: Optional[str] = Field(None, description="Organization ID for organization clients")
    car_number: str = Field("", description="Car plate number")
    phone_number: str = Field("", description="Client phone number")
    car_model: str = Field("", description="Car make/model")
    notes: str = Field("", description="Optional notes")
    total_price: float = Field(0, ge=0, description="Total price")
    employee_ids: List[str] = Field(default_factory=list, description="Employees on the job")
    status: AppointmentStatus = Field(AppointmentStatus.PENDING, description="Initial status")
    
    @field_validator('date')
    @classmethod
    def validate_date(cls, v: Optional[datetime]) -> datetime:
        """Date is mandatory."""
        if v is None:
            raise ValueError("Не указана дата записи")
        return v
    
    @field_validator('services')
    @classmethod
    def validate_services(cls, v: List[AppointmentServiceDTO]) -> List[AppointmentServiceDTO]:
        """At least one service must be booked."""
        if not v:
            raise ValueError("Не выбраны услуги")
        return v
    
    @field_validator('total_price', mode='before')
    @classmethod
    def default_total_price(cls, v: Any) -> Any:
        """Missing total is stored as zero."""
        return 0 if v is None else v
    
    @field_validator('car_number', 'phone_number', 'car_model', 'notes', mode='before')
    @classmethod
    def default_text(cls, v: Any) -> Any:
        return "" if v is None else v
    
    @model_validator(mode='after')
    def normalize_organization(self) -> "CreateAppointmentDTO":
        """Individuals never carry an organization ID (explicit None)."""
        if self.client_type != ClientType.ORGANIZATION or not self.organization_id:
            self.organization_id = None
        return self
    
    def to_record(self) -> Dict[str, Any]:
        """Build storage payload."""
        return self.model_dump()


class UpdateAppointmentDTO(BaseModel):
    """
    DTO for a partial appointment update.
    
    Only fields explicitly present in the input are applied. List fields
    (services, employee_ids) replace the stored value wholesale.
    """
    
    model_config = ConfigDict(extra="forbid")
    
    date: Optional[datetime] = None
    services: Optional[List[AppointmentServiceDTO]] = None
    client_type: Optional[ClientType] = None
    organization_id: Optional[str] = None
    car_number: Optional[str] = None
    phone_number: Optional[str] = None
    car_model: Optional[str] = None
    notes: Optional[str] = None
    total_price: Optional[float] = Field(None, ge=0)
    employee_ids: Optional[List[str]] = None
    status: Optional[AppointmentStatus] = None
    
    @field_validator('services')
    @classmethod
    def validate_services(cls, v: Optional[List[AppointmentServiceDTO]]) -> Optional[List[AppointmentServiceDTO]]:
        """An appointment can't be left without services."""
        if v is not None and not v:
            raise ValueError("Не выбраны услуги")
        return v
    
    @model_validator(mode='after')
    def reject_nulls(self) -> "UpdateAppointmentDTO":
        """Only organization_id may be explicitly cleared."""
        for name in self.model_fields_set:
            if name != "organization_id" and getattr(self, name) is None:
                raise ValueError(f"Поле '{name}' не может быть пустым")
        return self
    
    def to_changes(self) -> Dict[str, Any]:
        """Build partial payload with only the fields that were set."""
        return self.model_dump(exclude_unset=True)
