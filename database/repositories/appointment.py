"""Appointment repository for database operations."""
from dataclasses import asdict, is_dataclass
from typing import Any, Dict, Mapping

from core.entities import Appointment, AppointmentServiceItem, AppointmentStatus, ClientType
from dashboard.utils.time_utils import from_storage, to_utc
from database.models import AppointmentModel
from database.repositories.base import BaseRepository


def _service_item_values(item: Any) -> Dict[str, Any]:
    """Serialize a service snapshot for the JSON column."""
    if is_dataclass(item):
        return asdict(item)
    return dict(item)


class AppointmentRepository(BaseRepository[AppointmentModel, Appointment]):
    """Repository for Appointment documents."""
    
    model_class = AppointmentModel
    entity_class = Appointment
    
    def to_entity(self, row: AppointmentModel) -> Appointment:
        return Appointment(
            id=row.id,
            date=from_storage(row.date),
            services=[AppointmentServiceItem(**item) for item in (row.services or [])],
            client_type=ClientType(row.client_type),
            organization_id=row.organization_id,
            car_number=row.car_number,
            phone_number=row.phone_number,
            car_model=row.car_model,
            notes=row.notes,
            total_price=row.total_price,
            employee_ids=list(row.employee_ids or []),
            status=AppointmentStatus(row.status),
        )
    
    def to_values(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        values = super().to_values(data)
        if "date" in values:
            # Stored as UTC so every backend keeps the same instant
            values["date"] = to_utc(values["date"])
        if "services" in values:
            values["services"] = [_service_item_values(item) for item in values["services"]]
        if "employee_ids" in values:
            values["employee_ids"] = list(values["employee_ids"])
        return values
