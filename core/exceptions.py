"""
Custom application exceptions.

These exceptions represent business logic errors that should be handled
gracefully with user-friendly messages. Storage driver errors are not
wrapped and reach the caller as raised by SQLAlchemy.
"""
from typing import Optional


class CarWashError(Exception):
    """Base exception for all application errors."""

    message: str = "Произошла ошибка"

    def __init__(self, message: Optional[str] = None, **kwargs):
        self.message = message or self.message
        self.details = kwargs
        super().__init__(self.message)


# ============== Not found ==============

class EntityNotFoundError(CarWashError):
    """Entity is not present in the loaded state."""
    message = "Объект не найден"

    def __init__(self, entity_id: Optional[str] = None):
        self.entity_id = entity_id
        super().__init__(f"{self.message}: #{entity_id}" if entity_id else self.message)


class AppointmentNotFoundError(EntityNotFoundError):
    """Appointment not found."""
    message = "Запись не найдена"


class EmployeeNotFoundError(EntityNotFoundError):
    """Employee not found."""
    message = "Сотрудник не найден"


class ServiceNotFoundError(EntityNotFoundError):
    """Service not found."""
    message = "Услуга не найдена"


class OrganizationNotFoundError(EntityNotFoundError):
    """Organization not found."""
    message = "Организация не найдена"


class NotificationNotFoundError(EntityNotFoundError):
    """Notification not found."""
    message = "Уведомление не найдено"


# ============== Storage ==============

class RecordNotFoundError(CarWashError):
    """Storage has no document with the given ID."""
    message = "Документ не найден"

    def __init__(self, collection: str, record_id: str):
        self.collection = collection
        self.record_id = record_id
        super().__init__(f"Document with ID {record_id} not found in {collection}")


# ============== Validation ==============

class ValidationError(CarWashError):
    """Data validation error."""
    message = "Ошибка валидации"

    def __init__(self, field: str, error: str):
        self.field = field
        self.error = error
        super().__init__(f"Ошибка в поле '{field}': {error}")
