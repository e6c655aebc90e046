"""Database repositories package."""
from database.repositories.appointment import AppointmentRepository
from database.repositories.employee import EmployeeRepository
from database.repositories.service import ServiceRepository
from database.repositories.organization import OrganizationRepository
from database.repositories.notification import NotificationRepository

__all__ = [
    "AppointmentRepository",
    "EmployeeRepository",
    "ServiceRepository",
    "OrganizationRepository",
    "NotificationRepository",
]
