"""Database models package."""
from database.models.appointment import AppointmentModel
from database.models.employee import EmployeeModel
from database.models.service import ServiceModel
from database.models.organization import OrganizationModel
from database.models.notification import NotificationModel

__all__ = [
    "AppointmentModel",
    "EmployeeModel",
    "ServiceModel",
    "OrganizationModel",
    "NotificationModel",
]
