"""
Data Transfer Objects (DTOs) for data validation.

This package contains Pydantic models for validating input data.
"""

from core.dto.base import validate_dto
from core.dto.appointments import (
    AppointmentServiceDTO,
    CreateAppointmentDTO,
    UpdateAppointmentDTO,
)
from core.dto.employees import (
    CreateEmployeeDTO,
    UpdateEmployeeDTO,
)
from core.dto.services import (
    CreateServiceDTO,
    UpdateServiceDTO,
)
from core.dto.organizations import (
    CreateOrganizationDTO,
    UpdateOrganizationDTO,
)

__all__ = [
    'validate_dto',
    'AppointmentServiceDTO',
    'CreateAppointmentDTO',
    'UpdateAppointmentDTO',
    'CreateEmployeeDTO',
    'UpdateEmployeeDTO',
    'CreateServiceDTO',
    'UpdateServiceDTO',
    'CreateOrganizationDTO',
    'UpdateOrganizationDTO',
]
