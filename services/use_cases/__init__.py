"""
Use Cases package for business logic encapsulation.

This package contains use case classes that encapsulate business logic
and orchestrate interactions between the in-memory state, storage and
the statistics/report services.
"""

from services.use_cases.appointments import (
    CreateAppointmentUseCase,
    UpdateAppointmentUseCase,
    DeleteAppointmentUseCase,
)
from services.use_cases.catalog import (
    AddEmployeeUseCase,
    UpdateEmployeeUseCase,
    DeleteEmployeeUseCase,
    AddServiceUseCase,
    UpdateServiceUseCase,
    DeleteServiceUseCase,
    AddOrganizationUseCase,
    UpdateOrganizationUseCase,
    DeleteOrganizationUseCase,
)
from services.use_cases.reports import (
    DashboardSummary,
    GetGeneralReportUseCase,
    GetEmployeeReportUseCase,
    GetDashboardUseCase,
)
from services.use_cases.data import (
    LoadDataUseCase,
    ResetDataUseCase,
)

__all__ = [
    'CreateAppointmentUseCase',
    'UpdateAppointmentUseCase',
    'DeleteAppointmentUseCase',
    'AddEmployeeUseCase',
    'UpdateEmployeeUseCase',
    'DeleteEmployeeUseCase',
    'AddServiceUseCase',
    'UpdateServiceUseCase',
    'DeleteServiceUseCase',
    'AddOrganizationUseCase',
    'UpdateOrganizationUseCase',
    'DeleteOrganizationUseCase',
    'DashboardSummary',
    'GetGeneralReportUseCase',
    'GetEmployeeReportUseCase',
    'GetDashboardUseCase',
    'LoadDataUseCase',
    'ResetDataUseCase',
]
