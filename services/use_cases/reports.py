"""
Report and dashboard use cases.

Read-only: they resolve a period and run the pure report functions over
the loaded state.
"""
import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import List, Optional, Union

from core.entities import (
    Appointment,
    EmployeeReport,
    GeneralReport,
    PeriodSummary,
    Statistics,
)
from dashboard.config import settings
from services.dashboard import (
    DayOccupancy,
    PopularService,
    get_monthly_summary,
    get_popular_services,
    get_today_appointments,
    get_upcoming_appointments,
    get_weekly_occupancy,
    get_weekly_summary,
)
from services.reports import (
    ReportPeriod,
    generate_daily_report,
    generate_employee_report,
    generate_general_report,
    get_period_range,
)
from services.use_cases.base import BaseUseCase

logger = logging.getLogger(__name__)

DayLike = Union[date, datetime]


@dataclass
class DashboardSummary:
    """View model for the main dashboard page."""
    statistics: Statistics
    today: PeriodSummary
    week: PeriodSummary
    month: PeriodSummary
    today_appointments: List[Appointment]
    upcoming_appointments: List[Appointment]
    popular_services: List[PopularService]
    weekly_occupancy: List[DayOccupancy]
    unread_notifications: int


class GetGeneralReportUseCase(BaseUseCase[GeneralReport]):
    """
    Earnings per employee and per service for a period.
    """

    async def execute(
        self,
        period: Union[ReportPeriod, str] = ReportPeriod.MONTH,
        start: Optional[DayLike] = None,
        end: Optional[DayLike] = None,
        now: Optional[datetime] = None,
    ) -> GeneralReport:
        """
        Build general report.

        Raises:
            ValidationError: If the period can't be resolved
        """
        date_range = get_period_range(period, now=now, start=start, end=end)
        report = generate_general_report(
            self.state.appointments.items,
            self.state.employees.items,
            self.state.services.items,
            date_range.start,
            date_range.end,
        )
        logger.info(
            f"General report {date_range.start.date()}..{date_range.end.date()}: "
            f"{report.appointments_count} appointments"
        )
        return report


class GetEmployeeReportUseCase(BaseUseCase[Optional[EmployeeReport]]):
    """
    One employee's share of earnings and job history for a period.
    """

    async def execute(
        self,
        employee_id: str,
        period: Union[ReportPeriod, str] = ReportPeriod.MONTH,
        start: Optional[DayLike] = None,
        end: Optional[DayLike] = None,
        now: Optional[datetime] = None,
    ) -> Optional[EmployeeReport]:
        """
        Build employee report.

        Deleted employees are still reported on.

        Returns:
            EmployeeReport or None if the employee is unknown
        """
        employee = self.state.employees.get(employee_id)
        if employee is None:
            logger.warning(
                "Employee report requested for unknown employee",
                extra={"employee_id": employee_id}
            )
            return None

        date_range = get_period_range(period, now=now, start=start, end=end)
        return generate_employee_report(
            employee,
            self.state.appointments.items,
            date_range.start,
            date_range.end,
        )


class GetDashboardUseCase(BaseUseCase[DashboardSummary]):
    """
    Everything shown on the main page.
    """

    async def execute(self, now: Optional[datetime] = None) -> DashboardSummary:
        """Build dashboard; every period widget, today included, is computed at `now`."""
        now = now or datetime.now(timezone.utc)
        appointments = self.state.appointments.items

        return DashboardSummary(
            statistics=self.state.statistics,
            today=generate_daily_report(appointments, now),
            week=get_weekly_summary(appointments, now),
            month=get_monthly_summary(appointments, now),
            today_appointments=get_today_appointments(appointments, now),
            upcoming_appointments=get_upcoming_appointments(
                appointments, now, limit=settings.upcoming_appointments_limit
            ),
            popular_services=get_popular_services(
                appointments, limit=settings.popular_services_limit
            ),
            weekly_occupancy=get_weekly_occupancy(appointments, now),
            unread_notifications=self.state.notifications.unread_count(),
        )
