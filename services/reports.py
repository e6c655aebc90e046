"""
Report generation over completed appointments.

Both report shapes share one filter (completed, start <= date <= end) and
one attribution rule: a job's total price is split evenly between every
employee credited on it. Service figures always come from the snapshots
stored on the appointment, never from the live catalog.
"""
import logging
from datetime import date, datetime, timedelta, timezone
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Union

from pytz.tzinfo import BaseTzInfo

from core.entities import (
    Appointment,
    AppointmentDetail,
    DateRange,
    Employee,
    EmployeeReport,
    EmployeeStat,
    GeneralReport,
    PeriodSummary,
    Service,
    ServiceStat,
)
from core.exceptions import ValidationError
from dashboard.utils.formatters import format_employee_name
from dashboard.utils.time_utils import (
    end_of_day,
    end_of_month,
    get_timezone,
    start_of_day,
    start_of_month,
    to_local,
)
from services.statistics import is_completed, safe_amount

logger = logging.getLogger(__name__)


class ReportPeriod(str, Enum):
    """Preset report periods."""
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    CUSTOM = "custom"


def select_completed_in_range(
    appointments: Iterable[Appointment],
    start: datetime,
    end: datetime,
    tz: Optional[BaseTzInfo] = None,
) -> List[Appointment]:
    """Keep completed appointments with start <= date <= end (both inclusive)."""
    tz = tz or get_timezone()
    start = to_local(start, tz)
    end = to_local(end, tz)
    return [
        a for a in appointments
        if is_completed(a) and start <= to_local(a.date, tz) <= end
    ]


def employee_share(appointment: Appointment) -> float:
    """Even split of the job total between all credited employees."""
    if not appointment.employee_ids:
        return 0.0
    return safe_amount(appointment.total_price, appointment.id) / len(appointment.employee_ids)


def generate_general_report(
    appointments: Iterable[Appointment],
    employees: Iterable[Employee],
    services: Sequence[Service],
    start: datetime,
    end: datetime,
    tz: Optional[BaseTzInfo] = None,
) -> GeneralReport:
    """
    Build totals plus per-employee and per-service breakdowns.
    
    Args:
        appointments: Full appointment set
        employees: Employee reference set (soft-deleted included)
        services: Live catalog. Unused: names and prices come from the
            snapshots on each appointment, so renamed or deleted services
            still report as they were sold. Kept so callers pass the full
            reference set.
        start: Range start (inclusive)
        end: Range end (inclusive)
        tz: Business timezone
        
    Returns:
        GeneralReport; employee_stats and service_stats are unordered
    """
    period_appointments = select_completed_in_range(appointments, start, end, tz)
    
    total_earnings = sum(
        safe_amount(a.total_price, a.id) for a in period_appointments
    )
    
    employee_stats = []
    for employee in employees:
        employee_appointments = [
            a for a in period_appointments if employee.id in a.employee_ids
        ]
        if not employee_appointments:
            continue
        employee_stats.append(EmployeeStat(
            employee_id=employee.id,
            employee_name=format_employee_name(employee),
            earnings=sum(employee_share(a) for a in employee_appointments),
            appointments_count=len(employee_appointments),
        ))
    
    service_stats: Dict[str, ServiceStat] = {}
    for appointment in period_appointments:
        for item in appointment.services:
            stat = service_stats.get(item.service_id)
            if stat is None:
                stat = service_stats[item.service_id] = ServiceStat(
                    service_id=item.service_id,
                    service_name=item.name,
                )
            quantity = int(safe_amount(item.quantity, appointment.id))
            stat.count += quantity
            stat.earnings += safe_amount(item.price, appointment.id) * quantity
    
    logger.debug(
        f"General report {start} - {end}: {len(period_appointments)} appointments"
    )
    
    return GeneralReport(
        period=DateRange(start=start, end=end),
        total_earnings=total_earnings,
        appointments_count=len(period_appointments),
        employee_stats=employee_stats,
        service_stats=list(service_stats.values()),
    )


def generate_employee_report(
    employee: Employee,
    appointments: Iterable[Appointment],
    start: datetime,
    end: datetime,
    tz: Optional[BaseTzInfo] = None,
) -> EmployeeReport:
    """
    Build a single employee's earnings and itemized job history.
    
    Args:
        employee: Employee to report on (must be resolved by the caller)
        appointments: Full appointment set
        start: Range start (inclusive)
        end: Range end (inclusive)
        tz: Business timezone
        
    Returns:
        EmployeeReport; appointment_details keep input order
    """
    employee_appointments = [
        a for a in select_completed_in_range(appointments, start, end, tz)
        if employee.id in a.employee_ids
    ]
    
    details = [
        AppointmentDetail(
            id=a.id,
            date=a.date,
            services=a.services,
            earnings=employee_share(a),
        )
        for a in employee_appointments
    ]
    
    return EmployeeReport(
        employee_id=employee.id,
        employee=employee,
        total_earnings=sum(d.earnings for d in details),
        appointments_count=len(details),
        appointment_details=details,
    )


def summarize(appointments: Iterable[Appointment]) -> PeriodSummary:
    """Count and total of already filtered appointments."""
    summary = PeriodSummary()
    for a in appointments:
        summary.count += 1
        summary.total_earnings += safe_amount(a.total_price, a.id)
    return summary


def generate_daily_report(
    appointments: Iterable[Appointment],
    day: Union[date, datetime],
    tz: Optional[BaseTzInfo] = None,
) -> PeriodSummary:
    """Completed appointment count and earnings for one local calendar day."""
    tz = tz or get_timezone()
    return summarize(
        select_completed_in_range(appointments, start_of_day(day, tz), end_of_day(day, tz), tz)
    )


def get_period_range(
    period: Union[ReportPeriod, str],
    now: Optional[datetime] = None,
    start: Optional[Union[date, datetime]] = None,
    end: Optional[Union[date, datetime]] = None,
    tz: Optional[BaseTzInfo] = None,
) -> DateRange:
    """
    Resolve a preset period into an inclusive date range.
    
    - day: today 00:00 .. 23:59:59.999999
    - week: six days ago 00:00 .. end of today
    - month: first day 00:00 .. last day 23:59:59.999999
    - custom: start 00:00 .. end of `end` (or of `start` when end is omitted)
    
    Raises:
        ValidationError: If period is unknown or custom range has no start
    """
    tz = tz or get_timezone()
    now = now or datetime.now(timezone.utc)
    
    try:
        period = ReportPeriod(period)
    except ValueError:
        raise ValidationError("period", f"Неизвестный период: {period}")
    
    if period == ReportPeriod.DAY:
        return DateRange(start=start_of_day(now, tz), end=end_of_day(now, tz))
    
    if period == ReportPeriod.WEEK:
        return DateRange(
            start=start_of_day(to_local(now, tz) - timedelta(days=6), tz),
            end=end_of_day(now, tz),
        )
    
    if period == ReportPeriod.MONTH:
        return DateRange(start=start_of_month(now, tz), end=end_of_month(now, tz))
    
    if start is None:
        raise ValidationError("start", "Не указано начало периода")
    range_start = start_of_day(start, tz)
    range_end = end_of_day(end if end is not None else start, tz)
    if range_end < range_start:
        raise ValidationError("end", "Конец периода раньше начала")
    return DateRange(start=range_start, end=range_end)
