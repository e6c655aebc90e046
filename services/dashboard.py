"""Dashboard widgets: today's board, upcoming jobs, period totals, occupancy."""
from collections import Counter
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Iterable, List, Optional, Union

from pytz.tzinfo import BaseTzInfo

from core.entities import Appointment, AppointmentStatus, PeriodSummary
from dashboard.utils.time_utils import (
    days_of_week,
    get_timezone,
    local_date,
    start_of_day,
    start_of_month,
    start_of_week,
    to_local,
)
from services.reports import select_completed_in_range, summarize
from services.statistics import safe_amount


class OccupancyLevel(str, Enum):
    """How busy the day is, by number of appointments."""
    FREE = "free"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass
class PopularService:
    name: str
    count: int


@dataclass
class DayOccupancy:
    date: date
    count: int


def _sorted_by_date(appointments: Iterable[Appointment]) -> List[Appointment]:
    return sorted(appointments, key=lambda a: to_local(a.date))


def get_appointments_by_date(
    appointments: Iterable[Appointment],
    day: Union[date, datetime],
    tz: Optional[BaseTzInfo] = None,
) -> List[Appointment]:
    """All appointments (any status) on a local calendar day, in input order."""
    target = local_date(day, tz)
    return [a for a in appointments if local_date(a.date, tz) == target]


def get_today_appointments(
    appointments: Iterable[Appointment],
    now: datetime,
    tz: Optional[BaseTzInfo] = None,
) -> List[Appointment]:
    """Today's appointments sorted by time."""
    return _sorted_by_date(get_appointments_by_date(appointments, now, tz))


def get_upcoming_appointments(
    appointments: Iterable[Appointment],
    now: datetime,
    limit: int = 5,
    tz: Optional[BaseTzInfo] = None,
) -> List[Appointment]:
    """Nearest appointments starting from tomorrow 00:00."""
    tz = tz or get_timezone()
    tomorrow = start_of_day(local_date(now, tz) + timedelta(days=1), tz)
    upcoming = [a for a in appointments if to_local(a.date, tz) >= tomorrow]
    return _sorted_by_date(upcoming)[:limit]


def get_weekly_summary(
    appointments: Iterable[Appointment],
    now: datetime,
    tz: Optional[BaseTzInfo] = None,
) -> PeriodSummary:
    """Completed jobs from Monday 00:00 up to now."""
    return summarize(
        select_completed_in_range(appointments, start_of_week(now, tz), now, tz)
    )


def get_monthly_summary(
    appointments: Iterable[Appointment],
    now: datetime,
    tz: Optional[BaseTzInfo] = None,
) -> PeriodSummary:
    """Completed jobs from the 1st of the month 00:00 up to now."""
    return summarize(
        select_completed_in_range(appointments, start_of_month(now, tz), now, tz)
    )


def get_popular_services(
    appointments: Iterable[Appointment],
    limit: int = 5,
) -> List[PopularService]:
    """
    Most booked services by total quantity.
    
    Grouped by snapshot name; cancelled appointments are skipped.
    """
    counter: Counter = Counter()
    for appointment in appointments:
        if appointment.status == AppointmentStatus.CANCELLED:
            continue
        for item in appointment.services:
            counter[item.name] += int(safe_amount(item.quantity, appointment.id))
    
    return [PopularService(name=name, count=count) for name, count in counter.most_common(limit)]


def get_weekly_occupancy(
    appointments: Iterable[Appointment],
    now: datetime,
    tz: Optional[BaseTzInfo] = None,
) -> List[DayOccupancy]:
    """Number of appointments per day of the current Monday..Sunday week."""
    per_day = Counter(local_date(a.date, tz) for a in appointments)
    return [DayOccupancy(date=day, count=per_day.get(day, 0)) for day in days_of_week(now, tz)]


def get_occupancy_level(appointments_count: int) -> OccupancyLevel:
    """Classify day load: 0 free, 1-2 low, 3-5 medium, 6+ high."""
    if appointments_count == 0:
        return OccupancyLevel.FREE
    if appointments_count < 3:
        return OccupancyLevel.LOW
    if appointments_count < 6:
        return OccupancyLevel.MEDIUM
    return OccupancyLevel.HIGH
