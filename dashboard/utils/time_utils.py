"""Time utilities for calendar days, periods and local-time conversion."""
import calendar
from datetime import date, datetime, time, timedelta, timezone
from typing import List, Optional, Union

import pytz
from pytz.tzinfo import BaseTzInfo

from dashboard.config import settings


DayLike = Union[date, datetime]


def get_timezone(name: Optional[str] = None) -> BaseTzInfo:
    """Get business timezone (defaults to settings.timezone)."""
    return pytz.timezone(name or settings.timezone)


def to_local(dt: datetime, tz: Optional[BaseTzInfo] = None) -> datetime:
    """
    Convert datetime to business local time.
    
    Naive datetimes are treated as local wall-clock time.
    """
    tz = tz or get_timezone()
    if dt.tzinfo is None:
        return tz.localize(dt)
    return dt.astimezone(tz)


def to_utc(dt: datetime, tz: Optional[BaseTzInfo] = None) -> datetime:
    """Convert datetime to aware UTC (naive values are treated as local)."""
    return to_local(dt, tz).astimezone(timezone.utc)


def from_storage(dt: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive datetimes read back from storage."""
    if dt is None or dt.tzinfo is not None:
        return dt
    return dt.replace(tzinfo=timezone.utc)


def local_date(value: DayLike, tz: Optional[BaseTzInfo] = None) -> date:
    """Get local calendar date for a date or datetime."""
    if isinstance(value, datetime):
        return to_local(value, tz).date()
    return value


def day_key(value: DayLike, tz: Optional[BaseTzInfo] = None) -> str:
    """Get calendar-day key in format YYYY-MM-DD (local time)."""
    return local_date(value, tz).strftime("%Y-%m-%d")


def start_of_day(value: DayLike, tz: Optional[BaseTzInfo] = None) -> datetime:
    """Get local midnight of the given day."""
    tz = tz or get_timezone()
    return tz.localize(datetime.combine(local_date(value, tz), time.min))


def end_of_day(value: DayLike, tz: Optional[BaseTzInfo] = None) -> datetime:
    """Get last microsecond of the given local day."""
    tz = tz or get_timezone()
    return tz.localize(datetime.combine(local_date(value, tz), time.max))


def start_of_week(value: DayLike, tz: Optional[BaseTzInfo] = None) -> datetime:
    """Get Monday 00:00 of the week containing the given day."""
    day = local_date(value, tz)
    return start_of_day(day - timedelta(days=day.weekday()), tz)


def end_of_week(value: DayLike, tz: Optional[BaseTzInfo] = None) -> datetime:
    """Get Sunday 23:59:59.999999 of the week containing the given day."""
    day = local_date(value, tz)
    return end_of_day(day + timedelta(days=6 - day.weekday()), tz)


def start_of_month(value: DayLike, tz: Optional[BaseTzInfo] = None) -> datetime:
    """Get first day of month at 00:00."""
    day = local_date(value, tz)
    return start_of_day(day.replace(day=1), tz)


def end_of_month(value: DayLike, tz: Optional[BaseTzInfo] = None) -> datetime:
    """Get last day of month at 23:59:59.999999."""
    day = local_date(value, tz)
    last_day = calendar.monthrange(day.year, day.month)[1]
    return end_of_day(day.replace(day=last_day), tz)


def days_of_week(value: DayLike, tz: Optional[BaseTzInfo] = None) -> List[date]:
    """Get Monday..Sunday dates of the week containing the given day."""
    monday = start_of_week(value, tz).date()
    return [monday + timedelta(days=i) for i in range(7)]


def format_datetime(dt: datetime, tz: Optional[BaseTzInfo] = None) -> str:
    """Format datetime to readable local string."""
    return to_local(dt, tz).strftime("%d.%m.%Y %H:%M")


def format_date(value: DayLike, tz: Optional[BaseTzInfo] = None) -> str:
    """Format date to readable string."""
    return local_date(value, tz).strftime("%d.%m.%Y")


def format_time(dt: datetime, tz: Optional[BaseTzInfo] = None) -> str:
    """Format time to readable string."""
    return to_local(dt, tz).strftime("%H:%M")
