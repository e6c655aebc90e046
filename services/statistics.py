"""
Statistics aggregation over the full appointment set.

Totals are always recomputed from scratch: there is no incremental path,
so cached figures can't drift from the appointments they describe.
"""
import logging
import math
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Iterable, Optional

from pytz.tzinfo import BaseTzInfo

from core.entities import Appointment, AppointmentStatus, DayStats, Statistics
from dashboard.utils.time_utils import day_key, get_timezone, start_of_day, to_local

logger = logging.getLogger(__name__)


def safe_amount(value: Any, appointment_id: Optional[str] = None) -> float:
    """
    Coerce a stored money value to float.
    
    Missing or malformed values (None, non-numeric strings, NaN) count as
    zero so a single bad record never breaks dashboard rendering.
    """
    if isinstance(value, bool):
        value = None
    if isinstance(value, (int, float, Decimal)):
        amount = float(value)
    else:
        try:
            amount = float(value)
        except (TypeError, ValueError):
            amount = math.nan
    
    if math.isnan(amount) or math.isinf(amount):
        logger.warning(
            f"Malformed amount {value!r} counted as 0",
            extra={"appointment_id": appointment_id}
        )
        return 0.0
    return amount


def is_completed(appointment: Appointment) -> bool:
    return appointment.status == AppointmentStatus.COMPLETED


def compute_statistics(
    appointments: Iterable[Appointment],
    reference_instant: Optional[datetime] = None,
    tz: Optional[BaseTzInfo] = None,
) -> Statistics:
    """
    Compute running totals and per-day breakdown.
    
    Only completed appointments contribute. "Today" is the fixed window
    [local midnight of reference_instant, +24h).
    
    Args:
        appointments: Complete current appointment set
        reference_instant: Instant that defines "today" (defaults to now)
        tz: Business timezone (defaults to settings.timezone)
        
    Returns:
        Statistics snapshot
    """
    tz = tz or get_timezone()
    reference_instant = reference_instant or datetime.now(timezone.utc)
    today_start = start_of_day(reference_instant, tz)
    today_end = today_start + timedelta(hours=24)
    
    stats = Statistics()
    
    for appointment in appointments:
        if not is_completed(appointment):
            continue
        
        amount = safe_amount(appointment.total_price, appointment.id)
        stats.total_earnings += amount
        stats.completed_appointments += 1
        
        local_dt = to_local(appointment.date, tz)
        day = stats.daily_stats.setdefault(day_key(local_dt, tz), DayStats())
        day.earnings += amount
        day.count += 1
        
        if today_start <= local_dt < today_end:
            stats.today_earnings += amount
            stats.today_completed_appointments += 1
    
    return stats
