"""
Domain entities and derived report types.

Plain dataclasses without behaviour. Storage rows are converted into these
by the repositories, and all statistics and reports operate on them.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional


class AppointmentStatus(str, Enum):
    """Appointment status enum."""
    PENDING = "pending"  # Ожидает выполнения
    COMPLETED = "completed"  # Выполнена
    CANCELLED = "cancelled"  # Отменена


class ClientType(str, Enum):
    """Who the car belongs to."""
    INDIVIDUAL = "individual"
    ORGANIZATION = "organization"


class NotificationType(str, Enum):
    """Notification severity."""
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


# ============== Reference data ==============

@dataclass
class Employee:
    id: str
    first_name: str
    last_name: str
    is_active: bool = True
    is_deleted: bool = False


@dataclass
class Service:
    id: str
    name: str
    price: float
    is_deleted: bool = False


@dataclass
class Organization:
    id: str
    name: str
    contact_person: str = ""
    phone_number: str = ""
    is_deleted: bool = False


# ============== Appointments ==============

@dataclass
class AppointmentServiceItem:
    """Service snapshot taken at booking time (name and price are frozen)."""
    service_id: str
    name: str
    price: float
    quantity: int = 1


@dataclass
class Appointment:
    id: str
    date: datetime
    services: List[AppointmentServiceItem]
    client_type: ClientType = ClientType.INDIVIDUAL
    organization_id: Optional[str] = None
    car_number: str = ""
    phone_number: str = ""
    car_model: str = ""
    notes: str = ""
    total_price: float = 0
    employee_ids: List[str] = field(default_factory=list)
    status: AppointmentStatus = AppointmentStatus.PENDING


@dataclass
class Notification:
    id: str
    title: str
    message: str
    type: NotificationType
    timestamp: datetime
    is_read: bool = False


# ============== Statistics ==============

@dataclass
class DayStats:
    earnings: float = 0
    count: int = 0


@dataclass
class Statistics:
    """Running totals derived from the full appointment set."""
    total_earnings: float = 0
    completed_appointments: int = 0
    today_earnings: float = 0
    today_completed_appointments: int = 0
    daily_stats: Dict[str, DayStats] = field(default_factory=dict)


@dataclass
class PeriodSummary:
    """Completed appointment count and earnings for a period."""
    count: int = 0
    total_earnings: float = 0


# ============== Reports ==============

@dataclass
class DateRange:
    start: datetime
    end: datetime


@dataclass
class EmployeeStat:
    employee_id: str
    employee_name: str
    earnings: float
    appointments_count: int


@dataclass
class ServiceStat:
    service_id: str
    service_name: str
    count: int = 0
    earnings: float = 0


@dataclass
class GeneralReport:
    period: DateRange
    total_earnings: float
    appointments_count: int
    employee_stats: List[EmployeeStat]
    service_stats: List[ServiceStat]


@dataclass
class AppointmentDetail:
    id: str
    date: datetime
    services: List[AppointmentServiceItem]
    earnings: float


@dataclass
class EmployeeReport:
    employee_id: str
    employee: Employee
    total_earnings: float
    appointments_count: int
    appointment_details: List[AppointmentDetail]
