"""
In-memory application state.

One sub-store per collection, each owning its list of entities and the
repository that persists it. Stores update memory only after the storage
call succeeded, so a failed call leaves the loaded state untouched.

Deletion comes in two flavours:
- SoftDeleteStore.soft_delete: reference data (employees, services,
  organizations) is flagged is_deleted and stays resolvable by ID
- AppointmentStore.remove / NotificationStore.clear_all: hard delete
"""
import logging
from dataclasses import replace
from datetime import date, datetime, timezone
from typing import Any, Dict, Generic, List, Mapping, Optional, Type, TypeVar, Union

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.entities import (
    Appointment,
    AppointmentServiceItem,
    Employee,
    Notification,
    NotificationType,
    Organization,
    PeriodSummary,
    Service,
    Statistics,
)
from core.exceptions import (
    AppointmentNotFoundError,
    EmployeeNotFoundError,
    EntityNotFoundError,
    NotificationNotFoundError,
    OrganizationNotFoundError,
    ServiceNotFoundError,
)
from database.base import async_session_maker
from database.repositories import (
    AppointmentRepository,
    EmployeeRepository,
    NotificationRepository,
    OrganizationRepository,
    ServiceRepository,
)
from database.repositories.base import BaseRepository
from dashboard.utils.time_utils import local_date
from services.statistics import compute_statistics

logger = logging.getLogger(__name__)

EntityType = TypeVar("EntityType")


class EntityStore(Generic[EntityType]):
    """Loaded collection plus its repository."""

    not_found_error: Type[EntityNotFoundError] = EntityNotFoundError

    def __init__(self, repository: BaseRepository):
        self.repository = repository
        self._items: List[EntityType] = []

    @property
    def items(self) -> List[EntityType]:
        """Snapshot of loaded entities."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def get(self, entity_id: str) -> Optional[EntityType]:
        return next((item for item in self._items if item.id == entity_id), None)

    def require(self, entity_id: str) -> EntityType:
        """Get loaded entity or raise the store's not-found error."""
        entity = self.get(entity_id)
        if entity is None:
            raise self.not_found_error(entity_id)
        return entity

    async def load(self) -> List[EntityType]:
        """Replace loaded entities with the storage contents."""
        self._items = await self.repository.get_all()
        return self.items

    async def add(self, data: Mapping[str, Any]) -> EntityType:
        """Persist a new entity and append it to memory."""
        created = await self.repository.add(data)
        self._items.append(created)
        return created

    async def update(self, entity_id: str, changes: Mapping[str, Any]) -> EntityType:
        """
        Persist partial changes, then shallow-merge them in memory.

        Raises:
            EntityNotFoundError: If entity isn't loaded (storage not called)
        """
        current = self.require(entity_id)
        await self.repository.update(entity_id, changes)
        updated = replace(current, **changes)
        self._items = [updated if item.id == entity_id else item for item in self._items]
        return updated

    def clear(self) -> None:
        self._items = []


class SoftDeleteStore(EntityStore[EntityType]):
    """Store for reference data that is hidden instead of removed."""

    async def soft_delete(self, entity_id: str) -> str:
        """Flag entity as deleted; historical references stay valid."""
        await self.update(entity_id, {"is_deleted": True})
        return entity_id

    def visible(self) -> List[EntityType]:
        """Entities shown in selection lists."""
        return [item for item in self._items if not item.is_deleted]


class EmployeeStore(SoftDeleteStore[Employee]):
    not_found_error = EmployeeNotFoundError

    def available(self) -> List[Employee]:
        """Employees that can be assigned to new bookings."""
        return [e for e in self._items if e.is_active and not e.is_deleted]


class ServiceStore(SoftDeleteStore[Service]):
    not_found_error = ServiceNotFoundError


class OrganizationStore(SoftDeleteStore[Organization]):
    not_found_error = OrganizationNotFoundError


class AppointmentStore(EntityStore[Appointment]):
    not_found_error = AppointmentNotFoundError

    async def update(self, entity_id: str, changes: Mapping[str, Any]) -> Appointment:
        changes = dict(changes)
        if "services" in changes:
            changes["services"] = [
                item if isinstance(item, AppointmentServiceItem) else AppointmentServiceItem(**item)
                for item in changes["services"]
            ]
        return await super().update(entity_id, changes)

    async def remove(self, appointment_id: str) -> Appointment:
        """Hard-delete appointment; returns the removed record."""
        removed = self.require(appointment_id)
        await self.repository.delete(appointment_id)
        self._items = [a for a in self._items if a.id != appointment_id]
        return removed

    def on_date(self, day: Union[date, datetime]) -> List[Appointment]:
        """Appointments of any status on a local calendar day."""
        target = local_date(day)
        return [a for a in self._items if local_date(a.date) == target]


class NotificationStore(EntityStore[Notification]):
    """
    Append-only event ledger.

    The only mutations besides append are read flags and a full clear.
    """

    not_found_error = NotificationNotFoundError
    repository: NotificationRepository

    @property
    def items(self) -> List[Notification]:
        """Notifications, most recent first."""
        return sorted(self._items, key=lambda n: n.timestamp, reverse=True)

    async def append(
        self,
        title: str,
        message: str,
        type: NotificationType = NotificationType.INFO,
    ) -> Notification:
        """Record a new unread notification stamped with the current time."""
        notification = await self.add({
            "title": title,
            "message": message,
            "type": type,
            "is_read": False,
            "timestamp": datetime.now(timezone.utc),
        })
        logger.info(
            f"Notification added: {title}",
            extra={"notification_id": notification.id}
        )
        return notification

    async def mark_read(self, notification_id: str) -> Notification:
        current = self.require(notification_id)
        await self.repository.mark_as_read(notification_id)
        updated = replace(current, is_read=True)
        self._items = [updated if n.id == notification_id else n for n in self._items]
        return updated

    async def mark_all_read(self) -> int:
        """Mark every notification read; returns how many were unread in storage."""
        count = await self.repository.mark_all_as_read()
        self._items = [replace(n, is_read=True) for n in self._items]
        return count

    async def clear_all(self) -> int:
        """Hard-delete every notification; returns deleted count."""
        count = await self.repository.delete_all()
        self._items = []
        return count

    def unread_count(self) -> int:
        """Unread notifications among the loaded ones."""
        return sum(1 for n in self._items if not n.is_read)


class AppState:
    """
    Everything the dashboard holds in memory for one session.

    Statistics are a derived value: recompute_statistics() rebuilds them
    from the full appointment set and is called by the appointment use
    cases after every mutation that can change earnings.
    """

    def __init__(
        self,
        appointments: AppointmentStore,
        employees: EmployeeStore,
        services: ServiceStore,
        organizations: OrganizationStore,
        notifications: NotificationStore,
    ):
        self.appointments = appointments
        self.employees = employees
        self.services = services
        self.organizations = organizations
        self.notifications = notifications
        self.statistics = Statistics()

    @classmethod
    def create(
        cls,
        session_maker: async_sessionmaker[AsyncSession] = async_session_maker,
    ) -> "AppState":
        """Build state backed by SQLAlchemy repositories."""
        return cls(
            appointments=AppointmentStore(AppointmentRepository(session_maker)),
            employees=EmployeeStore(EmployeeRepository(session_maker)),
            services=ServiceStore(ServiceRepository(session_maker)),
            organizations=OrganizationStore(OrganizationRepository(session_maker)),
            notifications=NotificationStore(NotificationRepository(session_maker)),
        )

    @property
    def stores(self) -> Dict[str, EntityStore]:
        return {
            "appointments": self.appointments,
            "employees": self.employees,
            "services": self.services,
            "organizations": self.organizations,
            "notifications": self.notifications,
        }

    async def load(self) -> Statistics:
        """Load every collection from storage, then rebuild statistics."""
        for name, store in self.stores.items():
            await store.load()
            logger.info(f"Loaded {len(store)} {name}")
        return self.recompute_statistics()

    def recompute_statistics(self, now: Optional[datetime] = None) -> Statistics:
        """Rebuild statistics from the full appointment set."""
        self.statistics = compute_statistics(self.appointments.items, now)
        return self.statistics

    def today_statistics(self) -> PeriodSummary:
        return PeriodSummary(
            count=self.statistics.today_completed_appointments,
            total_earnings=self.statistics.today_earnings,
        )

    def all_time_statistics(self) -> PeriodSummary:
        return PeriodSummary(
            count=self.statistics.completed_appointments,
            total_earnings=self.statistics.total_earnings,
        )

    def clear(self) -> None:
        """Drop all loaded data and reset statistics."""
        for store in self.stores.values():
            store.clear()
        self.statistics = Statistics()
