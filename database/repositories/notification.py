"""Notification repository for database operations."""
from typing import Any, Dict, List, Mapping

from sqlalchemy import select, update

from core.entities import Notification, NotificationType
from dashboard.utils.time_utils import from_storage, to_utc
from database.models import NotificationModel
from database.repositories.base import BaseRepository


class NotificationRepository(BaseRepository[NotificationModel, Notification]):
    """Repository for Notification documents."""
    
    model_class = NotificationModel
    entity_class = Notification
    
    def to_entity(self, row: NotificationModel) -> Notification:
        return Notification(
            id=row.id,
            title=row.title,
            message=row.message,
            type=NotificationType(row.type),
            timestamp=from_storage(row.timestamp),
            is_read=row.is_read,
        )
    
    def to_values(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        values = super().to_values(data)
        if "timestamp" in values:
            values["timestamp"] = to_utc(values["timestamp"])
        return values
    
    async def get_all(self) -> List[Notification]:
        """Get all notifications, most recent first."""
        async with self.session_maker() as session:
            result = await session.execute(
                select(NotificationModel).order_by(NotificationModel.timestamp.desc())
            )
            return [self.to_entity(row) for row in result.scalars().all()]
    
    async def mark_as_read(self, notification_id: str) -> Notification:
        """Mark single notification as read."""
        return await self.update(notification_id, {"is_read": True})
    
    async def mark_all_as_read(self) -> int:
        """
        Mark every unread notification as read.
        
        Returns:
            Number of notifications that were unread
        """
        async with self.session_maker() as session, session.begin():
            result = await session.execute(
                update(NotificationModel)
                .where(NotificationModel.is_read == False)
                .values(is_read=True)
            )
        return result.rowcount or 0
