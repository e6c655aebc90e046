"""
Data management use cases: initial load and full reset.
"""
import logging
import time

from core.entities import Notification, NotificationType, Statistics
from dashboard.messages import NotificationMessages
from services.use_cases.base import BaseUseCase

logger = logging.getLogger(__name__)


class LoadDataUseCase(BaseUseCase[Statistics]):
    """
    Load all collections into memory and compute statistics.
    """

    async def execute(self) -> Statistics:
        started = time.perf_counter()
        try:
            statistics = await self.state.load()
        except Exception as e:
            logger.error(f"Failed to load data: {e}", exc_info=True)
            raise

        logger.info(
            f"Data loaded: {statistics.completed_appointments} completed appointments",
            extra={"duration": round(time.perf_counter() - started, 3)}
        )
        return statistics


class ResetDataUseCase(BaseUseCase[Notification]):
    """
    Delete every document of every collection.

    Irreversible. The ledger starts over with a single warning entry.
    """

    async def execute(self) -> Notification:
        """
        Reset all data.

        If a collection fails to delete, the ones already emptied in storage
        are emptied in memory too and statistics are recomputed before the
        error propagates.

        Returns:
            The notification recording the reset
        """
        emptied = []
        try:
            for name, store in self.state.stores.items():
                deleted = await store.repository.delete_all()
                emptied.append(store)
                logger.warning(f"Deleted {deleted} {name}")
        except Exception as e:
            logger.error(
                f"Failed to reset data after {len(emptied)} collections: {e}", exc_info=True
            )
            for store in emptied:
                store.clear()
            self.state.recompute_statistics()
            raise

        self.state.clear()

        return await self.state.notifications.append(
            title=NotificationMessages.DATA_RESET,
            message=NotificationMessages.DATA_RESET_BODY,
            type=NotificationType.WARNING,
        )
