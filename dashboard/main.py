"""Dashboard entrypoint: prepare storage, load state and print today's summary."""
import asyncio
import logging

from dashboard.config import settings
from dashboard.logging_config import setup_logging
from dashboard.utils.formatters import format_price
from database.base import close_db, init_db
from services.state import AppState
from services.use_cases import GetDashboardUseCase, LoadDataUseCase

logger = logging.getLogger(__name__)


async def bootstrap() -> AppState:
    """Create tables if needed and load every collection into memory."""
    await init_db()
    state = AppState.create()
    await LoadDataUseCase(state).execute()
    return state


async def main():
    setup_logging()
    logger.info(f"Starting dashboard ({settings.environment}), timezone {settings.timezone}")

    try:
        state = await bootstrap()
        summary = await GetDashboardUseCase(state).execute()
        logger.info(
            f"Today: {summary.today.count} completed, {format_price(summary.today.total_earnings)}; "
            f"total: {summary.statistics.completed_appointments} completed, "
            f"{format_price(summary.statistics.total_earnings)}; "
            f"unread notifications: {summary.unread_notifications}"
        )
    finally:
        await close_db()


def run():
    """Console script entrypoint."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
