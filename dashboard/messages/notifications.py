"""Notification ledger texts."""
from dataclasses import dataclass

from dashboard.config import settings


@dataclass(frozen=True)
class NotificationMessages:
    """Titles and bodies of notifications appended by use cases."""
    
    APPOINTMENT_COMPLETED = "Запись выполнена"
    DATA_RESET = "Сброс данных"
    DATA_RESET_BODY = "Все данные приложения были успешно удалены"
    
    @staticmethod
    def earnings_added(total_price: float) -> str:
        """Body of the completion notification."""
        return f"Сумма {total_price:.2f} {settings.currency} добавлена в статистику."
