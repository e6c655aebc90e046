"""Report export texts."""
from dataclasses import dataclass


@dataclass(frozen=True)
class ReportMessages:
    """Column headers and captions of exported reports."""
    
    # General report
    PERIOD = "Период"
    TOTAL_EARNINGS = "Общий заработок"
    APPOINTMENTS_COUNT = "Выполнено записей"
    EMPLOYEES_SECTION = "Сотрудники"
    SERVICES_SECTION = "Услуги"
    EMPLOYEE = "Сотрудник"
    APPOINTMENTS = "Записей"
    EARNINGS = "Заработок"
    SERVICE = "Услуга"
    QUANTITY = "Кол-во"
    
    # Employee report
    DATE = "Дата"
    SERVICES = "Услуги"
    
    @staticmethod
    def period(start: str, end: str) -> str:
        return f"{start} - {end}"
