from datetime import datetime
from typing import AsyncGenerator, Callable

import pytest
import pytest_asyncio
import pytz
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from core.entities import (
    Appointment,
    AppointmentServiceItem,
    AppointmentStatus,
    Employee,
)
from database.base import Base
import database.models  # noqa: F401
from services.state import AppState


MINSK = pytz.timezone("Europe/Minsk")


def local(*args) -> datetime:
    """Aware Europe/Minsk datetime."""
    return MINSK.localize(datetime(*args))


@pytest_asyncio.fixture(scope="function")
async def async_engine(tmp_path):
    """Create async engine on a fresh SQLite file."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        echo=False,
        poolclass=NullPool,  # Disable pooling for tests
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def session_maker(async_engine) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Session factory bound to the test database."""
    yield async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
def state(session_maker) -> AppState:
    """Empty application state backed by the test database."""
    return AppState.create(session_maker)


@pytest.fixture
def make_service_item() -> Callable[..., AppointmentServiceItem]:
    def _make(service_id="s1", name="Мойка кузова", price=20.0, quantity=1):
        return AppointmentServiceItem(
            service_id=service_id, name=name, price=price, quantity=quantity
        )
    return _make


@pytest.fixture
def make_appointment(make_service_item) -> Callable[..., Appointment]:
    """Build in-memory appointments for pure aggregation tests."""
    counter = {"n": 0}

    def _make(
        date=None,
        total_price=20.0,
        status=AppointmentStatus.COMPLETED,
        employee_ids=None,
        services=None,
        id=None,
    ):
        counter["n"] += 1
        return Appointment(
            id=id or f"a{counter['n']}",
            date=date or local(2024, 1, 15, 10, 0),
            services=services if services is not None else [make_service_item(price=total_price)],
            total_price=total_price,
            employee_ids=employee_ids if employee_ids is not None else [],
            status=status,
        )
    return _make


@pytest.fixture
def employees() -> list:
    return [
        Employee(id="e1", first_name="Иван", last_name="Петров"),
        Employee(id="e2", first_name="Олег", last_name="Смирнов"),
        Employee(id="e3", first_name="Анна", last_name="Козлова"),
    ]


@pytest.fixture
def draft() -> dict:
    """Valid appointment draft as entered in the booking form."""
    return {
        "date": local(2024, 1, 15, 10, 0),
        "services": [
            {"service_id": "s1", "name": "Мойка кузова", "price": 20.0, "quantity": 1},
        ],
        "car_number": "1234 AB-7",
        "total_price": 20.0,
        "employee_ids": ["e1"],
    }
