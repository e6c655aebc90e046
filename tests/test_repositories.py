"""Unit tests for repositories."""
from datetime import datetime, timezone

import pytest
import pytz

from core.entities import AppointmentServiceItem, AppointmentStatus, ClientType
from core.exceptions import RecordNotFoundError
from database.repositories import AppointmentRepository, EmployeeRepository


MINSK = pytz.timezone("Europe/Minsk")


def appointment_data(**overrides) -> dict:
    data = {
        "date": MINSK.localize(datetime(2024, 1, 15, 10, 0)),
        "services": [AppointmentServiceItem("s1", "Мойка", 20.0, 2)],
        "client_type": ClientType.INDIVIDUAL,
        "organization_id": None,
        "car_number": "1234 AB-7",
        "phone_number": "",
        "car_model": "Volkswagen Passat",
        "notes": "",
        "total_price": 40.0,
        "employee_ids": ["e1", "e2"],
        "status": AppointmentStatus.PENDING,
    }
    data.update(overrides)
    return data


@pytest.mark.asyncio
async def test_add_appointment_round_trip(session_maker):
    repo = AppointmentRepository(session_maker)

    created = await repo.add(appointment_data())
    loaded = await repo.get_by_id(created.id)

    assert len(created.id) == 32
    assert loaded.services == [AppointmentServiceItem("s1", "Мойка", 20.0, 2)]
    assert loaded.employee_ids == ["e1", "e2"]
    assert loaded.status == AppointmentStatus.PENDING
    assert loaded.client_type == ClientType.INDIVIDUAL


@pytest.mark.asyncio
async def test_dates_stored_as_utc(session_maker):
    """Local 10:00 in Minsk is read back as 07:00 UTC."""
    repo = AppointmentRepository(session_maker)

    created = await repo.add(appointment_data())
    loaded = await repo.get_by_id(created.id)

    assert loaded.date.tzinfo is not None
    assert loaded.date == datetime(2024, 1, 15, 7, 0, tzinfo=timezone.utc)
    assert loaded.date == created.date


@pytest.mark.asyncio
async def test_update_and_delete(session_maker):
    repo = AppointmentRepository(session_maker)
    created = await repo.add(appointment_data())

    updated = await repo.update(created.id, {"status": AppointmentStatus.COMPLETED, "notes": "ok"})

    assert updated.status == AppointmentStatus.COMPLETED
    assert updated.notes == "ok"
    assert updated.car_model == "Volkswagen Passat"

    assert await repo.delete(created.id) == created.id
    assert await repo.get_all() == []


@pytest.mark.asyncio
async def test_update_missing_record(session_maker):
    repo = EmployeeRepository(session_maker)

    with pytest.raises(RecordNotFoundError) as exc_info:
        await repo.update("missing", {"first_name": "Иван"})

    assert exc_info.value.collection == "employees"


@pytest.mark.asyncio
async def test_delete_all(session_maker):
    repo = EmployeeRepository(session_maker)
    for name in ("Иван", "Олег"):
        await repo.add({"first_name": name, "last_name": "Петров"})

    assert await repo.count() == 2
    assert await repo.delete_all() == 2
    assert await repo.count() == 0
