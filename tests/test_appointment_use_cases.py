"""Tests for appointment lifecycle use cases."""
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.exc import OperationalError

from core.entities import AppointmentStatus, ClientType, NotificationType
from core.exceptions import AppointmentNotFoundError, ValidationError
from services.use_cases import (
    CreateAppointmentUseCase,
    DeleteAppointmentUseCase,
    UpdateAppointmentUseCase,
)


@pytest.mark.asyncio
async def test_create_appointment_defaults(state, draft):
    """Create fills defaults and persists the record."""
    appointment = await CreateAppointmentUseCase(state).execute(draft)

    assert appointment.id
    assert appointment.status == AppointmentStatus.PENDING
    assert appointment.client_type == ClientType.INDIVIDUAL
    assert appointment.organization_id is None
    assert appointment.phone_number == ""
    assert appointment.services[0].name == "Мойка кузова"
    assert state.appointments.items == [appointment]

    stored = await state.appointments.repository.get_all()
    assert [a.id for a in stored] == [appointment.id]


@pytest.mark.asyncio
async def test_create_missing_total_price_is_zero(state, draft):
    draft["total_price"] = None

    appointment = await CreateAppointmentUseCase(state).execute(draft)

    assert appointment.total_price == 0


@pytest.mark.asyncio
async def test_create_individual_drops_organization(state, draft):
    draft["organization_id"] = "org1"

    appointment = await CreateAppointmentUseCase(state).execute(draft)

    assert appointment.organization_id is None


@pytest.mark.asyncio
async def test_create_organization_client(state, draft):
    draft.update(client_type="organization", organization_id="org1")

    appointment = await CreateAppointmentUseCase(state).execute(draft)

    assert appointment.client_type == ClientType.ORGANIZATION
    assert appointment.organization_id == "org1"


@pytest.mark.asyncio
async def test_create_completed_updates_statistics(state, draft):
    draft["status"] = "completed"

    await CreateAppointmentUseCase(state).execute(draft)

    assert state.statistics.completed_appointments == 1
    assert state.statistics.total_earnings == 20


@pytest.mark.asyncio
async def test_validation_rejection_before_storage(state):
    """Empty draft fails on the date field without touching storage."""
    state.appointments.repository.add = AsyncMock()

    with pytest.raises(ValidationError) as exc_info:
        await CreateAppointmentUseCase(state).execute({"services": []})

    assert exc_info.value.field == "date"
    state.appointments.repository.add.assert_not_awaited()
    assert state.appointments.items == []


@pytest.mark.asyncio
async def test_empty_services_rejected(state, draft):
    draft["services"] = []

    with pytest.raises(ValidationError) as exc_info:
        await CreateAppointmentUseCase(state).execute(draft)

    assert exc_info.value.field == "services"
    assert state.appointments.items == []


@pytest.mark.asyncio
async def test_storage_failure_leaves_memory_untouched(state, draft):
    state.appointments.repository.add = AsyncMock(
        side_effect=OperationalError("INSERT", {}, Exception("disk I/O error"))
    )

    with pytest.raises(OperationalError):
        await CreateAppointmentUseCase(state).execute(draft)

    assert state.appointments.items == []
    assert state.statistics.completed_appointments == 0


@pytest.mark.asyncio
async def test_status_transition_notification(state, draft):
    """Completing a job appends exactly one success notification."""
    draft["total_price"] = 75
    appointment = await CreateAppointmentUseCase(state).execute(draft)
    use_case = UpdateAppointmentUseCase(state)

    with patch.object(state, "recompute_statistics", wraps=state.recompute_statistics) as recompute:
        updated = await use_case.execute(appointment.id, {"status": "completed"})

        assert recompute.call_count == 1

    assert updated.status == AppointmentStatus.COMPLETED
    notifications = state.notifications.items
    assert len(notifications) == 1
    assert notifications[0].type == NotificationType.SUCCESS
    assert "75.00" in notifications[0].message
    assert state.statistics.total_earnings == 75

    await use_case.execute(appointment.id, {"status": "completed"})

    assert len(state.notifications.items) == 1


@pytest.mark.asyncio
async def test_update_without_completion_skips_recompute(state, draft):
    appointment = await CreateAppointmentUseCase(state).execute(draft)

    with patch.object(state, "recompute_statistics") as recompute:
        updated = await UpdateAppointmentUseCase(state).execute(
            appointment.id, {"notes": "Клиент опаздывает"}
        )

    recompute.assert_not_called()
    assert updated.notes == "Клиент опаздывает"
    assert updated.car_number == "1234 AB-7"
    assert state.notifications.items == []


@pytest.mark.asyncio
async def test_reopen_completed_recomputes(state, draft):
    draft["status"] = "completed"
    appointment = await CreateAppointmentUseCase(state).execute(draft)

    await UpdateAppointmentUseCase(state).execute(appointment.id, {"status": "pending"})

    assert state.statistics.completed_appointments == 0
    assert state.notifications.items == []


@pytest.mark.asyncio
async def test_update_replaces_lists(state, draft):
    appointment = await CreateAppointmentUseCase(state).execute(draft)

    updated = await UpdateAppointmentUseCase(state).execute(appointment.id, {
        "employee_ids": ["e2", "e3"],
        "services": [{"service_id": "s2", "name": "Полировка", "price": 50}],
    })

    assert updated.employee_ids == ["e2", "e3"]
    assert [s.service_id for s in updated.services] == ["s2"]
    assert updated.services[0].quantity == 1

    stored = await state.appointments.repository.get_by_id(appointment.id)
    assert stored.employee_ids == ["e2", "e3"]
    assert stored.services == updated.services


@pytest.mark.asyncio
async def test_switch_to_individual_clears_organization(state, draft):
    draft.update(client_type="organization", organization_id="org1")
    appointment = await CreateAppointmentUseCase(state).execute(draft)

    updated = await UpdateAppointmentUseCase(state).execute(
        appointment.id, {"client_type": "individual"}
    )

    assert updated.organization_id is None


@pytest.mark.asyncio
async def test_organization_id_ignored_for_individual_client(state, draft):
    appointment = await CreateAppointmentUseCase(state).execute(draft)

    updated = await UpdateAppointmentUseCase(state).execute(
        appointment.id, {"organization_id": "org1"}
    )

    assert updated.client_type == ClientType.INDIVIDUAL
    assert updated.organization_id is None
    stored = await state.appointments.repository.get_by_id(appointment.id)
    assert stored.organization_id is None


@pytest.mark.asyncio
async def test_switch_to_organization_keeps_given_id(state, draft):
    appointment = await CreateAppointmentUseCase(state).execute(draft)
    use_case = UpdateAppointmentUseCase(state)

    without_id = await use_case.execute(appointment.id, {"client_type": "organization"})
    assert without_id.organization_id is None

    with_id = await use_case.execute(
        appointment.id, {"client_type": "organization", "organization_id": "org1"}
    )
    assert with_id.organization_id == "org1"

    renamed = await use_case.execute(appointment.id, {"car_number": "5678 AB-7"})
    assert renamed.organization_id == "org1"


@pytest.mark.asyncio
async def test_completion_survives_notification_failure(state, draft):
    """A lost completion notification doesn't fail the stored update."""
    appointment = await CreateAppointmentUseCase(state).execute(draft)
    state.notifications.repository.add = AsyncMock(side_effect=RuntimeError("connection lost"))

    updated = await UpdateAppointmentUseCase(state).execute(
        appointment.id, {"status": "completed"}
    )

    assert updated.status == AppointmentStatus.COMPLETED
    assert state.appointments.get(appointment.id).status == AppointmentStatus.COMPLETED
    assert state.statistics.completed_appointments == 1
    assert state.notifications.items == []
    state.notifications.repository.add.assert_awaited_once()


@pytest.mark.asyncio
async def test_update_rejects_unknown_and_null_fields(state, draft):
    appointment = await CreateAppointmentUseCase(state).execute(draft)
    use_case = UpdateAppointmentUseCase(state)

    with pytest.raises(ValidationError):
        await use_case.execute(appointment.id, {"color": "red"})
    with pytest.raises(ValidationError):
        await use_case.execute(appointment.id, {"date": None})


@pytest.mark.asyncio
async def test_update_unknown_id(state):
    state.appointments.repository.update = AsyncMock()

    with pytest.raises(AppointmentNotFoundError):
        await UpdateAppointmentUseCase(state).execute("missing", {"status": "completed"})

    state.appointments.repository.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_storage_failure(state, draft):
    appointment = await CreateAppointmentUseCase(state).execute(draft)
    state.appointments.repository.update = AsyncMock(side_effect=RuntimeError("connection lost"))

    with pytest.raises(RuntimeError):
        await UpdateAppointmentUseCase(state).execute(appointment.id, {"status": "completed"})

    assert state.appointments.get(appointment.id).status == AppointmentStatus.PENDING
    assert state.notifications.items == []


@pytest.mark.asyncio
async def test_delete_completed_recomputes(state, draft):
    draft["status"] = "completed"
    appointment = await CreateAppointmentUseCase(state).execute(draft)

    deleted_id = await DeleteAppointmentUseCase(state).execute(appointment.id)

    assert deleted_id == appointment.id
    assert state.appointments.items == []
    assert state.statistics.completed_appointments == 0
    assert await state.appointments.repository.get_by_id(appointment.id) is None


@pytest.mark.asyncio
async def test_delete_pending_skips_recompute(state, draft):
    appointment = await CreateAppointmentUseCase(state).execute(draft)

    with patch.object(state, "recompute_statistics") as recompute:
        await DeleteAppointmentUseCase(state).execute(appointment.id)

    recompute.assert_not_called()


@pytest.mark.asyncio
async def test_delete_unknown_id(state):
    with pytest.raises(AppointmentNotFoundError):
        await DeleteAppointmentUseCase(state).execute("missing")
