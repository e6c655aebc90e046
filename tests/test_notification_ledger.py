"""Tests for the notification ledger."""
from datetime import datetime, timedelta, timezone

import pytest

from core.entities import NotificationType
from core.exceptions import NotificationNotFoundError


@pytest.mark.asyncio
async def test_append_creates_unread_notification(state):
    before = datetime.now(timezone.utc)

    notification = await state.notifications.append(
        "Запись выполнена", "Сумма 10.00 BYN добавлена в статистику.", NotificationType.SUCCESS
    )

    assert notification.id
    assert notification.is_read is False
    assert notification.type == NotificationType.SUCCESS
    assert notification.timestamp >= before
    assert state.notifications.unread_count() == 1


@pytest.mark.asyncio
async def test_items_most_recent_first(state):
    first = await state.notifications.append("Первое", "")
    second = await state.notifications.append("Второе", "")

    assert [n.id for n in state.notifications.items] == [second.id, first.id]


@pytest.mark.asyncio
async def test_load_orders_by_timestamp(state):
    repository = state.notifications.repository
    now = datetime.now(timezone.utc)
    for title, age in (("old", 2), ("new", 0), ("mid", 1)):
        await repository.add({
            "title": title,
            "message": "",
            "type": NotificationType.INFO,
            "is_read": False,
            "timestamp": now - timedelta(hours=age),
        })

    loaded = await repository.get_all()

    assert [n.title for n in loaded] == ["new", "mid", "old"]
    assert all(n.timestamp.tzinfo is not None for n in loaded)


@pytest.mark.asyncio
async def test_mark_read(state):
    notification = await state.notifications.append("Тест", "")
    await state.notifications.append("Другое", "")

    updated = await state.notifications.mark_read(notification.id)

    assert updated.is_read is True
    assert state.notifications.unread_count() == 1
    stored = await state.notifications.repository.get_by_id(notification.id)
    assert stored.is_read is True


@pytest.mark.asyncio
async def test_mark_read_unknown(state):
    with pytest.raises(NotificationNotFoundError):
        await state.notifications.mark_read("missing")


@pytest.mark.asyncio
async def test_mark_all_read(state):
    for i in range(3):
        await state.notifications.append(f"N{i}", "")
    await state.notifications.mark_read(state.notifications.items[0].id)

    count = await state.notifications.mark_all_read()

    assert count == 2
    assert state.notifications.unread_count() == 0
    await state.notifications.load()
    assert state.notifications.unread_count() == 0


@pytest.mark.asyncio
async def test_clear_all_is_hard_delete(state):
    for i in range(2):
        await state.notifications.append(f"N{i}", "")

    count = await state.notifications.clear_all()

    assert count == 2
    assert state.notifications.items == []
    assert await state.notifications.repository.count() == 0
