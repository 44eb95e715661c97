"""Tests for the reference adapters: in-memory store, console logger, simulated notifier."""

import asyncio
import logging
import random

import pytest
from usercore.models.user import User
from usercore.services.app_logger import ConsoleLogger, format_payload
from usercore.services.notifier import NotificationError, SimulatedEmailNotifier
from usercore.services.user_store import InMemoryUserStore


def _user(name: str = "Juan Pérez", email: str = "juan@example.com", user_id: str | None = None) -> User:
    if user_id is None:
        return User(name=name, email=email)
    return User(name=name, email=email, user_id=user_id)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_store_save_upserts_by_id(store: InMemoryUserStore) -> None:
    original = _user(user_id="usr_1")
    await store.save(original)
    await store.save(original.with_updated_fields(name="Juan P."))

    assert store.count() == 1
    assert (await store.find_by_id("usr_1")).name == "Juan P."


@pytest.mark.unit
@pytest.mark.asyncio
async def test_store_find_by_email_is_exact(store: InMemoryUserStore) -> None:
    await store.save(_user())

    assert (await store.find_by_email("juan@example.com")) is not None
    assert await store.find_by_email("JUAN@example.com") is None
    assert await store.exists("juan@example.com")
    assert not await store.exists("juan@example.org")


@pytest.mark.unit
@pytest.mark.asyncio
async def test_store_lists_in_insertion_order(store: InMemoryUserStore) -> None:
    for index, name in enumerate(["Ana", "Beto", "Cora"]):
        await store.save(_user(name=name, email=f"{name.lower()}@example.com", user_id=f"usr_{index}"))

    assert [user.name for user in await store.list_all()] == ["Ana", "Beto", "Cora"]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_store_delete_reports_presence(store: InMemoryUserStore) -> None:
    await store.save(_user(user_id="usr_1"))

    assert await store.delete("usr_1") is True
    assert await store.delete("usr_1") is False
    assert await store.find_by_id("usr_1") is None


@pytest.mark.unit
@pytest.mark.asyncio
async def test_store_search_is_case_insensitive(store: InMemoryUserStore) -> None:
    await store.save(_user("Juan Pérez", "juan@example.com", "usr_1"))
    await store.save(_user("Carlos López", "carlos@corp.io", "usr_2"))

    assert [user.user_id for user in await store.search("PÉREZ")] == ["usr_1"]
    assert [user.user_id for user in await store.search("corp")] == ["usr_2"]
    assert await store.search("") == []


@pytest.mark.unit
def test_console_logger_writes_payload(caplog: pytest.LogCaptureFixture) -> None:
    app_logger = ConsoleLogger(name="usercore.test")

    with caplog.at_level(logging.INFO, logger="usercore.test"):
        app_logger.info("User created", {"user_id": "usr_1", "count": 3})
        app_logger.warn("User not found")
        app_logger.error("Welcome email failed", NotificationError("smtp down"))

    messages = [record.getMessage() for record in caplog.records]
    assert messages == [
        "User created | user_id='usr_1' count=3",
        "User not found",
        "Welcome email failed | NotificationError: smtp down",
    ]
    assert [record.levelname for record in caplog.records] == ["INFO", "WARNING", "ERROR"]


@pytest.mark.unit
def test_console_logger_never_raises() -> None:
    class Unprintable:
        def __format__(self, spec: str) -> str:
            raise RuntimeError("boom")

    app_logger = ConsoleLogger(name="usercore.test")
    app_logger.info("odd payload", {"value": Unprintable()})  # type: ignore[dict-item]


@pytest.mark.unit
def test_format_payload_empty() -> None:
    assert format_payload(None) == ""
    assert format_payload({}) == ""
    assert format_payload({"ok": True, "missing": None}) == "ok=True missing=None"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_notifier_records_sent_messages() -> None:
    notifier = SimulatedEmailNotifier(delay_seconds=0)
    user = _user()

    await notifier.send_welcome(user)
    await notifier.send_update_notice(user)

    assert [(sent.kind, sent.email) for sent in notifier.sent] == [
        ("welcome", "juan@example.com"),
        ("update", "juan@example.com"),
    ]
    assert notifier.sent[0].subject == "Welcome, Juan Pérez!"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_notifier_failure_rate_raises() -> None:
    notifier = SimulatedEmailNotifier(delay_seconds=0, failure_rate=1.0, rng=random.Random(7))

    with pytest.raises(NotificationError):
        await notifier.send_welcome(_user())
    assert notifier.sent == []


@pytest.mark.unit
@pytest.mark.asyncio
async def test_notifier_times_out() -> None:
    notifier = SimulatedEmailNotifier(delay_seconds=1.0, timeout_seconds=0.01)

    with pytest.raises(NotificationError, match="timed out"):
        await notifier.send_update_notice(_user())


@pytest.mark.unit
def test_notifier_rejects_bad_failure_rate() -> None:
    with pytest.raises(ValueError):
        SimulatedEmailNotifier(failure_rate=1.5)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_notifier_sends_are_cooperative() -> None:
    notifier = SimulatedEmailNotifier(delay_seconds=0.05)
    users = [_user(name=f"User {i}", email=f"user{i}@example.com") for i in range(3)]

    await asyncio.gather(*(notifier.send_welcome(user) for user in users))

    assert sorted(sent.email for sent in notifier.sent) == [user.email for user in users]
