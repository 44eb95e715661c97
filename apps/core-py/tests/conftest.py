"""Pytest configuration and fixtures for the user core."""

import pytest
from usercore.models.user import User
from usercore.services.app_logger import AppLogger, LogPayload
from usercore.services.notifier import NotificationError, Notifier, SimulatedEmailNotifier
from usercore.services.user_service import UserService
from usercore.services.user_store import InMemoryUserStore


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")


class RecordingLogger(AppLogger):
    """AppLogger that keeps every entry for assertions."""

    def __init__(self) -> None:
        self.entries: list[tuple[str, str, object]] = []

    def info(self, message: str, payload: LogPayload | None = None) -> None:
        self.entries.append(("info", message, payload))

    def warn(self, message: str, payload: LogPayload | None = None) -> None:
        self.entries.append(("warn", message, payload))

    def error(self, message: str, error: BaseException | str | None = None) -> None:
        self.entries.append(("error", message, error))

    def levels(self, level: str) -> list[str]:
        return [message for entry_level, message, _ in self.entries if entry_level == level]


class FailingNotifier(Notifier):
    """Notifier whose every send fails."""

    def __init__(self) -> None:
        self.attempts = 0

    async def send_welcome(self, user: User) -> None:
        self.attempts += 1
        raise NotificationError("smtp down")

    async def send_update_notice(self, user: User) -> None:
        self.attempts += 1
        raise NotificationError("smtp down")


@pytest.fixture
def store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def notifier() -> SimulatedEmailNotifier:
    return SimulatedEmailNotifier(delay_seconds=0)


@pytest.fixture
def failing_notifier() -> FailingNotifier:
    return FailingNotifier()


@pytest.fixture
def service(store, recording_logger, notifier) -> UserService:
    return UserService(store=store, logger=recording_logger, notifier=notifier)
