"""Core services package."""

from usercore.services.app_logger import AppLogger, ConsoleLogger
from usercore.services.notifier import NotificationError, Notifier, SimulatedEmailNotifier
from usercore.services.user_service import UserService
from usercore.services.user_store import InMemoryUserStore, UserStore

__all__ = [
    "AppLogger",
    "ConsoleLogger",
    "InMemoryUserStore",
    "NotificationError",
    "Notifier",
    "SimulatedEmailNotifier",
    "UserService",
    "UserStore",
]
