"""Composition root: assembles the user service from concrete adapters."""

import logging

from usercore.config import CoreConfig, get_core_config
from usercore.services.app_logger import AppLogger, ConsoleLogger
from usercore.services.notifier import Notifier, SimulatedEmailNotifier
from usercore.services.user_service import UserService
from usercore.services.user_store import InMemoryUserStore, UserStore

logger = logging.getLogger(__name__)

# Service instances cache
_services_cache: dict[str, UserService] = {}


def build_user_service(
    config: CoreConfig | None = None,
    *,
    store: UserStore | None = None,
    app_logger: AppLogger | None = None,
    notifier: Notifier | None = None,
) -> UserService:
    """Build a UserService, defaulting each port to its reference adapter.

    Args:
        config: Core configuration, loaded from the environment when omitted
        store: Persistence adapter override
        app_logger: Logging adapter override
        notifier: Notification adapter override

    Returns:
        A wired UserService
    """
    config = config or get_core_config()
    return UserService(
        store=store or InMemoryUserStore(),
        logger=app_logger or ConsoleLogger(name=config.logger_name, level=config.log_level),
        notifier=notifier
        or SimulatedEmailNotifier(
            sender=config.notifier_sender,
            delay_seconds=config.notifier_delay_seconds,
            failure_rate=config.notifier_failure_rate,
            timeout_seconds=config.notifier_timeout_seconds,
        ),
    )


def get_user_service(config: CoreConfig | None = None) -> UserService:
    """Get the process-wide UserService instance."""
    if "user_service" not in _services_cache:
        _services_cache["user_service"] = build_user_service(config)
        logger.info("Initialized UserService with in-memory store")
    return _services_cache["user_service"]


def reset_services() -> None:
    """Drop cached service instances."""
    _services_cache.clear()
