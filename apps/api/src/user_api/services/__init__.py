"""Service initialization and dependency injection."""

from fastapi import Depends
from usercore.config import CoreConfig, get_core_config
from usercore.services.user_service import UserService
from usercore.wiring import get_user_service as get_core_user_service


def get_user_service(config: CoreConfig = Depends(get_core_config)) -> UserService:
    """Get the shared UserService instance.

    The instance is built and cached by the core composition root on first use.

    Args:
        config: Core configuration

    Returns:
        UserService wired with the in-memory store
    """
    return get_core_user_service(config)
