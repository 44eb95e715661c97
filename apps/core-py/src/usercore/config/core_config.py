"""Configuration management for the user core."""

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_env_file_path() -> str:
    """Get the path to the .env file.

    Checks for ENV_FILE environment variable first, then defaults to
    .env in the core-py project directory (apps/core-py/.env).

    Returns:
        Path to the .env file
    """
    env_file = os.getenv("ENV_FILE")
    if env_file:
        return env_file

    # apps/core-py/src/usercore/config/core_config.py -> apps/core-py/
    core_py_dir = Path(__file__).parent.parent.parent.parent
    return str(core_py_dir / ".env")


class CoreConfig(BaseSettings):
    """Settings for the user core and its reference adapters."""

    log_level: str = "info"
    logger_name: str = "usercore"

    # Simulated email notifier
    notifier_sender: str = "no-reply@example.com"
    notifier_delay_seconds: float = Field(0.1, ge=0.0)
    notifier_failure_rate: float = Field(0.0, ge=0.0, le=1.0)
    notifier_timeout_seconds: float | None = Field(5.0, gt=0.0)

    model_config = SettingsConfigDict(
        env_file=_get_env_file_path(),
        case_sensitive=False,
        env_file_encoding="utf-8",
        env_prefix="USERCORE_",
        extra="ignore",
    )


def get_core_config() -> CoreConfig:
    """Get core configuration.

    Returns:
        CoreConfig instance
    """
    return CoreConfig()
