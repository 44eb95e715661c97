"""Configuration package."""

from usercore.config.core_config import CoreConfig, get_core_config

__all__ = ["CoreConfig", "get_core_config"]
