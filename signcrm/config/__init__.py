"""Configuration module."""

from signcrm.config.logging import (
    bind_acting_user,
    clear_acting_user,
    configure_logging,
    get_logger,
)
from signcrm.config.settings import Settings, get_settings, reset_settings

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "configure_logging",
    "bind_acting_user",
    "clear_acting_user",
    "get_logger",
]
