"""Configuration for neo-auth-broker."""

from .logging_config import (
    LogFormat,
    LogLevel,
    LogVerbosity,
    LoggingConfig,
    setup_logging,
)
from .settings import AuthBrokerSettings, get_settings

__all__ = [
    "LogFormat",
    "LogLevel",
    "LogVerbosity",
    "LoggingConfig",
    "setup_logging",
    "AuthBrokerSettings",
    "get_settings",
]
