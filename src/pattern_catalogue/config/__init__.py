"""Configuration package."""

from .defaults import DEFAULT_CONFIG, ConfigurationManager, LogDestination, LogLevel
from .schemas import AppConfig, DemoConfig, LogFileConfig, LoggingConfig

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigurationManager",
    "LogLevel",
    "LogDestination",
    "AppConfig",
    "DemoConfig",
    "LoggingConfig",
    "LogFileConfig",
]
