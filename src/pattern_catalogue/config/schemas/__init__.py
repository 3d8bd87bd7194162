"""Configuration schemas."""

from .app_schema import AppConfig, DemoConfig
from .logging_schema import LogFileConfig, LoggingConfig

__all__ = ["AppConfig", "DemoConfig", "LoggingConfig", "LogFileConfig"]
