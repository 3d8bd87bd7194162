# src/pattern_catalogue/config/defaults.py
import copy
import json
import os
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from pattern_catalogue.domain.base.exceptions import ConfigurationError
from pattern_catalogue.domain.base.value_objects import PatternFamily

from .schemas.app_schema import AppConfig

CONFIG_FILENAME = "pattern_catalogue.json"


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDERR = "stderr"
    BOTH = "both"


DEFAULT_CONFIG: Dict[str, Any] = {
    # Logging configuration
    "LOGGING_CONFIG": {
        "level": "${PATTERN_CATALOGUE_LOG_LEVEL:WARNING}",
        "destination": "${PATTERN_CATALOGUE_LOG_DESTINATION:stderr}",
        "file": {
            "path": "${PATTERN_CATALOGUE_LOG_FILE:logs/pattern_catalogue.log}",
            "max_size_mb": 10,
            "backup_count": 5,
        },
    },

    # Demo runner configuration
    "DEMO_CONFIG": {
        "pause_on_exit": False,
        "default_family": None,
    },

    # Validation ranges and rules
    "VALIDATION_RULES": {
        ("LOGGING_CONFIG", "file", "max_size_mb"): {
            "min": 1,
            "max": 1024,
            "type": "int",
        },
        ("LOGGING_CONFIG", "file", "backup_count"): {
            "min": 0,
            "max": 100,
            "type": "int",
        },
    },
}

# Top-level sections that must be JSON objects
CONFIG_SECTIONS = ("LOGGING_CONFIG", "DEMO_CONFIG", "VALIDATION_RULES")

# Environment variables applied after the config file (highest priority)
ENV_MAPPINGS = {
    "PATTERN_CATALOGUE_PAUSE_ON_EXIT": ("DEMO_CONFIG", "pause_on_exit"),
    "PATTERN_CATALOGUE_DEFAULT_FAMILY": ("DEMO_CONFIG", "default_family"),
}


class ConfigurationManager:
    """
    Manages application configuration with defaults and overrides.

    This class handles:
    - Loading default configuration
    - Applying user configuration file overrides
    - Applying environment variable overrides
    - Variable interpolation
    - Configuration validation
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration manager with defaults.

        Args:
            config_file: Optional path to configuration file. If not provided,
                        will look in PATTERN_CATALOGUE_CONFDIR/pattern_catalogue.json
        """
        self._config = copy.deepcopy(DEFAULT_CONFIG)

        if config_file:
            self._load_config_file(config_file)
        else:
            default_config_path = os.path.join(
                os.environ.get("PATTERN_CATALOGUE_CONFDIR", ""),
                CONFIG_FILENAME,
            )
            if os.path.exists(default_config_path):
                self._load_config_file(default_config_path)

        self._load_env_vars()

        self.validate_config()

    def _load_config_file(self, config_path: str) -> None:
        """Load configuration from file."""
        try:
            with open(config_path, "r") as f:
                user_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Failed to load configuration: {str(e)}") from e
        if not isinstance(user_config, dict):
            raise ConfigurationError(
                f"Failed to load configuration: {config_path} must contain a JSON object"
            )
        self.update_config(user_config)

    def _load_env_vars(self) -> None:
        """Load and apply environment variable overrides."""
        for env_var, path in ENV_MAPPINGS.items():
            if env_var in os.environ:
                self._set_nested_value(self._config, path, os.environ[env_var])

    def _set_nested_value(self, config: Dict[str, Any], path: tuple, value: Any) -> None:
        """Set a nested configuration value."""
        current = config
        for key in path[:-1]:
            current = current.setdefault(key, {})
            if not isinstance(current, dict):
                # Left for validate_config to report
                return
        current[path[-1]] = value

    def _get_nested_value(self, config: Dict[str, Any], path: tuple) -> Any:
        current: Any = config
        for key in path:
            if not isinstance(current, dict) or key not in current:
                return None
            current = current[key]
        return current

    def _interpolate_values(self, config: Any) -> Any:
        """Interpolate ${VAR} and ${VAR:default} references in configuration values."""
        if isinstance(config, str):
            if config.startswith("${") and config.endswith("}"):
                var_name = config[2:-1]
                if ":" in var_name:
                    var_name, default = var_name.split(":", 1)
                    return os.environ.get(var_name, default)
                return os.environ.get(var_name, config)
            return config
        elif isinstance(config, dict):
            return {k: self._interpolate_values(v) for k, v in config.items()}
        elif isinstance(config, list):
            return [self._interpolate_values(v) for v in config]
        return config

    def update_config(self, user_config: Dict[str, Any]) -> None:
        """
        Update configuration with user-provided values.

        Args:
            user_config: Configuration dictionary from user config file
        """
        def deep_update(target: Dict[str, Any], source: Dict[str, Any]) -> None:
            for key, value in source.items():
                if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                    deep_update(target[key], value)
                else:
                    target[key] = value

        deep_update(self._config, user_config)

    def get_config(self) -> Dict[str, Any]:
        """
        Get the complete configuration with all interpolations applied.

        Returns:
            Dict containing the complete configuration
        """
        return self._interpolate_values(self._config)

    def get_app_config(self) -> AppConfig:
        """Get the configuration as a validated AppConfig model."""
        config = self.get_config()
        try:
            return AppConfig.model_validate(
                {
                    "logging": config["LOGGING_CONFIG"],
                    "demo": config["DEMO_CONFIG"],
                }
            )
        except PydanticValidationError as e:
            raise ConfigurationError(
                "Invalid configuration",
                [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()],
            ) from e

    def validate_config(self) -> None:
        """
        Validate the configuration.

        Validates:
        - Log level and destination are known values
        - Numeric settings are integers within their allowed ranges
        - The default demo family, when set, is a known family

        Raises:
            ConfigurationError: If configuration is invalid, listing every problem found
        """
        config = self.get_config()

        # Field checks below index into these sections
        errors = [
            f"{section} must be an object, got {type(config.get(section)).__name__}"
            for section in CONFIG_SECTIONS
            if not isinstance(config.get(section), dict)
        ]
        if errors:
            raise ConfigurationError(
                f"Configuration validation failed: {'; '.join(errors)}", errors
            )

        log_config = config["LOGGING_CONFIG"]
        log_level = str(log_config["level"]).upper()
        if log_level not in LogLevel.__members__:
            errors.append(f"Invalid log level: {log_level}")

        log_dest = str(log_config["destination"]).lower()
        try:
            LogDestination(log_dest)
        except ValueError:
            errors.append(
                f"Invalid log destination: {log_dest}. "
                f"Must be one of: {', '.join(d.value for d in LogDestination)}"
            )

        for path, rules in config["VALIDATION_RULES"].items():
            if not isinstance(rules, dict) or rules.get("type") != "int":
                continue
            field = ".".join(path)
            value = self._get_nested_value(config, path)
            if value is None:
                continue
            try:
                value = int(value)
            except (TypeError, ValueError):
                errors.append(f"{field} must be an integer")
                continue
            if "min" in rules and value < rules["min"]:
                errors.append(f"{field} must be at least {rules['min']}")
            if "max" in rules and value > rules["max"]:
                errors.append(f"{field} must be at most {rules['max']}")

        default_family = config["DEMO_CONFIG"].get("default_family")
        if default_family and str(default_family).lower() not in PatternFamily.values():
            errors.append(
                f"Invalid default family: {default_family}. "
                f"Must be one of: {', '.join(PatternFamily.values())}"
            )

        if errors:
            raise ConfigurationError(
                f"Configuration validation failed: {'; '.join(errors)}", errors
            )
