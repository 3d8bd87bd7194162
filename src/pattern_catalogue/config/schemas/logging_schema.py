"""Logging configuration schema."""

from pydantic import BaseModel, Field, field_validator


class LogFileConfig(BaseModel):
    """Rotating log file settings."""

    path: str = Field("logs/pattern_catalogue.log", description="Log file path")
    max_size_mb: int = Field(10, description="Maximum size of one log file in MB")
    backup_count: int = Field(5, description="Number of rotated files to keep")

    @field_validator("max_size_mb")
    @classmethod
    def validate_max_size(cls, v: int) -> int:
        """Validate maximum log file size."""
        if v < 1:
            raise ValueError("Log file size must be at least 1 MB")
        return v

    @field_validator("backup_count")
    @classmethod
    def validate_backup_count(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Backup count cannot be negative")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("WARNING", description="Log level")
    destination: str = Field("stderr", description="Where log records are written")
    file: LogFileConfig = Field(default_factory=lambda: LogFileConfig())

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """
        Validate log level.

        Args:
            v: Value to validate

        Returns:
            Validated value, upper-cased

        Raises:
            ValueError: If log level is invalid
        """
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        valid_destinations = ["stderr", "file", "both"]
        if v.lower() not in valid_destinations:
            raise ValueError(f"Log destination must be one of {valid_destinations}")
        return v.lower()
