"""Main application configuration schema."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from pattern_catalogue.domain.base.value_objects import PatternFamily

from .logging_schema import LoggingConfig


class DemoConfig(BaseModel):
    """Demo runner configuration."""

    pause_on_exit: bool = Field(False, description="Wait for Enter before the CLI exits")
    default_family: Optional[str] = Field(
        None, description="Family run by 'run' when no names are given"
    )

    @field_validator("default_family")
    @classmethod
    def validate_default_family(cls, v: Optional[str]) -> Optional[str]:
        """Validate the default family against the known families."""
        if v is None or v == "":
            return None
        if v.lower() not in PatternFamily.values():
            raise ValueError(f"Default family must be one of {PatternFamily.values()}")
        return v.lower()


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    demo: DemoConfig = Field(default_factory=lambda: DemoConfig())
