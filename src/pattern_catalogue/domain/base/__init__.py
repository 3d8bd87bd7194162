"""Domain base package - shared exceptions and value objects."""

from .exceptions import (
    ConfigurationError,
    DomainException,
    PatternError,
    ValidationError,
)
from .value_objects import PatternFamily

__all__ = [
    "DomainException",
    "ValidationError",
    "ConfigurationError",
    "PatternError",
    "PatternFamily",
]
