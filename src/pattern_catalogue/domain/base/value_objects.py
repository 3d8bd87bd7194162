"""Catalogue value objects."""
from enum import Enum
from typing import List

from .exceptions import ValidationError


class PatternFamily(str, Enum):
    """Design pattern families, in catalogue order."""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"

    @classmethod
    def parse(cls, value: str) -> "PatternFamily":
        """Parse a family name, case-insensitively."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValidationError(
                f"Invalid pattern family: {value}. Must be one of: {', '.join(cls.values())}",
                "INVALID_PATTERN_FAMILY",
                {"value": value},
            ) from None

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]
