"""Registry for the demo catalogue."""

from .demo_registry import (
    DemoRegistration,
    DemoRegistry,
    UnsupportedDemoError,
    get_demo_registry,
)

__all__ = [
    "DemoRegistration",
    "DemoRegistry",
    "UnsupportedDemoError",
    "get_demo_registry",
]
