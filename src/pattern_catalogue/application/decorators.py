"""
Application Layer Decorators for demo drivers.

``@demo`` records a zero-argument driver function in an application-level
registry. The infrastructure registry consumes these
records at bootstrap; module import order is catalogue order.
"""
from __future__ import annotations
from typing import Callable, Dict, NamedTuple, TypeVar, Union

from pattern_catalogue.domain.base.value_objects import PatternFamily

TDemo = TypeVar('TDemo', bound=Callable[[], None])


class DemoDefinition(NamedTuple):
    name: str
    family: PatternFamily
    description: str
    runner: Callable[[], None]


# Demo registry (application-level abstraction)
_demo_registry: Dict[str, DemoDefinition] = {}


def demo(name: str, family: Union[PatternFamily, str], description: str = ""):
    """
    Application-layer decorator to record demo drivers.

    Usage:
        @demo("singleton", PatternFamily.CREATIONAL, "Lazy, lock-guarded single instance")
        def singleton() -> None:
            ...

    Args:
        name: Unique demo name used on the command line
        family: Pattern family the demo belongs to
        description: One-line description shown in listings

    Returns:
        The undecorated driver function
    """
    pattern_family = PatternFamily.parse(family)

    def decorator(func: TDemo) -> TDemo:
        _demo_registry[name] = DemoDefinition(name, pattern_family, description, func)
        return func

    return decorator


def get_registered_demo_functions() -> Dict[str, DemoDefinition]:
    """Get all registered demo drivers (for infrastructure consumption)."""
    return _demo_registry.copy()
