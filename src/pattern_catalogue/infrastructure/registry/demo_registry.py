"""Demo Registry - Registry pattern for pattern demo drivers.

Demos are looked up by name instead of through a hard-coded dispatch
table, so new demos are added by registering them.
"""

from typing import Callable, Dict, List, Optional
import threading

from pattern_catalogue.domain.base.exceptions import ValidationError
from pattern_catalogue.domain.base.value_objects import PatternFamily
from pattern_catalogue.infrastructure.logging.logger import get_logger


class UnsupportedDemoError(ValidationError):
    """Exception raised when an unknown demo name is requested."""

    def __init__(self, demo_name: str, available: Optional[List[str]] = None):
        super().__init__(
            f"Unknown demo: {demo_name}",
            "UNSUPPORTED_DEMO",
            {"demo_name": demo_name, "available": available or []},
        )
        self.demo_name = demo_name


class DemoRegistration:
    """Container for demo registration information."""

    def __init__(self,
                 name: str,
                 family: PatternFamily,
                 runner: Callable[[], None],
                 description: str = ""):
        """
        Initialize demo registration.

        Args:
            name: Unique demo name (e.g., 'singleton', 'chain_of_responsibility')
            family: Pattern family the demo belongs to
            runner: Zero-argument driver that prints the demo output
            description: One-line description shown in listings
        """
        self.name = name
        self.family = family
        self.runner = runner
        self.description = description

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "family": self.family.value,
            "description": self.description,
        }

    def __repr__(self) -> str:
        return f"DemoRegistration(name={self.name!r}, family={self.family.value!r})"


class DemoRegistry:
    """
    Registry for pattern demo drivers.

    Registrations keep insertion order within a family. Listings are
    grouped creational, structural, behavioral.

    Thread-safe singleton implementation.
    """

    _instance: Optional['DemoRegistry'] = None
    _lock = threading.RLock()

    def __init__(self):
        """Initialize demo registry."""
        self._registrations: Dict[str, DemoRegistration] = {}
        self._logger = get_logger(__name__)
        self._registration_lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> 'DemoRegistry':
        """Get singleton instance of demo registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the process-wide instance. Used by tests."""
        with cls._lock:
            cls._instance = None

    def register_demo(self,
                      name: str,
                      family: PatternFamily,
                      runner: Callable[[], None],
                      description: str = "") -> None:
        """
        Register a demo driver.

        Raises:
            ValueError: If the name is already registered
        """
        with self._registration_lock:
            if name in self._registrations:
                raise ValueError(f"Demo '{name}' is already registered")

            self._registrations[name] = DemoRegistration(
                name=name,
                family=PatternFamily(family),
                runner=runner,
                description=description,
            )
            self._logger.debug("Registered demo", demo=name, family=PatternFamily(family).value)

    def unregister_demo(self, name: str) -> bool:
        """
        Unregister a demo.

        Returns:
            True if the demo was unregistered, False if not found
        """
        with self._registration_lock:
            if name in self._registrations:
                del self._registrations[name]
                self._logger.debug("Unregistered demo", demo=name)
                return True
            return False

    def is_demo_registered(self, name: str) -> bool:
        return name in self._registrations

    def get_registration(self, name: str) -> DemoRegistration:
        """
        Get the registration for a demo.

        Raises:
            UnsupportedDemoError: If no demo with this name is registered
        """
        registration = self._registrations.get(name)
        if registration is None:
            raise UnsupportedDemoError(name, list(self._registrations))
        return registration

    def get_registered_demos(self, family: Optional[PatternFamily] = None) -> List[DemoRegistration]:
        """
        Get registered demos in catalogue order.

        Args:
            family: Optional family filter

        Returns:
            Registrations grouped by family, each group in registration order
        """
        with self._registration_lock:
            registrations = list(self._registrations.values())

        families = [PatternFamily(family)] if family is not None else list(PatternFamily)
        return [
            registration
            for fam in families
            for registration in registrations
            if registration.family is fam
        ]

    def get_registered_demo_names(self) -> List[str]:
        return [registration.name for registration in self.get_registered_demos()]

    def clear_registrations(self) -> None:
        """Clear all registrations (mainly for testing)."""
        with self._registration_lock:
            self._registrations.clear()
            self._logger.debug("Cleared all demo registrations")

    def __len__(self) -> int:
        return len(self._registrations)


def get_demo_registry() -> DemoRegistry:
    """Get the global demo registry instance."""
    return DemoRegistry.get_instance()
