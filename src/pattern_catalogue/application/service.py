"""
Application Service - runs demos from the catalogue.

This service is the single entry point the CLI uses: it lists the
registered demos and runs one, several, a family, or all of them.
"""
import time
from typing import Any, Dict, List, Optional, Sequence, Union

from pattern_catalogue.domain.base.value_objects import PatternFamily
from pattern_catalogue.infrastructure.logging.logger import get_logger
from pattern_catalogue.infrastructure.registry.demo_registry import (
    DemoRegistration,
    DemoRegistry,
)


class DemoApplicationService:
    """
    Main application service for the pattern catalogue.

    Demo output goes to stdout; the service only logs around it.
    """

    def __init__(self, registry: DemoRegistry, logger: Optional[Any] = None):
        """
        Initialize the service.

        Args:
            registry: Registry holding the demo drivers
            logger: Optional bound logger, defaults to the module logger
        """
        self._registry = registry
        self._logger = logger or get_logger(__name__)

    @property
    def registry(self) -> DemoRegistry:
        return self._registry

    def list_demos(self, family: Optional[Union[PatternFamily, str]] = None) -> List[Dict[str, str]]:
        """
        List the catalogue.

        Args:
            family: Optional family filter

        Returns:
            One dict per demo with name, family and description, in catalogue order
        """
        pattern_family = PatternFamily.parse(family) if family is not None else None
        return [
            registration.to_dict()
            for registration in self._registry.get_registered_demos(pattern_family)
        ]

    def run_demo(self, name: str) -> DemoRegistration:
        """
        Run a single demo by name.

        Raises:
            UnsupportedDemoError: If no demo with this name is registered
        """
        registration = self._registry.get_registration(name)
        self._logger.info("Running demo", demo=name, family=registration.family.value)
        started = time.perf_counter()
        try:
            registration.runner()
        except Exception as e:
            self._logger.error("Demo failed", demo=name, error=str(e))
            raise
        duration_ms = (time.perf_counter() - started) * 1000
        self._logger.info("Demo finished", demo=name, duration_ms=round(duration_ms, 3))
        return registration

    def run_demos(self, names: Sequence[str]) -> List[DemoRegistration]:
        """
        Run several demos in the given order.

        Every name is checked before anything runs, so an unknown name
        produces no partial output.
        """
        for name in names:
            self._registry.get_registration(name)
        return [self.run_demo(name) for name in names]

    def run_family(self, family: Union[PatternFamily, str]) -> List[DemoRegistration]:
        """Run every demo of one family in catalogue order."""
        pattern_family = PatternFamily.parse(family)
        names = [r.name for r in self._registry.get_registered_demos(pattern_family)]
        self._logger.info("Running family", family=pattern_family.value, count=len(names))
        return self.run_demos(names)

    def run_all(self) -> List[DemoRegistration]:
        """Run every registered demo in catalogue order."""
        names = self._registry.get_registered_demo_names()
        self._logger.info("Running all demos", count=len(names))
        return self.run_demos(names)
