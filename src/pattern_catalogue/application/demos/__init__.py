"""Built-in demo drivers, one module per pattern family."""
from typing import Optional

from pattern_catalogue.application.decorators import get_registered_demo_functions
from pattern_catalogue.domain.base.exceptions import ConfigurationError
from pattern_catalogue.infrastructure.logging.logger import get_logger
from pattern_catalogue.infrastructure.registry.demo_registry import DemoRegistry, get_demo_registry

# Importing the modules runs their @demo decorators, in catalogue order
from . import creational  # noqa: F401
from . import structural  # noqa: F401
from . import behavioral  # noqa: F401

logger = get_logger(__name__)


def register_builtin_demos(registry: Optional[DemoRegistry] = None) -> DemoRegistry:
    """
    Copy the @demo registrations into the demo registry.

    Demos already present in the registry are left as they are.

    Raises:
        ConfigurationError: If a registration is rejected by the registry
    """
    if registry is None:
        registry = get_demo_registry()
    registered = 0
    for name, definition in get_registered_demo_functions().items():
        if registry.is_demo_registered(name):
            continue
        try:
            registry.register_demo(
                name=name,
                family=definition.family,
                runner=definition.runner,
                description=definition.description,
            )
        except ValueError as e:
            raise ConfigurationError(f"Failed to register demo '{name}': {str(e)}") from e
        registered += 1

    logger.debug("Built-in demos registered", count=registered, total=len(registry))
    return registry
