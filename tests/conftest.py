import logging

import pytest

from pattern_catalogue.domain.creational.singleton import Singleton
from pattern_catalogue.infrastructure.logging.logger import HANDLER_MARKER
from pattern_catalogue.infrastructure.registry.demo_registry import DemoRegistry

CATALOGUE_ENV_VARS = [
    "PATTERN_CATALOGUE_LOG_LEVEL",
    "PATTERN_CATALOGUE_LOG_DESTINATION",
    "PATTERN_CATALOGUE_LOG_FILE",
    "PATTERN_CATALOGUE_CONFDIR",
    "PATTERN_CATALOGUE_PAUSE_ON_EXIT",
    "PATTERN_CATALOGUE_DEFAULT_FAMILY",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the caller's PATTERN_CATALOGUE_* settings out of the tests."""
    for name in CATALOGUE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Give every test a fresh Singleton and demo registry."""
    Singleton.reset_instance()
    DemoRegistry.reset_instance()
    yield
    Singleton.reset_instance()
    DemoRegistry.reset_instance()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo any handlers or level set by setup_logging."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if getattr(handler, HANDLER_MARKER, False):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def registry():
    """A registry instance separate from the process-wide one."""
    return DemoRegistry()
