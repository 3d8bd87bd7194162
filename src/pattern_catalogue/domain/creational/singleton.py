"""Singleton - exactly one process-wide instance, created on first access.

The instance is created lazily by ``get_instance()``. Creation is guarded by
a lock and checked twice, so concurrent first calls still create a single
instance while later reads never touch the lock. The instance is released
at interpreter exit.
"""
import atexit
import threading
from typing import Optional

from pattern_catalogue.infrastructure.logging.logger import get_logger

from .exceptions import SingletonViolationError

logger = get_logger(__name__)

_CREATION_TOKEN = object()


class Singleton:
    """Process-wide single instance."""

    _instance: Optional["Singleton"] = None
    _lock = threading.Lock()

    def __init__(self, _token: object = None) -> None:
        if _token is not _CREATION_TOKEN:
            raise SingletonViolationError(self.__class__.__name__, "constructed directly")

    @classmethod
    def get_instance(cls) -> "Singleton":
        """Get the singleton instance, creating it on first access."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls(_CREATION_TOKEN)
                    logger.debug("Singleton instance created", instance_id=id(cls._instance))
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the current instance; the next get_instance() creates a new one."""
        with cls._lock:
            cls._instance = None

    def __copy__(self):
        raise SingletonViolationError(self.__class__.__name__, "copied")

    def __deepcopy__(self, memo):
        raise SingletonViolationError(self.__class__.__name__, "copied")

    def __reduce__(self):
        raise SingletonViolationError(self.__class__.__name__, "pickled")

    def show(self) -> None:
        print("I am singleton !")


atexit.register(Singleton.reset_instance)
