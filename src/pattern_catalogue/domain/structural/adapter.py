"""Adapter - put an incompatible service behind the interface callers expect.

ObjectAdapter extends the target and composes the service. ClassAdapter
offers the combined interface by owning both a target and a service and
relaying to each, instead of inheriting from both.
"""
from abc import ABC, abstractmethod
from typing import Optional


class Target(ABC):
    """Interface the caller works with."""

    @abstractmethod
    def show(self) -> None:
        pass


class TargetClass(Target):
    def show(self) -> None:
        print("target class")


class Service:
    """Existing class with an interface the caller does not know."""

    def service_method(self) -> None:
        print("service class")


class ClassAdapter(Target):
    def __init__(self) -> None:
        self._target = TargetClass()
        self._service = Service()

    def show(self) -> None:
        self._target.show()
        self._service.service_method()

    def service_method(self) -> None:
        self._service.service_method()


class ObjectAdapter(TargetClass):
    def __init__(self, service: Optional[Service] = None) -> None:
        self._service = service if service is not None else Service()

    def show(self) -> None:
        super().show()
        self._service.service_method()
