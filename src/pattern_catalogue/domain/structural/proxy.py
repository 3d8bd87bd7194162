"""Proxy - a stand-in with the same interface that forwards to the real service."""
from abc import ABC, abstractmethod


class Payment(ABC):
    @abstractmethod
    def show(self) -> None:
        pass


class Cash(Payment):
    def show(self) -> None:
        print("here is the cash")


class CreditCard(Payment):
    """Forwards every call to the cash it stands in for."""

    def __init__(self, cash: Cash) -> None:
        self._cash = cash

    def show(self) -> None:
        self._cash.show()
