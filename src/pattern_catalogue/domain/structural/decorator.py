"""Decorator - wrap an object to add behaviour after its own.

Output stays on one line; the caller ends it.
"""
from abc import ABC, abstractmethod


class Coffee(ABC):
    @abstractmethod
    def show(self) -> None:
        pass


class OriginalCoffee(Coffee):
    def show(self) -> None:
        print("original coffee", end="")


class CoffeeDecorator(Coffee):
    """Forwards to the wrapped coffee; subclasses add their effect afterwards."""

    def __init__(self, wrappee: Coffee) -> None:
        self._wrappee = wrappee

    def show(self) -> None:
        self._wrappee.show()


class HoneyDecorator(CoffeeDecorator):
    def show(self) -> None:
        super().show()
        print(" add honey-", end="")


class MilkDecorator(CoffeeDecorator):
    def show(self) -> None:
        super().show()
        print(" add milk-", end="")
