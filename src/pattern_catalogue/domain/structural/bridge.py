"""Bridge - abstraction and implementation vary independently."""
from abc import ABC, abstractmethod


class Implementation(ABC):
    @abstractmethod
    def show(self) -> None:
        pass


class ConcreteImplementation1(Implementation):
    def show(self) -> None:
        print("ConcreteImplementation1")


class ConcreteImplementation2(Implementation):
    def show(self) -> None:
        print("ConcreteImplementation2")


class Abstraction(ABC):
    """Holds an implementation and delegates part of its work to it."""

    def __init__(self, implementation: Implementation) -> None:
        self.implementation = implementation

    @abstractmethod
    def show(self) -> None:
        pass


class RefinedAbstraction1(Abstraction):
    def show(self) -> None:
        print("abstraction 1")
        self.implementation.show()


class RefinedAbstraction2(Abstraction):
    def show(self) -> None:
        print("abstraction 2")
        self.implementation.show()
