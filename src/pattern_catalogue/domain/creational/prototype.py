"""Prototype - objects clone themselves so callers never name the concrete class."""
import copy
from abc import ABC, abstractmethod


class Prototype(ABC):
    """Clonable object carrying one data field."""

    def __init__(self, data: str = "") -> None:
        self.data = data

    def clone(self) -> "Prototype":
        """Return a new, independent instance with the same field values."""
        return copy.copy(self)

    @abstractmethod
    def show(self) -> None:
        pass


class ConcretePrototype(Prototype):
    def __init__(self, data: str = "", data2: str = "") -> None:
        super().__init__(data)
        self.data2 = data2

    def show(self) -> None:
        print(f"{self.data}, {self.data2}")
