"""Factory Method - subclasses decide which product gets created."""
from abc import ABC, abstractmethod

from .simple_factory import Product, ProductA, ProductB


class Creator(ABC):
    """Declares the factory method; concrete creators fix the product."""

    @abstractmethod
    def create_product(self) -> Product:
        """Create a new product."""


class FactoryA(Creator):
    def create_product(self) -> Product:
        return ProductA()


class FactoryB(Creator):
    def create_product(self) -> Product:
        return ProductB()
