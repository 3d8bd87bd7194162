"""Abstract Factory - one creator per family of related products.

Family A is (ProductA, Product2A) and family B is (ProductB, Product2B).
A concrete factory only ever returns products from its own family.
"""
from abc import ABC, abstractmethod

from .simple_factory import Product, ProductA, ProductB


class Product2(ABC):
    """Second product kind produced by every family."""

    family: str = ""

    @abstractmethod
    def show(self) -> None:
        pass


class Product2A(Product2):
    family = "A"

    def show(self) -> None:
        print("product2A")


class Product2B(Product2):
    family = "B"

    def show(self) -> None:
        print("product2B")


class ProductFamilyFactory(ABC):
    """Creates one product of each kind for a single family."""

    family: str = ""

    @abstractmethod
    def create_product(self) -> Product:
        pass

    @abstractmethod
    def create_product2(self) -> Product2:
        pass


class FamilyAFactory(ProductFamilyFactory):
    family = "A"

    def create_product(self) -> Product:
        return ProductA()

    def create_product2(self) -> Product2:
        return Product2A()


class FamilyBFactory(ProductFamilyFactory):
    family = "B"

    def create_product(self) -> Product:
        return ProductB()

    def create_product2(self) -> Product2:
        return Product2B()
