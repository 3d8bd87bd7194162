"""Creational patterns - object construction strategies."""

from .abstract_factory import (
    FamilyAFactory,
    FamilyBFactory,
    Product2,
    Product2A,
    Product2B,
    ProductFamilyFactory,
)
from .builder import AssembledProduct, Builder, ConcreteBuilderA, ConcreteBuilderB, Director
from .exceptions import SingletonViolationError, UnknownProductTypeError
from .factory_method import Creator, FactoryA, FactoryB
from .prototype import ConcretePrototype, Prototype
from .simple_factory import Product, ProductA, ProductB, ProductType, SimpleFactory
from .singleton import Singleton

__all__ = [
    "Product",
    "ProductA",
    "ProductB",
    "ProductType",
    "SimpleFactory",
    "Creator",
    "FactoryA",
    "FactoryB",
    "Product2",
    "Product2A",
    "Product2B",
    "ProductFamilyFactory",
    "FamilyAFactory",
    "FamilyBFactory",
    "AssembledProduct",
    "Builder",
    "ConcreteBuilderA",
    "ConcreteBuilderB",
    "Director",
    "Prototype",
    "ConcretePrototype",
    "Singleton",
    "UnknownProductTypeError",
    "SingletonViolationError",
]
