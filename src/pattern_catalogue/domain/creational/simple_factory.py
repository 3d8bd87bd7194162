"""Simple Factory - one factory function picks the concrete product from a type tag.

Adding a product variant means touching the factory's mapping, which is the
limitation the Factory Method pattern removes.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Type, Union

from pattern_catalogue.infrastructure.logging.logger import get_logger

from .exceptions import UnknownProductTypeError

logger = get_logger(__name__)


class Product(ABC):
    """Capability shared by every product variant."""

    family: str = ""

    @abstractmethod
    def show(self) -> None:
        pass


class ProductA(Product):
    family = "A"

    def show(self) -> None:
        print("productA")


class ProductB(Product):
    family = "B"

    def show(self) -> None:
        print("productB")


class ProductType(str, Enum):
    """Product type tags understood by SimpleFactory."""
    PRODUCT_A = "product_a"
    PRODUCT_B = "product_b"


class SimpleFactory:
    """Creates products from a ProductType tag."""

    _products: Dict[ProductType, Type[Product]] = {
        ProductType.PRODUCT_A: ProductA,
        ProductType.PRODUCT_B: ProductB,
    }

    def create_product(self, product_type: Union[ProductType, str]) -> Product:
        """
        Create a new product for the given tag.

        Args:
            product_type: A ProductType member or its string value

        Returns:
            A new product instance owned by the caller

        Raises:
            UnknownProductTypeError: If the tag is not mapped to a product
        """
        try:
            product_type = ProductType(product_type)
        except ValueError:
            raise UnknownProductTypeError(product_type) from None

        product_class = self._products.get(product_type)
        if product_class is None:
            raise UnknownProductTypeError(product_type)

        logger.debug("Creating product", product_type=product_type.value)
        return product_class()
