"""Builder + Director.

Builders know how to make each part; the director knows in which order
and with which values the parts are made. The same recipe works with any
builder.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from pattern_catalogue.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AssembledProduct:
    """Product made of three named parts."""
    part_a: str = ""
    part_b: str = ""
    part_c: str = ""

    def show(self) -> None:
        print(f"{self.part_a}, {self.part_b}, {self.part_c}")


class Builder(ABC):
    """Accumulates parts and hands out the assembled product."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Forget every part built so far."""
        self._part_a = ""
        self._part_b = ""
        self._part_c = ""

    @abstractmethod
    def build_part_a(self, part: str) -> None:
        pass

    @abstractmethod
    def build_part_b(self, part: str) -> None:
        pass

    @abstractmethod
    def build_part_c(self, part: str) -> None:
        pass

    def get_product(self) -> AssembledProduct:
        """Return an immutable snapshot of the parts built so far."""
        return AssembledProduct(self._part_a, self._part_b, self._part_c)


class ConcreteBuilderA(Builder):
    """Prefixes every part with 'A'."""

    def build_part_a(self, part: str) -> None:
        self._part_a = "A" + part

    def build_part_b(self, part: str) -> None:
        self._part_b = "A" + part

    def build_part_c(self, part: str) -> None:
        self._part_c = "A" + part


class ConcreteBuilderB(Builder):
    """Prefixes every part with 'B'."""

    def build_part_a(self, part: str) -> None:
        self._part_a = "B" + part

    def build_part_b(self, part: str) -> None:
        self._part_b = "B" + part

    def build_part_c(self, part: str) -> None:
        self._part_c = "B" + part


class Director:
    """Runs fixed construction recipes against whichever builder is set."""

    def __init__(self, builder: Optional[Builder] = None) -> None:
        self._builder = builder

    @property
    def builder(self) -> Optional[Builder]:
        return self._builder

    def set_builder(self, builder: Optional[Builder]) -> None:
        self._builder = builder

    def _has_builder(self) -> bool:
        if self._builder is None:
            print("without builder")
            logger.warning("Director used without a builder")
            return False
        return True

    def construct_standard(self) -> None:
        """Build parts '0', '1', '2'."""
        if not self._has_builder():
            return
        self._builder.build_part_a("0")
        self._builder.build_part_b("1")
        self._builder.build_part_c("2")

    def construct_premium(self) -> None:
        """Build every part as 'great'."""
        if not self._has_builder():
            return
        self._builder.build_part_a("great")
        self._builder.build_part_b("great")
        self._builder.build_part_c("great")

    def get_product(self) -> AssembledProduct:
        """Return the builder's product, or an empty product when no builder is set."""
        if not self._has_builder():
            return AssembledProduct()
        return self._builder.get_product()
