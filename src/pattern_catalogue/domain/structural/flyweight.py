"""Flyweight - share the intrinsic part of many similar objects.

A cat's texture is intrinsic and shared through CatFactory; its position is
extrinsic and lives in MovingCat, one per use.
"""
from abc import ABC, abstractmethod
from typing import Dict, List

from pattern_catalogue.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class AbstractCat(ABC):
    """Flyweight holding only intrinsic state."""

    def __init__(self, texture: str) -> None:
        self._texture = texture

    @property
    def texture(self) -> str:
        return self._texture

    @abstractmethod
    def show(self) -> None:
        pass


class ConcreteCat(AbstractCat):
    def show(self) -> None:
        print(f"{self.texture} {hex(id(self))} ", end="")


class CatFactory:
    """Owns the flyweight cache; callers only borrow the cached cats."""

    def __init__(self) -> None:
        self._cats: Dict[str, AbstractCat] = {}

    def get_cat(self, texture: str) -> AbstractCat:
        """Return the shared cat for a texture, creating and caching it on first request."""
        cat = self._cats.get(texture)
        if cat is None:
            cat = ConcreteCat(texture)
            self._cats[texture] = cat
            logger.debug("Flyweight cache miss", texture=texture, cached=len(self._cats))
        return cat

    def textures(self) -> List[str]:
        return list(self._cats)

    def clear(self) -> None:
        self._cats.clear()

    def __len__(self) -> int:
        return len(self._cats)

    def __contains__(self, texture: object) -> bool:
        return texture in self._cats


class MovingCat:
    """Pairs a shared cat with a per-use position."""

    def __init__(self, cat: AbstractCat, position: int) -> None:
        self.cat = cat
        self.position = position

    def show(self) -> None:
        self.cat.show()
        print(f" position: {self.position}")
