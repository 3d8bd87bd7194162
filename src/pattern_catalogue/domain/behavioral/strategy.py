"""Strategy - swap the routing algorithm a navigator uses at runtime."""
from abc import ABC, abstractmethod
from typing import Optional

from .exceptions import StrategyNotSetError


class Strategy(ABC):
    @abstractmethod
    def build_route(self, origin: str, destination: str) -> None:
        pass


class BikeStrategy(Strategy):
    def build_route(self, origin: str, destination: str) -> None:
        print(f"bike: {origin}-{destination}")


class WalkingStrategy(Strategy):
    def build_route(self, origin: str, destination: str) -> None:
        print(f"walking: {origin}-{destination}")


class Navigator:
    def __init__(self, strategy: Optional[Strategy] = None) -> None:
        self._strategy = strategy

    @property
    def strategy(self) -> Optional[Strategy]:
        return self._strategy

    def set_strategy(self, strategy: Strategy) -> None:
        self._strategy = strategy

    def show_route(self, origin: str, destination: str) -> None:
        """
        Delegate route building to the current strategy.

        Raises:
            StrategyNotSetError: If no strategy has been set
        """
        if self._strategy is None:
            raise StrategyNotSetError(self.__class__.__name__)
        self._strategy.build_route(origin, destination)
