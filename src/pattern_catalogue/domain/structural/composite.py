"""Composite - leaves and containers share one interface and form a tree."""
from abc import ABC, abstractmethod
from typing import List


class Component(ABC):
    @abstractmethod
    def show(self) -> None:
        pass


class Leaf(Component):
    def show(self) -> None:
        print(f"Leaf {hex(id(self))}")


class Leaf2(Component):
    def show(self) -> None:
        print(f"Leaf2 {hex(id(self))}")


class Composite(Component):
    """Ordered container of child components."""

    def __init__(self) -> None:
        self._children: List[Component] = []

    def show(self) -> None:
        """Print the child count, then show every child in insertion order."""
        print(f"Size:{len(self._children)}")
        for child in self._children:
            child.show()

    def add(self, component: Component) -> None:
        self._children.append(component)

    def remove(self, component: Component) -> None:
        """Remove the first child that is the given component; no-op if absent."""
        for index, child in enumerate(self._children):
            if child is component:
                del self._children[index]
                return

    @property
    def children(self) -> List[Component]:
        return list(self._children)

    def __len__(self) -> int:
        return len(self._children)
