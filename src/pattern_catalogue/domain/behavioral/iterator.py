"""Iterator - traverse a collection without exposing how it stores its data."""
from abc import ABC, abstractmethod
from typing import Iterable, List

# Returned by get_next() once the iterator is exhausted
ITERATION_SENTINEL = 0


class Iterator(ABC):
    @abstractmethod
    def get_next(self) -> int:
        pass

    @abstractmethod
    def has_more(self) -> bool:
        pass

    def __iter__(self) -> "Iterator":
        return self

    def __next__(self) -> int:
        if not self.has_more():
            raise StopIteration
        return self.get_next()


class IterableCollection(ABC):
    @abstractmethod
    def create_iterator(self) -> Iterator:
        pass


class ConcreteCollection(IterableCollection):
    def __init__(self, data: Iterable[int]) -> None:
        self._data: List[int] = list(data)

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> int:
        return self._data[index]

    def create_iterator(self) -> "ConcreteIterator":
        """Return a fresh iterator positioned before the first element."""
        return ConcreteIterator(self)


class ConcreteIterator(Iterator):
    def __init__(self, collection: ConcreteCollection) -> None:
        self._collection = collection
        self._position = 0

    def has_more(self) -> bool:
        return self._position < len(self._collection)

    def get_next(self) -> int:
        """Return the next element and advance; ITERATION_SENTINEL when none remain."""
        if not self.has_more():
            return ITERATION_SENTINEL
        value = self._collection[self._position]
        self._position += 1
        return value
