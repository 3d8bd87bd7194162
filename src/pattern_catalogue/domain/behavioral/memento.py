"""Memento + Caretaker - snapshot and restore state without exposing it."""
from dataclasses import dataclass
from typing import List

from .exceptions import EmptyHistoryError


@dataclass(frozen=True)
class GameMemento:
    """Immutable snapshot of a game's state."""
    data: int


class GameOriginator:
    """Owns the state; creates and restores mementos."""

    def __init__(self) -> None:
        self._data = 0

    @property
    def state(self) -> int:
        return self._data

    def play(self) -> None:
        """Print the current state, then advance it by one."""
        print(f"play : {self._data}")
        self._data += 1

    def save(self) -> GameMemento:
        return GameMemento(self._data)

    def restore(self, memento: GameMemento) -> None:
        self._data = memento.data


class GameCaretaker:
    """Keeps mementos on a last-in-first-out history."""

    def __init__(self) -> None:
        self._history: List[GameMemento] = []

    def backup(self, memento: GameMemento) -> None:
        self._history.append(memento)

    def undo(self) -> GameMemento:
        """
        Remove and return the most recent memento.

        Raises:
            EmptyHistoryError: If nothing has been backed up
        """
        if not self._history:
            raise EmptyHistoryError()
        return self._history.pop()

    def __len__(self) -> int:
        return len(self._history)
