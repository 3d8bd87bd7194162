"""State machine for a media player.

States and events are tags. ``transition`` is a pure function over the
TRANSITIONS table; state objects only carry the behaviour of being in a
state. The player keeps at most one state object per kind, created the
first time that kind is entered.
"""
from abc import ABC, abstractmethod
from collections import deque
from enum import Enum
from typing import Deque, Dict, List, Optional, Tuple, Type

from pattern_catalogue.infrastructure.logging.logger import get_logger

from .exceptions import InvalidStateTransitionError, StateNotSetError

logger = get_logger(__name__)

# Transitions kept per player; older ones are dropped
HISTORY_LIMIT = 100


class PlayerState(str, Enum):
    """Player state kinds."""
    LOCKED = "locked"
    PLAYING = "playing"
    READY = "ready"


class PlayerEvent(str, Enum):
    """Operations that drive the player."""
    PLAY = "play"
    LOCK = "lock"
    NEXT = "next"


TRANSITIONS: Dict[PlayerState, Dict[PlayerEvent, PlayerState]] = {
    PlayerState.LOCKED: {
        PlayerEvent.PLAY: PlayerState.PLAYING,
        PlayerEvent.LOCK: PlayerState.LOCKED,
        PlayerEvent.NEXT: PlayerState.READY,
    },
    PlayerState.PLAYING: {
        PlayerEvent.PLAY: PlayerState.PLAYING,
        PlayerEvent.LOCK: PlayerState.LOCKED,
        PlayerEvent.NEXT: PlayerState.READY,
    },
    PlayerState.READY: {
        PlayerEvent.PLAY: PlayerState.PLAYING,
        PlayerEvent.LOCK: PlayerState.LOCKED,
        PlayerEvent.NEXT: PlayerState.READY,
    },
}


def transition(current: PlayerState, event: PlayerEvent) -> PlayerState:
    """Return the state reached from ``current`` on ``event``."""
    target = TRANSITIONS.get(current, {}).get(event)
    if target is None:
        raise InvalidStateTransitionError(current.value, event.value)
    return target


class State(ABC):
    kind: PlayerState

    @abstractmethod
    def handle(self, event: PlayerEvent) -> None:
        """Perform the operation that brought the player into this state."""


class PlayingState(State):
    kind = PlayerState.PLAYING

    def handle(self, event: PlayerEvent) -> None:
        print("playing...")


class LockedState(State):
    kind = PlayerState.LOCKED

    def handle(self, event: PlayerEvent) -> None:
        print("lock...")


class ReadyState(State):
    kind = PlayerState.READY

    def handle(self, event: PlayerEvent) -> None:
        print("next...")


STATE_CLASSES: Dict[PlayerState, Type[State]] = {
    PlayerState.PLAYING: PlayingState,
    PlayerState.LOCKED: LockedState,
    PlayerState.READY: ReadyState,
}


class Player:
    """Context holding the current state and the lazily built state table."""

    def __init__(self, initial_state: Optional[PlayerState] = None) -> None:
        self._states: Dict[PlayerState, State] = {}
        self._current: Optional[State] = None
        self._history: Deque[Tuple[PlayerState, PlayerState]] = deque(maxlen=HISTORY_LIMIT)
        if initial_state is not None:
            self.set_state(initial_state)

    @property
    def current_state(self) -> Optional[PlayerState]:
        return self._current.kind if self._current is not None else None

    @property
    def history(self) -> List[Tuple[PlayerState, PlayerState]]:
        """Most recent transitions, oldest first, as (old, new) pairs."""
        return list(self._history)

    def get_state(self, kind: PlayerState) -> State:
        """Return the state object for a kind, creating it on first use."""
        state = self._states.get(kind)
        if state is None:
            state = STATE_CLASSES[kind]()
            self._states[kind] = state
        return state

    def set_state(self, kind: PlayerState) -> None:
        self._current = self.get_state(kind)

    def play(self) -> None:
        self._dispatch(PlayerEvent.PLAY)

    def lock(self) -> None:
        self._dispatch(PlayerEvent.LOCK)

    def next(self) -> None:
        self._dispatch(PlayerEvent.NEXT)

    def _dispatch(self, event: PlayerEvent) -> None:
        if self._current is None:
            raise StateNotSetError(self.__class__.__name__)

        old_kind = self._current.kind
        new_kind = transition(old_kind, event)
        self._current = self.get_state(new_kind)
        self._history.append((old_kind, new_kind))
        logger.debug(
            "Player state transition",
            old_state=old_kind.value,
            new_state=new_kind.value,
            trigger=event.value,
        )
        self._current.handle(event)
