"""Behavioral patterns - object collaboration strategies."""

from .chain_of_responsibility import BaseHandler, ConcreteHandler1, ConcreteHandler2, Handler
from .command import (
    Command,
    ConcreteCommand1,
    ConcreteCommand2,
    Invoker,
    Receiver1,
    Receiver2,
)
from .exceptions import (
    ChainCycleError,
    EmptyHistoryError,
    InvalidStateTransitionError,
    StateNotSetError,
    StrategyNotSetError,
    UnknownComponentError,
)
from .iterator import (
    ITERATION_SENTINEL,
    ConcreteCollection,
    ConcreteIterator,
    IterableCollection,
    Iterator,
)
from .mediator import Button, Component, ConcreteMediator, Label, Mediator, Textbox
from .memento import GameCaretaker, GameMemento, GameOriginator
from .observer import ConcreteSubscriber1, ConcreteSubscriber2, Publisher, Subscriber
from .state import (
    TRANSITIONS,
    LockedState,
    Player,
    PlayerEvent,
    PlayerState,
    PlayingState,
    ReadyState,
    State,
    transition,
)
from .strategy import BikeStrategy, Navigator, Strategy, WalkingStrategy
from .template_method import AbstractClass, ConcreteClass1, ConcreteClass2
from .visitor import (
    ConcreteElement1,
    ConcreteElement2,
    ConcreteVisitor1,
    ConcreteVisitor2,
    Element,
    Visitor,
)

__all__ = [
    "Handler",
    "BaseHandler",
    "ConcreteHandler1",
    "ConcreteHandler2",
    "Command",
    "ConcreteCommand1",
    "ConcreteCommand2",
    "Invoker",
    "Receiver1",
    "Receiver2",
    "ITERATION_SENTINEL",
    "Iterator",
    "IterableCollection",
    "ConcreteCollection",
    "ConcreteIterator",
    "Mediator",
    "Component",
    "ConcreteMediator",
    "Button",
    "Textbox",
    "Label",
    "GameMemento",
    "GameOriginator",
    "GameCaretaker",
    "Subscriber",
    "ConcreteSubscriber1",
    "ConcreteSubscriber2",
    "Publisher",
    "PlayerState",
    "PlayerEvent",
    "TRANSITIONS",
    "transition",
    "State",
    "PlayingState",
    "LockedState",
    "ReadyState",
    "Player",
    "Strategy",
    "BikeStrategy",
    "WalkingStrategy",
    "Navigator",
    "AbstractClass",
    "ConcreteClass1",
    "ConcreteClass2",
    "Visitor",
    "Element",
    "ConcreteElement1",
    "ConcreteElement2",
    "ConcreteVisitor1",
    "ConcreteVisitor2",
    "ChainCycleError",
    "UnknownComponentError",
    "EmptyHistoryError",
    "StrategyNotSetError",
    "StateNotSetError",
    "InvalidStateTransitionError",
]
