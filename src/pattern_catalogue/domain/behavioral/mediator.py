"""Mediator - components talk only through a shared mediator.

Routing rules of ConcreteMediator, by sender identity:
button -> textbox, textbox -> button, label -> label.
"""
from abc import ABC, abstractmethod
from typing import Optional

from .exceptions import UnknownComponentError


class Mediator(ABC):
    @abstractmethod
    def notify(self, sender: "Component", message: str) -> None:
        pass


class Component(ABC):
    """Sends through the mediator and receives what the mediator routes to it."""

    def __init__(self, mediator: Mediator) -> None:
        self._mediator = mediator

    @property
    def mediator(self) -> Mediator:
        return self._mediator

    def send(self, message: str) -> None:
        self._mediator.notify(self, message)

    @abstractmethod
    def receive(self, message: str) -> None:
        pass


class Button(Component):
    def receive(self, message: str) -> None:
        print(f"button receives: {message} sends")


class Textbox(Component):
    def receive(self, message: str) -> None:
        print(f"texbox receives: {message} sends")


class Label(Component):
    def receive(self, message: str) -> None:
        print(f"label receives: {message} sends")


class ConcreteMediator(Mediator):
    def __init__(self) -> None:
        self._button: Optional[Component] = None
        self._textbox: Optional[Component] = None
        self._label: Optional[Component] = None

    def add_components(self, button: Component, textbox: Component, label: Component) -> None:
        self._button = button
        self._textbox = textbox
        self._label = label

    def notify(self, sender: Component, message: str) -> None:
        """
        Deliver a message according to the routing rules.

        Raises:
            UnknownComponentError: If the sender was not added to this mediator
        """
        if sender is None:
            raise UnknownComponentError("None")
        if sender is self._button:
            self._textbox.receive(message)
        elif sender is self._textbox:
            self._button.receive(message)
        elif sender is self._label:
            self._label.receive(message)
        else:
            raise UnknownComponentError(sender.__class__.__name__)
