"""Chain of Responsibility - pass a request along an explicitly linked chain.

Every handler may act on the request and then forwards it to the next
handler, if one is linked. The chain order is whatever set_next built.
"""
from abc import ABC, abstractmethod
from typing import Optional

from .exceptions import ChainCycleError


class Handler(ABC):
    @abstractmethod
    def set_next(self, handler: Optional["Handler"]) -> Optional["Handler"]:
        pass

    @abstractmethod
    def handle(self, request: int) -> None:
        pass


class BaseHandler(Handler):
    """Default handler: forwards the request and does nothing else."""

    def __init__(self) -> None:
        self._next: Optional[Handler] = None

    @property
    def next_handler(self) -> Optional[Handler]:
        return self._next

    def set_next(self, handler: Optional[Handler]) -> Optional[Handler]:
        """
        Link the handler that receives requests after this one.

        Returns the linked handler so chains can be built fluently:
        ``h0.set_next(h1).set_next(h2)``.

        Raises:
            ChainCycleError: If the new link would lead back to this handler
        """
        node = handler
        while node is not None:
            if node is self:
                raise ChainCycleError(handler.__class__.__name__)
            node = getattr(node, "next_handler", None)
        self._next = handler
        return handler

    def handle(self, request: int) -> None:
        if self._next is not None:
            self._next.handle(request)


class ConcreteHandler1(BaseHandler):
    def can_handle(self, request: int) -> bool:
        return True

    def handle(self, request: int) -> None:
        if self.can_handle(request):
            print("handler1")
        super().handle(request)


class ConcreteHandler2(BaseHandler):
    def can_handle(self, request: int) -> bool:
        return True

    def handle(self, request: int) -> None:
        if self.can_handle(request):
            print("handler2")
        super().handle(request)
