"""Observer - a publisher notifies its subscribers, in subscription order."""
from abc import ABC, abstractmethod
from typing import List


class Subscriber(ABC):
    @abstractmethod
    def update(self, value: int) -> None:
        pass


class ConcreteSubscriber1(Subscriber):
    def update(self, value: int) -> None:
        print(f"subscriber1 :{value}")


class ConcreteSubscriber2(Subscriber):
    def update(self, value: int) -> None:
        print(f"subscriber2 :{value}")


class Publisher:
    def __init__(self) -> None:
        self._subscribers: List[Subscriber] = []

    def subscribe(self, subscriber: Subscriber) -> None:
        self._subscribers.append(subscriber)

    def unsubscribe(self, subscriber: Subscriber) -> None:
        """Remove the first registration of this exact subscriber; no-op if absent."""
        for index, registered in enumerate(self._subscribers):
            if registered is subscriber:
                del self._subscribers[index]
                return

    def notify(self, value: int) -> None:
        for subscriber in list(self._subscribers):
            subscriber.update(value)

    @property
    def subscribers(self) -> List[Subscriber]:
        return list(self._subscribers)
