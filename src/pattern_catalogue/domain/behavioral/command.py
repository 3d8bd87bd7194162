"""Command + Invoker - requests as objects, queued and executed in order."""
from abc import ABC, abstractmethod
from typing import List

from pattern_catalogue.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Command(ABC):
    @abstractmethod
    def execute(self) -> None:
        pass


class Receiver1:
    def action(self) -> None:
        print("action 1")


class Receiver2:
    def action(self) -> None:
        print("action 2")


class ConcreteCommand1(Command):
    def __init__(self, receiver: Receiver1) -> None:
        self._receiver = receiver

    def execute(self) -> None:
        self._receiver.action()


class ConcreteCommand2(Command):
    def __init__(self, receiver: Receiver2) -> None:
        self._receiver = receiver

    def execute(self) -> None:
        self._receiver.action()


class Invoker:
    """Collects commands and executes them in insertion order."""

    def __init__(self) -> None:
        self._commands: List[Command] = []

    def add_command(self, command: Command) -> None:
        self._commands.append(command)

    def execute_commands(self) -> None:
        for command in self._commands:
            logger.debug("Executing command", command=command.__class__.__name__)
            command.execute()

    @property
    def commands(self) -> List[Command]:
        return list(self._commands)
