"""Template Method - a fixed sequence of steps with overridable parts."""
from abc import ABC, abstractmethod


class AbstractClass(ABC):
    def template_method(self) -> None:
        """Run step1, step2 and step3, always in this order."""
        self.step1()
        self.step2()
        self.step3()

    @abstractmethod
    def step1(self) -> None:
        pass

    @abstractmethod
    def step2(self) -> None:
        pass

    def step3(self) -> None:
        print("step3")


class ConcreteClass1(AbstractClass):
    def step1(self) -> None:
        print("ConcreteClass1 step1")

    def step2(self) -> None:
        print("ConcreteClass1 step2")


class ConcreteClass2(AbstractClass):
    def step1(self) -> None:
        print("ConcreteClass2 step1")

    def step2(self) -> None:
        print("ConcreteClass2 step2")

    def step3(self) -> None:
        print("ConcreteClass2 step3")
