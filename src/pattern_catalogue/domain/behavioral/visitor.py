"""Visitor - double dispatch through one visit method per element kind.

An element's accept() picks the visitor method for its own type, so the
visitor's concrete type and the element's concrete type together decide
what runs. New visitors need no element changes; a new element kind needs
a new method on every visitor.
"""
from abc import ABC, abstractmethod


class Visitor(ABC):
    @abstractmethod
    def visit_concrete_element1(self, element: "ConcreteElement1") -> None:
        pass

    @abstractmethod
    def visit_concrete_element2(self, element: "ConcreteElement2") -> None:
        pass


class Element(ABC):
    @abstractmethod
    def accept(self, visitor: Visitor) -> None:
        pass


class ConcreteElement1(Element):
    def accept(self, visitor: Visitor) -> None:
        visitor.visit_concrete_element1(self)


class ConcreteElement2(Element):
    def accept(self, visitor: Visitor) -> None:
        visitor.visit_concrete_element2(self)


class ConcreteVisitor1(Visitor):
    def visit_concrete_element1(self, element: ConcreteElement1) -> None:
        print("ConcreteVisitor1 visit concrete element1")

    def visit_concrete_element2(self, element: ConcreteElement2) -> None:
        print("ConcreteVisitor1 visit concrete element2")


class ConcreteVisitor2(Visitor):
    def visit_concrete_element1(self, element: ConcreteElement1) -> None:
        print("ConcreteVisitor2 visit concrete element1")

    def visit_concrete_element2(self, element: ConcreteElement2) -> None:
        print("ConcreteVisitor2 visit concrete element2")
