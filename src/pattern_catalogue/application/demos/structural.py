"""Demo drivers for the structural patterns."""
from pattern_catalogue.application.decorators import demo
from pattern_catalogue.domain.base.value_objects import PatternFamily
from pattern_catalogue.domain.structural import (
    Cash,
    CatFactory,
    ClassAdapter,
    Composite,
    ConcreteImplementation1,
    ConcreteImplementation2,
    CreditCard,
    HoneyDecorator,
    Leaf,
    Leaf2,
    MilkDecorator,
    MovingCat,
    ObjectAdapter,
    OriginalCoffee,
    RefinedAbstraction1,
    RefinedAbstraction2,
    VideoFacade,
)


@demo("adapter", PatternFamily.STRUCTURAL, "Expose a service through the expected interface")
def adapter() -> None:
    ClassAdapter().show()
    ObjectAdapter().show()


@demo("bridge", PatternFamily.STRUCTURAL, "Vary abstraction and implementation independently")
def bridge() -> None:
    RefinedAbstraction1(ConcreteImplementation1()).show()
    RefinedAbstraction2(ConcreteImplementation2()).show()


@demo("composite", PatternFamily.STRUCTURAL, "Treat leaves and subtrees uniformly")
def composite() -> None:
    tree = Composite()
    tree.add(Leaf())
    tree.add(Leaf())
    tree.add(Leaf2())
    subtree = Composite()
    tree.add(subtree)
    subtree.add(Leaf())
    subtree.add(Leaf2())
    tree.show()


@demo("decorator", PatternFamily.STRUCTURAL, "Stack behaviour onto an object at runtime")
def decorator() -> None:
    coffee = OriginalCoffee()
    coffee.show()
    print()
    coffee = HoneyDecorator(coffee)
    coffee.show()
    print()
    coffee = MilkDecorator(coffee)
    coffee.show()
    print()


@demo("facade", PatternFamily.STRUCTURAL, "One call drives several subsystems")
def facade() -> None:
    VideoFacade().show()


@demo("flyweight", PatternFamily.STRUCTURAL, "Share intrinsic state between many objects")
def flyweight() -> None:
    cats = CatFactory()
    MovingCat(cats.get_cat("black"), 0).show()
    MovingCat(cats.get_cat("black"), 1).show()
    MovingCat(cats.get_cat("white"), 2).show()


@demo("proxy", PatternFamily.STRUCTURAL, "Forward calls through a stand-in")
def proxy() -> None:
    money = Cash()
    payment = CreditCard(money)
    payment.show()
