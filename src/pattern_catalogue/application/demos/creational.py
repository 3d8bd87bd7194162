"""Demo drivers for the creational patterns."""
from pattern_catalogue.application.decorators import demo
from pattern_catalogue.domain.base.value_objects import PatternFamily
from pattern_catalogue.domain.creational import (
    ConcreteBuilderA,
    ConcretePrototype,
    Director,
    FactoryA,
    FamilyBFactory,
    ProductType,
    SimpleFactory,
    Singleton,
)


@demo("simple_factory", PatternFamily.CREATIONAL, "Create a product from a type tag")
def simple_factory() -> None:
    factory = SimpleFactory()
    product = factory.create_product(ProductType.PRODUCT_A)
    product.show()


@demo("factory_method", PatternFamily.CREATIONAL, "Subclasses decide which product to create")
def factory_method() -> None:
    factory = FactoryA()
    product = factory.create_product()
    product.show()


@demo("abstract_factory", PatternFamily.CREATIONAL, "Create a family of related products")
def abstract_factory() -> None:
    factory = FamilyBFactory()
    factory.create_product().show()
    factory.create_product2().show()


@demo("builder", PatternFamily.CREATIONAL, "Director sequences a builder's part construction")
def builder() -> None:
    director = Director()
    director.set_builder(ConcreteBuilderA())
    director.construct_premium()
    product = director.get_product()
    product.show()


@demo("prototype", PatternFamily.CREATIONAL, "Clone an object without knowing its class")
def prototype() -> None:
    original = ConcretePrototype("hello", "world")
    original.show()
    original.clone().show()


@demo("singleton", PatternFamily.CREATIONAL, "Lazy, lock-guarded single instance")
def singleton() -> None:
    instance = Singleton.get_instance()
    instance.show()
    instance = Singleton.get_instance()
    instance.show()
