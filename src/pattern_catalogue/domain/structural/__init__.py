"""Structural patterns - object composition strategies."""

from .adapter import ClassAdapter, ObjectAdapter, Service, Target, TargetClass
from .bridge import (
    Abstraction,
    ConcreteImplementation1,
    ConcreteImplementation2,
    Implementation,
    RefinedAbstraction1,
    RefinedAbstraction2,
)
from .composite import Component, Composite, Leaf, Leaf2
from .decorator import Coffee, CoffeeDecorator, HoneyDecorator, MilkDecorator, OriginalCoffee
from .facade import AudioFile, VideoAudioMixer, VideoFacade, VideoFile
from .flyweight import AbstractCat, CatFactory, ConcreteCat, MovingCat
from .proxy import Cash, CreditCard, Payment

__all__ = [
    "Target",
    "TargetClass",
    "Service",
    "ClassAdapter",
    "ObjectAdapter",
    "Implementation",
    "ConcreteImplementation1",
    "ConcreteImplementation2",
    "Abstraction",
    "RefinedAbstraction1",
    "RefinedAbstraction2",
    "Component",
    "Leaf",
    "Leaf2",
    "Composite",
    "Coffee",
    "OriginalCoffee",
    "CoffeeDecorator",
    "HoneyDecorator",
    "MilkDecorator",
    "VideoFile",
    "AudioFile",
    "VideoAudioMixer",
    "VideoFacade",
    "AbstractCat",
    "ConcreteCat",
    "CatFactory",
    "MovingCat",
    "Payment",
    "Cash",
    "CreditCard",
]
