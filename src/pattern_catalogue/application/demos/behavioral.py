"""Demo drivers for the behavioral patterns."""
from pattern_catalogue.application.decorators import demo
from pattern_catalogue.domain.base.value_objects import PatternFamily
from pattern_catalogue.domain.behavioral import (
    BaseHandler,
    BikeStrategy,
    Button,
    ConcreteClass1,
    ConcreteClass2,
    ConcreteCollection,
    ConcreteCommand1,
    ConcreteCommand2,
    ConcreteElement1,
    ConcreteElement2,
    ConcreteHandler1,
    ConcreteHandler2,
    ConcreteMediator,
    ConcreteSubscriber1,
    ConcreteSubscriber2,
    ConcreteVisitor1,
    ConcreteVisitor2,
    GameCaretaker,
    GameOriginator,
    Invoker,
    Label,
    Navigator,
    Player,
    PlayerState,
    Publisher,
    Receiver1,
    Receiver2,
    Textbox,
    WalkingStrategy,
)


@demo("chain_of_responsibility", PatternFamily.BEHAVIORAL, "Pass a request along linked handlers")
def chain_of_responsibility() -> None:
    head = BaseHandler()
    head.set_next(ConcreteHandler1()).set_next(ConcreteHandler2())
    head.handle(0)


@demo("command", PatternFamily.BEHAVIORAL, "Queue requests as objects and run them in order")
def command() -> None:
    invoker = Invoker()
    invoker.add_command(ConcreteCommand1(Receiver1()))
    invoker.add_command(ConcreteCommand2(Receiver2()))
    invoker.execute_commands()


@demo("iterator", PatternFamily.BEHAVIORAL, "Traverse a collection without exposing it")
def iterator() -> None:
    collection = ConcreteCollection([1, 2, 3, 4, 5, 6, 7])
    it = collection.create_iterator()
    while it.has_more():
        print(it.get_next())


@demo("mediator", PatternFamily.BEHAVIORAL, "Route messages between components centrally")
def mediator() -> None:
    hub = ConcreteMediator()
    button = Button(hub)
    textbox = Textbox(hub)
    label = Label(hub)
    hub.add_components(button, textbox, label)
    button.send("button")
    textbox.send("textbox")
    label.send("label")


@demo("memento", PatternFamily.BEHAVIORAL, "Snapshot state and undo back to it")
def memento() -> None:
    history = GameCaretaker()
    game = GameOriginator()
    history.backup(game.save())
    game.play()
    game.play()
    game.play()
    game.restore(history.undo())
    game.play()


@demo("observer", PatternFamily.BEHAVIORAL, "Notify subscribers in subscription order")
def observer() -> None:
    first = ConcreteSubscriber1()
    second = ConcreteSubscriber2()
    publisher = Publisher()
    publisher.subscribe(first)
    publisher.subscribe(second)
    publisher.notify(0)
    publisher.unsubscribe(second)
    publisher.notify(1)


@demo("state", PatternFamily.BEHAVIORAL, "Behaviour follows the player's current state")
def state() -> None:
    player = Player(PlayerState.LOCKED)
    player.lock()
    player.play()
    player.next()
    player.play()


@demo("strategy", PatternFamily.BEHAVIORAL, "Swap the routing algorithm at runtime")
def strategy() -> None:
    navigator = Navigator()
    navigator.set_strategy(BikeStrategy())
    navigator.show_route("a", "b")
    navigator.set_strategy(WalkingStrategy())
    navigator.show_route("b", "c")


@demo("template_method", PatternFamily.BEHAVIORAL, "Fixed step sequence with overridable steps")
def template_method() -> None:
    ConcreteClass1().template_method()
    ConcreteClass2().template_method()


@demo("visitor", PatternFamily.BEHAVIORAL, "Double dispatch on visitor and element types")
def visitor() -> None:
    visitor1 = ConcreteVisitor1()
    visitor2 = ConcreteVisitor2()
    element1 = ConcreteElement1()
    element2 = ConcreteElement2()
    element1.accept(visitor1)
    element1.accept(visitor2)
    element2.accept(visitor1)
    element2.accept(visitor2)
