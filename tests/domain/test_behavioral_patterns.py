"""Tests for the behavioral patterns."""

import typing
from dataclasses import FrozenInstanceError
from typing import Optional
from unittest.mock import Mock

import pytest

from pattern_catalogue.domain.base.exceptions import PatternError
from pattern_catalogue.domain.behavioral import (
    ITERATION_SENTINEL,
    TRANSITIONS,
    BaseHandler,
    BikeStrategy,
    Button,
    ChainCycleError,
    Command,
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
    EmptyHistoryError,
    GameCaretaker,
    GameMemento,
    GameOriginator,
    Handler,
    Invoker,
    Label,
    Navigator,
    Player,
    PlayerEvent,
    PlayerState,
    Publisher,
    Receiver1,
    Receiver2,
    StateNotSetError,
    Strategy,
    StrategyNotSetError,
    Subscriber,
    Textbox,
    UnknownComponentError,
    Visitor,
    WalkingStrategy,
    transition,
)
from pattern_catalogue.domain.behavioral.state import HISTORY_LIMIT


class TestChainOfResponsibility:
    """Test handler linking and forwarding."""

    def test_request_travels_whole_chain(self, capsys):
        head = BaseHandler()
        head.set_next(ConcreteHandler1()).set_next(ConcreteHandler2())
        head.handle(0)
        assert capsys.readouterr().out == "handler1\nhandler2\n"

    def test_order_follows_linking(self, capsys):
        head = ConcreteHandler2()
        head.set_next(ConcreteHandler1())
        head.handle(0)
        assert capsys.readouterr().out == "handler2\nhandler1\n"

    def test_end_of_chain_is_noop(self, capsys):
        BaseHandler().handle(0)
        assert capsys.readouterr().out == ""

    def test_set_next_returns_linked_handler(self):
        head = BaseHandler()
        second = ConcreteHandler1()
        assert head.set_next(second) is second
        assert head.next_handler is second

    def test_set_next_none_unlinks(self, capsys):
        head = BaseHandler()
        head.set_next(ConcreteHandler1())
        assert head.set_next(None) is None
        assert head.next_handler is None
        head.handle(1)
        assert capsys.readouterr().out == ""

    def test_handler_interface_accepts_none(self):
        hints = typing.get_type_hints(Handler.set_next)
        assert hints["handler"] == Optional[Handler]
        assert hints["return"] == Optional[Handler]
        assert typing.get_type_hints(BaseHandler.set_next) == hints

    def test_cycle_is_rejected(self):
        first, second, third = BaseHandler(), ConcreteHandler1(), ConcreteHandler2()
        first.set_next(second).set_next(third)
        with pytest.raises(ChainCycleError):
            third.set_next(first)
        assert third.next_handler is None

    def test_self_link_is_rejected(self):
        handler = BaseHandler()
        with pytest.raises(ChainCycleError):
            handler.set_next(handler)


class TestCommand:
    """Test command queue execution."""

    def test_commands_run_in_insertion_order(self, capsys):
        invoker = Invoker()
        invoker.add_command(ConcreteCommand2(Receiver2()))
        invoker.add_command(ConcreteCommand1(Receiver1()))
        invoker.execute_commands()
        assert capsys.readouterr().out == "action 2\naction 1\n"

    def test_command_calls_its_receiver(self):
        receiver = Mock(spec=Receiver1)
        ConcreteCommand1(receiver).execute()
        receiver.action.assert_called_once_with()

    def test_invoker_accepts_any_command(self):
        command = Mock(spec=Command)
        invoker = Invoker()
        invoker.add_command(command)
        invoker.execute_commands()
        command.execute.assert_called_once_with()
        assert invoker.commands == [command]


class TestIterator:
    """Test explicit and Python-style iteration."""

    def test_explicit_iteration(self):
        iterator = ConcreteCollection([1, 2, 3]).create_iterator()
        values = []
        while iterator.has_more():
            values.append(iterator.get_next())
        assert values == [1, 2, 3]

    def test_exhausted_iterator_returns_sentinel(self):
        iterator = ConcreteCollection([5]).create_iterator()
        iterator.get_next()
        assert not iterator.has_more()
        assert iterator.get_next() == ITERATION_SENTINEL

    def test_each_iterator_starts_fresh(self):
        collection = ConcreteCollection([1, 2])
        first = collection.create_iterator()
        first.get_next()
        assert collection.create_iterator().get_next() == 1

    def test_python_iteration(self):
        assert list(ConcreteCollection([4, 5, 6]).create_iterator()) == [4, 5, 6]

    def test_empty_collection(self):
        iterator = ConcreteCollection([]).create_iterator()
        assert not iterator.has_more()
        assert list(iterator) == []


class TestMediator:
    """Test routing through the mediator."""

    def setup_method(self):
        """Set up test fixtures."""
        self.mediator = ConcreteMediator()
        self.button = Button(self.mediator)
        self.textbox = Textbox(self.mediator)
        self.label = Label(self.mediator)
        self.mediator.add_components(self.button, self.textbox, self.label)

    def test_routing(self, capsys):
        self.button.send("button")
        self.textbox.send("textbox")
        self.label.send("label")
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].startswith("texbox receives: button")
        assert lines[1].startswith("button receives: textbox")
        assert lines[2].startswith("label receives: label")

    def test_unregistered_sender_is_rejected(self):
        stranger = Button(self.mediator)
        with pytest.raises(UnknownComponentError):
            stranger.send("hello")


class TestMemento:
    """Test snapshot and undo."""

    def test_undo_restores_backed_up_state(self, capsys):
        history = GameCaretaker()
        game = GameOriginator()
        history.backup(game.save())
        for _ in range(3):
            game.play()
        assert game.state == 3

        game.restore(history.undo())

        assert game.state == 0
        game.play()
        assert capsys.readouterr().out.splitlines()[-1] == "play : 0"

    def test_history_is_last_in_first_out(self):
        history = GameCaretaker()
        history.backup(GameMemento(1))
        history.backup(GameMemento(2))
        assert history.undo().data == 2
        assert history.undo().data == 1
        assert len(history) == 0

    def test_undo_on_empty_history_raises(self):
        with pytest.raises(EmptyHistoryError) as exc_info:
            GameCaretaker().undo()
        assert isinstance(exc_info.value, PatternError)

    def test_memento_is_immutable(self):
        memento = GameMemento(1)
        with pytest.raises(FrozenInstanceError):
            memento.data = 2


class TestObserver:
    """Test subscription order and unsubscription."""

    def test_notify_in_subscription_order(self):
        calls = []
        first = Mock(spec=Subscriber)
        first.update.side_effect = lambda v: calls.append(("first", v))
        second = Mock(spec=Subscriber)
        second.update.side_effect = lambda v: calls.append(("second", v))
        publisher = Publisher()
        publisher.subscribe(first)
        publisher.subscribe(second)

        publisher.notify(7)

        assert calls == [("first", 7), ("second", 7)]

    def test_unsubscribed_subscriber_is_not_notified(self, capsys):
        first, second = ConcreteSubscriber1(), ConcreteSubscriber2()
        publisher = Publisher()
        publisher.subscribe(first)
        publisher.subscribe(second)
        publisher.unsubscribe(first)

        publisher.notify(1)

        assert capsys.readouterr().out == "subscriber2 :1\n"

    def test_unsubscribe_absent_is_noop(self):
        subscriber = ConcreteSubscriber1()
        publisher = Publisher()
        publisher.subscribe(subscriber)
        publisher.unsubscribe(ConcreteSubscriber1())
        assert publisher.subscribers == [subscriber]


class TestStateMachine:
    """Test the table-driven player state machine."""

    def test_transition_table_is_complete(self):
        for state in PlayerState:
            for event in PlayerEvent:
                assert transition(state, event) is TRANSITIONS[state][event]

    @pytest.mark.parametrize(
        "event, expected",
        [
            (PlayerEvent.PLAY, PlayerState.PLAYING),
            (PlayerEvent.LOCK, PlayerState.LOCKED),
            (PlayerEvent.NEXT, PlayerState.READY),
        ],
    )
    def test_transition_targets(self, event, expected):
        for state in PlayerState:
            assert transition(state, event) is expected

    def test_locked_play_goes_to_playing(self, capsys):
        player = Player(PlayerState.LOCKED)
        player.play()
        assert player.current_state is PlayerState.PLAYING
        assert capsys.readouterr().out == "playing...\n"

    def test_lock_from_playing(self, capsys):
        player = Player(PlayerState.PLAYING)
        player.lock()
        assert player.current_state is PlayerState.LOCKED
        assert capsys.readouterr().out == "lock...\n"

    def test_state_objects_are_reused(self):
        player = Player(PlayerState.LOCKED)
        player.play()
        playing = player.get_state(PlayerState.PLAYING)
        player.lock()
        player.play()
        assert player.get_state(PlayerState.PLAYING) is playing

    def test_history_records_transitions(self):
        player = Player(PlayerState.LOCKED)
        player.lock()
        player.play()
        player.next()
        assert player.history == [
            (PlayerState.LOCKED, PlayerState.LOCKED),
            (PlayerState.LOCKED, PlayerState.PLAYING),
            (PlayerState.PLAYING, PlayerState.READY),
        ]

    def test_history_keeps_most_recent_transitions(self):
        player = Player(PlayerState.READY)
        for _ in range(HISTORY_LIMIT + 5):
            player.lock()
        player.play()
        assert len(player.history) == HISTORY_LIMIT
        assert player.history[-1] == (PlayerState.LOCKED, PlayerState.PLAYING)
        assert player.history[0] == (PlayerState.LOCKED, PlayerState.LOCKED)

    def test_operation_without_state_raises(self):
        player = Player()
        assert player.current_state is None
        with pytest.raises(StateNotSetError):
            player.play()


class TestStrategy:
    """Test strategy swapping."""

    def test_swap_strategies(self, capsys):
        navigator = Navigator()
        navigator.set_strategy(BikeStrategy())
        navigator.show_route("a", "b")
        navigator.set_strategy(WalkingStrategy())
        navigator.show_route("b", "c")
        assert capsys.readouterr().out == "bike: a-b\nwalking: b-c\n"

    def test_delegates_to_strategy(self):
        strategy = Mock(spec=Strategy)
        Navigator(strategy).show_route("x", "y")
        strategy.build_route.assert_called_once_with("x", "y")

    def test_missing_strategy_raises(self):
        with pytest.raises(StrategyNotSetError):
            Navigator().show_route("a", "b")


class TestTemplateMethod:
    def test_default_and_overridden_steps(self, capsys):
        ConcreteClass1().template_method()
        ConcreteClass2().template_method()
        assert capsys.readouterr().out.splitlines() == [
            "ConcreteClass1 step1",
            "ConcreteClass1 step2",
            "step3",
            "ConcreteClass2 step1",
            "ConcreteClass2 step2",
            "ConcreteClass2 step3",
        ]


class TestVisitor:
    """Test double dispatch."""

    def test_element_picks_visitor_method(self):
        visitor = Mock(spec=Visitor)
        first, second = ConcreteElement1(), ConcreteElement2()
        first.accept(visitor)
        second.accept(visitor)
        visitor.visit_concrete_element1.assert_called_once_with(first)
        visitor.visit_concrete_element2.assert_called_once_with(second)

    def test_all_pairings(self, capsys):
        for element in (ConcreteElement1(), ConcreteElement2()):
            for visitor in (ConcreteVisitor1(), ConcreteVisitor2()):
                element.accept(visitor)
        assert capsys.readouterr().out.splitlines() == [
            "ConcreteVisitor1 visit concrete element1",
            "ConcreteVisitor2 visit concrete element1",
            "ConcreteVisitor1 visit concrete element2",
            "ConcreteVisitor2 visit concrete element2",
        ]
