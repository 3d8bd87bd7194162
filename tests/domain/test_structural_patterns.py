"""Tests for the structural patterns."""

from unittest.mock import Mock

from pattern_catalogue.domain.structural import (
    Cash,
    CatFactory,
    ClassAdapter,
    Component,
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
    Service,
    Target,
    VideoFacade,
)


class TestAdapter:
    """Test both adapter styles."""

    def test_class_adapter_relays_target_then_service(self, capsys):
        adapter = ClassAdapter()
        assert isinstance(adapter, Target)
        adapter.show()
        assert capsys.readouterr().out == "target class\nservice class\n"

    def test_object_adapter_uses_injected_service(self, capsys):
        service = Mock(spec=Service)
        ObjectAdapter(service).show()
        assert capsys.readouterr().out == "target class\n"
        service.service_method.assert_called_once_with()


class TestBridge:
    """Test abstraction and implementation pairings."""

    def test_every_pairing_is_legal(self, capsys):
        RefinedAbstraction1(ConcreteImplementation2()).show()
        RefinedAbstraction2(ConcreteImplementation1()).show()
        assert capsys.readouterr().out == (
            "abstraction 1\nConcreteImplementation2\n"
            "abstraction 2\nConcreteImplementation1\n"
        )


class TestComposite:
    """Test tree recursion and child management."""

    def test_show_visits_children_in_order(self):
        calls = []
        children = []
        for name in ("a", "b", "c"):
            child = Mock(spec=Component)
            child.show.side_effect = lambda n=name: calls.append(n)
            children.append(child)

        tree = Composite()
        for child in children:
            tree.add(child)
        tree.show()

        assert calls == ["a", "b", "c"]

    def test_nested_composite_output(self, capsys):
        tree = Composite()
        leaf = Leaf()
        tree.add(leaf)
        subtree = Composite()
        subtree.add(Leaf2())
        tree.add(subtree)
        tree.show()

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Size:2"
        assert lines[1] == f"Leaf {hex(id(leaf))}"
        assert lines[2] == "Size:1"
        assert lines[3].startswith("Leaf2 ")

    def test_remove_absent_child_is_noop(self):
        tree = Composite()
        first, second = Leaf(), Leaf()
        tree.add(first)
        tree.add(second)

        tree.remove(Leaf())

        assert tree.children == [first, second]

    def test_remove_present_child(self):
        tree = Composite()
        first, second = Leaf(), Leaf2()
        tree.add(first)
        tree.add(second)

        tree.remove(first)

        assert tree.children == [second]
        assert len(tree) == 1

    def test_children_is_a_copy(self):
        tree = Composite()
        tree.children.append(Leaf())
        assert len(tree) == 0


class TestDecorator:
    """Test decorator layering order."""

    def test_layers_apply_in_wrap_order(self, capsys):
        coffee = MilkDecorator(HoneyDecorator(OriginalCoffee()))
        coffee.show()
        assert capsys.readouterr().out == "original coffee add honey- add milk-"

    def test_wrap_order_changes_output(self, capsys):
        HoneyDecorator(MilkDecorator(OriginalCoffee())).show()
        assert capsys.readouterr().out == "original coffee add milk- add honey-"


class TestFacade:
    def test_subsystems_run_in_fixed_order(self, capsys):
        VideoFacade().show()
        assert capsys.readouterr().out == "show video\nshow audio\nmix video and audio\n"


class TestFlyweight:
    """Test the identity-based flyweight cache."""

    def test_equal_keys_share_instance(self):
        factory = CatFactory()
        assert factory.get_cat("black") is factory.get_cat("black")

    def test_different_keys_get_distinct_instances(self):
        factory = CatFactory()
        assert factory.get_cat("black") is not factory.get_cat("white")

    def test_one_instance_per_distinct_key(self):
        factory = CatFactory()
        for texture in ["black", "white", "black", "grey", "white"]:
            factory.get_cat(texture)
        assert len(factory) == 3
        assert factory.textures() == ["black", "white", "grey"]
        assert "grey" in factory

    def test_clear_drops_cache(self):
        factory = CatFactory()
        first = factory.get_cat("black")
        factory.clear()
        assert len(factory) == 0
        assert factory.get_cat("black") is not first

    def test_extrinsic_state_is_not_stored_on_flyweight(self, capsys):
        factory = CatFactory()
        cat = factory.get_cat("black")
        MovingCat(cat, 0).show()
        MovingCat(factory.get_cat("black"), 1).show()

        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            f"black {hex(id(cat))}  position: 0",
            f"black {hex(id(cat))}  position: 1",
        ]
        assert not hasattr(cat, "position")


class TestProxy:
    def test_credit_card_forwards_to_cash(self, capsys):
        cash = Mock(spec=Cash)
        CreditCard(cash).show()
        cash.show.assert_called_once_with()

    def test_output(self, capsys):
        CreditCard(Cash()).show()
        assert capsys.readouterr().out == "here is the cash\n"
