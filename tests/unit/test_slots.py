"""Tests for member slots and class-level interception."""

import pytest

from mojo_spy import AttributeSlot, ForwardMode, MappingSlot, MemberSlot, Spy
from mojo_spy.core.slots import MISSING, slot_for


class Greeter:
    def __init__(self, name):
        self.name = name
        self.greeted = []

    def greet(self, other):
        self.greeted.append(other)

    @classmethod
    def build(cls, name):
        cls.last_built = name

    @staticmethod
    def shout(text):
        Greeter.shouted = text


class LoudGreeter(Greeter):
    pass


class TestSlotFor:
    """Tests for choosing the slot type."""

    def test_object_uses_attribute_slot(self, mailer):
        assert isinstance(slot_for(mailer, "send"), AttributeSlot)

    def test_mapping_key_uses_mapping_slot(self, table):
        assert isinstance(slot_for(table, "method"), MappingSlot)

    def test_mapping_method_uses_attribute_slot(self, table):
        assert isinstance(slot_for(table, "keys"), AttributeSlot)

    def test_unhashable_key_falls_back(self, table):
        assert isinstance(slot_for(table, ["x"]), AttributeSlot)


class TestMappingSlot:
    """Spying on a dict entry, e.g. {"method": f}."""

    def test_scenario(self, table):
        spy = Spy(table, "method")
        table["method"](1, 2, 3)
        assert spy.was_called(1, 2, 3) is True
        assert spy.was_called(4, 5) is False
        assert len(spy.call_history) == 1
        spy.retire()

    def test_pass_through(self, table):
        spy = Spy(table, "method")
        spy.set_forward_mode(ForwardMode.PASS_THROUGH)
        table["method"]("x")
        assert table["calls"] == [("x",)]
        spy.retire()

    def test_restores_missing_key(self):
        slot = MappingSlot({}, "gone")
        slot.capture()
        slot.target["gone"] = print
        slot.restore()
        assert "gone" not in slot.target

    def test_describe(self, table):
        assert MappingSlot(table, "method").describe() == "dict['method']"


class TestAttributeSlot:
    """Tests for attribute slots."""

    def test_read_non_string_name(self, mailer):
        slot = AttributeSlot(mailer, 1)
        assert slot.read() is MISSING
        assert slot.raw() is MISSING

    def test_read_missing(self, mailer):
        assert AttributeSlot(mailer, "nope").read() is MISSING

    def test_inherited_attribute_is_deleted_on_restore(self, mailer):
        slot = AttributeSlot(mailer, "send")
        slot.capture()
        slot.write(print)
        assert mailer.send is print
        slot.restore()
        assert "send" not in vars(mailer)

    def test_binds_receiver_only_for_classes(self, mailer):
        assert AttributeSlot(mailer, "send").binds_receiver is False
        assert AttributeSlot(type(mailer), "send").binds_receiver is True


class TestClassLevelSpy:
    """Spying on a class intercepts calls on every instance."""

    def test_records_receiver_separately(self):
        alice, bob = Greeter("alice"), Greeter("bob")
        with Spy(Greeter, "greet") as spy:
            alice.greet("carol")
            bob.greet("dave")
            assert spy.call_history == [("carol",), ("dave",)]
            assert spy.call_history[0].receiver is alice
            assert spy.call_history[1].receiver is bob
            assert spy.was_called("dave")

    def test_pass_through_keeps_receiver(self):
        alice = Greeter("alice")
        with Spy(Greeter, "greet") as spy:
            spy.set_forward_mode(ForwardMode.PASS_THROUGH)
            alice.greet("carol")
        assert alice.greeted == ["carol"]

    def test_substitute_is_bound_to_receiver(self):
        alice = Greeter("alice")
        seen = []
        with Spy(Greeter, "greet") as spy:

            def fake(self, other):
                seen.append((self.name, other))
                spy.original_implementation(self, other.upper())

            spy.set_forward_mode(fake)
            alice.greet("carol")
        assert seen == [("alice", "carol")]
        assert alice.greeted == ["CAROL"]

    def test_subclass_instances_are_intercepted(self):
        loud = LoudGreeter("loud")
        with Spy(Greeter, "greet") as spy:
            loud.greet("x")
            assert spy.call_history[0].receiver is loud

    def test_unbound_access_passes_self_as_argument(self):
        alice = Greeter("alice")
        with Spy(Greeter, "greet") as spy:
            Greeter.greet(alice, "carol")
            assert spy.was_called(alice, "carol")

    def test_restores_the_function(self):
        original = Greeter.__dict__["greet"]
        with Spy(Greeter, "greet"):
            pass
        assert Greeter.__dict__["greet"] is original

    def test_spy_on_subclass_leaves_base_alone(self):
        with Spy(LoudGreeter, "greet"):
            assert "greet" in vars(LoudGreeter)
            assert Greeter.__dict__["greet"] is not LoudGreeter.__dict__["greet"]
        assert "greet" not in vars(LoudGreeter)

    def test_stacked_class_spies_keep_receiver(self):
        alice = Greeter("alice")
        original = Greeter.__dict__["greet"]
        with Spy(Greeter, "greet") as inner:
            with Spy(Greeter, "greet") as outer:
                seen = []
                outer.set_forward_mode(
                    lambda self, other: seen.append((self, other))
                )
                alice.greet("carol")
                assert outer.call_history[0].receiver is alice
                assert seen == [(alice, "carol")]
                assert inner.call_history == []

                outer.set_forward_mode(ForwardMode.PASS_THROUGH)
                inner.set_forward_mode(ForwardMode.PASS_THROUGH)
                alice.greet("dave")
                assert inner.call_history[0].receiver is alice
        assert alice.greeted == ["dave"]
        assert Greeter.__dict__["greet"] is original

    def test_classmethod_binds_to_class(self):
        with Spy(Greeter, "build") as spy:
            spy.set_forward_mode(ForwardMode.PASS_THROUGH)
            Greeter.build("zed")
            assert spy.call_history[0].receiver is Greeter
        assert Greeter.last_built == "zed"
        assert isinstance(Greeter.__dict__["build"], classmethod)

    def test_staticmethod_has_no_receiver(self):
        with Spy(Greeter, "shout") as spy:
            spy.set_forward_mode(ForwardMode.PASS_THROUGH)
            Greeter("a").shout("hey")
            assert spy.call_history[0].receiver is None
            assert spy.was_called("hey")
        assert Greeter.shouted == "hey"
        assert isinstance(Greeter.__dict__["shout"], staticmethod)


class TestCustomSlot:
    """A caller-provided MemberSlot."""

    def test_spy_uses_custom_slot(self):
        class Registry:
            def __init__(self):
                self.handlers = {"ping": lambda: "pong"}

        class HandlerSlot(MemberSlot):
            def read(self):
                return self.target.handlers.get(self.name, MISSING)

            def capture(self):
                self._saved = self.target.handlers[self.name]

            def write(self, value):
                self.target.handlers[self.name] = value

            def restore(self):
                self.target.handlers[self.name] = self._saved

        registry = Registry()
        original = registry.handlers["ping"]
        spy = Spy(registry, "ping", slot=HandlerSlot(registry, "ping"))
        registry.handlers["ping"]()
        assert spy.was_called()
        spy.retire()
        assert registry.handlers["ping"] is original

    def test_abstract_slot_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            MemberSlot(object(), "x")
