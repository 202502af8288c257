"""mojo-spy core module — the spy, its interceptor, and supporting types."""

from mojo_spy.core.call import Call
from mojo_spy.core.forwarding import ForwardMode, Forwarding
from mojo_spy.core.slots import AttributeSlot, MappingSlot, MemberSlot
from mojo_spy.core.spy import Spy

__all__ = [
    "Spy",
    "Call",
    "ForwardMode",
    "Forwarding",
    "MemberSlot",
    "AttributeSlot",
    "MappingSlot",
]
