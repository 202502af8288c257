"""
mojo-spy — Spy on a single method, then put it back.

A ``Spy`` replaces one callable member of an object, records every call
made to it, and optionally forwards each call to the original
implementation or to a substitute:

- Call history with on/off recording
- Exact-argument queries via ``was_called()``
- Silent, pass-through and substitute forwarding
- Clean restoration of the original member

Quick Start::

    from mojo_spy import ForwardMode, Spy

    spy = Spy(mailer, "send")
    spy.set_forward_mode(ForwardMode.PASS_THROUGH)

    mailer.send("alice@example.com", "hi")
    assert spy.was_called("alice@example.com", "hi")

    spy.retire()

Note that the intercepted member always returns ``None``.

:copyright: (c) 2024 Jonathan Eiten
:license: MIT
"""

from mojo_spy.config.loader import load_config, load_config_from_dict
from mojo_spy.config.schema import SpyConfig
from mojo_spy.core.call import Call
from mojo_spy.core.forwarding import ForwardMode, Forwarding
from mojo_spy.core.registry import SpyRegistry
from mojo_spy.core.slots import AttributeSlot, MappingSlot, MemberSlot
from mojo_spy.core.spy import Spy
from mojo_spy.exceptions import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigValidationError,
    InstallationError,
    InvalidForwardModeError,
    MemberNotWritableError,
    NotCallableError,
    SpyError,
)

__version__ = "0.2.0"
__license__ = "MIT"

__all__ = [
    # Main classes
    "Spy",
    "SpyRegistry",
    # Data models
    "Call",
    "ForwardMode",
    "Forwarding",
    # Extension bases
    "MemberSlot",
    "AttributeSlot",
    "MappingSlot",
    # Config
    "SpyConfig",
    "load_config",
    "load_config_from_dict",
    # Exceptions
    "SpyError",
    "InstallationError",
    "NotCallableError",
    "MemberNotWritableError",
    "InvalidForwardModeError",
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigValidationError",
    # Version
    "__version__",
]
