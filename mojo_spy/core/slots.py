"""
Member Slots
~~~~~~~~~~~~

The one place in a target object a spy writes to. A slot knows how to
read the member as a call site sees it, how to replace it, and how to put
the target back exactly as it was.
"""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from collections.abc import MutableMapping
from typing import Any

__all__ = ["MemberSlot", "AttributeSlot", "MappingSlot", "slot_for", "MISSING"]


class _Missing:
    def __repr__(self) -> str:
        return "<missing>"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


class MemberSlot(ABC):
    """
    Abstract access to a single named member of a target.

    Subclasses must implement ``read()``, ``write()`` and ``restore()``.
    ``capture()`` is called exactly once, before the first ``write()``,
    and must remember whatever ``restore()`` needs.
    """

    def __init__(self, target: Any, name: Any) -> None:
        self.target = target
        self.name = name

    @abstractmethod
    def read(self) -> Any:
        """Return the member as a call site sees it, or MISSING."""

    def raw(self) -> Any:
        """Return the stored value before any descriptor binding."""
        return self.read()

    def capture(self) -> None:
        """Remember the current state of the slot for ``restore()``."""

    @abstractmethod
    def write(self, value: Any) -> None:
        """
        Replace the member.

        Raises:
            AttributeError, TypeError: If the target refuses the write.
        """

    @abstractmethod
    def restore(self) -> None:
        """Return the slot to the state recorded by ``capture()``."""

    @property
    def binds_receiver(self) -> bool:
        """Whether values written here go through the descriptor protocol."""
        return False

    def describe(self) -> str:
        """Return a short human-readable name for log messages."""
        owner = getattr(self.target, "__name__", type(self.target).__name__)
        return f"{owner}.{self.name}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.describe()})"


class AttributeSlot(MemberSlot):
    """
    An attribute of a module, class or instance.

    An attribute the target only inherits (e.g. a method an instance gets
    from its class) is shadowed while spying and deleted again on restore,
    so the target's own ``__dict__`` ends up exactly as it started.
    """

    def __init__(self, target: Any, name: str) -> None:
        super().__init__(target, name)
        self._owned = False
        self._stored: Any = MISSING

    def read(self) -> Any:
        try:
            return getattr(self.target, self.name, MISSING)
        except TypeError:  # non-string name
            return MISSING

    def raw(self) -> Any:
        try:
            return inspect.getattr_static(self.target, self.name)
        except (AttributeError, TypeError):
            return MISSING

    def capture(self) -> None:
        own = getattr(self.target, "__dict__", None)
        self._owned = own is not None and self.name in own
        self._stored = own[self.name] if self._owned else MISSING

    def write(self, value: Any) -> None:
        setattr(self.target, self.name, value)

    def restore(self) -> None:
        if self._owned:
            setattr(self.target, self.name, self._stored)
        else:
            delattr(self.target, self.name)

    @property
    def binds_receiver(self) -> bool:
        return inspect.isclass(self.target)


class MappingSlot(MemberSlot):
    """A key of a mutable mapping holding callables (e.g. a dispatch table)."""

    def __init__(self, target: MutableMapping, name: Any) -> None:
        super().__init__(target, name)
        self._stored: Any = MISSING

    def read(self) -> Any:
        return self.target.get(self.name, MISSING)

    def capture(self) -> None:
        self._stored = self.target.get(self.name, MISSING)

    def write(self, value: Any) -> None:
        self.target[self.name] = value

    def restore(self) -> None:
        if self._stored is MISSING:
            self.target.pop(self.name, None)
        else:
            self.target[self.name] = self._stored

    def describe(self) -> str:
        return f"{type(self.target).__name__}[{self.name!r}]"


def slot_for(target: Any, name: Any) -> MemberSlot:
    """
    Pick the slot type for ``target``.

    Mutable mappings that contain ``name`` as a key are spied on by item;
    everything else by attribute.
    """
    if isinstance(target, MutableMapping):
        try:
            if name in target:
                return MappingSlot(target, name)
        except TypeError:  # unhashable key
            pass
    return AttributeSlot(target, name)
