"""
Recorded Calls
~~~~~~~~~~~~~~

A ``Call`` is one entry of a spy's call history: the positional arguments
exactly as the call site passed them, plus the keyword arguments and the
receiver the call was bound to.
"""

from __future__ import annotations

from typing import Any

__all__ = ["Call", "strictly_equal"]

_VALUE_TYPES = (int, float, complex, bool, str, bytes, type(None))


def strictly_equal(actual: Any, expected: Any) -> bool:
    """
    Compare two arguments the way ``Spy.was_called`` does.

    Identical objects always match. Immutable scalars (numbers, strings,
    bytes, None) of exactly the same type match by value, so ``1``, ``1.0``
    and ``True`` are three different arguments; tuples match when their
    items do. Any other object, lists and dicts included, only matches
    itself.
    """
    if actual is expected:
        return True
    if type(actual) is not type(expected):
        return False
    if type(actual) in _VALUE_TYPES:
        return actual == expected
    if type(actual) is tuple:
        return len(actual) == len(expected) and all(
            strictly_equal(a, e) for a, e in zip(actual, expected)
        )
    return False


class Call(tuple):
    """
    Positional arguments of one intercepted call.

    Behaves as a plain tuple of the arguments (so ``call == (1, 2)`` and
    ``call[0]`` work) while also carrying:

    Attributes:
        kwargs: Keyword arguments, as received.
        receiver: The instance or class the call was bound to when the
            spy intercepts through a class, otherwise ``None``.
    """

    kwargs: dict[str, Any]
    receiver: Any

    def __new__(
        cls,
        args: tuple[Any, ...] = (),
        kwargs: dict[str, Any] | None = None,
        receiver: Any = None,
    ) -> Call:
        call = super().__new__(cls, args)
        call.kwargs = kwargs or {}
        call.receiver = receiver
        return call

    @property
    def args(self) -> tuple[Any, ...]:
        """Return the positional arguments as a plain tuple."""
        return tuple(self)

    def matches(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> bool:
        """Return True if this call was made with exactly these arguments."""
        if len(self) != len(args) or self.kwargs.keys() != kwargs.keys():
            return False
        if not all(strictly_equal(a, e) for a, e in zip(self, args)):
            return False
        return all(strictly_equal(self.kwargs[k], v) for k, v in kwargs.items())

    def __repr__(self) -> str:
        parts = [repr(a) for a in self]
        parts.extend(f"{k}={v!r}" for k, v in self.kwargs.items())
        return f"Call({', '.join(parts)})"
