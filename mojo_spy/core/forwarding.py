"""
Forward Modes
~~~~~~~~~~~~~

Defines what happens to an intercepted call once it has been recorded.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from mojo_spy.exceptions import InvalidForwardModeError

__all__ = ["ForwardMode", "Forwarding", "SILENT", "PASS_THROUGH"]


class ForwardMode(StrEnum):
    """
    Dispatch behaviour of a spy after recording a call.

    - SILENT: Nothing runs; the call is only observed.
    - PASS_THROUGH: The original implementation runs.
    - SUBSTITUTE: A caller-supplied callable runs instead of the original.
    """

    SILENT = "silent"
    PASS_THROUGH = "pass_through"
    SUBSTITUTE = "substitute"

    def is_forwarding(self) -> bool:
        """Return True if calls leave the spy in this mode."""
        return self is not ForwardMode.SILENT


@dataclass(frozen=True)
class Forwarding:
    """
    The active forward mode of a spy, with its substitute payload.

    Only ``SUBSTITUTE`` carries a callable; the other modes never do.

    Attributes:
        mode: Which dispatch behaviour applies.
        substitute: The callable run in ``SUBSTITUTE`` mode.
    """

    mode: ForwardMode
    substitute: Callable[..., Any] | None = None

    def __post_init__(self) -> None:
        try:
            mode = ForwardMode(self.mode)
        except ValueError:
            raise InvalidForwardModeError(
                f"Unknown forward mode: {self.mode!r}",
                details={"choices": [m.value for m in ForwardMode]},
            ) from None
        object.__setattr__(self, "mode", mode)
        if self.mode is ForwardMode.SUBSTITUTE and not callable(self.substitute):
            raise InvalidForwardModeError(
                "SUBSTITUTE forwarding requires a callable substitute",
                details={"substitute": repr(self.substitute)},
            )
        if self.mode is not ForwardMode.SUBSTITUTE and self.substitute is not None:
            raise InvalidForwardModeError(
                f"{self.mode.name} forwarding does not take a substitute",
                details={"mode": str(self.mode)},
            )

    @classmethod
    def substituting(cls, substitute: Callable[..., Any]) -> Forwarding:
        """Build a SUBSTITUTE forwarding for ``substitute``."""
        return cls(ForwardMode.SUBSTITUTE, substitute)

    @classmethod
    def coerce(cls, value: Any) -> Forwarding:
        """
        Normalize anything ``Spy.set_forward_mode`` accepts.

        Args:
            value: A Forwarding, a ForwardMode (or its string value) other
                than SUBSTITUTE, or a callable to use as the substitute.

        Returns:
            The equivalent Forwarding.

        Raises:
            InvalidForwardModeError: If the value is none of the above.
        """
        if isinstance(value, Forwarding):
            return value
        if isinstance(value, str):
            return cls(value)
        if callable(value):
            return cls.substituting(value)
        raise InvalidForwardModeError(
            f"Forward mode must be a ForwardMode or a callable, "
            f"got {type(value).__name__}",
            details={"value": repr(value)},
        )

    def __str__(self) -> str:
        if self.substitute is None:
            return str(self.mode)
        name = getattr(self.substitute, "__qualname__", repr(self.substitute))
        return f"{self.mode}({name})"


SILENT = Forwarding(ForwardMode.SILENT)
PASS_THROUGH = Forwarding(ForwardMode.PASS_THROUGH)
