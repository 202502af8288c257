"""
Spy — Method Interception
~~~~~~~~~~~~~~~~~~~~~~~~~

Replaces one member of one object with an Interceptor, records how it is
called, optionally forwards each call, and restores the object on retire.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from contextlib import AbstractContextManager, nullcontext
from typing import Any

from mojo_spy.core.call import Call
from mojo_spy.core.forwarding import SILENT, ForwardMode, Forwarding
from mojo_spy.core.interceptor import Interceptor
from mojo_spy.core.slots import MISSING, MemberSlot, slot_for
from mojo_spy.exceptions import MemberNotWritableError, NotCallableError

__all__ = ["Spy"]

logger = logging.getLogger(__name__)


class Spy:
    """
    Spies on a single method of a single object.

    By default calls are recorded and nothing else happens: neither the
    original nor any substitute runs. ``set_forward_mode()`` switches
    between three modes:

    - ``ForwardMode.SILENT`` — do nothing after recording.
    - ``ForwardMode.PASS_THROUGH`` — call the original implementation.
    - a callable — call it instead of the original. A substitute that
      wants the original behaviour too calls ``spy.original_implementation``
      itself.

    The intercepted member never returns a value, whatever the mode.

    Example::

        spy = Spy(mailer, "send")
        mailer.send("alice", subject="hi")
        assert spy.was_called("alice", subject="hi")
        spy.retire()

    Args:
        target: Module, class, instance or mutable mapping to spy on.
        member_name: Name (or key) of the callable member to intercept.
        slot: Custom access to the member; defaults to ``slot_for()``.
        thread_safe: Serialize recording and dispatch with a lock.
        log_calls: Log every intercepted call at DEBUG level.

    Raises:
        NotCallableError: If the member is missing or not callable.
        MemberNotWritableError: If the target refuses the replacement.
    """

    def __init__(
        self,
        target: Any,
        member_name: Any,
        *,
        slot: MemberSlot | None = None,
        thread_safe: bool = False,
        log_calls: bool = False,
    ) -> None:
        self._slot = slot or slot_for(target, member_name)
        original = self._slot.read()
        if not callable(original):
            owner = type(target).__name__
            raise NotCallableError(
                f"Cannot spy on {self._slot.describe()}: not callable",
                target=target,
                member_name=member_name,
                value=original,
                what_happened=(
                    f"{owner} has no member {member_name!r}."
                    if original is MISSING
                    else ""
                ),
            )

        self._target = target
        self._member_name = member_name
        self._original = original
        self._installed = False
        self._retired = False
        self._log_calls = log_calls
        self._lock: AbstractContextManager[Any] = (
            threading.RLock() if thread_safe else nullcontext()
        )
        self._history: list[Call] = []
        self._recording = True
        self._forwarding: Forwarding = SILENT
        self.reset()

        self._slot.capture()
        descriptor = self._slot.raw() if self._slot.binds_receiver else None
        self._interceptor = Interceptor(self, descriptor)
        try:
            self._slot.write(self._interceptor)
        except (AttributeError, TypeError) as exc:
            raise MemberNotWritableError(
                f"Cannot spy on {self._slot.describe()}: {exc}",
                target=target,
                member_name=member_name,
            ) from exc
        self._installed = True
        logger.debug("Spy installed on %s", self._slot.describe())

    # ── Properties ─────────────────────────────────────────────────

    @property
    def target(self) -> Any:
        """Return the object being spied on."""
        return self._target

    @property
    def member_name(self) -> Any:
        """Return the name of the intercepted member."""
        return self._member_name

    @property
    def original_implementation(self) -> Callable[..., Any]:
        """
        Return the member as it was before the spy was installed.

        Substitutes call this to chain to the original behaviour.
        """
        return self._original

    @property
    def interceptor(self) -> Interceptor:
        """Return the callable installed in place of the member."""
        return self._interceptor

    @property
    def is_recording(self) -> bool:
        return self._recording

    @property
    def forwarding(self) -> Forwarding:
        return self._forwarding

    @property
    def forward_mode(self) -> ForwardMode:
        return self._forwarding.mode

    @property
    def substitute(self) -> Callable[..., Any] | None:
        return self._forwarding.substitute

    @property
    def call_history(self) -> list[Call]:
        """Return the recorded calls, oldest first."""
        with self._lock:
            return list(self._history)

    @property
    def call_count(self) -> int:
        return len(self._history)

    @property
    def retired(self) -> bool:
        return self._retired

    # ── Control ────────────────────────────────────────────────────

    def enable_recording(self) -> None:
        """Record calls from now on."""
        self._recording = True

    def disable_recording(self) -> None:
        """Stop recording calls. Existing history is kept."""
        self._recording = False

    def clear_history(self) -> None:
        """Forget all recorded calls."""
        with self._lock:
            self._history = []

    def reset(self) -> None:
        """
        Restore the default behaviour: recording on, SILENT, no history.

        Does not retire the spy.
        """
        with self._lock:
            self.enable_recording()
            self._forwarding = SILENT
            self.clear_history()

    def set_forward_mode(self, mode: ForwardMode | Forwarding | Callable[..., Any]) -> None:
        """
        Choose what happens to a call after it is recorded.

        Args:
            mode: ``ForwardMode.SILENT``, ``ForwardMode.PASS_THROUGH``
                (or their string values), a ``Forwarding``, or a callable
                to run instead of the original.

        Raises:
            InvalidForwardModeError: If ``mode`` is none of the above.
                The current mode is left unchanged.
        """
        forwarding = Forwarding.coerce(mode)
        with self._lock:
            self._forwarding = forwarding

    def retire(self) -> None:
        """
        Put the original member back and disable the spy for good.

        Calling it again is a no-op. History stays readable.
        """
        with self._lock:
            if self._retired or not self._installed:
                return
            self._slot.restore()
            self._retired = True
        logger.debug("Spy retired from %s", self._slot.describe())

    on = enable_recording
    off = disable_recording
    close = retire

    # ── Queries ────────────────────────────────────────────────────

    def was_called(self, *args: Any, **kwargs: Any) -> bool:
        """
        Check whether (or how) the member was called.

        Without arguments: whether any call was recorded, including a call
        made without arguments. With arguments: whether some recorded call
        had exactly these arguments, compared with ``strictly_equal``.
        Note there is no way to ask specifically for a call made without
        arguments.
        """
        with self._lock:
            if not args and not kwargs:
                return bool(self._history)
            return any(call.matches(args, kwargs) for call in self._history)

    # ── Interception ───────────────────────────────────────────────

    def _intercept(
        self,
        receiver: Any,
        original: Callable[..., Any],
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> None:
        """Record and dispatch one call landing on the interceptor."""
        with self._lock:
            if self._retired:
                original(*args, **kwargs)
                return
            if self._recording:
                self._history.append(Call(args, kwargs, receiver))
            forwarding = self._forwarding
            if self._log_calls:
                logger.debug(
                    "%s called (%s): args=%r kwargs=%r",
                    self._slot.describe(),
                    forwarding,
                    args,
                    kwargs,
                )

            if forwarding.mode is ForwardMode.PASS_THROUGH:
                original(*args, **kwargs)
            elif forwarding.mode is ForwardMode.SUBSTITUTE:
                if receiver is None:
                    forwarding.substitute(*args, **kwargs)
                else:
                    forwarding.substitute(receiver, *args, **kwargs)

    # ── Context manager ────────────────────────────────────────────

    def __enter__(self) -> Spy:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.retire()

    def __repr__(self) -> str:
        state = "retired" if self._retired else str(self._forwarding)
        return (
            f"<Spy {self._slot.describe()} [{state}] "
            f"calls={len(self._history)} recording={self._recording}>"
        )
