"""
Interceptor
~~~~~~~~~~~

The callable a spy installs in place of the original member. It keeps the
calling convention of the member it replaces, including descriptor binding
when installed on a class, and hands every call to its spy.
"""

from __future__ import annotations

import functools
import types
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from mojo_spy.core.spy import Spy

__all__ = ["Interceptor", "BoundInterceptor"]


class Interceptor:
    """
    Stand-in for a spied member.

    Installed on a module, an instance or a mapping it is called directly.
    Installed on a class it behaves like the descriptor it replaces: an
    instance method binds to the instance, a classmethod to the class, a
    staticmethod to nothing. The bound receiver is reported to the spy
    separately from the arguments.
    """

    def __init__(self, spy: Spy, descriptor: Any = None) -> None:
        self._spy = spy
        self._descriptor = descriptor
        functools.update_wrapper(self, spy.original_implementation, updated=())

    @property
    def spy(self) -> Spy:
        """Return the spy this interceptor reports to."""
        return self._spy

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        self._spy._intercept(None, self._spy.original_implementation, args, kwargs)

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        bind = getattr(self._descriptor, "__get__", None)
        if bind is None:
            return self
        resolved = bind(instance, owner)
        if isinstance(resolved, (types.MethodType, BoundInterceptor)):
            receiver = resolved.__self__
        else:
            receiver = None
        return BoundInterceptor(self, receiver, resolved)

    def __repr__(self) -> str:
        return f"<Interceptor for {self._spy!r}>"


class BoundInterceptor:
    """An Interceptor resolved for one receiver, like a bound method."""

    def __init__(self, interceptor: Interceptor, receiver: Any, original: Any) -> None:
        self.__func__ = interceptor
        self.__self__ = receiver
        self._original = original
        functools.update_wrapper(self, original, updated=())

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        self.__func__.spy._intercept(self.__self__, self._original, args, kwargs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundInterceptor):
            return NotImplemented
        return self.__func__ is other.__func__ and self.__self__ is other.__self__

    def __hash__(self) -> int:
        return hash((id(self.__func__), id(self.__self__)))

    def __repr__(self) -> str:
        return f"<bound {self.__func__!r} of {self.__self__!r}>"
