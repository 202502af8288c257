"""
Spy Registry
~~~~~~~~~~~~

Creates spies from a shared configuration and retires them together,
for test fixtures that spy on several members at once.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from mojo_spy.config.defaults import DEFAULT_CONFIG
from mojo_spy.config.loader import load_config, load_config_from_dict
from mojo_spy.config.schema import SpyConfig
from mojo_spy.core.slots import MemberSlot
from mojo_spy.core.spy import Spy

__all__ = ["SpyRegistry"]

logger = logging.getLogger(__name__)


class SpyRegistry:
    """
    Tracks the spies it creates so they can be retired in one call.

    Spies are retired newest first, so several spies stacked on the same
    member unwind back to the original.
    """

    def __init__(self, config: SpyConfig | None = None) -> None:
        self._config = config or SpyConfig()
        self._spies: list[Spy] = []

    # ── Class Methods (constructors) ──────────────────────────────

    @classmethod
    def from_config(cls, path: str) -> SpyRegistry:
        """
        Create a registry from a YAML config file.

        Args:
            path: Path to spy_config.yaml.

        Returns:
            Configured SpyRegistry instance.
        """
        config = load_config(path)
        return cls(config=config)

    @classmethod
    def default(cls) -> SpyRegistry:
        """Create a registry with the default configuration."""
        config = load_config_from_dict(DEFAULT_CONFIG)
        return cls(config=config)

    # ── Properties ─────────────────────────────────────────────────

    @property
    def config(self) -> SpyConfig:
        return self._config

    @property
    def spies(self) -> list[Spy]:
        """Return the tracked spies in creation order."""
        return list(self._spies)

    # ── Primary API ───────────────────────────────────────────────

    def spy_on(
        self,
        target: Any,
        member_name: Any,
        *,
        slot: MemberSlot | None = None,
    ) -> Spy:
        """
        Install and track a spy configured from this registry.

        Raises:
            NotCallableError: If the member is missing or not callable.
            MemberNotWritableError: If the target refuses the replacement.
        """
        spy = Spy(
            target,
            member_name,
            slot=slot,
            thread_safe=self._config.interception.thread_safe,
            log_calls=self._config.interception.log_calls,
        )
        self._spies.append(spy)
        return spy

    def retire_all(self) -> None:
        """Retire every tracked spy, newest first, and forget them."""
        spies, self._spies = self._spies, []
        for spy in reversed(spies):
            spy.retire()
        if spies:
            logger.debug("Retired %d spies", len(spies))

    @contextmanager
    def sandbox(self) -> Iterator[SpyRegistry]:
        """
        Context manager that retires the spies created inside it.

        Retirement is skipped when ``registry.retire_on_exit`` is off.

        Yields:
            This registry.
        """
        try:
            yield self
        finally:
            if self._config.registry.retire_on_exit:
                self.retire_all()

    def __len__(self) -> int:
        return len(self._spies)

    def __iter__(self) -> Iterator[Spy]:
        return iter(list(self._spies))

    def __repr__(self) -> str:
        return f"<SpyRegistry spies={len(self._spies)}>"
