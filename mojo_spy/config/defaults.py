"""
Default Configuration
~~~~~~~~~~~~~~~~~~~~~

Defaults used by SpyRegistry when no config file is provided.
"""

from __future__ import annotations

__all__ = ["DEFAULT_CONFIG"]

DEFAULT_CONFIG: dict = {
    "version": "1.0",
    "interception": {
        "thread_safe": False,
        "log_calls": False,
    },
    "registry": {
        "retire_on_exit": True,
    },
}
