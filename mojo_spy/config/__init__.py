"""mojo-spy configuration — loading, validation, and defaults."""

from mojo_spy.config.defaults import DEFAULT_CONFIG
from mojo_spy.config.loader import load_config, load_config_from_dict
from mojo_spy.config.schema import SpyConfig

__all__ = [
    "load_config",
    "load_config_from_dict",
    "SpyConfig",
    "DEFAULT_CONFIG",
]
