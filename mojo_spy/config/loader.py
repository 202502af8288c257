"""
Configuration Loader
~~~~~~~~~~~~~~~~~~~~

Reads spy_config.yaml and layers it over DEFAULT_CONFIG.
"""

from __future__ import annotations

import logging
import os
from typing import Any

import yaml

from mojo_spy.config.defaults import DEFAULT_CONFIG
from mojo_spy.config.schema import SpyConfig
from mojo_spy.exceptions import (
    ConfigFileNotFoundError,
    ConfigValidationError,
)

__all__ = ["load_config", "load_config_from_dict"]

logger = logging.getLogger(__name__)


def _overlay(defaults: dict, overrides: dict) -> dict:
    """Return ``defaults`` with ``overrides`` applied section by section."""
    merged = dict(defaults)
    for section, value in overrides.items():
        current = merged.get(section)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[section] = _overlay(current, value)
        else:
            merged[section] = value
    return merged


def _read_yaml(path: str) -> dict[str, Any]:
    """Parse a spy config file; an empty file counts as no overrides."""
    try:
        with open(path, encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigValidationError(
            f"{path} is not valid YAML: {exc}",
            details={"path": path},
        ) from exc

    if document is None:
        return {}
    if not isinstance(document, dict):
        raise ConfigValidationError(
            f"{path} must hold a mapping of settings, "
            f"found {type(document).__name__}",
            details={"path": path},
        )
    return document


def load_config(path: str) -> SpyConfig:
    """
    Build a SpyConfig from a YAML file.

    Raises:
        ConfigFileNotFoundError: If ``path`` is not a file.
        ConfigValidationError: If the YAML or any setting is invalid.
    """
    if not os.path.isfile(path):
        raise ConfigFileNotFoundError(
            f"No spy configuration at {path}",
            details={"path": path},
        )

    overrides = _read_yaml(path)
    logger.debug("Read spy settings %s from %s", list(overrides), path)
    return load_config_from_dict(overrides)


def load_config_from_dict(data: dict[str, Any]) -> SpyConfig:
    """
    Build a SpyConfig from ``data`` layered over DEFAULT_CONFIG.

    Raises:
        ConfigValidationError: If any setting is invalid.
    """
    try:
        return SpyConfig(**_overlay(DEFAULT_CONFIG, data))
    except Exception as exc:
        raise ConfigValidationError(f"Invalid spy settings: {exc}") from exc
