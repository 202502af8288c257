"""
Configuration Schema
~~~~~~~~~~~~~~~~~~~~

Pydantic models for validating mojo-spy configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

__all__ = [
    "SpyConfig",
    "InterceptionConfig",
    "RegistryConfig",
]

SUPPORTED_VERSIONS = ("1.0",)


class InterceptionConfig(BaseModel):
    """Settings applied to every spy a registry creates."""

    thread_safe: bool = False
    log_calls: bool = False

    model_config = {"extra": "forbid"}


class RegistryConfig(BaseModel):
    """SpyRegistry behaviour."""

    retire_on_exit: bool = True

    model_config = {"extra": "forbid"}


class SpyConfig(BaseModel):
    """
    Root configuration model for mojo-spy.

    Validated on load with clear error messages for invalid values.
    """

    version: str = "1.0"
    interception: InterceptionConfig = Field(default_factory=InterceptionConfig)
    registry: RegistryConfig = Field(default_factory=RegistryConfig)

    model_config = {"extra": "forbid"}

    @field_validator("version", mode="before")
    @classmethod
    def validate_version(cls, v: object) -> str:
        """Reject config files written for another schema version."""
        if str(v) not in SUPPORTED_VERSIONS:
            raise ValueError(
                f"Unsupported config version {v!r}; expected one of {SUPPORTED_VERSIONS}"
            )
        return str(v)
