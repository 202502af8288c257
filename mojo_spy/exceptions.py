"""
Spy Custom Exceptions
~~~~~~~~~~~~~~~~~~~~~

All custom exception classes for mojo-spy, organized by domain.

**Structured Error Messages**

Construction failures provide two structured fields:
- ``what_happened``: Clear plain-English description
- ``how_to_fix``: Concrete, actionable steps
"""

__all__ = [
    # Base
    "SpyError",
    # Installation
    "InstallationError",
    "NotCallableError",
    "MemberNotWritableError",
    # Control
    "InvalidForwardModeError",
    # Config
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigValidationError",
]


# ── Formatting Helper ────────────────────────────────────────────────────────

_SEPARATOR = "─" * 52


def _format_structured_error(
    title: str,
    what_happened: str,
    how_to_fix: str,
) -> str:
    """Build a rich, structured error message."""
    lines = [
        f"  {title}",
        f"  {_SEPARATOR}",
        "  What happened:",
        *[f"    {line}" for line in what_happened.strip().splitlines()],
        "",
        "  How to fix:",
        *[f"    {line}" for line in how_to_fix.strip().splitlines()],
    ]
    return "\n".join(lines)


# ── Base Exception ───────────────────────────────────────────────────────────


class SpyError(Exception):
    """Base exception for all mojo-spy errors."""

    def __init__(self, message: str = "", details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message)


# ── Installation Exceptions ──────────────────────────────────────────────────


class InstallationError(SpyError):
    """
    Base exception for failures while installing a spy.

    Raised before the target is touched; a failed installation never
    leaves partial state behind.

    Structured fields:
    - ``what_happened``: description of the failed installation
    - ``how_to_fix``: actionable remediation steps
    """

    def __init__(
        self,
        message: str = "Cannot install spy",
        target: object = None,
        member_name: object = "",
        details: dict | None = None,
        what_happened: str = "",
        how_to_fix: str = "",
    ) -> None:
        self.target = target
        self.member_name = member_name
        self.what_happened = what_happened or message
        self.how_to_fix = how_to_fix
        super().__init__(message, details)

    def __str__(self) -> str:
        return _format_structured_error(
            title=f"{type(self).__name__}: {self.args[0]}",
            what_happened=self.what_happened,
            how_to_fix=self.how_to_fix or "(none)",
        )


class NotCallableError(InstallationError):
    """Raised when the named member is missing or is not callable."""

    def __init__(
        self,
        message: str = "Cannot spy on a non-callable",
        target: object = None,
        member_name: object = "",
        value: object = None,
        details: dict | None = None,
        what_happened: str = "",
        how_to_fix: str = "",
    ) -> None:
        self.value = value
        owner = type(target).__name__
        what_happened = what_happened or (
            f"Member {member_name!r} of {owner} is "
            f"{type(value).__name__}, which is not callable."
        )
        how_to_fix = how_to_fix or (
            f"1. Check the spelling of {member_name!r}\n"
            f"2. Spy on the object that actually defines the method\n"
            f"3. For plain attributes, replace the value directly instead of spying"
        )
        super().__init__(
            message,
            target=target,
            member_name=member_name,
            details=details,
            what_happened=what_happened,
            how_to_fix=how_to_fix,
        )


class MemberNotWritableError(InstallationError):
    """Raised when the target refuses to have the member replaced."""

    def __init__(
        self,
        message: str = "Cannot replace member",
        target: object = None,
        member_name: object = "",
        details: dict | None = None,
        what_happened: str = "",
        how_to_fix: str = "",
    ) -> None:
        owner = type(target).__name__
        what_happened = what_happened or (
            f"{owner} does not allow {member_name!r} to be reassigned."
        )
        how_to_fix = how_to_fix or (
            f"1. Spy on the class instead of the instance:\n"
            f"   Spy({owner}, {member_name!r})\n"
            f"2. Pass a custom MemberSlot for objects with their own storage"
        )
        super().__init__(
            message,
            target=target,
            member_name=member_name,
            details=details,
            what_happened=what_happened,
            how_to_fix=how_to_fix,
        )


# ── Control Exceptions ───────────────────────────────────────────────────────


class InvalidForwardModeError(SpyError):
    """Raised when a forward mode is neither a ForwardMode nor a callable."""


# ── Config Exceptions ────────────────────────────────────────────────────────


class ConfigError(SpyError):
    """Base exception for configuration-related errors."""


class ConfigFileNotFoundError(ConfigError):
    """Raised when a configuration file cannot be found at the specified path."""


class ConfigValidationError(ConfigError):
    """Raised when configuration values fail validation."""
