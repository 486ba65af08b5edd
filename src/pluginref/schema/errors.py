"""Error taxonomy for pluginref-sdk.

All exceptions raised by pluginref derive from ``PluginRefError`` so that
callers can catch the entire family with a single ``except PluginRefError``
clause while still being able to distinguish individual failure modes.

Shipped in this module
----------------------
- ErrorSeverity             — ordered severity enum
- PluginRefError            — root exception with severity and context payload
- Domain subclasses         — FormatError, IncompleteReferenceError,
                              ConfigurationError

Unsupported configuration values are *not* errors: they are logged and
skipped by the encoder.
"""
from __future__ import annotations

from enum import Enum


class ErrorSeverity(str, Enum):
    """Ordered severity levels for ``PluginRefError`` instances.

    Severity is advisory metadata only.  It lets a build step decide whether
    a failure should abort the job or merely be reported.
    """

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    INFO = "info"


class PluginRefError(Exception):
    """Root exception for all pluginref failures.

    Parameters
    ----------
    message:
        Human-readable description of what went wrong.
    severity:
        Advisory ``ErrorSeverity`` level.  Defaults to ``HIGH``.
    context:
        Optional dict of structured metadata (the offending reference,
        location, JSON type, etc.).

    Examples
    --------
    >>> try:
    ...     raise PluginRefError("something broke", ErrorSeverity.MEDIUM)
    ... except PluginRefError as exc:
    ...     print(exc.severity.value)
    medium
    """

    def __init__(
        self,
        message: str,
        severity: ErrorSeverity = ErrorSeverity.HIGH,
        context: dict[str, object] | None = None,
    ) -> None:
        super().__init__(message)
        self.severity: ErrorSeverity = severity
        self.context: dict[str, object] = context or {}

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}("
            f"message={str(self)!r}, "
            f"severity={self.severity.value!r})"
        )


class FormatError(PluginRefError):
    """Raised when a plugin reference or plugin JSON document is malformed.

    Examples: unparseable reference, ambiguous ``#`` version marker, a
    top-level JSON value that is not an array.
    """


class IncompleteReferenceError(PluginRefError):
    """Raised when a location has too few path segments to find its repository.

    Only repository resolution fails; name, label and identifier are still
    derivable from the same descriptor.
    """

    def __init__(
        self,
        message: str,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        context: dict[str, object] | None = None,
    ) -> None:
        super().__init__(message, severity, context)


class ConfigurationError(PluginRefError):
    """Raised when settings loading or validation fails."""
