"""Settings schema re-export and validation helpers for pluginref-sdk.

Shipped in this module
----------------------
- PluginRefSettings  — re-export with full Pydantic v2 validation
- validate_settings  — standalone validation helper
"""
from __future__ import annotations

from pydantic import ValidationError

from pluginref.schema.errors import ConfigurationError
from pluginref.schema.settings import PluginRefSettings

__all__ = ["PluginRefSettings", "validate_settings"]


def validate_settings(data: dict[str, object]) -> PluginRefSettings:
    """Validate a raw dict against the ``PluginRefSettings`` schema.

    Raises
    ------
    ConfigurationError
        If the data fails Pydantic validation.  The original
        ``ValidationError`` is attached as the ``__cause__``.

    Examples
    --------
    >>> validate_settings({"repository_suffix": ".hg"}).repository_suffix
    '.hg'
    """
    try:
        return PluginRefSettings.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(
            f"Settings validation failed: {exc}",
            context={"errors": exc.errors()},
        ) from exc
