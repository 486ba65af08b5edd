"""Schema package for pluginref-sdk.

Exports the error taxonomy, the configuration value model and the validated
settings model.
"""
from __future__ import annotations

from pluginref.schema.errors import (
    ConfigurationError,
    ErrorSeverity,
    FormatError,
    IncompleteReferenceError,
    PluginRefError,
)
from pluginref.schema.settings import PluginRefSettings
from pluginref.schema.values import ConfigValue, ValueKind, classify_value

__all__ = [
    # Errors
    "ErrorSeverity",
    "PluginRefError",
    "FormatError",
    "IncompleteReferenceError",
    "ConfigurationError",
    # Values
    "ValueKind",
    "ConfigValue",
    "classify_value",
    # Settings
    "PluginRefSettings",
]
