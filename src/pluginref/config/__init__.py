"""Config package for pluginref-sdk.

Provides settings loading, validation, and the default settings instance.
"""
from __future__ import annotations

from pluginref.config.defaults import DEFAULT_SETTINGS
from pluginref.config.loader import SettingsLoader
from pluginref.config.schema import PluginRefSettings, validate_settings

__all__ = [
    "PluginRefSettings",
    "validate_settings",
    "SettingsLoader",
    "DEFAULT_SETTINGS",
]
