"""Default settings constants for pluginref-sdk.

``DEFAULT_SETTINGS`` is the settings instance used by every operation that
is not handed an explicit ``settings`` argument.  It is also the starting
point for ``SettingsLoader.load_auto()`` before file or environment
overrides are applied.
"""
from __future__ import annotations

from pluginref.schema.settings import PluginRefSettings

DEFAULT_SETTINGS: PluginRefSettings = PluginRefSettings(
    well_known_hosts=("github.com", "bitbucket.org", "gitlab.com"),
    repository_suffix=".git",
    name_suffix="-buildkite-plugin",
    default_scheme="https",
    environment_prefix="BUILDKITE_PLUGIN",
)
"""Baseline ``PluginRefSettings`` matching the plugin hook conventions."""
