"""pluginref-sdk — CI plugin references: parsing, checkout identifiers, hook environments.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Quick-start
-----------
>>> import pluginref
>>> pluginref.__version__
'0.1.0'

>>> from pluginref import create_plugin
>>> plugin = create_plugin(
...     "github.com/buildkite-plugins/docker-compose-buildkite-plugin#v3.0.0",
...     {"run": "app"},
... )
>>> plugin.name
'docker-compose'
>>> plugin.configuration_to_list()
['BUILDKITE_PLUGIN_DOCKER_COMPOSE_RUN=app']
"""
from __future__ import annotations

__version__: str = "0.1.0"

# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------
from pluginref.schema.errors import (
    ConfigurationError,
    ErrorSeverity,
    FormatError,
    IncompleteReferenceError,
    PluginRefError,
)
from pluginref.schema.settings import PluginRefSettings
from pluginref.schema.values import ConfigValue, ValueKind, classify_value

# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------
from pluginref.config.defaults import DEFAULT_SETTINGS
from pluginref.config.loader import SettingsLoader
from pluginref.config.schema import validate_settings

# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------
from pluginref.environment.encoder import encode_configuration, environment_variable_name
from pluginref.environment.environment import Environment

# ---------------------------------------------------------------------------
# References
# ---------------------------------------------------------------------------
from pluginref.reference.batch import decode_plugins, decode_plugins_json
from pluginref.reference.descriptor import PluginDescriptor, create_plugin
from pluginref.reference.naming import plugin_identifier, plugin_label, plugin_name
from pluginref.reference.parser import ParsedReference, parse_reference
from pluginref.reference.repository import (
    repository_root,
    repository_subdirectory,
    repository_url,
)

__all__ = [
    "__version__",
    # schema — errors
    "ErrorSeverity",
    "PluginRefError",
    "FormatError",
    "IncompleteReferenceError",
    "ConfigurationError",
    # schema — values
    "ValueKind",
    "ConfigValue",
    "classify_value",
    # schema — settings
    "PluginRefSettings",
    # config
    "DEFAULT_SETTINGS",
    "SettingsLoader",
    "validate_settings",
    # environment
    "Environment",
    "encode_configuration",
    "environment_variable_name",
    # references
    "ParsedReference",
    "parse_reference",
    "PluginDescriptor",
    "create_plugin",
    "decode_plugins",
    "decode_plugins_json",
    "plugin_name",
    "plugin_label",
    "plugin_identifier",
    "repository_root",
    "repository_subdirectory",
    "repository_url",
]
