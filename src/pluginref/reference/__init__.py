"""Reference package for pluginref-sdk.

Parses plugin references, resolves their repositories, derives names and
identifiers, and batch-decodes pipeline plugin lists.
"""
from __future__ import annotations

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
