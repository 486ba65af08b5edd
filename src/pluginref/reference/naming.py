"""Name, label and identifier derivation for pluginref-sdk.

Each derived string is produced by an explicit, ordered list of
normalisation steps so the result never depends on replacement order.

Name
    Last location segment, used as a fragment of environment variable names.

    1. take the text after the last ``/``
    2. lower-case
    3. collapse whitespace runs to one space
    4. replace each character outside ``[a-z0-9]`` with ``-``
    5. strip the plugin-repository suffix when it ends the name or directly
       precedes the normalised repository suffix (``-buildkite-plugin-git``
       becomes ``-git``)

Label
    ``location#version``, or ``location`` alone when unversioned.  Two
    references denote the same plugin instance iff their labels are equal.

Identifier
    Filesystem-safe form of the label, used as the checkout directory name.

    1. replace each character outside ``[a-zA-Z0-9]`` with ``-``
    2. collapse ``-`` runs
    3. trim ``-`` from both ends
"""
from __future__ import annotations

import re

from pluginref.config.defaults import DEFAULT_SETTINGS
from pluginref.schema.settings import PluginRefSettings

_WHITESPACE_RUN = re.compile(r"\s+")
_NON_NAME_CHARACTER = re.compile(r"[^a-z0-9]")
_NON_IDENTIFIER_CHARACTER = re.compile(r"[^a-zA-Z0-9]")
_DASH_RUN = re.compile(r"-+")


def plugin_name(location: str, settings: PluginRefSettings = DEFAULT_SETTINGS) -> str:
    """Return the normalised plugin name for *location*.

    Examples
    --------
    >>> plugin_name("github.com/buildkite-plugins/docker-compose-buildkite-plugin")
    'docker-compose'
    >>> plugin_name("example.com/My Plugin")
    'my-plugin'
    >>> plugin_name("github.com/org/docker-compose-buildkite-plugin.git")
    'docker-compose-git'
    """
    if not location:
        return ""
    name = location.rsplit("/", 1)[-1]
    name = name.lower()
    name = _WHITESPACE_RUN.sub(" ", name)
    name = _NON_NAME_CHARACTER.sub("-", name)
    return _strip_name_suffix(name, settings)


def _strip_name_suffix(name: str, settings: PluginRefSettings) -> str:
    suffix = settings.name_suffix
    if not suffix:
        return name
    if name.endswith(suffix):
        return name[: -len(suffix)]
    repository_tail = _NON_NAME_CHARACTER.sub("-", settings.repository_suffix.lower())
    if name.endswith(suffix + repository_tail):
        return name[: -len(suffix + repository_tail)] + repository_tail
    return name


def plugin_label(location: str, version: str = "") -> str:
    """Return ``location#version``, or *location* when *version* is empty."""
    if version:
        return f"{location}#{version}"
    return location


def plugin_identifier(label: str) -> str:
    """Return a filesystem-safe identifier for *label*.

    Equal labels always give equal identifiers, so a plugin checked out once
    is reused by every step referencing the same location and version.

    Examples
    --------
    >>> plugin_identifier("github.com/org/my-plugin#v1.0.0")
    'github-com-org-my-plugin-v1-0-0'
    """
    identifier = _NON_IDENTIFIER_CHARACTER.sub("-", label)
    identifier = _DASH_RUN.sub("-", identifier)
    return identifier.strip("-")
