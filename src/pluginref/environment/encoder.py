"""Plugin configuration to environment variable encoding for pluginref-sdk.

Plugin hook scripts read their configuration from variables named::

    BUILDKITE_PLUGIN_<NAME>_<KEY>[_<INDEX>]=<value>

Variable names
--------------
1. join prefix, plugin name and key (key whitespace collapsed) with ``_``
2. upper-case
3. replace each ``-`` or whitespace run with ``_``
4. collapse ``_`` runs

Values
------
- strings are written verbatim
- numbers use fixed six-digit fractional notation (``3`` -> ``3.000000``)
- lists produce one variable per element, suffixed with the element index
- anything else is logged and skipped

The returned list is always sorted so the same configuration yields the same
output regardless of mapping order.
"""
from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from pluginref.config.defaults import DEFAULT_SETTINGS
from pluginref.schema.settings import PluginRefSettings
from pluginref.schema.values import ConfigValue, ValueKind, classify_value

logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"\s+")
_SEPARATOR = re.compile(r"-|\s+")
_UNDERSCORE_RUN = re.compile(r"_+")


def environment_variable_name(
    plugin_name: str,
    key: str,
    settings: PluginRefSettings = DEFAULT_SETTINGS,
) -> str:
    """Return the environment variable name for one configuration key.

    Examples
    --------
    >>> environment_variable_name("docker-compose", "run")
    'BUILDKITE_PLUGIN_DOCKER_COMPOSE_RUN'
    >>> environment_variable_name("example", "image  name")
    'BUILDKITE_PLUGIN_EXAMPLE_IMAGE_NAME'
    """
    key = _WHITESPACE_RUN.sub(" ", key)
    name = f"{settings.environment_prefix}_{plugin_name}_{key}"
    name = name.upper()
    name = _SEPARATOR.sub("_", name)
    return _UNDERSCORE_RUN.sub("_", name)


def format_scalar(value: ConfigValue) -> str:
    """Render a STRING or NUMBER value as an environment variable value."""
    if value.kind is ValueKind.STRING:
        return str(value.raw)
    if value.kind is ValueKind.NUMBER:
        return f"{float(value.raw):f}"  # type: ignore[arg-type]
    raise ValueError(f"Not a scalar configuration value: {value.kind.value}")


def encode_configuration(
    plugin_name: str,
    configuration: Mapping[str, object],
    settings: PluginRefSettings = DEFAULT_SETTINGS,
) -> list[str]:
    """Encode *configuration* as sorted ``NAME=value`` assignments.

    Parameters
    ----------
    plugin_name:
        The derived plugin name (see
        :func:`~pluginref.reference.naming.plugin_name`).
    configuration:
        Mapping of key to raw JSON value or pre-classified ``ConfigValue``.
    settings:
        Supplies the variable-name prefix.

    Returns
    -------
    list[str]
        Lexicographically sorted assignments.  Unsupported values are
        omitted and reported through the module logger.

    Examples
    --------
    >>> encode_configuration("example", {"name": "value", "flags": ["a", "b"]})
    ['BUILDKITE_PLUGIN_EXAMPLE_FLAGS_0=a', 'BUILDKITE_PLUGIN_EXAMPLE_FLAGS_1=b', 'BUILDKITE_PLUGIN_EXAMPLE_NAME=value']
    """
    assignments: list[str] = []

    for key, raw_value in configuration.items():
        name = environment_variable_name(plugin_name, key, settings)
        value = classify_value(raw_value)

        if value.kind in (ValueKind.STRING, ValueKind.NUMBER):
            assignments.append(f"{name}={format_scalar(value)}")
        elif value.kind.is_list:
            for index, item in enumerate(value.items):
                if not item.is_supported:
                    logger.warning(
                        "Skipping unsupported %s at index %d of %r for plugin %r",
                        item.json_type,
                        index,
                        key,
                        plugin_name,
                    )
                    continue
                assignments.append(f"{name}_{index}={format_scalar(item)}")
        else:
            logger.warning(
                "Skipping unsupported %s value for %r of plugin %r",
                value.json_type,
                key,
                plugin_name,
            )

    assignments.sort()
    return assignments
