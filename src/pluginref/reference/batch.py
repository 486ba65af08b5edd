"""Batch decoding of pipeline plugin lists for pluginref-sdk.

A pipeline step declares its plugins as a JSON array whose elements are
either a bare reference string or an object mapping references to their
configuration::

    [
      "docker-login#v2.0.1",
      {"docker-compose#v3.0.0": {"run": "app", "config": ["a.yml", "b.yml"]}}
    ]
"""
from __future__ import annotations

import json
import logging

from pluginref.config.defaults import DEFAULT_SETTINGS
from pluginref.reference.descriptor import PluginDescriptor, create_plugin
from pluginref.schema.errors import FormatError
from pluginref.schema.settings import PluginRefSettings
from pluginref.schema.values import json_type_name

logger = logging.getLogger(__name__)


def decode_plugins(
    data: object,
    settings: PluginRefSettings = DEFAULT_SETTINGS,
) -> list[PluginDescriptor]:
    """Convert an already-decoded plugin list into descriptors.

    Descriptors keep array order.  Keys of an object element are processed
    in sorted order.

    Raises
    ------
    FormatError
        If *data* is not a list, an element is neither a string nor an
        object, a configuration is not an object, or a reference is
        malformed.
    """
    if not isinstance(data, list):
        raise FormatError(
            f"Plugin JSON structure was not an array (got {json_type_name(data)})",
            context={"type": json_type_name(data)},
        )

    plugins: list[PluginDescriptor] = []
    for index, element in enumerate(data):
        if isinstance(element, str):
            plugins.append(create_plugin(element, {}, settings))
        elif isinstance(element, dict):
            # non-string keys sort alongside strings and fail in create_plugin
            for reference in sorted(element, key=str):
                config = element[reference]
                if not isinstance(config, dict):
                    raise FormatError(
                        f"Configuration for {reference!r} is not an object",
                        context={
                            "reference": reference,
                            "type": json_type_name(config),
                        },
                    )
                plugins.append(create_plugin(reference, config, settings))
        else:
            raise FormatError(
                f"Unknown type in plugin definition ({json_type_name(element)})",
                context={"index": index, "type": json_type_name(element)},
            )

    logger.debug("Decoded %d plugin(s) from %d element(s)", len(plugins), len(data))
    return plugins


def decode_plugins_json(
    document: str | bytes,
    settings: PluginRefSettings = DEFAULT_SETTINGS,
) -> list[PluginDescriptor]:
    """Parse a JSON plugin list into descriptors.

    Raises
    ------
    FormatError
        If *document* is not valid JSON or has the wrong shape.

    Examples
    --------
    >>> [p.label for p in decode_plugins_json('["a-plugin", {"b-plugin": {"k": 1}}]')]
    ['a-plugin', 'b-plugin']
    """
    try:
        data = json.loads(document)
    except ValueError as exc:
        # JSONDecodeError, UnicodeDecodeError and the int digit limit
        raise FormatError(
            f"Failed to parse plugin JSON: {exc}",
            context={"position": getattr(exc, "pos", None)},
        ) from exc
    return decode_plugins(data, settings)
