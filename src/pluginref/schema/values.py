"""Configuration value model for pluginref-sdk.

Plugin configuration arrives as arbitrary JSON.  ``classify_value`` resolves
each raw value once into a ``ConfigValue`` carrying a closed ``ValueKind``
tag, so that the environment encoder switches on the tag instead of
re-inspecting Python types.

Shipped in this module
----------------------
- ValueKind        — closed set of configuration value variants
- ConfigValue      — tagged, immutable wrapper around one raw JSON value
- classify_value() — raw JSON value -> ConfigValue
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ValueKind(str, Enum):
    """Variants a plugin configuration value can take."""

    STRING = "string"
    NUMBER = "number"
    STRING_LIST = "string_list"
    NUMBER_LIST = "number_list"
    MIXED_LIST = "mixed_list"
    UNSUPPORTED = "unsupported"

    @property
    def is_list(self) -> bool:
        return self in (ValueKind.STRING_LIST, ValueKind.NUMBER_LIST, ValueKind.MIXED_LIST)


def json_type_name(value: object) -> str:
    """Return the JSON type name of a decoded value, for diagnostics."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _is_number(value: object) -> bool:
    # bool is an int subclass but a distinct JSON type
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    try:
        float(value)
    except OverflowError:
        # integers beyond float range have no fixed-point rendering
        return False
    return True


@dataclass(frozen=True)
class ConfigValue:
    """One classified configuration value.

    Parameters
    ----------
    kind:
        The resolved ``ValueKind``.
    raw:
        The original decoded JSON value.
    items:
        For list kinds, the classified elements in their original order.
        Elements that are themselves unsupported keep their position so that
        encoded indices match the source list.
    """

    kind: ValueKind
    raw: object
    items: tuple["ConfigValue", ...] = field(default=())

    @property
    def is_supported(self) -> bool:
        return self.kind is not ValueKind.UNSUPPORTED

    @property
    def json_type(self) -> str:
        return json_type_name(self.raw)


def _classify_scalar(value: object) -> ConfigValue:
    if isinstance(value, str):
        return ConfigValue(ValueKind.STRING, value)
    if _is_number(value):
        return ConfigValue(ValueKind.NUMBER, value)
    return ConfigValue(ValueKind.UNSUPPORTED, value)


def classify_value(value: object) -> ConfigValue:
    """Resolve a raw JSON value into a ``ConfigValue``.

    Examples
    --------
    >>> classify_value("x").kind.value
    'string'
    >>> classify_value([1, 2]).kind.value
    'number_list'
    >>> classify_value({"nested": True}).kind.value
    'unsupported'
    """
    if isinstance(value, ConfigValue):
        return value
    if not isinstance(value, (list, tuple)):
        return _classify_scalar(value)

    items = tuple(_classify_scalar(element) for element in value)
    kinds = {item.kind for item in items if item.is_supported}
    if kinds == {ValueKind.STRING}:
        kind = ValueKind.STRING_LIST
    elif kinds == {ValueKind.NUMBER}:
        kind = ValueKind.NUMBER_LIST
    elif kinds:
        kind = ValueKind.MIXED_LIST
    elif items:
        # every element is unsupported
        kind = ValueKind.MIXED_LIST
    else:
        kind = ValueKind.STRING_LIST
    return ConfigValue(kind, value, items)
