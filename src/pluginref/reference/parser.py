"""Plugin reference parser for pluginref-sdk.

A plugin reference is written in a pipeline definition as::

    [scheme://][user-info@]host-and-path[#version]

``parse_reference`` splits such a string into its parts without touching the
network or the filesystem.

Shipped in this module
----------------------
- ParsedReference   — the four string parts of a reference
- parse_reference() — raw reference string -> ParsedReference
"""
from __future__ import annotations

import logging
import re
from typing import NamedTuple
from urllib.parse import unquote, urlsplit

from pluginref.schema.errors import FormatError

logger = logging.getLogger(__name__)

_CONTROL_CHARACTER = re.compile(r"[\x00-\x1f\x7f]")
_BAD_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class ParsedReference(NamedTuple):
    """The parts of a plugin reference string."""

    scheme: str
    location: str
    version: str
    authentication: str


def _format_error(reference: str, reason: str) -> FormatError:
    return FormatError(
        f"Invalid plugin reference {reference!r}: {reason}",
        context={"reference": reference},
    )


def parse_reference(reference: str) -> ParsedReference:
    """Parse a raw plugin reference string.

    Parameters
    ----------
    reference:
        The reference as written in the pipeline, e.g.
        ``"ssh://git@github.com/org/my-buildkite-plugin.git#v1.2.0"``.

    Returns
    -------
    ParsedReference
        ``location`` is host (with port) plus path, with the fragment
        removed.  ``version`` is the fragment.  ``scheme`` and
        ``authentication`` are empty when absent.

    Raises
    ------
    FormatError
        If the string is not a URI, or if it contains more than one ``#``.

    Examples
    --------
    >>> parse_reference("https://github.com/org/repo#v1")
    ParsedReference(scheme='https', location='github.com/org/repo', version='v1', authentication='')
    >>> parse_reference("org/repo").location
    'org/repo'
    """
    if not isinstance(reference, str):
        raise FormatError(
            f"Plugin reference must be a string, got {type(reference).__name__}",
            context={"reference": repr(reference)},
        )
    if _CONTROL_CHARACTER.search(reference):
        raise _format_error(reference, "contains a control character")
    if _BAD_PERCENT_ESCAPE.search(reference):
        raise _format_error(reference, "contains an invalid percent escape")

    try:
        parts = urlsplit(reference)
        # accessing .port validates it
        parts.port  # noqa: B018
    except ValueError as exc:
        raise _format_error(reference, str(exc)) from exc

    if not parts.scheme and ":" in parts.path.split("/", 1)[0]:
        raise _format_error(reference, "first path segment cannot contain a colon")

    version = unquote(parts.fragment)
    if "#" in version:
        raise FormatError(
            f"Too many #'s in {reference!r}",
            context={"reference": reference},
        )

    userinfo, _, hostport = parts.netloc.rpartition("@")
    parsed = ParsedReference(
        scheme=parts.scheme,
        location=hostport + unquote(parts.path),
        version=version,
        authentication=userinfo,
    )
    logger.debug("Parsed plugin reference %r -> %r", reference, parsed)
    return parsed
