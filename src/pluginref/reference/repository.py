"""Repository boundary resolution for pluginref-sdk.

A plugin location may point *inside* a version-control repository, e.g.
``github.com/org/repo/plugins/lint``.  The functions here find where the
repository ends and what remains as the subdirectory.

Rules
-----
1. Locations with fewer than two ``/`` segments are incomplete.
2. On a well-known hosting domain the repository is ``host/org/repo``.
3. Elsewhere the repository ends at the first segment carrying the
   repository suffix (``.git``), or at the end of the path when no segment
   does.
"""
from __future__ import annotations

from pluginref.config.defaults import DEFAULT_SETTINGS
from pluginref.schema.errors import IncompleteReferenceError
from pluginref.schema.settings import PluginRefSettings


def repository_root(
    location: str,
    settings: PluginRefSettings = DEFAULT_SETTINGS,
) -> str:
    """Return the repository part of *location*.

    Raises
    ------
    IncompleteReferenceError
        If *location* is empty or has too few segments.

    Examples
    --------
    >>> repository_root("github.com/org/repo/sub/dir")
    'github.com/org/repo'
    >>> repository_root("host.example/team/my-thing.git/sub")
    'host.example/team/my-thing.git'
    """
    if not location:
        raise IncompleteReferenceError("Missing plugin location")

    segments = location.split("/")
    if len(segments) < 2:
        raise IncompleteReferenceError(
            f"Incomplete plugin path {location!r}",
            context={"location": location},
        )

    host = segments[0]
    if host in settings.well_known_hosts:
        if len(segments) < 3:
            raise IncompleteReferenceError(
                f"Incomplete {host} path {location!r}",
                context={"location": location, "host": host},
            )
        return "/".join(segments[:3])

    root: list[str] = []
    for segment in segments:
        root.append(segment)
        if segment.endswith(settings.repository_suffix):
            break
    return "/".join(root)


def repository_subdirectory(
    location: str,
    settings: PluginRefSettings = DEFAULT_SETTINGS,
) -> str:
    """Return the path of the plugin inside its repository.

    Empty when *location* is the repository root itself.

    Raises
    ------
    IncompleteReferenceError
        If the repository root cannot be resolved.
    """
    root = repository_root(location, settings)
    return location.removeprefix(root).removeprefix("/")


def repository_url(
    location: str,
    scheme: str = "",
    authentication: str = "",
    settings: PluginRefSettings = DEFAULT_SETTINGS,
) -> str:
    """Return the clone target for the repository holding *location*.

    The root is prefixed with ``authentication@`` when present, then with
    ``scheme://`` (``settings.default_scheme`` when *scheme* is empty)
    unless the result is an absolute filesystem path.

    Raises
    ------
    IncompleteReferenceError
        If the repository root cannot be resolved.

    Examples
    --------
    >>> repository_url("github.com/org/repo/sub")
    'https://github.com/org/repo'
    >>> repository_url("/var/lib/plugins/x.git", scheme="file")
    '/var/lib/plugins/x.git'
    """
    url = repository_root(location, settings)
    if authentication:
        url = f"{authentication}@{url}"
    if not url.startswith("/"):
        url = f"{scheme or settings.default_scheme}://{url}"
    return url
