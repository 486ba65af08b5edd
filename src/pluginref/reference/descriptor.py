"""Plugin descriptor for pluginref-sdk.

``PluginDescriptor`` is the immutable, parsed form of one plugin reference
together with its configuration.  Everything a job bootstrap needs is
derived from it: the checkout directory name, the clone target, the sparse
subdirectory, and the hook environment.

Shipped in this module
----------------------
- PluginDescriptor   — frozen dataclass with derived properties
- create_plugin()    — reference string + configuration -> PluginDescriptor
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from pluginref.config.defaults import DEFAULT_SETTINGS
from pluginref.environment.encoder import encode_configuration
from pluginref.environment.environment import Environment
from pluginref.reference.naming import plugin_identifier, plugin_label, plugin_name
from pluginref.reference.parser import parse_reference
from pluginref.reference.repository import repository_subdirectory, repository_url
from pluginref.schema.errors import FormatError
from pluginref.schema.settings import PluginRefSettings
from pluginref.schema.values import ConfigValue, classify_value


@dataclass(frozen=True)
class PluginDescriptor:
    """A parsed plugin reference.

    Parameters
    ----------
    location:
        Host and path of the plugin, without scheme, credentials or version.
        May point at a subdirectory of a repository.
    version:
        The ``#`` fragment of the reference; empty when unpinned.
    scheme:
        Clone scheme; empty means ``settings.default_scheme``.
    authentication:
        User-info embedded in the reference, e.g. ``"git"`` or
        ``"user:token"``.
    configuration:
        Key to value mapping.  Raw JSON values are classified into
        ``ConfigValue`` on construction and stored read-only.  Compared
        for equality but not hashed.
    settings:
        Conventions used for derivation.  Not part of equality.

    Examples
    --------
    >>> plugin = create_plugin("github.com/org/my-buildkite-plugin#v2")
    >>> plugin.name, plugin.label
    ('my', 'github.com/org/my-buildkite-plugin#v2')
    """

    location: str
    version: str = ""
    scheme: str = ""
    authentication: str = ""
    configuration: Mapping[str, ConfigValue] = field(default_factory=dict, hash=False)
    settings: PluginRefSettings = field(
        default=DEFAULT_SETTINGS, compare=False, repr=False
    )

    def __post_init__(self) -> None:
        if "#" in self.location:
            raise FormatError(
                f"Plugin location {self.location!r} must not contain '#'",
                context={"location": self.location},
            )
        classified = {
            str(key): classify_value(value) for key, value in self.configuration.items()
        }
        object.__setattr__(self, "configuration", MappingProxyType(classified))

    # ------------------------------------------------------------------
    # Derived names
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        """Normalised name used in environment variable names."""
        return plugin_name(self.location, self.settings)

    @property
    def label(self) -> str:
        """``location#version`` display and de-duplication key."""
        return plugin_label(self.location, self.version)

    @property
    def identifier(self) -> str:
        """Filesystem-safe checkout directory name derived from the label."""
        return plugin_identifier(self.label)

    # ------------------------------------------------------------------
    # Repository
    # ------------------------------------------------------------------

    def repository(self) -> str:
        """Return the clone target for this plugin's repository.

        Raises
        ------
        IncompleteReferenceError
            If the location has too few segments.
        """
        return repository_url(
            self.location, self.scheme, self.authentication, self.settings
        )

    def repository_subdirectory(self) -> str:
        """Return the plugin's path inside its repository ("" at the root).

        Raises
        ------
        IncompleteReferenceError
            If the location has too few segments.
        """
        return repository_subdirectory(self.location, self.settings)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def configuration_to_list(self) -> list[str]:
        """Return the sorted ``NAME=value`` lines for the configuration."""
        return encode_configuration(self.name, self.configuration, self.settings)

    def configuration_to_environment(self) -> Environment:
        """Return the configuration as an ``Environment`` for hook processes."""
        return Environment.from_list(self.configuration_to_list())

    def raw_configuration(self) -> dict[str, object]:
        """Return the configuration as originally decoded from JSON."""
        return {key: value.raw for key, value in self.configuration.items()}

    def to_dict(self) -> dict[str, object]:
        """Serialise the descriptor and its derived names to a plain dict."""
        return {
            "location": self.location,
            "version": self.version,
            "scheme": self.scheme,
            "authentication": self.authentication,
            "name": self.name,
            "label": self.label,
            "identifier": self.identifier,
            "configuration": self.raw_configuration(),
        }


def create_plugin(
    reference: str,
    configuration: Mapping[str, object] | None = None,
    settings: PluginRefSettings = DEFAULT_SETTINGS,
) -> PluginDescriptor:
    """Parse *reference* and attach *configuration*.

    Raises
    ------
    FormatError
        If *reference* is malformed.

    Examples
    --------
    >>> create_plugin("ssh://git@example.com/ci/lint.git#main").authentication
    'git'
    """
    parsed = parse_reference(reference)
    return PluginDescriptor(
        location=parsed.location,
        version=parsed.version,
        scheme=parsed.scheme,
        authentication=parsed.authentication,
        configuration=configuration or {},
        settings=settings,
    )
