"""Settings schema for pluginref-sdk.

``PluginRefSettings`` is a Pydantic v2 model holding the tunable constants
used by repository resolution, name derivation and environment encoding.
The defaults reproduce the conventions expected by existing plugin hook
scripts, so most callers never construct one explicitly.

Shipped in this module
----------------------
- PluginRefSettings   — frozen Pydantic v2 model with env loading and overlay
"""
from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator


class PluginRefSettings(BaseModel):
    """Validated settings for plugin reference handling.

    Parameters
    ----------
    well_known_hosts:
        Hosting domains whose repositories are always ``host/org/repo``.
    repository_suffix:
        Segment suffix marking the repository boundary on other hosts.
    name_suffix:
        Suffix stripped from the last location segment when deriving a name.
    default_scheme:
        Scheme used for the public repository string when none was given.
    environment_prefix:
        Leading component of every encoded configuration variable.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    well_known_hosts: tuple[str, ...] = Field(
        default=("github.com", "bitbucket.org", "gitlab.com")
    )
    repository_suffix: str = Field(default=".git", min_length=1)
    name_suffix: str = Field(default="-buildkite-plugin")
    default_scheme: str = Field(default="https", min_length=1)
    environment_prefix: str = Field(default="BUILDKITE_PLUGIN", min_length=1)

    @model_validator(mode="before")
    @classmethod
    def _normalise_hosts(cls, values: Any) -> Any:  # noqa: ANN401
        """Treat an explicit ``None`` host list as empty."""
        if isinstance(values, dict) and "well_known_hosts" in values:
            if values["well_known_hosts"] is None:
                values = {**values, "well_known_hosts": ()}
        return values

    @field_validator("well_known_hosts")
    @classmethod
    def _lowercase_hosts(cls, hosts: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(host.strip().lower() for host in hosts if host.strip())

    @field_validator("default_scheme")
    @classmethod
    def _strip_scheme_separator(cls, scheme: str) -> str:
        return scheme.removesuffix("://").lower()

    # ------------------------------------------------------------------
    # Sources and overlays
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls, prefix: str = "PLUGINREF_") -> "PluginRefSettings":
        """Build settings from environment variables.

        ``PLUGINREF_REPOSITORY_SUFFIX=.hg`` maps to
        ``repository_suffix=".hg"``.  ``well_known_hosts`` is read as a
        comma-separated list.  Unknown keys are ignored.  Only the fields
        found in the environment are recorded in ``model_fields_set``.
        """
        data: dict[str, object] = {}
        for raw_key, raw_value in os.environ.items():
            if not raw_key.startswith(prefix):
                continue
            key = raw_key[len(prefix):].lower()
            if key not in cls.model_fields:
                continue
            if key == "well_known_hosts":
                data[key] = [item.strip() for item in raw_value.split(",") if item.strip()]
            else:
                data[key] = raw_value
        return cls.model_validate(data)

    def overlay(self, overrides: "PluginRefSettings") -> "PluginRefSettings":
        """Return new settings where every field explicitly set on *overrides* wins.

        Fields left at their default on *overrides* keep the value from
        ``self``, even when the two differ.  A set ``well_known_hosts``
        replaces the base list.

        Examples
        --------
        >>> base = PluginRefSettings(repository_suffix=".hg")
        >>> base.overlay(PluginRefSettings(repository_suffix=".git")).repository_suffix
        '.git'
        >>> base.overlay(PluginRefSettings(default_scheme="ssh")).repository_suffix
        '.hg'
        """
        updates = {key: getattr(overrides, key) for key in overrides.model_fields_set}
        return PluginRefSettings.model_validate({**self.model_dump(), **updates})
