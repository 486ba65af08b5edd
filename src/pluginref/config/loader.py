"""Settings loader for pluginref-sdk.

``SettingsLoader`` resolves settings from YAML files, JSON files,
environment variables, or auto-discovers the first available file by
searching well-known names.

Shipped in this module
----------------------
- SettingsLoader   — multi-source settings loader with auto-discovery
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Callable, TextIO

import yaml
from pydantic import ValidationError

from pluginref.config.defaults import DEFAULT_SETTINGS
from pluginref.config.schema import validate_settings
from pluginref.schema.errors import ConfigurationError
from pluginref.schema.settings import PluginRefSettings

logger = logging.getLogger(__name__)

# Ordered list of paths searched by load_auto()
_AUTO_SEARCH_PATHS: tuple[str, ...] = (
    "pluginref.yaml",
    "pluginref.yml",
    "pluginref.json",
    ".pluginref.yaml",
    ".pluginref.yml",
    ".pluginref.json",
)


class SettingsLoader:
    """Loads ``PluginRefSettings`` from multiple sources.

    All loader methods return a validated ``PluginRefSettings`` instance.
    Every failure to read, decode, parse or validate a source surfaces as
    ``ConfigurationError``.

    Examples
    --------
    >>> loader = SettingsLoader()
    >>> loader.load_env(prefix="NO_SUCH_PREFIX_").repository_suffix
    '.git'
    """

    def _read_mapping(
        self,
        path: Path,
        format_name: str,
        parse: Callable[[TextIO], object],
        parse_errors: tuple[type[Exception], ...],
    ) -> dict[str, object]:
        if not path.exists():
            raise ConfigurationError(
                f"{format_name} settings file not found: {path}",
                context={"path": str(path)},
            )
        try:
            with path.open(encoding="utf-8") as fh:
                raw = parse(fh)
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigurationError(
                f"Failed to read {format_name} settings at {path}: {exc}",
                context={"path": str(path)},
            ) from exc
        except parse_errors as exc:
            raise ConfigurationError(
                f"Failed to parse {format_name} settings at {path}: {exc}",
                context={"path": str(path)},
            ) from exc

        if not isinstance(raw, dict):
            if raw is not None:
                logger.warning(
                    "%s settings at %s are not a mapping; ignoring contents.",
                    format_name,
                    path,
                )
            return {}
        logger.debug("Loaded %s settings from %s", format_name, path)
        return dict(raw)

    def load_yaml(self, path: str | Path) -> PluginRefSettings:
        """Load settings from a YAML file.

        Raises
        ------
        ConfigurationError
            If the file is missing, unreadable, not UTF-8, not valid YAML,
            or fails validation.
        """
        return validate_settings(
            self._read_mapping(Path(path), "YAML", yaml.safe_load, (yaml.YAMLError,))
        )

    def load_json(self, path: str | Path) -> PluginRefSettings:
        """Load settings from a JSON file.

        Raises
        ------
        ConfigurationError
            If the file is missing, unreadable, not UTF-8, not valid JSON,
            or fails validation.
        """
        # ValueError also covers the integer digit limit
        return validate_settings(
            self._read_mapping(Path(path), "JSON", json.load, (ValueError,))
        )

    def load_file(self, path: str | Path) -> PluginRefSettings:
        """Load settings from *path*, choosing the parser by file suffix."""
        resolved = Path(path)
        if resolved.suffix == ".json":
            return self.load_json(resolved)
        return self.load_yaml(resolved)

    def load_env(self, prefix: str = "PLUGINREF_") -> PluginRefSettings:
        """Build settings from environment variables.

        See :meth:`~pluginref.schema.settings.PluginRefSettings.from_env` for
        variable mapping rules.  The result records which fields the
        environment set, for use with ``PluginRefSettings.overlay``.

        Raises
        ------
        ConfigurationError
            If an environment value fails validation.
        """
        try:
            settings = PluginRefSettings.from_env(prefix=prefix)
        except ValidationError as exc:
            raise ConfigurationError(
                f"Invalid settings in environment (prefix {prefix!r}): {exc}",
                context={"prefix": prefix, "errors": exc.errors()},
            ) from exc
        logger.debug(
            "Loaded settings from environment with prefix %r: %s",
            prefix,
            sorted(settings.model_fields_set),
        )
        return settings

    def load_auto(
        self,
        search_dir: str | Path | None = None,
        env_prefix: str = "PLUGINREF_",
    ) -> PluginRefSettings:
        """Auto-discover and load settings.

        Discovery order:

        1. Search *search_dir* (defaults to ``cwd``) for ``pluginref.yaml``,
           ``pluginref.yml``, ``pluginref.json``, and hidden variants.
        2. Fall back to ``DEFAULT_SETTINGS`` if no file loads.
        3. Overlay every field set by an *env_prefix* variable on top,
           whatever its value.
        """
        base_dir = Path(search_dir) if search_dir is not None else Path.cwd()
        base_settings: PluginRefSettings | None = None

        for candidate_name in _AUTO_SEARCH_PATHS:
            candidate = base_dir / candidate_name
            if not candidate.exists():
                continue
            try:
                base_settings = self.load_file(candidate)
                logger.info("Auto-loaded pluginref settings from %s", candidate)
                break
            except ConfigurationError:
                logger.warning("Could not load settings from %s; trying next.", candidate)

        if base_settings is None:
            base_settings = DEFAULT_SETTINGS
            logger.debug("No settings file found; using DEFAULT_SETTINGS.")

        env_settings = self.load_env(prefix=env_prefix)
        if env_settings.model_fields_set:
            base_settings = base_settings.overlay(env_settings)
            logger.debug(
                "Applied environment overlay for %s.", sorted(env_settings.model_fields_set)
            )

        return base_settings
