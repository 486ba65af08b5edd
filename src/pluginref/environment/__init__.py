"""Environment package for pluginref-sdk.

Encodes plugin configuration as environment variables and provides the
``Environment`` container handed to plugin hook processes.
"""
from __future__ import annotations

from pluginref.environment.encoder import encode_configuration, environment_variable_name
from pluginref.environment.environment import Environment

__all__ = [
    "Environment",
    "encode_configuration",
    "environment_variable_name",
]
