#!/usr/bin/env python3
"""Example: Quickstart

Parses the plugin list of a pipeline step and prints, for each plugin, the
checkout directory name, the clone target and the hook environment.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install pluginref-sdk
"""
from __future__ import annotations

import json

from pluginref import IncompleteReferenceError, decode_plugins_json

STEP_PLUGINS = json.dumps(
    [
        "docker-login#v2.0.1",
        {
            "https://github.com/buildkite-plugins/docker-compose-buildkite-plugin#v3.0.0": {
                "run": "app",
                "config": ["docker-compose.yml", "docker-compose.ci.yml"],
                "retries": 2,
            }
        },
        {"ssh://git@git.example.com/ci/monorepo.git/plugins/cache#main": {"key": "v1"}},
    ]
)


def main() -> None:
    for plugin in decode_plugins_json(STEP_PLUGINS):
        print(f"== {plugin.label}")
        print(f"   checkout dir : {plugin.identifier}")
        try:
            print(f"   repository   : {plugin.repository()}")
            print(f"   subdirectory : {plugin.repository_subdirectory() or '(root)'}")
        except IncompleteReferenceError as exc:
            print(f"   repository   : unresolved ({exc})")
        for line in plugin.configuration_to_list():
            print(f"   {line}")


if __name__ == "__main__":
    main()
