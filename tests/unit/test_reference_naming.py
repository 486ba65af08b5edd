"""Unit tests for pluginref.reference.naming."""
from __future__ import annotations

import re

import pytest

from pluginref.reference.naming import plugin_identifier, plugin_label, plugin_name
from pluginref.schema.settings import PluginRefSettings

_IDENTIFIER_SHAPE = re.compile(r"^(?:[a-zA-Z0-9]+(?:-[a-zA-Z0-9]+)*)?$")


# ---------------------------------------------------------------------------
# plugin_name
# ---------------------------------------------------------------------------


class TestPluginName:
    def test_strips_plugin_repository_suffix(self) -> None:
        location = "github.com/buildkite-plugins/docker-compose-buildkite-plugin"
        assert plugin_name(location) == "docker-compose"

    def test_plain_name(self) -> None:
        assert plugin_name("github.com/org/docker-login") == "docker-login"

    def test_lowercases(self) -> None:
        assert plugin_name("host/org/MyPlugin") == "myplugin"

    def test_whitespace_collapses_to_single_dash(self) -> None:
        assert plugin_name("host/org/my  \t plugin") == "my-plugin"

    def test_non_alphanumerics_become_dashes(self) -> None:
        assert plugin_name("host/org/my_plugin.v2") == "my-plugin-v2"

    def test_git_suffix_is_kept(self) -> None:
        assert plugin_name("host/org/lint.git") == "lint-git"

    def test_suffix_only_stripped_at_end(self) -> None:
        assert plugin_name("host/org/a-buildkite-plugin-b") == "a-buildkite-plugin-b"

    def test_suffix_stripped_before_git_segment(self) -> None:
        location = "github.com/org/docker-compose-buildkite-plugin.git"
        assert plugin_name(location) == "docker-compose-git"

    def test_suffix_before_custom_repository_suffix(self) -> None:
        settings = PluginRefSettings(repository_suffix=".hg")
        assert plugin_name("host/org/cache-buildkite-plugin.hg", settings) == "cache-hg"
        assert plugin_name("host/org/cache-buildkite-plugin.git", settings) == (
            "cache-buildkite-plugin-git"
        )

    def test_single_segment(self) -> None:
        assert plugin_name("docker-compose") == "docker-compose"

    def test_empty_location(self) -> None:
        assert plugin_name("") == ""

    def test_custom_name_suffix(self) -> None:
        settings = PluginRefSettings(name_suffix="-ci-plugin")
        assert plugin_name("host/org/cache-ci-plugin", settings) == "cache"


# ---------------------------------------------------------------------------
# plugin_label
# ---------------------------------------------------------------------------


class TestPluginLabel:
    def test_with_version(self) -> None:
        assert plugin_label("github.com/org/repo", "v1") == "github.com/org/repo#v1"

    def test_without_version(self) -> None:
        assert plugin_label("github.com/org/repo") == "github.com/org/repo"
        assert plugin_label("github.com/org/repo", "") == "github.com/org/repo"


# ---------------------------------------------------------------------------
# plugin_identifier
# ---------------------------------------------------------------------------


class TestPluginIdentifier:
    def test_replaces_separators(self) -> None:
        assert (
            plugin_identifier("github.com/buildkite-plugins/docker-compose#v1.0.0")
            == "github-com-buildkite-plugins-docker-compose-v1-0-0"
        )

    def test_collapses_dash_runs(self) -> None:
        assert plugin_identifier("host//org--repo") == "host-org-repo"

    def test_trims_leading_and_trailing_dashes(self) -> None:
        assert plugin_identifier("/var/plugins/x/") == "var-plugins-x"

    def test_preserves_case(self) -> None:
        assert plugin_identifier("Host/Org#V1") == "Host-Org-V1"

    def test_deterministic(self) -> None:
        label = "git.example.com:2222/ci/lint.git#main"
        assert plugin_identifier(label) == plugin_identifier(label)

    @pytest.mark.parametrize(
        "label",
        [
            "github.com/org/repo#v1.2.3",
            "/absolute/path/to/plugin",
            "-weird--label-#-",
            "ünïcödé/plugin",
            "###",
            "",
        ],
    )
    def test_shape(self, label: str) -> None:
        assert _IDENTIFIER_SHAPE.match(plugin_identifier(label))
