"""Unit tests for pluginref.reference.repository."""
from __future__ import annotations

import pytest

from pluginref.reference.repository import (
    repository_root,
    repository_subdirectory,
    repository_url,
)
from pluginref.schema.errors import ErrorSeverity, IncompleteReferenceError
from pluginref.schema.settings import PluginRefSettings


# ---------------------------------------------------------------------------
# repository_root
# ---------------------------------------------------------------------------


class TestRepositoryRoot:
    @pytest.mark.parametrize("host", ["github.com", "bitbucket.org", "gitlab.com"])
    def test_well_known_host_takes_three_segments(self, host: str) -> None:
        assert repository_root(f"{host}/org/repo/sub/dir") == f"{host}/org/repo"

    def test_well_known_host_at_root(self) -> None:
        assert repository_root("github.com/org/repo") == "github.com/org/repo"

    def test_well_known_host_ignores_git_suffix_rule(self) -> None:
        assert repository_root("github.com/org.git/repo/sub") == "github.com/org.git/repo"

    def test_suffix_marks_boundary_on_other_hosts(self) -> None:
        assert (
            repository_root("host.example/team/my-thing.git/sub")
            == "host.example/team/my-thing.git"
        )

    def test_first_suffixed_segment_wins(self) -> None:
        assert repository_root("host/a.git/b.git/c") == "host/a.git"

    def test_without_suffix_whole_path_is_root(self) -> None:
        assert repository_root("host.example/team/thing/sub") == "host.example/team/thing/sub"

    def test_absolute_path(self) -> None:
        assert repository_root("/var/plugins/x.git/hooks") == "/var/plugins/x.git"

    def test_single_segment_is_incomplete(self) -> None:
        with pytest.raises(IncompleteReferenceError, match="Incomplete plugin path"):
            repository_root("docker-compose")

    def test_empty_location_is_incomplete(self) -> None:
        with pytest.raises(IncompleteReferenceError, match="Missing"):
            repository_root("")

    def test_well_known_host_with_two_segments_is_incomplete(self) -> None:
        with pytest.raises(IncompleteReferenceError, match="github.com") as exc_info:
            repository_root("github.com/org")
        assert exc_info.value.severity is ErrorSeverity.MEDIUM
        assert exc_info.value.context["host"] == "github.com"

    def test_custom_settings(self) -> None:
        settings = PluginRefSettings(
            well_known_hosts=("git.corp.example",), repository_suffix=".repo"
        )
        assert repository_root("git.corp.example/a/b/c", settings) == "git.corp.example/a/b"
        assert repository_root("github.com/x.repo/y", settings) == "github.com/x.repo"


# ---------------------------------------------------------------------------
# repository_subdirectory
# ---------------------------------------------------------------------------


class TestRepositorySubdirectory:
    def test_subdirectory_on_well_known_host(self) -> None:
        assert repository_subdirectory("github.com/org/repo/sub/dir") == "sub/dir"

    def test_subdirectory_after_suffix(self) -> None:
        assert repository_subdirectory("host.example/team/my-thing.git/sub") == "sub"

    def test_root_has_empty_subdirectory(self) -> None:
        assert repository_subdirectory("github.com/org/repo") == ""
        assert repository_subdirectory("host/team/thing") == ""

    def test_incomplete_location_raises(self) -> None:
        with pytest.raises(IncompleteReferenceError):
            repository_subdirectory("plugin")


# ---------------------------------------------------------------------------
# repository_url
# ---------------------------------------------------------------------------


class TestRepositoryUrl:
    def test_default_scheme(self) -> None:
        assert repository_url("github.com/org/repo/sub") == "https://github.com/org/repo"

    def test_explicit_scheme(self) -> None:
        assert repository_url("host/team/x.git", scheme="ssh") == "ssh://host/team/x.git"

    def test_authentication_is_prefixed(self) -> None:
        assert (
            repository_url("github.com/org/repo", scheme="ssh", authentication="git")
            == "ssh://git@github.com/org/repo"
        )

    def test_absolute_path_has_no_scheme(self) -> None:
        assert repository_url("/var/plugins/x", scheme="file") == "/var/plugins/x"

    def test_custom_default_scheme(self) -> None:
        settings = PluginRefSettings(default_scheme="git+ssh")
        assert repository_url("host/org/repo", settings=settings) == "git+ssh://host/org/repo"
