"""Unit tests for pluginref.environment.environment."""
from __future__ import annotations

import pytest

from pluginref.environment.environment import Environment
from pluginref.schema.errors import FormatError


class TestEnvironmentFromList:
    def test_splits_on_first_equals(self) -> None:
        env = Environment.from_list(["A=B=C"])
        assert env.get("A") == "B=C"

    def test_empty_value(self) -> None:
        assert Environment.from_list(["A="]).get("A") == ""

    def test_later_duplicates_win(self) -> None:
        assert Environment.from_list(["A=1", "A=2"]).get("A") == "2"

    @pytest.mark.parametrize("line", ["NO_EQUALS", "=value"])
    def test_invalid_lines(self, line: str) -> None:
        with pytest.raises(FormatError):
            Environment.from_list([line])


class TestEnvironmentOperations:
    def test_get_default(self) -> None:
        assert Environment().get("MISSING", "fallback") == "fallback"
        assert Environment().get("MISSING") is None

    def test_set_and_exists(self) -> None:
        env = Environment()
        env.set("A", "1")
        assert env.exists("A")
        assert "A" in env

    def test_remove(self) -> None:
        env = Environment({"A": "1"})
        assert env.remove("A") == "1"
        assert env.remove("A") is None
        assert len(env) == 0

    def test_merge_returns_new_environment(self) -> None:
        base = Environment({"A": "1", "B": "1"})
        merged = base.merge(Environment({"B": "2", "C": "3"}))
        assert merged.to_dict() == {"A": "1", "B": "2", "C": "3"}
        assert base.get("B") == "1"

    def test_copy_is_independent(self) -> None:
        env = Environment({"A": "1"})
        clone = env.copy()
        clone.set("A", "2")
        assert env.get("A") == "1"
        assert env != clone

    def test_to_list_is_sorted(self) -> None:
        env = Environment({"Z": "1", "A": "2"})
        assert env.to_list() == ["A=2", "Z=1"]

    def test_iteration_yields_names(self) -> None:
        assert sorted(Environment({"B": "1", "A": "2"})) == ["A", "B"]

    def test_equality(self) -> None:
        assert Environment.from_list(["A=1"]) == Environment({"A": "1"})
        assert Environment() != {"A": "1"}
