"""Process environment container for pluginref-sdk.

``Environment`` holds the variables a job bootstrap exports to a plugin hook
process.  It is built from ``NAME=value`` lines such as those produced by
:func:`~pluginref.environment.encoder.encode_configuration`.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from pluginref.schema.errors import FormatError


class Environment:
    """Ordered mapping of environment variable name to value.

    Examples
    --------
    >>> env = Environment.from_list(["B=2", "A=1"])
    >>> env.get("A")
    '1'
    >>> env.to_list()
    ['A=1', 'B=2']
    """

    def __init__(self, variables: Mapping[str, str] | None = None) -> None:
        self._variables: dict[str, str] = dict(variables or {})

    @classmethod
    def from_list(cls, lines: Iterable[str]) -> "Environment":
        """Build an environment from ``NAME=value`` lines.

        The line is split on the first ``=``.  Later duplicates win.

        Raises
        ------
        FormatError
            If a line has no ``=`` or an empty name.
        """
        env = cls()
        for line in lines:
            name, sep, value = line.partition("=")
            if not sep or not name:
                raise FormatError(
                    f"Invalid environment assignment {line!r}",
                    context={"line": line},
                )
            env.set(name, value)
        return env

    def get(self, name: str, default: str | None = None) -> str | None:
        return self._variables.get(name, default)

    def set(self, name: str, value: str) -> None:
        self._variables[name] = value

    def remove(self, name: str) -> str | None:
        """Remove *name* and return its previous value, if any."""
        return self._variables.pop(name, None)

    def exists(self, name: str) -> bool:
        return name in self._variables

    def merge(self, other: "Environment") -> "Environment":
        """Return a new environment where variables from *other* win."""
        merged = self.copy()
        for name, value in other.items():
            merged.set(name, value)
        return merged

    def copy(self) -> "Environment":
        return Environment(self._variables)

    def items(self) -> Iterator[tuple[str, str]]:
        return iter(self._variables.items())

    def to_dict(self) -> dict[str, str]:
        """Return a plain dict, suitable for ``subprocess.run(env=...)``."""
        return dict(self._variables)

    def to_list(self) -> list[str]:
        """Return sorted ``NAME=value`` lines."""
        return sorted(f"{name}={value}" for name, value in self._variables.items())

    def __contains__(self, name: object) -> bool:
        return name in self._variables

    def __iter__(self) -> Iterator[str]:
        return iter(self._variables)

    def __len__(self) -> int:
        return len(self._variables)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Environment):
            return NotImplemented
        return self._variables == other._variables

    def __repr__(self) -> str:
        return f"Environment(variables={len(self._variables)})"
