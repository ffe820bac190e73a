"""Core types describing sort configuration and compared values."""
from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Iterator, Union


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: Union["SortDirection", str]) -> "SortDirection":
        """Normalise ``value`` to a direction, accepting long and short spellings."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized in {"asc", "ascending"}:
                return cls.ASC
            if normalized in {"desc", "descending"}:
                return cls.DESC
        raise ValueError(f"Unknown sort direction: {value!r}")


class ValueKind(Enum):
    STRING = "string"
    NUMBER = "number"
    RECORD = "record"
    UNSUPPORTED = "unsupported"


def classify_value(value: Any) -> ValueKind:
    """Return the kind of ``value`` as seen by the comparator."""
    if isinstance(value, str):
        return ValueKind.STRING
    # bool subclasses int but is not a sortable number
    if isinstance(value, bool):
        return ValueKind.UNSUPPORTED
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, Mapping):
        return ValueKind.RECORD
    return ValueKind.UNSUPPORTED


class KeySpec:
    """Field names to compare, grouped by nesting depth.

    Depth 0 holds top-level field names; a dotted path contributes one name per
    depth. Names within a depth keep first-insertion order, which is the order
    used to break ties between sibling keys.
    """

    __slots__ = ("_levels",)

    def __init__(self) -> None:
        self._levels: dict[int, dict[str, None]] = {}

    def add_path(self, segments: tuple[str, ...]) -> None:
        for depth, name in enumerate(segments):
            self._levels.setdefault(depth, {})[name] = None

    def at(self, depth: int) -> tuple[str, ...]:
        level = self._levels.get(depth)
        if not level:
            return tuple()
        return tuple(level)

    def as_dict(self) -> dict[int, tuple[str, ...]]:
        return {depth: tuple(names) for depth, names in self._levels.items()}

    def __iter__(self) -> Iterator[tuple[int, tuple[str, ...]]]:
        return iter(self.as_dict().items())

    def __len__(self) -> int:
        return len(self._levels)

    def __bool__(self) -> bool:
        return bool(self._levels)

    def __repr__(self) -> str:
        return f"KeySpec({self.as_dict()!r})"


__all__ = ["KeySpec", "SortDirection", "ValueKind", "classify_value"]
