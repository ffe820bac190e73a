"""Comparator construction and recursive value comparison."""
from __future__ import annotations

import functools
import logging
from collections.abc import Mapping
from time import perf_counter
from typing import Any, Callable, Iterable, Optional, Union

from ..config import SortConfig
from ..utils import split_key_path
from .errors import MissingFieldError, NoKeysConfiguredError, UnsupportedTypeError
from .models import KeySpec, SortDirection, ValueKind, classify_value

Comparator = Callable[[Any, Any], Union[int, float]]

logger = logging.getLogger(__name__)


class ArraySorter:
    """Builds three-way comparators for strings, numbers and mappings.

    Configure the sorter with a direction and any number of (possibly dotted)
    key paths, then call :meth:`build` for a ``cmp``-style function or
    :meth:`key` for a ``key=`` argument to :func:`sorted`.

    Built comparators keep a reference to the sorter, so configuration changes
    made afterwards apply to them as well.
    """

    def __init__(self, config: Union[SortConfig, Mapping[str, Any], None] = None) -> None:
        self._direction = SortDirection.ASC
        self._keys = KeySpec()
        if config is None:
            return
        if isinstance(config, Mapping):
            config = SortConfig.from_mapping(config)
        elif not isinstance(config, SortConfig):
            raise TypeError(f"Expected SortConfig or mapping, got {type(config).__name__}")
        self.set_direction(config.direction)
        for path in config.keys:
            self.add_sort_key(path)

    @property
    def direction(self) -> SortDirection:
        return self._direction

    @property
    def keys(self) -> KeySpec:
        return self._keys

    def set_direction(self, direction: Union[SortDirection, str]) -> "ArraySorter":
        self._direction = SortDirection.parse(direction)
        logger.debug("Sort direction set to %s", self._direction.value)
        return self

    def add_sort_key(self, path: Any) -> "ArraySorter":
        segments = split_key_path(path)
        self._keys.add_path(segments)
        logger.debug("Added sort key %s (depths 0-%d)", ".".join(segments), len(segments) - 1)
        return self

    def build(self) -> Comparator:
        def comparator(a: Any, b: Any) -> Union[int, float]:
            result = self._compare(a, b)
            return 0 if result is None else result

        return comparator

    def key(self) -> Callable[[Any], Any]:
        return functools.cmp_to_key(self.build())

    def _compare(self, a: Any, b: Any, depth: int = 0) -> Optional[Union[int, float]]:
        kind = classify_value(a)
        if kind is ValueKind.UNSUPPORTED or kind is not classify_value(b):
            raise UnsupportedTypeError(a, b)
        if kind is ValueKind.STRING:
            return self._compare_strings(a, b)
        if kind is ValueKind.RECORD:
            return self._compare_records(a, b, depth)
        return self._compare_numbers(a, b)

    def _compare_strings(self, a: str, b: str) -> int:
        a = a.lower()
        b = b.lower()
        if self._direction is SortDirection.DESC:
            a, b = b, a
        if a < b:
            return -1
        if a > b:
            return 1
        return 0

    def _compare_numbers(self, a: Union[int, float], b: Union[int, float]) -> Union[int, float]:
        if self._direction is SortDirection.DESC:
            return b - a
        return a - b

    def _compare_records(
        self, a: Mapping[str, Any], b: Mapping[str, Any], depth: int
    ) -> Optional[Union[int, float]]:
        names = self._keys.at(depth)
        if not names:
            raise NoKeysConfiguredError(depth)
        for name in names:
            in_a = name in a
            in_b = name in b
            if not (in_a and in_b):
                missing_on = "both" if not (in_a or in_b) else ("a" if not in_a else "b")
                raise MissingFieldError(name, depth, missing_on)
        # all keys are compared before a result is chosen
        results = [self._compare(a[name], b[name], depth + 1) for name in names]
        for result in results:
            # an exact tie defers to the next sibling key
            if result is None or result == 0:
                continue
            return result
        return None


def sort_items(
    items: Iterable[Any], config: Union[SortConfig, Mapping[str, Any], None] = None
) -> list[Any]:
    """Return a new list of ``items`` ordered by a sorter built from ``config``."""
    start = perf_counter()
    ordered = sorted(items, key=ArraySorter(config).key())
    duration = perf_counter() - start
    logger.info("Sorted %s items in %.4fs", len(ordered), duration)
    return ordered


__all__ = ["ArraySorter", "Comparator", "sort_items"]
