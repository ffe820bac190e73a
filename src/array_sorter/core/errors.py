"""Errors raised while comparing values."""
from __future__ import annotations

from typing import Any


class ComparatorError(Exception):
    """Base class for failures raised from inside a comparison."""


class NoKeysConfiguredError(ComparatorError, LookupError):
    def __init__(self, depth: int) -> None:
        self.depth = depth
        super().__init__(
            f"No sort keys configured at depth {depth}; add a sort key before sorting records"
        )


class MissingFieldError(ComparatorError, LookupError):
    def __init__(self, field: str, depth: int, missing_on: str) -> None:
        self.field = field
        self.depth = depth
        self.missing_on = missing_on
        super().__init__(
            f"Sort key {field!r} at depth {depth} is missing on record {missing_on}"
        )


class UnsupportedTypeError(ComparatorError, TypeError):
    def __init__(self, left: Any, right: Any) -> None:
        self.left = left
        self.right = right
        super().__init__(
            "Cannot compare "
            f"{type(left).__name__} with {type(right).__name__}; "
            "only two strings, two numbers or two mappings are supported"
        )


__all__ = [
    "ComparatorError",
    "MissingFieldError",
    "NoKeysConfiguredError",
    "UnsupportedTypeError",
]
