"""Comparator building blocks with no I/O of their own."""
from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "ArraySorter",
    "Comparator",
    "sort_items",
    "KeySpec",
    "SortDirection",
    "ValueKind",
    "classify_value",
    "ComparatorError",
    "MissingFieldError",
    "NoKeysConfiguredError",
    "UnsupportedTypeError",
]


def __getattr__(name: str) -> Any:  # pragma: no cover - import side effects
    if name in {"ArraySorter", "Comparator", "sort_items"}:
        module = import_module(".comparer", __name__)
        return getattr(module, name)
    if name in {"KeySpec", "SortDirection", "ValueKind", "classify_value"}:
        module = import_module(".models", __name__)
        return getattr(module, name)
    if name in {
        "ComparatorError",
        "MissingFieldError",
        "NoKeysConfiguredError",
        "UnsupportedTypeError",
    }:
        module = import_module(".errors", __name__)
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
