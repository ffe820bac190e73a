"""Configurable comparators for sorting strings, numbers and nested records."""
from __future__ import annotations

from importlib import import_module
from typing import Any

from . import utils
from .config import SortConfig
from .core.errors import (
    ComparatorError,
    MissingFieldError,
    NoKeysConfiguredError,
    UnsupportedTypeError,
)
from .core.models import SortDirection

__all__ = [
    "ArraySorter",
    "SortConfig",
    "SortDirection",
    "sort_items",
    "ComparatorError",
    "MissingFieldError",
    "NoKeysConfiguredError",
    "UnsupportedTypeError",
    "utils",
]


def __getattr__(name: str) -> Any:  # pragma: no cover - import side effect
    if name in {"ArraySorter", "sort_items"}:
        module = import_module(".core.comparer", __name__)
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
