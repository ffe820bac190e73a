"""Utility helpers for key paths."""
from __future__ import annotations

from typing import Any

from .config import KEY_DELIMITER


def split_key_path(path: Any) -> tuple[str, ...]:
    """Split a dotted key path into one field name per depth.

    Empty segments are kept as field names; there is no escape for a literal
    delimiter inside a name.
    """
    text = path if isinstance(path, str) else str(path)
    return tuple(text.split(KEY_DELIMITER))
