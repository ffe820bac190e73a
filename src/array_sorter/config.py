"""Configuration dataclasses for the array sorter."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterable

from .core.models import SortDirection

KEY_DELIMITER = "."

_RECOGNIZED_OPTIONS = frozenset({"direction", "keys"})

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SortConfig:
    direction: SortDirection = SortDirection.ASC
    keys: tuple[str, ...] = tuple()

    def __post_init__(self) -> None:
        self.direction = SortDirection.parse(self.direction)
        if isinstance(self.keys, str):
            # a bare string is one key path, not a sequence of characters
            self.keys = (self.keys,)
        else:
            self.keys = tuple(self.keys)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "SortConfig":
        """Build a config from a plain mapping of ``direction`` and ``keys``.

        Options that are absent or empty fall back to the defaults; unknown
        options are ignored.
        """
        unknown = sorted(str(name) for name in options if name not in _RECOGNIZED_OPTIONS)
        if unknown:
            logger.debug("Ignoring unrecognised sort options: %s", ", ".join(unknown))
        direction = options.get("direction") or SortDirection.ASC
        keys: Iterable[str] = options.get("keys") or ()
        return cls(direction=direction, keys=keys)
