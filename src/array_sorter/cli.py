"""Command-line interface for sorting JSON arrays."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from .config import SortConfig
from .core.comparer import sort_items
from .core.errors import ComparatorError
from .core.models import SortDirection

logger = logging.getLogger(__name__)


class InputError(RuntimeError):
    """The JSON input could not be loaded."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sort a JSON array of strings, numbers or objects")
    parser.add_argument(
        "source",
        nargs="?",
        default="-",
        help="Path to a JSON file, or '-' to read from stdin",
    )
    parser.add_argument(
        "-k",
        "--key",
        dest="keys",
        action="append",
        default=[],
        metavar="PATH",
        help="Dotted key path to sort objects by (repeat for tie-breakers)",
    )
    parser.add_argument("--desc", action="store_true", help="Sort in descending order")
    parser.add_argument("--output", type=Path, help="Path to save the sorted JSON; prints to stdout if omitted")
    parser.add_argument("--indent", type=int, default=2, help="Indentation for the JSON output")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    config = SortConfig(
        direction=SortDirection.DESC if args.desc else SortDirection.ASC,
        keys=tuple(args.keys),
    )

    try:
        items = load_items(args.source)
    except InputError as exc:
        logger.error("Failed to load input: %s", exc)
        return 2

    try:
        ordered = sort_items(items, config)
    except ComparatorError as exc:
        logger.error("Sorting failed: %s", exc)
        return 1

    payload = json.dumps(ordered, indent=args.indent, ensure_ascii=False)
    if args.output:
        _ensure_parent(args.output)
        args.output.write_text(payload + "\n", encoding="utf-8")
        logger.info("Sorted output written to %s", args.output)
    else:
        print(payload)
    return 0


def load_items(source: str) -> list[Any]:
    try:
        if source == "-":
            text = sys.stdin.read()
        else:
            text = Path(source).read_text(encoding="utf-8")
        data = json.loads(text)
    except OSError as exc:
        raise InputError(str(exc)) from exc
    except json.JSONDecodeError as exc:
        raise InputError(f"invalid JSON in {source}: {exc}") from exc
    if not isinstance(data, list):
        raise InputError(f"expected a JSON array, got {type(data).__name__}")
    return data


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _ensure_parent(path: Path) -> None:
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
