"""
Grid Reference Reader: Interactive CLI
=======================================
Thin wrapper around the osgbtools library.

Usage:
    osgbtools                       # interactive mode
    osgbtools "TQ 12345 67890"      # single reference

Settings are read from environment variables:
    OSGBTOOLS_STRICT      1/true/yes to only accept squares used over GB
    OSGBTOOLS_LOG_LEVEL   logging level name, WARNING if not set
"""

import logging
import os
import sys
from typing import AbstractSet, Optional

from osgbtools import GridSquare
from osgbtools.exceptions import OsgbToolsError
from osgbtools.valid_squares import VALID_SQUARES

logger = logging.getLogger(__name__)

_TRUTHY = ("1", "true", "yes", "on")

_BANNER = """\
╔══════════════════════════════════════╗
║        Grid Reference Reader         ║
║   NGR → letters, digits and size     ║
╚══════════════════════════════════════╝
Type 'quit' to quit.
"""


def _strict_squares() -> Optional[AbstractSet[str]]:
    if os.environ.get("OSGBTOOLS_STRICT", "").strip().lower() in _TRUTHY:
        return VALID_SQUARES
    return None


def _configure_logging() -> None:
    level = os.environ.get("OSGBTOOLS_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def _print_parts(square: GridSquare) -> None:
    for key, val in square.as_parts().to_dict().items():
        print(f"{key:>10}: {val}")


def _run_interactive(valid_squares: Optional[AbstractSet[str]]) -> None:
    print(_BANNER)

    while True:
        try:
            raw = input("\nGrid reference:  ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        if raw.lower() in ("quit", "exit"):
            print("Bye!")
            break
        if not raw:
            print("  ✗ A grid reference is required.")
            continue
        try:
            square = GridSquare(raw, valid_squares=valid_squares)
        except OsgbToolsError as exc:
            print(f"  ✗ {exc}")
            continue

        print(f"  ✓ {square.get_size():,}m square")
        _print_parts(square)


def main() -> None:
    """Entry point; supports both a CLI argument and interactive mode."""
    _configure_logging()
    valid_squares = _strict_squares()
    logger.debug("Strict square checking %s", "on" if valid_squares else "off")

    if len(sys.argv) < 2:
        _run_interactive(valid_squares)
        return

    reference = " ".join(sys.argv[1:])
    try:
        square = GridSquare(reference, valid_squares=valid_squares)
    except OsgbToolsError as exc:
        print(f"Invalid grid reference: {exc}", file=sys.stderr)
        sys.exit(1)
    _print_parts(square)


if __name__ == "__main__":
    main()
