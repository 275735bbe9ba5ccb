"""
Command-Line Interface
======================
Thin wrapper around the shape factory.

Usage:
    $ shapearea circle 5
    $ shapearea -v triangle 3 4 5
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from shapearea.config import DEFAULT_LOG_LEVEL
from shapearea.logging_config import setup_logging
from shapearea.model.factory import ShapeError, create_shape_from_sequence
from shapearea.model.registry import list_keys
from shapearea.model.shapes import Triangle

logger = logging.getLogger(__name__)


def _create_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shapearea",
        description="Compute the area of a circle or a triangle.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "shape_type",
        metavar="type",
        help=f"Shape type, one of: {', '.join(list_keys())} (case-insensitive).",
    )
    parser.add_argument(
        "parameters",
        metavar="param",
        type=float,
        nargs="*",
        help="Radius of a circle, or the three side lengths of a triangle.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Entry point of the command-line interface.

    Args:
        argv: Arguments without the program name. Defaults to sys.argv[1:].

    Returns:
        0 on success, 2 when the factory rejects the input.
    """
    parsed = _create_argument_parser().parse_args(argv)

    setup_logging(level=logging.DEBUG if parsed.verbose else DEFAULT_LOG_LEVEL)

    try:
        shape = create_shape_from_sequence(parsed.shape_type, parsed.parameters)
    except ShapeError as e:
        logger.debug(f"Could not create shape: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 2

    if isinstance(shape, Triangle):
        print(f"Right triangle: {shape.is_right_triangle()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
