"""Command-line interface for archzoom."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from archzoom.config import read_config
from archzoom.pipeline import run
from archzoom.tree import StructuralError

logger = logging.getLogger("archzoom")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="archzoom",
        description="Export an architecture analysis as dependency-graph and violation JSON.",
    )
    parser.add_argument(
        "input",
        type=Path,
        help="Analysis dump to export (.json, .yaml or .yml)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Report directory (default: archzoom-report next to the input)",
    )
    parser.add_argument(
        "--prune-empty",
        action="store_true",
        default=None,
        help="Drop packages that contain neither classes nor subpackages",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Indent the written JSON by this many spaces",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) output",
    )

    args = parser.parse_args(argv)
    if args.indent is not None and args.indent < 0:
        parser.error("--indent must not be negative")

    logging.basicConfig(level=logging.WARNING, format="%(message)s")
    if args.verbose:
        logging.getLogger("archzoom").setLevel(logging.DEBUG)

    config = read_config(args.input.resolve().parent)
    if args.prune_empty is not None:
        config.prune_empty_packages = args.prune_empty
    if args.indent is not None:
        config.indent = args.indent

    try:
        run(args.input, output_dir=args.output, config=config)
    except (OSError, ValueError, StructuralError) as e:
        logger.error("archzoom: %s", e)
        sys.exit(1)
