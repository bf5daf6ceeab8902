#!/usr/bin/env python3
"""Shipyard - Main entry point.

Loads a list of spaceship parts, shuffles them, files each part into the
ship's slots by keyword and prints what the ship ended up loaded with.
"""

import argparse
import logging
import sys

from spaceship.engine.builder import build_ship
from spaceship.engine.loader import PartsLoadError, load_parts
from spaceship.interface.renderer import print_ship, print_ship_json
from spaceship.utils.constants import DEFAULT_PARTS_FILE
from spaceship.utils.rng import ShipRNG


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Shipyard - Build a spaceship from a list of parts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                          # Build from vehicle_parts.txt
  %(prog)s my_parts.txt             # Build from another parts file
  %(prog)s --seed 42                # Reproducible shuffle
  %(prog)s --json                   # Print the ship as JSON
        """,
    )

    parser.add_argument(
        "parts_file",
        nargs="?",
        default=DEFAULT_PARTS_FILE,
        help=f"Parts file, one part per line (default: {DEFAULT_PARTS_FILE})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for the part shuffle (default: system entropy)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the ship as JSON instead of the text report",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (shows how each part was filed)",
    )

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    # Keep stdout clean for the JSON document
    log_level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr if args.json else sys.stdout)],
        force=True,
    )

    try:
        parts = load_parts(args.parts_file)
    except PartsLoadError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error loading parts: {e}", file=sys.stderr)
        sys.exit(1)

    ship = build_ship(parts, ShipRNG(args.seed))

    if args.json:
        print_ship_json(ship)
    else:
        print_ship(ship)


if __name__ == "__main__":
    main()
