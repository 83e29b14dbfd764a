#!/usr/bin/env python3
"""
Play snake3 in the terminal.

Usage:
    python main.py
    python main.py --columns 40 --rows 20 --tick-ms 300 --seed 7

Settings default to the SNAKE_* environment variables (a .env file is
read too); flags given here take precedence.
"""

import argparse
import logging
import sys
from typing import List, Optional

from snake_engine import PythonRandomSource, TerminalTooSmallError
from snake_terminal.app import run
from snake_terminal.config import Settings, load_settings

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play the classic snake game in your terminal.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument("--columns", type=positive_int, default=None,
                        help="Board columns (default: fit the terminal)")
    parser.add_argument("--rows", type=positive_int, default=None,
                        help="Board rows (default: fit the terminal)")
    parser.add_argument("--tick-ms", type=positive_int, default=None,
                        help="Initial delay between ticks in milliseconds")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for apple placement, for reproducible games")
    parser.add_argument("--log-file", type=str, default=None,
                        help="Where to write the log (the terminal is used by the game)")
    parser.add_argument("--log-level", type=str, default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level")
    return parser


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    if args.tick_ms is not None:
        settings.tick_ms = args.tick_ms
    if args.log_file is not None:
        settings.log_file = args.log_file
    if args.log_level is not None:
        settings.log_level = args.log_level
    return settings


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if (args.columns is None) != (args.rows is None):
        parser.error("--columns and --rows must be given together")

    settings = apply_overrides(load_settings(), args)

    # Configure logging
    logging.basicConfig(
        filename=settings.log_file,
        level=getattr(logging, settings.log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    size = (args.columns, args.rows) if args.columns is not None else None

    try:
        run(settings, size=size, random_source=PythonRandomSource(args.seed))
    except TerminalTooSmallError as e:
        logger.error(str(e))
        print("\n*****\n")
        print(e)
        print("please resize your terminal and try again")
        print("\n*****\n")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")

    print("The game was closed, have a nice day :)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
