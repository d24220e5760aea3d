from __future__ import annotations

import argparse
import logging
import sys

from . import __version__
from .app import run_gui, run_headless
from .config import load_config


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ossuary",
        description="Ossuary - items and inventory demo",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--gui", action="store_true", help="Run the Arcade front end (default)")
    mode.add_argument("--headless", action="store_true", help="Run in the console")
    parser.add_argument("--config", default=None, help="YAML file overriding the default configuration")
    parser.add_argument("--max-steps", type=int, default=None, help="Stop after N commands (headless)")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")

    args = parser.parse_args(argv)
    _setup_logging(args.verbose)
    config = load_config(args.config)

    if args.headless:
        return run_headless(config, max_steps=args.max_steps)
    return run_gui(config)


if __name__ == "__main__":
    sys.exit(main())
