"""Console entry point for the tuition grant application system.

Loads configuration and scoring thresholds, then runs one interactive
session. Application data lives in memory only and is discarded on exit.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import load_config, load_thresholds
from .console import GrantSession

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tuition-grants",
        description="Students' tuition grant application system",
    )
    parser.add_argument(
        "--thresholds",
        help="JSON or YAML file overriding the eligibility and scoring thresholds.",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the screen between menus.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Print the banner and menu without colour.",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level for diagnostics on stderr (default: WARNING).",
    )
    return parser


def configure_logging(level: str) -> None:
    # stdout belongs to the interactive screens
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    logging.getLogger().setLevel(level)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.thresholds:
        overrides["thresholds_file"] = args.thresholds
    if args.no_clear:
        overrides["clear_screen"] = False
    if args.no_color:
        overrides["use_color"] = False
    if args.log_level:
        overrides["log_level"] = args.log_level

    try:
        config = load_config(**overrides)
    except ValueError as exc:
        configure_logging("WARNING")
        logger.error("Configuration failed: %s", exc)
        return 2

    configure_logging(config.log_level)

    try:
        thresholds = load_thresholds(config.thresholds_file)
    except (FileNotFoundError, ValueError) as exc:
        logger.error("Loading thresholds failed: %s", exc)
        return 2
    logger.debug("thresholds_loaded %s", thresholds.to_dict())

    logger.info(
        "Starting tuition grant console (capacity=%d, thresholds=%s)",
        config.max_applications,
        thresholds.version,
    )
    GrantSession(config, thresholds=thresholds).run()
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
