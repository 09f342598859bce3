import sys
import argparse
from typing import List, Optional

# --- Settings/Logging ---
from baseball_elimination.logging.setup import setup_logging

from loguru import logger

# --- End Settings/Logging ---

from baseball_elimination.calculation.elimination import EliminationAnalyzer
from baseball_elimination.loader.schedule_loader import (
    ScheduleFormatError,
    load_division,
)
from baseball_elimination.models.division import UnknownTeamError
from baseball_elimination.reporting.console import render_report

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Determine which teams of a division are mathematically eliminated."
    )
    parser.add_argument("schedule", help="Path to the division schedule file.")
    parser.add_argument(
        "--team", help="Only report the verdict for this team (exact name)."
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Override LOG_LEVEL from the environment/.env.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        division = load_division(args.schedule)
        analyzer = EliminationAnalyzer(division)
        render_report(analyzer, team=args.team)
    except ScheduleFormatError as e:
        logger.error(f"Invalid schedule {args.schedule}: {e}")
        return 1
    except UnknownTeamError as e:
        logger.error(f"{e} (known teams: {', '.join(division.teams())})")
        return 1

    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
    except Exception as e:
        logger.exception(f"Unhandled exception in main execution: {e}")
        sys.exit(1)
