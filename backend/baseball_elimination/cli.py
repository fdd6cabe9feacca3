"""
Command line driver: prints the elimination status of every team in a division.

Usage:
    python -m baseball_elimination.cli teams4.txt
    python -m baseball_elimination.cli https://example.org/teams5.txt --json
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

from .core import configure_logging
from .loaders import get_loader, DivisionNotFoundError, LoaderError
from .solver import EliminationEngine, EliminationError


logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def format_report(engine: EliminationEngine) -> List[str]:
    lines = []
    for team in engine.division.teams():
        if engine.is_eliminated(team):
            certificate = " ".join(engine.certificate_of_elimination(team))
            lines.append(f"{team} is eliminated by the subset R = {{ {certificate} }}")
        else:
            lines.append(f"{team} is not eliminated")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Determine which teams of a division are mathematically eliminated"
    )
    parser.add_argument(
        "source",
        help="Path or http(s) URL of a division file.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON report instead of text.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level.",
    )

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        division = asyncio.run(get_loader(args.source).load(args.source))
    except (DivisionNotFoundError, LoaderError, EliminationError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    logger.info("Loaded %d teams from %s", division.team_count(), args.source)
    engine = EliminationEngine(division)

    if args.json:
        print(json.dumps([result.to_dict() for result in engine.results()], indent=2))
    else:
        for line in format_report(engine):
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
