"""Command line interface for the ticket statistics pipeline."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from . import config
from .exceptions import TicketError
from .ingest import extract
from .transform import average_destination, build_destination_summary, build_period_summary, count_by_destination

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Airline ticket statistics")
    parser.add_argument(
        "command",
        nargs="?",
        default="share",
        choices=["share", "count", "periods", "summary"],
        help="Statistic to compute (default: share)",
    )
    parser.add_argument("--input", dest="input_path", default=str(config.DEFAULT_TICKETS_PATH), help="Ticket CSV file")
    parser.add_argument(
        "--destination",
        dest="destination",
        default=config.DEFAULT_DESTINATION,
        help="Destination used by the share and count commands",
    )
    parser.add_argument("--verbose", dest="verbose", action="store_true", help="Enable verbose logging")
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> None:
    tickets = extract(args.input_path)

    if args.command == "share":
        print(average_destination(tickets, args.destination))
        return

    if args.command == "count":
        print(count_by_destination(tickets, args.destination))
        return

    if args.command == "periods":
        print(build_period_summary(tickets).to_string(index=False))
        return

    if args.command == "summary":
        print(build_destination_summary(tickets).to_string(index=False))
        return

    raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    _configure_logging(args.verbose)

    try:
        run(args)
    except (TicketError, OSError) as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
