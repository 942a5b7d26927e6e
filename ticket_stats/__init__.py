"""Airline ticket statistics pipeline."""

from .cli import main as cli_main
from .exceptions import (
    DestinationNotFoundError,
    EmptyInputError,
    InvalidRangeError,
    TicketError,
    TicketParseError,
)
from .ingest import extract, parse_line
from .models import Ticket
from .transform import (
    average_destination,
    build_destination_summary,
    build_period_summary,
    count_by_destination,
    count_by_period,
    is_within,
    tickets_to_frame,
)

__all__ = [
    "cli_main",
    "Ticket",
    "extract",
    "parse_line",
    "count_by_destination",
    "count_by_period",
    "average_destination",
    "is_within",
    "tickets_to_frame",
    "build_destination_summary",
    "build_period_summary",
    "TicketError",
    "EmptyInputError",
    "TicketParseError",
    "DestinationNotFoundError",
    "InvalidRangeError",
]
