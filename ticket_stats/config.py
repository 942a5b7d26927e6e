"""Configuration constants for the ticket statistics pipeline."""
from __future__ import annotations

from datetime import date, datetime, time
from pathlib import Path
from typing import NamedTuple

# Default CSV file read by the command line interface
DEFAULT_TICKETS_PATH: Path = Path("tickets.csv")

# Destination queried when none is given on the command line
DEFAULT_DESTINATION: str = "China"

# Records are newline separated, fields comma separated. No quoting is supported.
LINE_SEPARATOR: str = "\n"
FIELD_DELIMITER: str = ","

# Field layout of every record, in file order.
TICKET_FIELDS: tuple[str, ...] = (
    "id",
    "name",
    "email",
    "destination",
    "departure_time",
    "price",
)

# Format of the departure time column
DEPARTURE_TIME_FORMAT: str = "%H:%M"

# Format used to declare the period window bounds below
WINDOW_BOUND_FORMAT: str = "%H:%M:%S"

# Times of day are compared after being placed on this date.
REFERENCE_DATE: date = date(1, 1, 1)


class PeriodWindow(NamedTuple):
    """A named time-of-day window. Both bounds are exclusive."""

    name: str
    lower: time
    upper: time


def _bound(value: str) -> time:
    return datetime.strptime(value, WINDOW_BOUND_FORMAT).time()


# Neighbouring windows overlap by one second at their shared edge; the bounds
# are kept exactly as published so existing period counts stay reproducible.
PERIOD_WINDOWS: tuple[PeriodWindow, ...] = (
    PeriodWindow("morning", _bound("06:59:59"), _bound("13:00:00")),
    PeriodWindow("evening", _bound("12:59:59"), _bound("20:00:00")),
    PeriodWindow("night", _bound("19:59:59"), _bound("23:59:59")),
    PeriodWindow("early_morning", _bound("00:00:00"), _bound("07:00:00")),
)
