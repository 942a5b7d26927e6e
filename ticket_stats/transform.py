"""Aggregations over parsed ticket records."""
from __future__ import annotations

import logging
from dataclasses import asdict
from datetime import datetime, time
from typing import Dict, Sequence, Union

import pandas as pd

from . import config
from .exceptions import DestinationNotFoundError, EmptyInputError, InvalidRangeError
from .models import Ticket

logger = logging.getLogger(__name__)

TimeOfDay = Union[time, datetime]


def _ensure_tickets(tickets: Sequence[Ticket]) -> None:
    if not tickets:
        raise EmptyInputError("no tickets found")


def _on_reference_date(value: TimeOfDay) -> datetime:
    # Only the wall-clock time of day is compared; date and timezone are dropped.
    if isinstance(value, datetime):
        value = value.time()
    return datetime.combine(config.REFERENCE_DATE, value.replace(tzinfo=None))


def count_by_destination(tickets: Sequence[Ticket], destination: str) -> int:
    """Return how many tickets go to ``destination``.

    Destinations are compared with exact string equality. An empty collection
    raises :class:`EmptyInputError` and a destination without tickets raises
    :class:`DestinationNotFoundError`; a zero count is never returned.
    """
    _ensure_tickets(tickets)

    total = sum(1 for ticket in tickets if ticket.destination == destination)
    if total == 0:
        raise DestinationNotFoundError(destination)
    return total


def is_within(target: TimeOfDay, lower: TimeOfDay, upper: TimeOfDay) -> bool:
    """Check whether ``target`` lies strictly between ``lower`` and ``upper``."""
    target_at, lower_at, upper_at = (_on_reference_date(value) for value in (target, lower, upper))
    if lower_at > upper_at:
        raise InvalidRangeError(f"lower bound {lower} is after upper bound {upper}")
    return lower_at < target_at < upper_at


def count_by_period(tickets: Sequence[Ticket]) -> Dict[str, int]:
    """Count tickets per departure period.

    Every ticket is checked against every window in ``config.PERIOD_WINDOWS``,
    so a departure near a window edge may be counted in two periods, or in none.
    """
    _ensure_tickets(tickets)

    counts: Dict[str, int] = {window.name: 0 for window in config.PERIOD_WINDOWS}
    for ticket in tickets:
        for window in config.PERIOD_WINDOWS:
            try:
                matched = is_within(ticket.departure_time, window.lower, window.upper)
            except InvalidRangeError:
                continue
            if matched:
                counts[window.name] += 1

    logger.debug("Period counts for %s tickets: %s", len(tickets), counts)
    return counts


def average_destination(tickets: Sequence[Ticket], destination: str) -> float:
    """Return the fraction (0..1) of tickets that go to ``destination``.

    Errors from :func:`count_by_destination` propagate unchanged.
    """
    matching = count_by_destination(tickets, destination)
    return matching / len(tickets)


def tickets_to_frame(tickets: Sequence[Ticket]) -> pd.DataFrame:
    return pd.DataFrame([asdict(ticket) for ticket in tickets], columns=list(config.TICKET_FIELDS))


def build_destination_summary(tickets: Sequence[Ticket]) -> pd.DataFrame:
    """Ticket count and share for every destination present in ``tickets``."""
    _ensure_tickets(tickets)

    df = tickets_to_frame(tickets)
    summary = (
        df.groupby("destination", sort=False)
        .agg(ticket_count=("id", "count"))
        .reset_index()
    )
    summary["share"] = summary["ticket_count"] / len(df)
    summary = summary.sort_values(by=["ticket_count", "destination"], ascending=[False, True]).reset_index(drop=True)
    logger.info("Built destination summary (%s destinations)", len(summary))
    return summary


def build_period_summary(tickets: Sequence[Ticket]) -> pd.DataFrame:
    counts = count_by_period(tickets)
    return pd.DataFrame({"period": list(counts.keys()), "ticket_count": list(counts.values())})


__all__ = [
    "count_by_destination",
    "is_within",
    "count_by_period",
    "average_destination",
    "tickets_to_frame",
    "build_destination_summary",
    "build_period_summary",
]
