"""Exceptions raised by the ticket statistics pipeline."""
from __future__ import annotations

from typing import Optional


class TicketError(Exception):
    """Base class for ticket pipeline errors."""


class EmptyInputError(TicketError, ValueError):
    """The ticket file or the ticket collection holds no data."""


class TicketParseError(TicketError, ValueError):
    """A ticket record could not be converted."""

    def __init__(self, message: str, *, line_number: int, field: Optional[str] = None, value: Optional[str] = None) -> None:
        super().__init__(f"line {line_number}: {message}")
        self.line_number = line_number
        self.field = field
        self.value = value


class DestinationNotFoundError(TicketError, LookupError):
    """No ticket matches the requested destination."""

    def __init__(self, destination: str) -> None:
        super().__init__(f"no tickets found for destination {destination}")
        self.destination = destination


class InvalidRangeError(TicketError, ValueError):
    """A time window was given a lower bound later than its upper bound."""


__all__ = [
    "TicketError",
    "EmptyInputError",
    "TicketParseError",
    "DestinationNotFoundError",
    "InvalidRangeError",
]
