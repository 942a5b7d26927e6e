"""Data classes shared by the ingestion and aggregation stages."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import time


@dataclass(frozen=True)
class Ticket:
    """A single issued ticket, as read from one line of the ticket file."""

    id: int
    name: str
    email: str
    destination: str
    departure_time: time
    price: int


__all__ = ["Ticket"]
