"""Utilities to read ticket records from a delimited text file."""
from __future__ import annotations

import logging
import re
from datetime import datetime, time
from pathlib import Path
from typing import List

from . import config
from .exceptions import EmptyInputError, TicketParseError
from .models import Ticket

logger = logging.getLogger(__name__)

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_DEPARTURE_TIME_PATTERN = re.compile(r"[0-9]{1,2}:[0-9]{2}")


def _parse_int(value: str, field: str, line_number: int) -> int:
    if not _INTEGER_PATTERN.fullmatch(value):
        raise TicketParseError(
            f"invalid integer for {field}: {value!r}", line_number=line_number, field=field, value=value
        )
    return int(value)


def _parse_departure_time(value: str, line_number: int) -> time:
    if not _DEPARTURE_TIME_PATTERN.fullmatch(value):
        raise TicketParseError(
            f"invalid departure_time: {value!r}", line_number=line_number, field="departure_time", value=value
        )
    try:
        return datetime.strptime(value, config.DEPARTURE_TIME_FORMAT).time()
    except ValueError as exc:
        raise TicketParseError(
            f"invalid departure_time: {value!r}", line_number=line_number, field="departure_time", value=value
        ) from exc


def parse_line(line: str, *, line_number: int = 1) -> Ticket:
    """Build a :class:`Ticket` from a single record line."""
    fields = line.split(config.FIELD_DELIMITER)
    if len(fields) != len(config.TICKET_FIELDS):
        raise TicketParseError(
            f"expected {len(config.TICKET_FIELDS)} fields, got {len(fields)}", line_number=line_number, value=line
        )

    raw_id, name, email, destination, raw_departure, raw_price = fields
    return Ticket(
        id=_parse_int(raw_id, "id", line_number),
        name=name,
        email=email,
        destination=destination,
        departure_time=_parse_departure_time(raw_departure, line_number),
        price=_parse_int(raw_price, "price", line_number),
    )


def extract(path: Path | str) -> List[Ticket]:
    """Read every ticket from ``path``.

    The file must hold one record per line in the layout described by
    ``config.TICKET_FIELDS``. A single trailing newline is tolerated; any other
    blank line is treated as a malformed record. The whole file is rejected on
    the first record that fails to parse.
    """
    path = Path(path)
    raw = path.read_bytes()
    logger.debug("Read %s bytes from %s", len(raw), path)
    if not raw:
        raise EmptyInputError(f"empty ticket file: {path}")

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        line_number = raw[: exc.start].count(b"\n") + 1
        raise TicketParseError(f"invalid UTF-8 data: {exc.reason}", line_number=line_number) from exc

    lines = text.split(config.LINE_SEPARATOR)
    if lines[-1] == "":
        lines = lines[:-1]

    tickets = [parse_line(line, line_number=index) for index, line in enumerate(lines, start=1)]
    logger.info("Extracted %s tickets from %s", len(tickets), path)
    return tickets


__all__ = ["extract", "parse_line"]
