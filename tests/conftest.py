from datetime import time
from pathlib import Path

import pytest

from ticket_stats.models import Ticket


@pytest.fixture
def write_tickets(tmp_path: Path):
    def _write(content: str, name: str = "tickets.csv") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def four_tickets() -> list[Ticket]:
    """One departure per period, two of them to China."""
    return [
        Ticket(1, "Tait Mc Caughan", "tmc0@scribd.com", "China", time(9, 0), 785),
        Ticket(2, "Padget McKee", "pmckee1@hexun.com", "Brazil", time(15, 0), 550),
        Ticket(3, "Yalonda Jermyn", "yjermyn2@omniture.com", "China", time(22, 0), 1213),
        Ticket(4, "Diannne Pharrow", "dpharrow3@icio.us", "Finland", time(3, 0), 432),
    ]
