"""Recording sessions.

Usage:
    session = Session()
    session.active = True
    session.log("SOUND 10\t delay: 2")
    session.append(record)

    records, lines = session.snapshot()
    session.reset()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from devtrace.tracing.models import TickRecord


@dataclass
class Session:
    """Captured tick records plus the parallel human-readable log.

    Both sequences only grow while ``active`` and are only ever reset
    together.
    """

    active: bool = False
    records: list[TickRecord] = field(default_factory=list)
    log_lines: list[str] = field(default_factory=list)

    def log(self, line: str) -> None:
        """Append a log line if recording."""
        if self.active:
            self.log_lines.append(line)

    def append(self, record: TickRecord) -> bool:
        """Append a record if recording. Returns True if it was kept."""
        if not self.active:
            return False
        self.records.append(record)
        return True

    def reset(self) -> None:
        self.records = []
        self.log_lines = []

    def snapshot(self) -> tuple[list[dict[str, Any]], list[str]]:
        """Serializable copies of the records and log lines."""
        return [r.to_dict() for r in self.records], list(self.log_lines)


@dataclass
class DropSession:
    """Ground-item drops captured while drop capture is on.

    Nothing populates ``records`` yet: ground-item capture is disabled, so
    saves always write an empty array.
    """

    active: bool = False
    records: list[dict[str, Any]] = field(default_factory=list)
