"""
Status log for pipeline runs.
Keeps timestamped, leveled lines and forwards them to the logging module.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol

from linkedin_leads.constants import LogLevel

logger = logging.getLogger("linkedin_leads")

_LOGGING_LEVELS = {
    LogLevel.INFO: logging.INFO,
    LogLevel.SUCCESS: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


class Reporter(Protocol):
    """Anything that can receive status lines."""

    def emit(self, level: LogLevel, message: str) -> None: ...


@dataclass(frozen=True)
class StatusEntry:
    timestamp: datetime
    level: LogLevel
    message: str

    @property
    def line(self) -> str:
        return f"[{self.timestamp.strftime('%H:%M:%S')}] {self.message}"


@dataclass
class StatusReporter:
    """Collects status lines for one run."""

    entries: list[StatusEntry] = field(default_factory=list)

    def emit(self, level: LogLevel, message: str) -> None:
        """Record a status line and log it."""
        level = LogLevel(level)
        entry = StatusEntry(datetime.now(), level, message)
        self.entries.append(entry)
        logger.log(_LOGGING_LEVELS[level], message)

    def clear(self):
        """Forget all recorded lines (start of a new run)."""
        self.entries.clear()

    def messages(self, level: LogLevel | None = None) -> list[str]:
        """Recorded messages, optionally only those at one level."""
        return [e.message for e in self.entries if level is None or e.level == level]

    @property
    def lines(self) -> list[str]:
        return [e.line for e in self.entries]
