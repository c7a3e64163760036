"""
Set difference between a master dataset and new datasets, keyed on LinkedIn profile IDs.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from linkedin_leads.column_detector import detect_url_column, find_url_column
from linkedin_leads.constants import LogLevel
from linkedin_leads.profile_id import extract_profile_id
from linkedin_leads.reporting import Reporter
from linkedin_leads.spreadsheet import Row

logger = logging.getLogger(__name__)


@dataclass
class FilterResult:
    """Rows of one new dataset that are not in the master set."""

    unique_rows: list[Row]
    unique_count: int
    duplicate_count: int
    url_column: str | None = None

    @property
    def skipped(self) -> bool:
        return self.url_column is None


@dataclass
class FileStats:
    name: str
    rows: int
    unique: int = 0
    duplicates: int = 0
    skipped: bool = False


@dataclass
class RunStats:
    """Counters for one processing run."""

    master_rows: int = 0
    master_ids: int = 0
    files: list[FileStats] = field(default_factory=list)

    @property
    def total_new_records(self) -> int:
        return sum(f.rows for f in self.files)

    @property
    def unique_count(self) -> int:
        return sum(f.unique for f in self.files)

    @property
    def duplicate_count(self) -> int:
        return sum(f.duplicates for f in self.files)

    def reset(self):
        self.master_rows = 0
        self.master_ids = 0
        self.files = []


class SetDifferenceEngine:
    """Builds the master ID set and filters new datasets against it."""

    def __init__(self, reporter: Reporter | None = None):
        self.reporter = reporter
        self.stats = RunStats()

    def _emit(self, level: LogLevel, message: str):
        if self.reporter is not None:
            self.reporter.emit(level, message)
        else:
            logger.debug(message)

    def build(self, master_rows: Sequence[Row]) -> frozenset[str]:
        """
        Build the set of canonical profile IDs found in the master dataset.

        If no URL column can be detected from the sampled rows, each row is
        searched for a URL column on its own.
        """
        url_column = detect_url_column(master_rows)
        if url_column is None:
            self._emit(
                LogLevel.WARNING,
                "Warning: No LinkedIn URL column detected in master file. Using all columns.",
            )
        else:
            self._emit(LogLevel.INFO, f'Detected URL column in master: "{url_column}"')

        master_ids = set()
        id_count = 0
        for row in master_rows:
            column = url_column or find_url_column(row)
            if column is None:
                continue
            if profile_id := extract_profile_id(row.get(column)):
                master_ids.add(profile_id)
                id_count += 1

        self.stats.master_rows = len(master_rows)
        self.stats.master_ids = id_count
        return frozenset(master_ids)

    def filter(
        self, new_rows: Sequence[Row], master_ids: frozenset[str], name: str = "new file"
    ) -> FilterResult:
        """
        Keep the rows of a new dataset whose profile ID is not in the master set.

        Files without a detectable URL column are skipped entirely. Rows without
        a profile ID count neither as unique nor as duplicate.
        """
        file_stats = FileStats(name=name, rows=len(new_rows))
        self.stats.files.append(file_stats)

        url_column = detect_url_column(new_rows)
        if url_column is None:
            file_stats.skipped = True
            self._emit(LogLevel.WARNING, f"Warning: No LinkedIn URL column detected in {name}")
            return FilterResult([], 0, 0)

        self._emit(LogLevel.INFO, f'Detected URL column: "{url_column}"')

        unique_rows = []
        duplicate_count = 0
        for row in new_rows:
            profile_id = extract_profile_id(row.get(url_column))
            if not profile_id:
                continue
            if profile_id in master_ids:
                duplicate_count += 1
            else:
                unique_rows.append(row)

        file_stats.unique = len(unique_rows)
        file_stats.duplicates = duplicate_count
        self._emit(LogLevel.INFO, f"  → {len(unique_rows)} unique, {duplicate_count} duplicates")
        return FilterResult(unique_rows, len(unique_rows), duplicate_count, url_column)
