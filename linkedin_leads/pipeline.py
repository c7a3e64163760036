"""
Dedup pipeline - master file -> master ID set -> filter each new file -> export.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from linkedin_leads import config
from linkedin_leads.constants import LogLevel
from linkedin_leads.dedup import RunStats, SetDifferenceEngine
from linkedin_leads.export import write_export
from linkedin_leads.reporting import Reporter
from linkedin_leads.spreadsheet import Row, SpreadsheetError, parse_file


class InputValidationError(Exception):
    """Raised when the run is missing its master or new files."""
    pass


@dataclass
class DedupResult:
    stats: RunStats
    unique_rows: list[Row] = field(default_factory=list)
    export_path: Path | None = None


def validate_inputs(master_path: str | Path | None, new_paths: Sequence[str | Path]):
    """Check that a master file and at least one new file were given."""
    if not master_path:
        raise InputValidationError("Please upload a master database file.")
    if not new_paths:
        raise InputValidationError("Please upload at least one search results file.")


async def run_dedup(
    master_path: str | Path | None,
    new_paths: Sequence[str | Path],
    reporter: Reporter,
    output_dir: str | Path | None = None,
) -> DedupResult | None:
    """
    Export the rows of the new files whose LinkedIn profile is not in the master file.

    Files are parsed one at a time in the given order. A file that can't be
    read, parsed or written stops the whole run and is reported at error
    level. Returns None when the run was aborted.
    """
    try:
        validate_inputs(master_path, new_paths)
    except InputValidationError as e:
        reporter.emit(LogLevel.ERROR, f"Error: {e}")
        return None

    engine = SetDifferenceEngine(reporter)
    export_rows: list[Row] = []

    try:
        # Master ID set
        reporter.emit(LogLevel.INFO, "Parsing master database...")
        master_rows = await parse_file(master_path)
        reporter.emit(LogLevel.INFO, f"Master database loaded: {len(master_rows)} rows")

        master_ids = engine.build(master_rows)
        reporter.emit(
            LogLevel.SUCCESS, f"Found {engine.stats.master_ids} LinkedIn IDs in Master database"
        )

        # Filter new files against it
        for idx, new_path in enumerate(new_paths, 1):
            name = Path(new_path).name
            reporter.emit(LogLevel.INFO, f"Processing file {idx}/{len(new_paths)}: {name}...")
            new_rows = await parse_file(new_path)
            reporter.emit(LogLevel.INFO, f"File contains {len(new_rows)} rows")

            result = engine.filter(new_rows, master_ids, name=name)
            export_rows.extend(result.unique_rows)

        stats = engine.stats
        reporter.emit(LogLevel.INFO, f"Total records processed: {stats.total_new_records}")
        reporter.emit(LogLevel.INFO, f"Total duplicates removed: {stats.duplicate_count}")
        reporter.emit(LogLevel.SUCCESS, f"Unique records to export: {len(export_rows)}")

        export_path = write_export(export_rows, output_dir or config.OUTPUT_DIR, reporter)
    except SpreadsheetError as e:
        reporter.emit(LogLevel.ERROR, f"Error: {e}")
        return None

    return DedupResult(stats=stats, unique_rows=export_rows, export_path=export_path)
