"""
Export of the unique records collected during a dedup run.
"""

from collections.abc import Sequence
from datetime import date
from pathlib import Path

from linkedin_leads import config
from linkedin_leads.constants import LogLevel
from linkedin_leads.reporting import Reporter
from linkedin_leads.spreadsheet import Row, write_rows


def export_filename(day: date | None = None) -> str:
    """Dated export file name, e.g. Cleaned_Leads_2024-05-01.xlsx (local calendar date)."""
    day = day or date.today()
    return f"{config.EXPORT_FILENAME_PREFIX}_{day.isoformat()}.xlsx"


def write_export(
    rows: Sequence[Row],
    output_dir: str | Path,
    reporter: Reporter,
    day: date | None = None,
) -> Path | None:
    """
    Write the unique rows to a dated workbook in output_dir.

    Nothing is written when there are no rows; returns the file path or None.
    """
    if not rows:
        reporter.emit(
            LogLevel.INFO, "No unique records found. All entries already exist in master database."
        )
        return None

    reporter.emit(LogLevel.INFO, "Exporting unique records...")
    path = write_rows(rows, Path(output_dir) / export_filename(day), sheet_name=config.EXPORT_SHEET_NAME)
    reporter.emit(LogLevel.SUCCESS, f"Export complete! File: {path.name}")
    reporter.emit(LogLevel.SUCCESS, f"Saved to: {path.parent}")
    return path
