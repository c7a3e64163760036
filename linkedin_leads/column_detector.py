"""
Column auto-detection - finds the column holding LinkedIn profile URLs by
looking at cell values rather than header names.
"""

from collections.abc import Mapping, Sequence

from linkedin_leads import config


def find_url_column(row: Mapping[str, str]) -> str | None:
    """Return the first column (in row order) whose value contains a LinkedIn profile URL."""
    if not isinstance(row, Mapping):
        return None

    for column, value in row.items():
        if value and isinstance(value, str) and config.PROFILE_URL_MARKER in value:
            return column
    return None


def detect_url_column(
    rows: Sequence[Mapping[str, str]], sample_size: int | None = None
) -> str | None:
    """
    Detect the URL column of a dataset from its first rows.

    Only the first `sample_size` rows are inspected (config.DETECTION_SAMPLE_SIZE
    by default), since the first row may have an empty cell.
    """
    if sample_size is None:
        sample_size = config.DETECTION_SAMPLE_SIZE

    for row in rows[:sample_size]:
        if column := find_url_column(row):
            return column
    return None
