"""
Spreadsheet I/O - reads CSV/XLSX files into row dicts and writes row dicts back out.
"""

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

import pandas as pd
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.utils.exceptions import IllegalCharacterError

from linkedin_leads import config

logger = logging.getLogger(__name__)

# One spreadsheet record: column name -> cell text ("" for missing cells)
Row = dict[str, str]

_EXCEL_EXTENSIONS = (".xlsx", ".xlsm")


class SpreadsheetError(Exception):
    """Base class for spreadsheet read/parse failures."""

    def __init__(self, message: str, path: str | Path):
        super().__init__(message)
        self.path = Path(path)


class FileReadError(SpreadsheetError):
    """Raised when a file cannot be read at all."""

    def __init__(self, path: str | Path):
        super().__init__(f"Failed to read file: {Path(path).name}", path)


class FileParseError(SpreadsheetError):
    """Raised when a file's content cannot be parsed as a spreadsheet."""

    def __init__(self, path: str | Path):
        super().__init__(f"Failed to parse file: {Path(path).name}", path)


class FileWriteError(SpreadsheetError):
    """Raised when rows cannot be written to the output file."""

    def __init__(self, path: str | Path):
        super().__init__(f"Failed to write file: {Path(path).name}", path)


def _read_frame(path: Path) -> pd.DataFrame:
    """Read the first sheet of a file with every cell as text."""
    suffix = path.suffix.lower()
    if suffix == ".csv":
        try:
            # index_col=False: lines ending in a delimiter must not shift values left
            return pd.read_csv(path, dtype=str, keep_default_na=False, index_col=False)
        except pd.errors.EmptyDataError:
            return pd.DataFrame()
    if suffix in _EXCEL_EXTENSIONS:
        return pd.read_excel(
            path, sheet_name=0, dtype=str, keep_default_na=False, engine="openpyxl"
        )
    raise ValueError(
        f"Unsupported file type '{suffix}' (expected one of {', '.join(config.SUPPORTED_EXTENSIONS)})"
    )


def read_rows(path: str | Path) -> list[Row]:
    """
    Read a CSV or Excel file into a list of row dicts.

    Column order is preserved and missing cells come back as "".
    Raises FileReadError if the file can't be opened, FileParseError if its
    content can't be parsed.
    """
    path = Path(path)
    if not path.is_file():
        raise FileReadError(path)

    try:
        df = _read_frame(path)
    except OSError as e:
        raise FileReadError(path) from e
    except Exception as e:
        logger.debug(f"Error parsing {path}: {e}")
        raise FileParseError(path) from e

    df = df.fillna("")
    df.columns = [str(column) for column in df.columns]
    return [
        {column: str(value) for column, value in record.items()}
        for record in df.to_dict(orient="records")
    ]


async def parse_file(path: str | Path) -> list[Row]:
    """Read a spreadsheet without blocking the event loop."""
    return await asyncio.to_thread(read_rows, path)


def _clean_cell(value):
    """Drop control characters that worksheets can't store."""
    if isinstance(value, str):
        return ILLEGAL_CHARACTERS_RE.sub("", value)
    return value


def _write_workbook(rows: Sequence[Row], path: Path, sheet_name: str):
    """Write a single-sheet workbook where every cell is a literal value."""
    cleaned = [{_clean_cell(k): _clean_cell(v) for k, v in row.items()} for row in rows]
    if cleaned != list(rows):
        logger.warning(f"Removed characters that can't be stored in a worksheet from {path.name}")
    df = pd.DataFrame(cleaned)

    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
        # Text such as "=John" is data, not a formula
        for row in writer.sheets[sheet_name].iter_rows():
            for cell in row:
                if cell.data_type == "f":
                    cell.data_type = "s"


def write_rows(
    rows: Sequence[Row], path: str | Path, sheet_name: str = config.EXPORT_SHEET_NAME
) -> Path:
    """
    Write rows to a CSV or Excel file.

    Rows may have different columns; the header is every column in the order
    it was first seen, with blanks where a row has no value.
    Raises FileWriteError if the file can't be written.
    """
    path = Path(path)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        if path.suffix.lower() == ".csv":
            pd.DataFrame(list(rows)).to_csv(path, index=False)
        else:
            _write_workbook(rows, path, sheet_name)
    except (OSError, IllegalCharacterError) as e:
        logger.debug(f"Error writing {path}: {e}")
        raise FileWriteError(path) from e
    return path
