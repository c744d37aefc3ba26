"""Helpers for reading and writing the scorer's tab-separated tables."""

from __future__ import annotations

import csv
import warnings
from pathlib import Path
from typing import Optional, Sequence, TextIO

import pandas as pd
from pandas.errors import ParserError, ParserWarning

from .config import TABLE_SEPARATOR
from .helpers import TableFormatError, require_columns

_READ_OPTIONS = dict(
    sep=TABLE_SEPARATOR,
    header=0,
    index_col=False,
    quoting=csv.QUOTE_NONE,
    dtype=str,
    keep_default_na=False,
)


def read_header(path: Path) -> Sequence[str]:
    """Column names of a tab-separated file, without reading its rows."""
    return [str(name) for name in pd.read_csv(path, nrows=0, **_READ_OPTIONS).columns]


def read_table(path: Path, columns: Optional[Sequence[str]] = None) -> pd.DataFrame:
    """Load a tab-separated file with a header row and no quoting, every cell as a string.

    Args:
        path: Table to read.
        columns: Optional subset of columns to keep; rows are only checked
            for completeness in these columns.

    Raises:
        FileNotFoundError: `path` does not exist.
        TableFormatError: a requested column is absent, or a row has more or
            fewer fields than the header.
    """
    if not path.exists():
        raise FileNotFoundError(f"No such table: {path}")
    if columns is not None:
        require_columns(read_header(path), columns, str(path))

    with warnings.catch_warnings():
        # pandas only warns when the first data row is longer than the header.
        warnings.simplefilter("error", ParserWarning)
        try:
            frame = pd.read_csv(
                path,
                usecols=list(columns) if columns is not None else None,
                **_READ_OPTIONS,
            )
        except (ParserError, ParserWarning) as exc:
            raise TableFormatError(f"{path}: a data row has more fields than the header ({exc})") from exc

    # Short rows are padded with NA even though empty cells stay as "".
    ragged = frame.isna().any(axis=1)
    if ragged.any():
        first = int(ragged.to_numpy().nonzero()[0][0])
        raise TableFormatError(f"{path}: data row {first + 1} has fewer fields than the header.")
    return frame


def write_table(frame: pd.DataFrame, handle: TextIO) -> None:
    """Write a frame as tab-separated text with a header, cells verbatim and NaN as `NaN`."""
    cells = frame.astype(object).where(frame.notna(), "NaN")
    handle.write(TABLE_SEPARATOR.join(str(name) for name in cells.columns) + "\n")
    for row in cells.itertuples(index=False, name=None):
        handle.write(TABLE_SEPARATOR.join(str(cell) for cell in row) + "\n")


__all__ = ["read_header", "read_table", "write_table"]
