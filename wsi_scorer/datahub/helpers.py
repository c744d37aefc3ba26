from __future__ import annotations

from typing import Iterable, List, Sequence

from .config import MIN_SENSE_COLUMNS, SENSE_COLUMN_PREFIX


class TableFormatError(ValueError):
    """Raised when an input table cannot be turned into annotated instances."""


def require_columns(header: Sequence[str], required: Iterable[str], source: str) -> None:
    """Fail loudly when any of `required` is absent from `header`."""
    missing = [name for name in required if name not in header]
    if missing:
        joined = ", ".join(repr(name) for name in missing)
        raise TableFormatError(f"{source} is missing required column(s): {joined}")


def select_sense_columns(header: Sequence[str], cluster_column: str) -> List[str]:
    """Return the sense columns in header order, skipping the cluster column."""
    columns = [
        name for name in header if name.startswith(SENSE_COLUMN_PREFIX) and name != cluster_column
    ]
    if len(columns) < MIN_SENSE_COLUMNS:
        raise TableFormatError(
            f"Expected at least {MIN_SENSE_COLUMNS} columns prefixed with '{SENSE_COLUMN_PREFIX}', "
            f"found {len(columns)}."
        )
    return columns


def clean_cell(value: object) -> str:
    """Normalize a table cell to the string the scorer compares."""
    if value is None:
        raise TableFormatError("Encountered an empty table cell where a value was expected.")
    return str(value)
