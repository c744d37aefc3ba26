"""Static configuration describing the scorer's input and output tables."""

from __future__ import annotations

from typing import Tuple

# ---------------------------------------------------------------------------
# Input table layout.

HEAD_COLUMN = "head"
SENSE_COLUMN_PREFIX = "sense"
DEFAULT_CLUSTER_COLUMN = "cluster"
MIN_SENSE_COLUMNS = 2

# Sense values ending with this suffix are unclear annotations and never match.
UNCLEAR_SUFFIX = "x"

# Appended to the cluster column name when it is read from a separate file.
CLUSTER_FILE_SUFFIX = "__clusterfile__"

TABLE_SEPARATOR = "\t"

# ---------------------------------------------------------------------------
# Output table layout.

OUTPUT_COLUMNS: Tuple[str, ...] = (
    "head",
    "RI",
    "sRI",
    "wsRI",
    "TP",
    "FP",
    "TN",
    "FN",
    "UP",
    "UN",
    "Precision",
    "Recall",
    "F1",
    "Instances",
)


__all__ = [
    "CLUSTER_FILE_SUFFIX",
    "DEFAULT_CLUSTER_COLUMN",
    "HEAD_COLUMN",
    "MIN_SENSE_COLUMNS",
    "OUTPUT_COLUMNS",
    "SENSE_COLUMN_PREFIX",
    "TABLE_SEPARATOR",
    "UNCLEAR_SUFFIX",
]
