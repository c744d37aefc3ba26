"""Rendering of scoring results as summary lines and a tab-separated table."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Iterable, TextIO

import pandas as pd

from ..datahub.config import OUTPUT_COLUMNS
from ..datahub.io import write_table
from .aggregation.records import AggregateResult, GroupResult

if TYPE_CHECKING:
    from ..pipelines.scoring import ScoreReport


def format_score(value: float) -> str:
    """Render a summary score, spelling NaN as `NaN` like the table does."""
    if math.isnan(value):
        return "NaN"
    return str(value)


def results_frame(results: Iterable[GroupResult]) -> pd.DataFrame:
    """One row per head group, columns in output order."""
    rows = [result.as_row() for result in results]
    return pd.DataFrame(rows, columns=list(OUTPUT_COLUMNS))


def write_summary(aggregate: AggregateResult, handle: TextIO) -> None:
    """Write the three dataset-level mean lines."""
    handle.write(f"mean RI: {format_score(aggregate.mean_ri)}\n")
    handle.write(f"mean sRI: {format_score(aggregate.mean_sri)}\n")
    handle.write(f"mean wsRI: {format_score(aggregate.mean_wsri)}\n")


def write_results(results: Iterable[GroupResult], handle: TextIO) -> None:
    """Write the per-head table."""
    write_table(results_frame(results), handle)


def write_report(report: "ScoreReport", handle: TextIO) -> None:
    """Write the summary lines followed by the per-head table."""
    write_summary(report.aggregate, handle)
    write_results(report.groups, handle)


__all__ = ["format_score", "results_frame", "write_report", "write_results", "write_summary"]
