"""Aggregation helpers for turning head-level scores into dataset summaries."""

from .pooling import aggregate_results
from .records import AggregateResult, GroupResult

__all__ = [
    "AggregateResult",
    "GroupResult",
    "aggregate_results",
]
