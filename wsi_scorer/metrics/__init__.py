"""Pairwise agreement metrics for word sense induction output."""

from .aggregation import AggregateResult, GroupResult, aggregate_results
from .pairwise import PairCounters, PairOutcome, classify_pair, count_pairs
from .scores import derive_group_result, rand_association

__all__ = [
    "AggregateResult",
    "GroupResult",
    "PairCounters",
    "PairOutcome",
    "aggregate_results",
    "classify_pair",
    "count_pairs",
    "derive_group_result",
    "rand_association",
]
