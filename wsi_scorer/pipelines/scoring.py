from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from ..datahub.annotated_instance import AnnotatedInstance
from ..metrics.aggregation import AggregateResult, GroupResult, aggregate_results
from ..metrics.pairwise import count_pairs
from ..metrics.scores import derive_group_result
from .bucketing import group_by_head


@dataclass(frozen=True)
class ScoreReport:
    """Per-head results plus their dataset-level means."""

    groups: Sequence[GroupResult]
    aggregate: AggregateResult


def score_group(head: str, instances: Sequence[AnnotatedInstance]) -> GroupResult:
    """Count all pairs of one head group and derive its metrics."""
    counters = count_pairs(instances)
    return derive_group_result(head, counters, len(instances))


def score_instances(
    instances: Sequence[AnnotatedInstance],
    on_group: Optional[Callable[[GroupResult], None]] = None,
) -> ScoreReport:
    """Score every head group independently, then average over groups.

    `on_group` is called once per finished group, in group order.
    """
    results: List[GroupResult] = []
    for head, members in group_by_head(instances).items():
        result = score_group(head, members)
        results.append(result)
        if on_group is not None:
            on_group(result)
    return ScoreReport(groups=tuple(results), aggregate=aggregate_results(results))
