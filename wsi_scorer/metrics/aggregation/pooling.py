"""Dataset-level pooling of per-head scores."""

from __future__ import annotations

from typing import Iterable

import numpy as np

from .records import AggregateResult, GroupResult


def aggregate_results(results: Iterable[GroupResult]) -> AggregateResult:
    """Average RI, sRI and wsRI over groups; a NaN in any group makes that mean NaN."""
    result_list = list(results)
    if not result_list:
        nan = float("nan")
        return AggregateResult(mean_ri=nan, mean_sri=nan, mean_wsri=nan, groups=0)

    values = np.asarray([(r.ri, r.sri, r.wsri) for r in result_list], dtype=float)
    with np.errstate(invalid="ignore", over="ignore"):
        means = values.mean(axis=0)
    return AggregateResult(
        mean_ri=float(means[0]),
        mean_sri=float(means[1]),
        mean_wsri=float(means[2]),
        groups=len(result_list),
    )
