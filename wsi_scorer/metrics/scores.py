"""Per-head clustering agreement metrics derived from pair counts."""

from __future__ import annotations

import numpy as np

from .aggregation.records import GroupResult
from .pairwise import PairCounters


def _divide(numerator: float, denominator: float) -> float:
    # IEEE semantics: 0/0 -> NaN, x/0 -> +-inf.
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def rand_association(tp: float, tn: float, fp: float, fn: float) -> float:
    """Signed Rand association used for both sRI and wsRI.

    Uses the additive denominator (TN+FN)(TP+FP) + (TN+FP)(TP+FN), not the
    square-root denominator of the Matthews correlation coefficient.
    """
    tp, tn, fp, fn = (np.float64(value) for value in (tp, tn, fp, fn))
    with np.errstate(invalid="ignore", over="ignore"):
        numerator = 2.0 * (tp * tn - fp * fn)
        denominator = (tn + fn) * (tp + fp) + (tn + fp) * (tp + fn)
    return _divide(numerator, denominator)


def derive_group_result(head: str, counters: PairCounters, instances: int) -> GroupResult:
    """Turn one group's pair counts into its result row."""
    tp, fp, tn, fn = counters.TP, counters.FP, counters.TN, counters.FN
    precision = _divide(tp, tp + fp)
    recall = _divide(tp, tp + fn)
    f1 = _divide(2.0 * precision * recall, precision + recall)
    ri = _divide(tp + tn, tp + tn + fp + fn)
    sri = rand_association(tp, tn, fp, fn)
    wsri = rand_association(counters.TPw, counters.TNw, counters.FPw, counters.FNw)

    return GroupResult(
        head=head,
        ri=ri,
        sri=sri,
        wsri=wsri,
        tp=tp,
        fp=fp,
        tn=tn,
        fn=fn,
        up=counters.UP,
        un=counters.UN,
        precision=precision,
        recall=recall,
        f1=f1,
        instances=instances,
    )


__all__ = ["derive_group_result", "rand_association"]
