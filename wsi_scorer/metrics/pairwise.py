"""Pairwise agreement counts between gold sense judgments and predicted clusters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Sequence

import numpy as np

from ..datahub.annotated_instance import AnnotatedInstance, is_unclear
from ..datahub.config import UNCLEAR_SUFFIX

# Tolerance band around full agreement / full disagreement.
AGREEMENT_THRESHOLD = 0.25
# A pair is scored only when more than this share of sense slots is usable on both sides.
INCLUSION_RATIO = 0.5

CountBucket = Literal["TP", "FP", "TN", "FN", "UP", "UN"]
WeightBucket = Literal["TPw", "FPw", "TNw", "FNw"]


@dataclass(frozen=True)
class PairOutcome:
    """Classification of a single ordered pair of instances."""

    bucket: CountBucket
    weight_bucket: WeightBucket
    weight: float
    ratio: float


@dataclass
class PairCounters:
    """Contingency counts for one head group, hard and weighted."""

    TP: int = 0
    FP: int = 0
    TN: int = 0
    FN: int = 0
    UP: int = 0
    UN: int = 0
    TPw: float = 0.0
    FPw: float = 0.0
    TNw: float = 0.0
    FNw: float = 0.0

    def record(self, outcome: PairOutcome) -> None:
        setattr(self, outcome.bucket, getattr(self, outcome.bucket) + 1)
        setattr(self, outcome.weight_bucket, getattr(self, outcome.weight_bucket) + outcome.weight)

    @property
    def counted_pairs(self) -> int:
        """Pairs that passed the inclusion gate."""
        return self.TP + self.FP + self.TN + self.FN + self.UP + self.UN


def classify_pair(
    senses_a: Sequence[str],
    senses_b: Sequence[str],
    same_cluster: bool,
) -> Optional[PairOutcome]:
    """Classify one ordered pair; returns None when too few sense slots are usable.

    Args:
        senses_a: Gold sense values of the first instance, one per annotator slot.
        senses_b: Gold sense values of the second instance, aligned with `senses_a`.
        same_cluster: Whether the system put both instances in the same cluster.

    Returns:
        PairOutcome naming the hard bucket and the weighted bucket, or None if
        the pair fails the inclusion gate and must not be counted anywhere.
    """
    if len(senses_a) != len(senses_b):
        raise ValueError("Both instances must carry the same number of sense slots.")
    total = len(senses_a)
    if total == 0:
        raise ValueError("Instances must carry at least one sense slot.")

    valid = 0
    matched = 0
    for sense_a, sense_b in zip(senses_a, senses_b):
        if is_unclear(sense_a) or is_unclear(sense_b):
            continue
        valid += 1
        if sense_a == sense_b:
            matched += 1

    if not valid / total > INCLUSION_RATIO:
        return None

    ratio = matched / valid
    weight = 2.0 * abs(0.5 - ratio)
    bucket: CountBucket
    weight_bucket: WeightBucket
    if same_cluster:
        if ratio >= 1.0 - AGREEMENT_THRESHOLD:
            bucket = "TP"
        elif ratio <= AGREEMENT_THRESHOLD:
            bucket = "FP"
        else:
            bucket = "UP"
        weight_bucket = "TPw" if ratio > 0.5 else "FPw"
    else:
        if ratio >= 1.0 - AGREEMENT_THRESHOLD:
            bucket = "FN"
        elif ratio <= AGREEMENT_THRESHOLD:
            bucket = "TN"
        else:
            bucket = "UN"
        weight_bucket = "FNw" if ratio > 0.5 else "TNw"
    return PairOutcome(bucket=bucket, weight_bucket=weight_bucket, weight=weight, ratio=ratio)


def count_pairs(instances: Sequence[AnnotatedInstance]) -> PairCounters:
    """Score all n x n ordered pairs of a head group, self pairs included.

    Equivalent to folding `classify_pair` over every (i, j), computed on
    (n, n, L) boolean arrays instead of a Python double loop.
    """
    counters = PairCounters()
    if not instances:
        return counters

    sense_count = instances[0].sense_count
    if sense_count == 0:
        raise ValueError("Instances must carry at least one sense slot.")
    if any(instance.sense_count != sense_count for instance in instances):
        raise ValueError("All instances in a group must carry the same number of sense slots.")

    senses = np.asarray([instance.senses for instance in instances], dtype=str).reshape(len(instances), sense_count)
    clusters = np.asarray([instance.cluster for instance in instances], dtype=object)

    usable = ~np.char.endswith(senses, UNCLEAR_SUFFIX)
    valid_slots = usable[:, None, :] & usable[None, :, :]
    equal_slots = senses[:, None, :] == senses[None, :, :]

    valid = valid_slots.sum(axis=2)
    matched = (valid_slots & equal_slots).sum(axis=2)

    included = valid / sense_count > INCLUSION_RATIO
    ratio = np.divide(matched, valid, out=np.zeros(valid.shape, dtype=float), where=valid > 0)
    weights = 2.0 * np.abs(0.5 - ratio)

    same_cluster = np.asarray(clusters[:, None] == clusters[None, :], dtype=bool)
    positive = included & same_cluster
    negative = included & ~same_cluster

    high = ratio >= 1.0 - AGREEMENT_THRESHOLD
    low = ratio <= AGREEMENT_THRESHOLD
    uncertain = ~(high | low)
    agrees = ratio > 0.5

    counters.TP = int(np.count_nonzero(positive & high))
    counters.FP = int(np.count_nonzero(positive & low))
    counters.UP = int(np.count_nonzero(positive & uncertain))
    counters.FN = int(np.count_nonzero(negative & high))
    counters.TN = int(np.count_nonzero(negative & low))
    counters.UN = int(np.count_nonzero(negative & uncertain))

    counters.TPw = float(weights[positive & agrees].sum())
    counters.FPw = float(weights[positive & ~agrees].sum())
    counters.FNw = float(weights[negative & agrees].sum())
    counters.TNw = float(weights[negative & ~agrees].sum())
    return counters


__all__ = [
    "AGREEMENT_THRESHOLD",
    "INCLUSION_RATIO",
    "PairCounters",
    "PairOutcome",
    "classify_pair",
    "count_pairs",
]
