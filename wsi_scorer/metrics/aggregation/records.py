"""Shared data records for per-head and dataset-level scores."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Union


@dataclass(frozen=True)
class GroupResult:
    """Scores for a single head group. Float fields may be NaN or infinite."""

    head: str
    ri: float
    sri: float
    wsri: float
    tp: int
    fp: int
    tn: int
    fn: int
    up: int
    un: int
    precision: float
    recall: float
    f1: float
    instances: int

    def as_row(self) -> Dict[str, Union[str, int, float]]:
        """Fields keyed by their output column names."""
        return {
            "head": self.head,
            "RI": self.ri,
            "sRI": self.sri,
            "wsRI": self.wsri,
            "TP": self.tp,
            "FP": self.fp,
            "TN": self.tn,
            "FN": self.fn,
            "UP": self.up,
            "UN": self.un,
            "Precision": self.precision,
            "Recall": self.recall,
            "F1": self.f1,
            "Instances": self.instances,
        }


@dataclass(frozen=True)
class AggregateResult:
    """Unweighted means over head groups."""

    mean_ri: float
    mean_sri: float
    mean_wsri: float
    groups: int
