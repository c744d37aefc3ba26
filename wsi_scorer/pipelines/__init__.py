"""Grouping of instances by head and the end-to-end scoring run."""

from .bucketing import BucketPlan, HeadKey, build_bucket_plan, group_by_head
from .scoring import ScoreReport, score_group, score_instances

__all__ = [
    "BucketPlan",
    "HeadKey",
    "ScoreReport",
    "build_bucket_plan",
    "group_by_head",
    "score_group",
    "score_instances",
]
