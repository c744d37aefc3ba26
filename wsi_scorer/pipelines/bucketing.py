from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Dict, Generic, Iterable, List, Sequence, TypeVar

from ..datahub.annotated_instance import AnnotatedInstance

SampleT = TypeVar("SampleT")
HeadKey = str


@dataclass(frozen=True)
class BucketPlan(Generic[SampleT]):
    """Samples grouped by key, keys in order of first appearance."""

    buckets: Dict[HeadKey, List[SampleT]]

    @property
    def sizes(self) -> Dict[HeadKey, int]:
        return {key: len(samples) for key, samples in self.buckets.items()}

    def __len__(self) -> int:
        return len(self.buckets)


def build_bucket_plan(
    samples: Iterable[SampleT],
    key_fn: Callable[[SampleT], HeadKey],
) -> BucketPlan[SampleT]:
    """Group samples by `key_fn`, preserving input order inside each bucket."""
    buckets: Dict[HeadKey, List[SampleT]] = defaultdict(list)
    for sample in samples:
        buckets[key_fn(sample)].append(sample)
    return BucketPlan(buckets=dict(buckets))


def group_by_head(instances: Sequence[AnnotatedInstance]) -> Dict[HeadKey, List[AnnotatedInstance]]:
    """Partition instances into head groups."""
    return build_bucket_plan(instances, lambda instance: instance.head).buckets
