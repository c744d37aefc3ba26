from dataclasses import dataclass
from typing import Tuple

from .config import UNCLEAR_SUFFIX


@dataclass(frozen=True)
class AnnotatedInstance:
    """One instance of a head word with its gold sense judgments and predicted cluster."""

    head: str
    senses: Tuple[str, ...]
    cluster: str

    @property
    def sense_count(self) -> int:
        return len(self.senses)


def is_unclear(sense: str) -> bool:
    """True when a gold sense value marks an unusable annotation."""
    return sense.endswith(UNCLEAR_SUFFIX)
