"""Parameters describing one scoring run's inputs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .config import CLUSTER_FILE_SUFFIX, DEFAULT_CLUSTER_COLUMN


@dataclass(frozen=True)
class ScoreRequest:
    """Where the gold annotations and the predicted clusters come from."""

    infile: Path
    cluster_column: str = DEFAULT_CLUSTER_COLUMN
    cluster_file: Optional[Path] = None

    @classmethod
    def from_flags(
        cls,
        infile: Path,
        cluster_col: Optional[str],
        cluster_file: Optional[Path],
    ) -> "ScoreRequest":
        """Translate CLI flags into a normalized request."""
        request = cls(
            infile=Path(infile),
            cluster_column=cluster_col or DEFAULT_CLUSTER_COLUMN,
            cluster_file=Path(cluster_file) if cluster_file is not None else None,
        )
        request.validate()
        return request

    def validate(self) -> None:
        if not self.cluster_column.strip():
            raise ValueError("Cluster column name cannot be empty.")

    @property
    def effective_cluster_column(self) -> str:
        """Column name holding the predicted clusters once both tables are joined."""
        if self.cluster_file is None:
            return self.cluster_column
        return self.cluster_column + CLUSTER_FILE_SUFFIX


__all__ = ["ScoreRequest"]
