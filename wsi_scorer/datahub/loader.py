from __future__ import annotations

from typing import List

import pandas as pd

from .annotated_instance import AnnotatedInstance
from .config import HEAD_COLUMN
from .helpers import TableFormatError, clean_cell, require_columns, select_sense_columns
from .io import read_table
from .request import ScoreRequest


def load_frame(request: ScoreRequest) -> pd.DataFrame:
    """Read INFILE and, when requested, attach the cluster column from the cluster file by row position."""
    frame = read_table(request.infile)
    if request.cluster_file is None:
        return frame

    cluster_frame = read_table(request.cluster_file, columns=[request.cluster_column])
    if len(cluster_frame) != len(frame):
        raise TableFormatError(
            f"{request.cluster_file} has {len(cluster_frame)} rows but {request.infile} has {len(frame)}; "
            "rows must be aligned by position."
        )

    renamed = request.effective_cluster_column
    if renamed in frame.columns:
        raise TableFormatError(f"{request.infile} already contains a column named '{renamed}'.")
    clusters = cluster_frame[request.cluster_column].reset_index(drop=True).rename(renamed)
    return pd.concat([frame.reset_index(drop=True), clusters], axis=1)


def load_instances(request: ScoreRequest) -> List[AnnotatedInstance]:
    """Load every row of the request's tables as an AnnotatedInstance, in input order."""
    frame = load_frame(request)
    header = [str(name) for name in frame.columns]
    cluster_column = request.effective_cluster_column

    require_columns(header, [HEAD_COLUMN, cluster_column], str(request.infile))
    sense_columns = select_sense_columns(header, cluster_column)

    heads = frame[HEAD_COLUMN].tolist()
    clusters = frame[cluster_column].tolist()
    sense_rows = frame[sense_columns].itertuples(index=False, name=None)

    instances: List[AnnotatedInstance] = []
    for head, senses, cluster in zip(heads, sense_rows, clusters):
        instances.append(
            AnnotatedInstance(
                head=clean_cell(head),
                senses=tuple(clean_cell(sense) for sense in senses),
                cluster=clean_cell(cluster),
            )
        )
    return instances
