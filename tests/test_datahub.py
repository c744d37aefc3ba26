"""Tests for the datahub table readers, loader, and request handling."""

from __future__ import annotations

import io
from pathlib import Path
import sys
from typing import Sequence

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pandas as pd

from wsi_scorer.datahub.annotated_instance import AnnotatedInstance, is_unclear
from wsi_scorer.datahub.helpers import TableFormatError, select_sense_columns
from wsi_scorer.datahub.io import read_table, write_table
from wsi_scorer.datahub.loader import load_frame, load_instances
from wsi_scorer.datahub.request import ScoreRequest


# ---------------------------------------------------------------------------
# Helper fixtures and utilities


def _write_tsv(path: Path, rows: Sequence[Sequence[str]]) -> Path:
    path.write_text("".join("\t".join(row) + "\n" for row in rows), encoding="utf-8")
    return path


def _annotations(tmp_path: Path) -> Path:
    return _write_tsv(
        tmp_path / "gold.tsv",
        [
            ("id", "head", "sense_b", "cluster", "sense_a"),
            ("1", "bank", "1", "c1", "1"),
            ("2", "bank", "2x", "c2", "2"),
            ("3", "cell", "1", "c1", ""),
        ],
    )


# ---------------------------------------------------------------------------
# Record model


def test_is_unclear_checks_final_character() -> None:
    assert is_unclear("2x")
    assert is_unclear("x")
    assert not is_unclear("x2")
    assert not is_unclear("")


# ---------------------------------------------------------------------------
# Table IO


def test_read_table_keeps_cells_as_strings(tmp_path: Path) -> None:
    path = _write_tsv(tmp_path / "t.tsv", [("head", "sense1"), ("bank", "007"), ("NA", "")])
    frame = read_table(path)
    assert list(frame.columns) == ["head", "sense1"]
    assert frame["sense1"].tolist() == ["007", ""]
    assert frame["head"].tolist() == ["bank", "NA"]


def test_read_table_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_table(tmp_path / "absent.tsv")


def test_write_table_is_tab_separated_with_nan_marker() -> None:
    frame = pd.DataFrame([{"head": "bank", "RI": 0.5, "sRI": float("nan"), "TP": 3}])
    handle = io.StringIO()
    write_table(frame, handle)
    assert handle.getvalue().splitlines() == ["head\tRI\tsRI\tTP", "bank\t0.5\tNaN\t3"]


# ---------------------------------------------------------------------------
# Loader


def test_load_instances_keeps_sense_column_order(tmp_path: Path) -> None:
    instances = load_instances(ScoreRequest(infile=_annotations(tmp_path)))
    assert instances == [
        AnnotatedInstance(head="bank", senses=("1", "1"), cluster="c1"),
        AnnotatedInstance(head="bank", senses=("2x", "2"), cluster="c2"),
        AnnotatedInstance(head="cell", senses=("1", ""), cluster="c1"),
    ]


def test_load_instances_custom_cluster_column(tmp_path: Path) -> None:
    path = _write_tsv(
        tmp_path / "gold.tsv",
        [("head", "sense1", "sense2", "system"), ("bank", "1", "1", "k9")],
    )
    instances = load_instances(ScoreRequest(infile=path, cluster_column="system"))
    assert instances[0].cluster == "k9"


def test_cluster_column_with_sense_prefix_is_not_a_sense(tmp_path: Path) -> None:
    path = _write_tsv(
        tmp_path / "gold.tsv",
        [("head", "sense1", "sense2", "sense_pred"), ("bank", "1", "2", "k")],
    )
    instances = load_instances(ScoreRequest(infile=path, cluster_column="sense_pred"))
    assert instances[0].senses == ("1", "2")
    assert instances[0].cluster == "k"


def test_load_instances_from_cluster_file(tmp_path: Path) -> None:
    infile = _annotations(tmp_path)
    cluster_file = _write_tsv(
        tmp_path / "system.tsv",
        [("cluster", "sense_extra"), ("k1", "zz"), ("k1", "zz"), ("k2", "zz")],
    )
    request = ScoreRequest(infile=infile, cluster_file=cluster_file)

    frame = load_frame(request)
    assert "cluster__clusterfile__" in frame.columns
    assert "sense_extra" not in frame.columns

    instances = load_instances(request)
    assert [instance.cluster for instance in instances] == ["k1", "k1", "k2"]
    assert [instance.senses for instance in instances] == [("1", "1"), ("2x", "2"), ("1", "")]


def test_cluster_file_must_be_row_aligned(tmp_path: Path) -> None:
    cluster_file = _write_tsv(tmp_path / "system.tsv", [("cluster",), ("k1",)])
    with pytest.raises(TableFormatError):
        load_instances(ScoreRequest(infile=_annotations(tmp_path), cluster_file=cluster_file))


def test_cluster_file_missing_column(tmp_path: Path) -> None:
    cluster_file = _write_tsv(tmp_path / "system.tsv", [("label",), ("k1",), ("k1",), ("k2",)])
    with pytest.raises(TableFormatError):
        load_instances(ScoreRequest(infile=_annotations(tmp_path), cluster_file=cluster_file))


def test_missing_head_column(tmp_path: Path) -> None:
    path = _write_tsv(tmp_path / "gold.tsv", [("lemma", "sense1", "sense2", "cluster"), ("bank", "1", "1", "c")])
    with pytest.raises(TableFormatError):
        load_instances(ScoreRequest(infile=path))


def test_missing_cluster_column(tmp_path: Path) -> None:
    path = _write_tsv(tmp_path / "gold.tsv", [("head", "sense1", "sense2"), ("bank", "1", "1")])
    with pytest.raises(ValueError):
        load_instances(ScoreRequest(infile=path))


def test_select_sense_columns_requires_two() -> None:
    assert select_sense_columns(["head", "sense2", "sense1", "cluster"], "cluster") == ["sense2", "sense1"]
    with pytest.raises(TableFormatError):
        select_sense_columns(["head", "sense1", "cluster"], "cluster")


# ---------------------------------------------------------------------------
# Request


def test_score_request_from_flags_defaults(tmp_path: Path) -> None:
    request = ScoreRequest.from_flags(tmp_path / "gold.tsv", None, None)
    assert request.cluster_column == "cluster"
    assert request.effective_cluster_column == "cluster"


def test_score_request_renames_cluster_file_column(tmp_path: Path) -> None:
    request = ScoreRequest.from_flags(tmp_path / "gold.tsv", "system", tmp_path / "system.tsv")
    assert request.effective_cluster_column == "system__clusterfile__"


def test_score_request_rejects_blank_cluster_column(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        ScoreRequest.from_flags(tmp_path / "gold.tsv", "  ", None)


# ---------------------------------------------------------------------------
# Malformed tables


def test_read_table_rejects_short_rows(tmp_path: Path) -> None:
    path = _write_tsv(
        tmp_path / "gold.tsv",
        [("head", "sense1", "sense2", "cluster"), ("X", "1", "1", "A"), ("X", "2", "2")],
    )
    with pytest.raises(TableFormatError):
        read_table(path)


def test_load_instances_rejects_rows_longer_than_header(tmp_path: Path) -> None:
    path = _write_tsv(
        tmp_path / "gold.tsv",
        [("head", "sense1", "sense2", "cluster"), ("X", "1", "1", "A", "extra"), ("X", "2", "2", "B", "extra")],
    )
    with pytest.raises(TableFormatError):
        load_instances(ScoreRequest(infile=path))


def test_read_table_rejects_later_long_row(tmp_path: Path) -> None:
    path = _write_tsv(
        tmp_path / "gold.tsv",
        [("head", "sense1", "sense2", "cluster"), ("X", "1", "1", "A"), ("X", "2", "2", "B", "extra")],
    )
    with pytest.raises(TableFormatError):
        read_table(path)


def test_read_table_column_subset(tmp_path: Path) -> None:
    path = _write_tsv(tmp_path / "system.tsv", [("note", "cluster"), ("ok", "k1"), ("ok", "k2")])
    frame = read_table(path, columns=["cluster"])
    assert list(frame.columns) == ["cluster"]
    assert frame["cluster"].tolist() == ["k1", "k2"]
    with pytest.raises(TableFormatError):
        read_table(path, columns=["pred"])


def test_cluster_file_ignores_ragged_unrelated_columns(tmp_path: Path) -> None:
    cluster_file = _write_tsv(
        tmp_path / "system.tsv",
        [("cluster", "note"), ("k1", "ok"), ("k1",), ("k2", "ok")],
    )
    instances = load_instances(ScoreRequest(infile=_annotations(tmp_path), cluster_file=cluster_file))
    assert [instance.cluster for instance in instances] == ["k1", "k1", "k2"]
    assert [instance.head for instance in instances] == ["bank", "bank", "cell"]


def test_write_table_keeps_cells_verbatim() -> None:
    frame = pd.DataFrame([{"head": 'say"s', "RI": 1.0}, {"head": "a\\b", "RI": float("inf")}])
    handle = io.StringIO()
    write_table(frame, handle)
    assert handle.getvalue().splitlines() == ["head\tRI", 'say"s\t1.0', "a\\b\tinf"]
