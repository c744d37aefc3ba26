import sys
from pathlib import Path
from typing import Optional

import typer

from wsi_scorer.datahub import ScoreRequest, load_instances
from wsi_scorer.datahub.config import DEFAULT_CLUSTER_COLUMN
from wsi_scorer.metrics.aggregation import GroupResult
from wsi_scorer.metrics.report import write_report, write_results, write_summary
from wsi_scorer.pipelines import score_instances

app = typer.Typer(add_completion=False)


@app.command()
def score(
    infile: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Tab-separated file with a header and no quoting: a 'head' column and two or more 'sense*' columns.",
    ),
    cluster_col: str = typer.Option(
        DEFAULT_CLUSTER_COLUMN,
        "-c",
        "--cluster-col",
        help="Column holding the WSI system output (applies to --cluster-file as well).",
        show_default=True,
    ),
    cluster_file: Optional[Path] = typer.Option(
        None,
        "-f",
        "--cluster-file",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Tab-separated file with a header and no quoting, rows in the same order as INFILE, holding the cluster column.",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "-o",
        "--output",
        dir_okay=False,
        writable=True,
        help="Write the per-head table here instead of stdout.",
    ),
    quiet: bool = typer.Option(False, "--quiet", help="Do not report progress on stderr."),
) -> None:
    """
    Score WSI cluster assignments against gold sense annotations, per head.

    Cluster values are arbitrary strings compared only for equality. Sense
    values ending with 'x' are unclear annotations and are ignored.
    """
    try:
        request = ScoreRequest.from_flags(infile, cluster_col, cluster_file)
        instances = load_instances(request)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    if not quiet:
        sense_count = instances[0].sense_count if instances else 0
        print(f"[scorer] Loaded {len(instances)} instances with {sense_count} sense columns from {infile}", file=sys.stderr)

    def report_progress(result: GroupResult) -> None:
        if not quiet:
            print(f"[scorer] processed {result.head}", file=sys.stderr)

    report = score_instances(instances, on_group=report_progress)

    if output is not None:
        write_summary(report.aggregate, sys.stdout)
        with output.open("w", encoding="utf-8", newline="") as handle:
            write_results(report.groups, handle)
        if not quiet:
            print(f"[scorer] Wrote {len(report.groups)} rows to {output}", file=sys.stderr)
    else:
        write_report(report, sys.stdout)


if __name__ == "__main__":
    app()
