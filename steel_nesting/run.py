# steel_nesting/run.py
# High-level convenience runner that ties together:
# - extraction + nesting
# - validation
# - optional CSV / JSON export
# - optional matplotlib cutting diagram
#
# This is meant to be called from your own scripts or a future API layer.
# Example:
#   from steel_nesting.run import run_nesting
#   res = run_nesting(lines, config, out_dir="out")

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from matplotlib.figure import Figure

from .config import NestingConfig
from .extract import LineLike, extract_pieces
from .io_csv import export_all
from .nesting import nest_pieces
from .plotting import PlotStyle, plot_result
from .types import NestingResult, Piece
from .utils import save_result_json, timer
from .validate import raise_on_errors, validate_result


@dataclass(frozen=True)
class RunResult:
    result: NestingResult
    pieces: List[Piece]
    seconds: float
    fig: Optional[Figure] = None     # set when show_plot=True and something was nested


def run_nesting(
    lines: Iterable[LineLike],
    config: Optional[NestingConfig] = None,
    *,
    validate: bool = True,
    out_dir: Optional[str | Path] = None,
    export_prefix: str = "nesting",
    show_plot: bool = False,
    plot_style: Optional[PlotStyle] = None,
) -> RunResult:
    """
    Run nesting end-to-end.

    With show_plot=True (and something nested) the cutting diagram is put on RunResult.fig.
    """
    config = config or NestingConfig()
    config.validate()

    with timer("nest") as t:
        extraction = extract_pieces(lines, config.stock_rounding_increment)
        pieces = extraction.pieces
        result = nest_pieces(pieces, config, extraction.warnings)

    if validate and result.groups:
        issues = validate_result(result, pieces=pieces, kerf=config.kerf)
        raise_on_errors(issues)

    fig = None
    if show_plot and result.groups:
        fig = plot_result(result, kerf=config.kerf, style=plot_style or PlotStyle())

    res = RunResult(result=result, pieces=pieces, seconds=t["seconds"], fig=fig)

    if out_dir is not None:
        out = Path(out_dir)
        export_all(result, out_dir=out, prefix=export_prefix)
        save_result_json(result, out / f"{export_prefix}.json")

    return res
