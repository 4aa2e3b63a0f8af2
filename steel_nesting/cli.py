# steel_nesting/cli.py
# Command line front end:
# - reads estimating lines from CSV (or a job JSON with settings)
# - nests them, optionally picking the best stock length
# - prints recommendation + per-group bars
# - optional CSV/JSON export folder and PNG cutting diagram
#
# Run:
#   python -m steel_nesting --lines lines.csv --out out/
#   python -m steel_nesting --job job.json --png cutting.png
#
# CSV lines format (header required, camelCase like the estimating grid):
#   lineId,status,materialType,shapeType,sizeDesignation,grade,lengthFt,lengthIn,qty,weightPerFoot,useStockRounding

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Tuple

from .config import DEFAULTS, NestingConfig, make_config, parse_lengths_text
from .debug import print_result
from .io_csv import read_lines_csv
from .io_json import load_job_json
from .logger import get_logger, set_enabled
from .plotting import PlotStyle, save_result_png, show_result
from .run import run_nesting
from .types import EstimatingLine


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Structural steel material nesting (best-fit-decreasing)")
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--lines", type=str, help="Path to estimating lines CSV")
    src.add_argument("--job", type=str, help="Path to job JSON (lines + settings)")

    p.add_argument("--stock_length", type=float, default=None, help="Desired stock length in feet")
    p.add_argument(
        "--candidates",
        type=str,
        default=",".join(f"{x:g}" for x in DEFAULTS.candidate_stock_lengths_ft),
        help="Candidate stock lengths in feet, e.g. 20,40,60",
    )
    p.add_argument("--rounding", type=float, default=None, help="Stock rounding increment in inches")
    p.add_argument("--kerf", type=float, default=None, help="Saw kerf per piece in inches")
    p.add_argument("--no_optimize", action="store_true", help="Use --stock_length (default 20') as-is")

    p.add_argument("--out", type=str, default="", help="Output directory for CSV + JSON exports (optional)")
    p.add_argument("--prefix", type=str, default="nesting", help="Export filename prefix")
    p.add_argument("--png", type=str, default="", help="Save cutting diagram as PNG (optional)")
    p.add_argument("--show", action="store_true", help="Show cutting diagram in a matplotlib window")
    p.add_argument("--no_labels", action="store_true", help="Hide line ids in plot")
    p.add_argument("--no_dims", action="store_true", help="Hide piece lengths in plot")
    p.add_argument("--verbose", action="store_true", help="Log optimizer and nesting steps")
    return p


def _load(args: argparse.Namespace) -> Tuple[List[EstimatingLine], NestingConfig]:
    if args.job:
        job_path = Path(args.job)
        if not job_path.exists():
            raise SystemExit(f"Job JSON not found: {job_path}")
        loaded = load_job_json(job_path)
        overrides = {}
        if args.stock_length is not None:
            overrides["desired_stock_length_ft"] = args.stock_length
        if args.rounding is not None:
            overrides["stock_rounding_increment"] = args.rounding
        if args.kerf is not None:
            overrides["kerf"] = args.kerf
        if args.no_optimize:
            overrides["run_optimization"] = False
        return loaded.lines, replace(loaded.config, **overrides)

    lines = read_lines_csv(Path(args.lines))
    config = make_config(
        stock_rounding_increment=args.rounding,
        kerf=args.kerf,
        candidate_stock_lengths_ft=parse_lengths_text(args.candidates),
        desired_stock_length_ft=args.stock_length,
        run_optimization=not args.no_optimize,
    )
    return lines, config


def main(argv: Optional[List[str]] = None) -> None:
    args = build_argparser().parse_args(argv)
    set_enabled(args.verbose)
    log = get_logger()

    try:
        lines, config = _load(args)
        if not lines:
            raise SystemExit("No lines found.")
        res = run_nesting(
            lines,
            config,
            validate=True,
            out_dir=args.out.strip() or None,
            export_prefix=args.prefix,
        )
    except ValueError as e:
        log.error(str(e))
        raise SystemExit(2) from e

    result = res.result
    if result.warnings:
        print(f"{len(result.warnings)} warning(s); rerun with --verbose for details")
    if not result.groups:
        print("Nothing to nest (no active, non-plate lines with a length).")
        return

    print(f"Stock length: {result.stock_length_ft:g}'  pieces: {result.num_pieces()}  ({res.seconds:.3f} s)")
    print_result(result)

    if args.out.strip():
        print(f"Exported CSV + JSON to: {args.out.strip()}")

    style = PlotStyle(show_labels=not args.no_labels, show_dims=not args.no_dims)
    if args.png.strip():
        save_result_png(result, args.png.strip(), kerf=config.kerf, style=style)
        print(f"Cutting diagram saved to: {args.png.strip()}")

    if args.show:
        show_result(result, kerf=config.kerf, style=style)


if __name__ == "__main__":
    main()
