# steel_nesting/io_csv.py
# CSV import/export helpers:
# - read estimating lines from CSV (header required)
# - export the cutting list (one row per piece per stock bar)
# - export a per-group summary
#
# (No PDF export; plotting is handled in plotting.py.)

from __future__ import annotations

import csv
from pathlib import Path
from typing import List

from .types import EstimatingLine, NestingResult
from .units import format_feet_inches


def read_lines_csv(path: str | Path) -> List[EstimatingLine]:
    """
    Read estimating lines. Column names follow the estimating grid (camelCase),
    snake_case works too. At least a length column is required.
    Empty cells are treated as missing values.
    """
    path = Path(path)
    lines: List[EstimatingLine] = []
    with path.open("r", newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        cols = set(reader.fieldnames or [])
        if not cols & {"lengthFt", "length_ft", "lengthIn", "length_in"}:
            raise ValueError("CSV must contain a lengthFt/lengthIn (or length_ft/length_in) column")
        for row in reader:
            record = {k: v for k, v in row.items() if k is not None and v not in (None, "")}
            if not record:
                continue
            lines.append(EstimatingLine.from_record(record))
    return lines


def export_cutting_list_csv(result: NestingResult, path: str | Path) -> None:
    """
    Write the cutting list. Lengths of bars are shown in feet-inches notation.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fieldnames = [
        "group",
        "stock_no",
        "stock_length_ft",
        "piece_length_ft",
        "piece_length_in",
        "cut_length_in",
        "drawing",
        "detail",
        "description",
        "line_id",
        "used_length",
        "waste_length",
        "waste_pct",
    ]

    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fieldnames)
        w.writeheader()
        for group in result.groups:
            for bar in group.stock_lengths:
                for piece in bar.pieces:
                    w.writerow(
                        {
                            "group": group.label(),
                            "stock_no": bar.index,
                            "stock_length_ft": f"{bar.length_ft:g}",
                            "piece_length_ft": f"{piece.length_ft:g}",
                            "piece_length_in": f"{piece.length_in:.2f}",
                            "cut_length_in": f"{piece.length_inches:.3f}",
                            "drawing": piece.drawing_number,
                            "detail": piece.detail_number,
                            "description": piece.item_description,
                            "line_id": piece.line_id,
                            "used_length": format_feet_inches(bar.used_length),
                            "waste_length": format_feet_inches(bar.waste_length),
                            "waste_pct": f"{bar.waste_percentage:.2f}",
                        }
                    )


def export_summary_csv(result: NestingResult, path: str | Path) -> None:
    """
    One-row-per-group summary (useful for purchasing).
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fieldnames = [
        "group",
        "shape_type",
        "size_designation",
        "grade",
        "coating_system",
        "stock_length_ft",
        "stock_bars",
        "pieces",
        "used_in",
        "waste_in",
        "waste_pct",
        "weight_lb",
    ]

    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fieldnames)
        w.writeheader()

        for group in result.groups:
            w.writerow(
                {
                    "group": group.label(),
                    "shape_type": group.shape_type or "",
                    "size_designation": group.size_designation or "",
                    "grade": group.grade or "",
                    "coating_system": group.coating_system or "",
                    "stock_length_ft": f"{result.stock_length_ft:g}" if result.stock_length_ft is not None else "",
                    "stock_bars": group.total_stock_lengths,
                    "pieces": group.total_pieces,
                    "used_in": f"{group.total_used_length:.3f}",
                    "waste_in": f"{group.total_waste_length:.3f}",
                    "waste_pct": f"{group.total_waste_percentage:.2f}",
                    "weight_lb": f"{group.total_weight:.2f}",
                }
            )


def export_all(result: NestingResult, out_dir: str | Path, prefix: str = "nesting") -> None:
    """
    Export cutting list and per-group summary into out_dir.
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    export_cutting_list_csv(result, out_dir / f"{prefix}_cutting_list.csv")
    export_summary_csv(result, out_dir / f"{prefix}_summary.csv")
