# steel_nesting/utils.py
# Small utilities used across the project:
# - timing context manager
# - simple JSON export for nesting results (groups + bars + recommendation)
#
# Keeps dependencies minimal (stdlib only).

from __future__ import annotations

import json
import time
from contextlib import contextmanager
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

from .types import NestingResult, StockRecommendation


@contextmanager
def timer(label: str = "timer") -> Iterator[Dict[str, float]]:
    """
    Usage:
      with timer("nest") as t:
          ...
      print(t["seconds"])
    """
    t0 = time.perf_counter()
    payload: Dict[str, float] = {}
    try:
        yield payload
    finally:
        payload["seconds"] = time.perf_counter() - t0


def recommendation_to_dict(rec: Optional[StockRecommendation]) -> Optional[Dict[str, Any]]:
    if rec is None:
        return None
    return asdict(rec)


def result_to_dict(result: NestingResult) -> Dict[str, Any]:
    """
    Convert NestingResult to a JSON-friendly dict.
    Pieces are reduced to the fields a cutting list needs.
    """
    out: Dict[str, Any] = {
        "stock_length_ft": result.stock_length_ft,
        "groups": [],
        "recommendation": recommendation_to_dict(result.recommendation),
        "totals": {
            "total_stock_lengths": result.total_stock_lengths,
            "total_waste_percentage": result.total_waste_percentage,
            "total_weight": result.total_weight,
            "total_used_length_in": result.total_used_length,
            "total_waste_length_in": result.total_waste_length,
            "total_pieces": result.num_pieces(),
        },
        "warnings": list(result.warnings),
    }

    for g in result.groups:
        out["groups"].append(
            {
                "shape_type": g.shape_type,
                "size_designation": g.size_designation,
                "grade": g.grade,
                "coating_system": g.coating_system,
                "stock_lengths": [
                    {
                        "index": bar.index,
                        "length_ft": bar.length_ft,
                        "used_length_in": bar.used_length,
                        "waste_length_in": bar.waste_length,
                        "waste_percentage": bar.waste_percentage,
                        "pieces": [
                            {
                                "line_id": p.line_id,
                                "drawing_number": p.drawing_number,
                                "detail_number": p.detail_number,
                                "item_description": p.item_description,
                                "length_inches": p.length_inches,
                            }
                            for p in bar.pieces
                        ],
                    }
                    for bar in g.stock_lengths
                ],
                "totals": {
                    "total_stock_lengths": g.total_stock_lengths,
                    "total_used_length_in": g.total_used_length,
                    "total_waste_length_in": g.total_waste_length,
                    "total_waste_percentage": g.total_waste_percentage,
                    "total_weight": g.total_weight,
                    "total_pieces": g.total_pieces,
                },
            }
        )

    return out


def save_result_json(result: NestingResult, path: str | Path, *, indent: int = 2) -> None:
    """Save the nesting result into JSON for debugging/integration."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(result_to_dict(result), f, ensure_ascii=False, indent=indent)
