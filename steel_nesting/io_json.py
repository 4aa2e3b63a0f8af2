# steel_nesting/io_json.py
# Load a nesting job from JSON: the estimating lines plus the nesting settings.
#
# Expected JSON shape:
# {
#   "lines": [{"lineId": "L1", "shapeType": "W", "sizeDesignation": "W12x26",
#              "grade": "A992", "lengthFt": 9, "lengthIn": 6, "qty": 3, ...}],
#   "settings": {"stockRounding": 0.125, "cuttingWaste": 0.125,
#                "stockLengthFt": 20, "candidateStockLengthsFt": [20, 40, 60],
#                "optimize": true}
# }

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Mapping

from .config import NestingConfig, make_config
from .types import EstimatingLine


@dataclass(frozen=True)
class JsonLoadResult:
    lines: List[EstimatingLine]
    config: NestingConfig


def _setting(settings: Mapping[str, Any], camel: str, snake: str) -> Any:
    return settings[camel] if camel in settings else settings.get(snake)


def load_job_json(path: str | Path) -> JsonLoadResult:
    """
    Load job definition from JSON and convert to ([EstimatingLine], NestingConfig).
    Missing settings fall back to DEFAULTS. The config is not validated here.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, list):
        data = {"lines": data}

    raw_lines = data.get("lines")
    if raw_lines is None:
        raise ValueError("JSON missing 'lines'.")

    settings = data.get("settings") or {}
    optimize = _setting(settings, "optimize", "run_optimization")

    config = make_config(
        stock_rounding_increment=_setting(settings, "stockRounding", "stock_rounding_increment"),
        kerf=_setting(settings, "cuttingWaste", "kerf"),
        candidate_stock_lengths_ft=_setting(settings, "candidateStockLengthsFt", "candidate_stock_lengths_ft"),
        desired_stock_length_ft=_setting(settings, "stockLengthFt", "desired_stock_length_ft"),
        run_optimization=True if optimize is None else bool(optimize),
    )

    lines = [EstimatingLine.from_record(rec) for rec in raw_lines]
    return JsonLoadResult(lines=lines, config=config)
