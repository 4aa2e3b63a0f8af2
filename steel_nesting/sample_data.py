# steel_nesting/sample_data.py
# Utilities to generate sample / random estimating lines for quick benchmarking and tests.
# Seeded, so the same config always yields the same lines.

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Tuple

from .types import EstimatingLine


@dataclass(frozen=True)
class RandomLinesConfig:
    seed: int = 123
    n_lines: int = 25
    qty_range: Tuple[int, int] = (1, 6)

    # member lengths (feet + inches)
    ft_range: Tuple[int, int] = (1, 18)
    in_choices: Tuple[float, ...] = (0, 1.5, 3, 4.25, 6, 7.875, 9, 10.5)

    # (shape, size, weight per foot)
    sections: Tuple[Tuple[str, str, float], ...] = (
        ("W", "W12x26", 26.0),
        ("W", "W8x31", 31.0),
        ("HSS", "HSS6x6x1/4", 19.02),
        ("L", "L4x4x3/8", 9.8),
        ("C", "C10x15.3", 15.3),
    )
    grades: Tuple[str, ...] = ("A992", "A500 Gr B", "A36")

    p_void: float = 0.05
    p_plate: float = 0.10
    p_rounding: float = 0.5


def generate_random_lines(cfg: RandomLinesConfig) -> List[EstimatingLine]:
    """
    Generate a plausible takeoff: mostly rolled members, a few voided lines and plates.
    """
    rnd = random.Random(cfg.seed)
    lines: List[EstimatingLine] = []

    for i in range(cfg.n_lines):
        shape, size, wpf = rnd.choice(cfg.sections)
        r = rnd.random()
        lines.append(
            EstimatingLine(
                line_id=f"L{i + 1:03d}",
                status="Void" if r < cfg.p_void else "Active",
                material_type="Plate" if cfg.p_void <= r < cfg.p_void + cfg.p_plate else "Rolled",
                shape_type=shape,
                size_designation=size,
                grade=rnd.choice(cfg.grades),
                length_ft=float(rnd.randint(*cfg.ft_range)),
                length_in=float(rnd.choice(cfg.in_choices)),
                qty=rnd.randint(*cfg.qty_range),
                weight_per_foot=wpf,
                use_stock_rounding=rnd.random() < cfg.p_rounding,
                drawing_number=f"S-{rnd.randint(100, 120)}",
                detail_number=str(rnd.randint(1, 12)),
                item_description=f"{size} member",
            )
        )

    return lines
