# steel_nesting/metrics.py
# Waste arithmetic for packed stock bars:
# - per-bar waste length / waste %
# - totals over a list of bars (capacity, used, waste, waste %, efficiency)
#
# Aggregate waste % is always total waste over total capacity, never a mean of percentages.

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from .types import MaterialGroup, StockBar


@dataclass(frozen=True)
class Totals:
    bar_count: int
    capacity_inches: float
    used_inches: float

    @property
    def waste_inches(self) -> float:
        return self.capacity_inches - self.used_inches

    @property
    def waste_percentage(self) -> float:
        if self.capacity_inches <= 0:
            return 0.0
        return self.waste_inches / self.capacity_inches * 100

    @property
    def efficiency(self) -> float:
        if self.capacity_inches <= 0:
            return 0.0
        return self.used_inches / self.capacity_inches * 100


def finalize_bar(bar: StockBar) -> None:
    """Fill waste_length / waste_percentage from used_length (in-place)."""
    capacity = bar.capacity_inches
    bar.waste_length = capacity - bar.used_length
    bar.waste_percentage = bar.waste_length / capacity * 100


def compute_bar_totals(bars: Iterable[StockBar]) -> Totals:
    count = 0
    capacity = 0.0
    used = 0.0
    for bar in bars:
        count += 1
        capacity += bar.capacity_inches
        used += bar.used_length
    return Totals(bar_count=count, capacity_inches=capacity, used_inches=used)


def compute_group_totals(groups: List[MaterialGroup]) -> Totals:
    """Aggregate across groups (sum of bars, so large groups weigh more)."""
    return compute_bar_totals(bar for g in groups for bar in g.stock_lengths)
