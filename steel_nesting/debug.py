# steel_nesting/debug.py
# Debug / inspection helpers:
# - pretty-print stock bars and their pieces
# - quick text summary of a whole result (used by the CLI)

from __future__ import annotations

from typing import Iterable

from .types import MaterialGroup, NestingResult, StockBar, StockRecommendation
from .units import format_feet_inches


def print_bars(bars: Iterable[StockBar]) -> None:
    for bar in bars:
        cuts = ", ".join(format_feet_inches(p.length_inches) for p in bar.pieces)
        print(
            f"  #{bar.index:<3d} {bar.length_ft:g}'  used={format_feet_inches(bar.used_length):>12s} "
            f"waste={format_feet_inches(bar.waste_length):>12s} ({bar.waste_percentage:5.2f}%)  [{cuts}]"
        )


def print_group(group: MaterialGroup) -> None:
    coat = f" ({group.coating_system})" if group.coating_system else ""
    print(f"=== {group.label()}{coat} ===")
    print(
        f"Pieces: {group.total_pieces}  Bars: {group.total_stock_lengths}  "
        f"Waste: {group.total_waste_percentage:.2f}%  Weight: {group.total_weight:,.1f} lb"
    )
    print_bars(group.stock_lengths)


def print_recommendation(rec: StockRecommendation) -> None:
    print(
        f"Recommended stock: {rec.stock_length_ft:g}' x {rec.quantity} "
        f"(waste {rec.waste_percentage:.2f}%, efficiency {rec.efficiency:.2f}%)"
    )
    for alt in rec.alternative_options:
        print(f"  alt {alt.stock_length_ft:g}': {alt.quantity} pcs ({alt.waste_percentage:.2f}% waste)")


def print_result(result: NestingResult) -> None:
    if result.recommendation is not None:
        print_recommendation(result.recommendation)
    for g in result.groups:
        print_group(g)
    print(f"TOTAL BARS: {result.total_stock_lengths}")
    print(f"TOTAL WASTE: {result.total_waste_percentage:.2f}%")
    print(f"TOTAL WEIGHT: {result.total_weight:,.1f} lb")
