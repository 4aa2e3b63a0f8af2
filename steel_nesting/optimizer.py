# steel_nesting/optimizer.py
# Pick the stock length that wastes the least across the whole job.
#
# Every candidate is packed against ALL pieces (ignoring material groups), since the
# choice of mill length interacts with the full mix of cut lengths. Actual cutting is
# done per group afterwards, at the winning length.
#
# Ranking: waste % ascending; when two candidates are within DEFAULTS.waste_tie_pct
# of each other, the one needing fewer bars goes first.

from __future__ import annotations

from functools import cmp_to_key
from typing import List, Optional, Sequence

from .config import DEFAULTS
from .errors import InvalidNestingConfig, PieceTooLongForStock
from .logger import get_logger
from .metrics import compute_bar_totals
from .packer import pack_best_fit_decreasing
from .types import Piece, StockOption, StockRecommendation


def evaluate_stock_length(pieces: Sequence[Piece], stock_length_ft: float, kerf: float) -> StockOption:
    """Pack all pieces at one stock length and summarise the outcome."""
    bars = pack_best_fit_decreasing(pieces, stock_length_ft, kerf)
    totals = compute_bar_totals(bars)
    return StockOption(
        stock_length_ft=stock_length_ft,
        quantity=totals.bar_count,
        waste_percentage=totals.waste_percentage,
        total_waste_inches=totals.waste_inches,
        efficiency=totals.efficiency,
    )


def compare_options(a: StockOption, b: StockOption) -> float:
    if abs(a.waste_percentage - b.waste_percentage) < DEFAULTS.waste_tie_pct:
        return a.quantity - b.quantity
    return a.waste_percentage - b.waste_percentage


def rank_options(options: Sequence[StockOption]) -> List[StockOption]:
    """Stable ranking; equal options keep candidate order."""
    return sorted(options, key=cmp_to_key(compare_options))


def optimize_stock_length(
    pieces: Sequence[Piece],
    stock_length_options: Sequence[float] = DEFAULTS.candidate_stock_lengths_ft,
    kerf: float = DEFAULTS.kerf,
    max_alternatives: int = DEFAULTS.max_alternatives,
) -> StockRecommendation:
    """
    Evaluate each candidate stock length and recommend the best one.

    Candidates too short for the longest piece are dropped; if none is long enough,
    the PieceTooLongForStock from the longest candidate is raised.
    Empty input yields a zero recommendation at the first candidate length.
    """
    if not stock_length_options:
        raise InvalidNestingConfig("stock_length_options must not be empty")

    if not pieces:
        return StockRecommendation(
            stock_length_ft=stock_length_options[0],
            quantity=0,
            waste_percentage=0.0,
            total_waste_inches=0.0,
            efficiency=0.0,
        )

    log = get_logger()
    options: List[StockOption] = []
    skipped: List[float] = []
    last_error: Optional[PieceTooLongForStock] = None

    for stock_length_ft in stock_length_options:
        try:
            opt = evaluate_stock_length(pieces, stock_length_ft, kerf)
        except PieceTooLongForStock as e:
            log.warn(f"{stock_length_ft:g}' stock skipped: {e}")
            skipped.append(stock_length_ft)
            if last_error is None or e.stock_length_in > last_error.stock_length_in:
                last_error = e
            continue
        log.info(
            f"{stock_length_ft:g}' stock: {opt.quantity} bars, "
            f"waste {opt.waste_percentage:.2f}% ({opt.total_waste_inches:.2f}\")"
        )
        options.append(opt)

    if last_error is not None and not options:
        raise last_error

    ranked = rank_options(options)
    best = ranked[0]

    return StockRecommendation(
        stock_length_ft=best.stock_length_ft,
        quantity=best.quantity,
        waste_percentage=best.waste_percentage,
        total_waste_inches=best.total_waste_inches,
        efficiency=best.efficiency,
        alternative_options=list(ranked[1 : 1 + max_alternatives]),
        skipped_stock_lengths_ft=skipped,
    )
