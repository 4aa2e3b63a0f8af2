# steel_nesting/packer.py
# Best-Fit-Decreasing (BFD) heuristic for 1D bin packing of cut pieces into stock bars.
#
# - pieces sorted longest first; equal lengths keep extraction order (stable sort)
# - each piece goes into the open bar that is left with the least slack after placing it
#   (first such bar wins a tie); if none fits, a new bar is opened
# - kerf is charged once per placed piece, including the last piece on a bar
#
# This is a heuristic, not an exact solver.

from __future__ import annotations

from typing import Iterable, List, Optional

from .config import DEFAULTS
from .errors import PieceTooLongForStock
from .metrics import finalize_bar
from .types import Piece, StockBar


def sort_decreasing(pieces: Iterable[Piece]) -> List[Piece]:
    """Longest first. sorted() is stable, so ties stay in input order."""
    return sorted(pieces, key=lambda p: p.length_inches, reverse=True)


def _best_fit(bars: List[StockBar], required: float) -> Optional[StockBar]:
    best: Optional[StockBar] = None
    best_slack = float("inf")
    for bar in bars:
        available = bar.available()
        if required <= available:
            slack = available - required
            if slack < best_slack:
                best = bar
                best_slack = slack
    return best


def pack_best_fit_decreasing(
    pieces: Iterable[Piece],
    stock_length_ft: float = DEFAULTS.default_stock_length_ft,
    kerf: float = DEFAULTS.kerf,
) -> List[StockBar]:
    """
    Pack pieces into bars of stock_length_ft.
    Raises PieceTooLongForStock for a piece that cannot fit even an empty bar.
    """
    stock_inches = stock_length_ft * 12
    bars: List[StockBar] = []

    for piece in sort_decreasing(pieces):
        required = piece.length_inches + kerf
        if required > stock_inches:
            raise PieceTooLongForStock(piece.line_id, piece.length_inches, stock_inches, kerf)

        bar = _best_fit(bars, required)
        if bar is None:
            bar = StockBar(length_ft=stock_length_ft, index=len(bars) + 1)
            bars.append(bar)
        bar.place(piece, kerf)

    for bar in bars:
        finalize_bar(bar)

    return bars
