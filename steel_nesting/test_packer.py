# steel_nesting/test_packer.py
# Best-fit-decreasing packing.

from __future__ import annotations

from collections import Counter
from typing import List

import pytest

from steel_nesting.errors import PieceTooLongForStock
from steel_nesting.packer import pack_best_fit_decreasing
from steel_nesting.types import Piece


def _pieces(*lengths: float, prefix: str = "P") -> List[Piece]:
    return [Piece(line_id=f"{prefix}{i}", length_inches=float(x)) for i, x in enumerate(lengths)]


def test_three_114_inch_pieces_in_20ft_bars() -> None:
    bars = pack_best_fit_decreasing(_pieces(114, 114, 114), stock_length_ft=20, kerf=0.125)

    assert len(bars) == 2
    assert len(bars[0].pieces) == 2
    assert bars[0].used_length == 228.25
    assert bars[0].waste_length == 11.75
    assert len(bars[1].pieces) == 1
    assert bars[1].used_length == 114.125
    assert bars[1].waste_length == 125.875
    assert bars[1].waste_percentage == pytest.approx(125.875 / 240 * 100)
    assert [b.index for b in bars] == [1, 2]


def test_best_fit_prefers_tightest_bar_not_first() -> None:
    # 125 -> bar 1 (115 left), 120 -> bar 2 (120 left), 118 -> bar 2 (2 left),
    # 2 fits both; best fit puts it in bar 2 (first fit would use bar 1)
    bars = pack_best_fit_decreasing(_pieces(2, 118, 125, 120), stock_length_ft=20, kerf=0)

    assert [[p.length_inches for p in b.pieces] for b in bars] == [[125], [120, 118, 2]]
    assert bars[1].waste_length == 0


def test_equal_lengths_keep_extraction_order() -> None:
    pieces = [
        Piece(line_id="A", length_inches=100),
        Piece(line_id="B", length_inches=100),
        Piece(line_id="C", length_inches=150),
    ]
    bars = pack_best_fit_decreasing(pieces, stock_length_ft=20, kerf=0.125)

    assert [[p.line_id for p in b.pieces] for b in bars] == [["C"], ["A", "B"]]


def test_kerf_is_charged_per_piece() -> None:
    bars = pack_best_fit_decreasing(_pieces(60, 60, 60, 60), stock_length_ft=20, kerf=0.25)
    # 4 * 60.25 = 241 > 240, so the fourth piece needs a second bar
    assert len(bars) == 2
    assert bars[0].used_length == 3 * 60.25


def test_exact_fit_including_kerf() -> None:
    bars = pack_best_fit_decreasing(_pieces(119.875, 119.875), stock_length_ft=20, kerf=0.125)
    assert len(bars) == 1
    assert bars[0].waste_length == 0


def test_conservation_and_capacity() -> None:
    lengths = [97.5, 12, 44.125, 230, 8, 8, 8, 150.25, 60, 60, 33.75, 119, 2.5]
    pieces = _pieces(*lengths)
    bars = pack_best_fit_decreasing(pieces, stock_length_ft=20, kerf=0.125)

    placed = Counter(p for b in bars for p in b.pieces)
    assert placed == Counter(pieces)
    for b in bars:
        assert b.used_length <= b.capacity_inches
        assert b.waste_length >= 0
        assert b.waste_length == pytest.approx(b.capacity_inches - b.used_length)


def test_piece_longer_than_stock_raises() -> None:
    pieces = [Piece(line_id="L7", length_inches=252)]
    with pytest.raises(PieceTooLongForStock) as ei:
        pack_best_fit_decreasing(pieces, stock_length_ft=20, kerf=0.125)
    assert ei.value.line_id == "L7"
    assert ei.value.piece_length_in == 252
    assert ei.value.stock_length_in == 240


def test_piece_that_fits_only_without_kerf_raises() -> None:
    with pytest.raises(PieceTooLongForStock):
        pack_best_fit_decreasing(_pieces(240), stock_length_ft=20, kerf=0.125)


def test_empty_input_gives_no_bars() -> None:
    assert pack_best_fit_decreasing([], stock_length_ft=20, kerf=0.125) == []
