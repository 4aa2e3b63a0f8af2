# steel_nesting/test_validate.py
# Result validation catches broken results.

from __future__ import annotations

from dataclasses import replace

import pytest

from steel_nesting.extract import extract_nestable_pieces
from steel_nesting.nesting import nest_material
from steel_nesting.types import EstimatingLine
from steel_nesting.validate import raise_on_errors, validate_result


def _lines():
    return [
        EstimatingLine(line_id="A", shape_type="W", size_designation="W12x26", grade="A992",
                       length_ft=9, length_in=6, qty=3),
        EstimatingLine(line_id="B", shape_type="L", size_designation="L4x4x3/8", grade="A36",
                       length_ft=4, length_in=0, qty=2),
    ]


def test_clean_result_has_no_errors() -> None:
    lines = _lines()
    res = nest_material(lines, stock_length_ft=20, optimize=False)
    issues = validate_result(res, pieces=extract_nestable_pieces(lines), kerf=0.125)
    assert [i for i in issues if i.level == "ERROR"] == []


def test_missing_piece_is_detected() -> None:
    lines = _lines()
    res = nest_material(lines, stock_length_ft=20, optimize=False)
    res.groups[0].stock_lengths[0].pieces.pop()

    issues = validate_result(res, pieces=extract_nestable_pieces(lines))
    assert any("not placed" in i.message for i in issues)
    with pytest.raises(ValueError):
        raise_on_errors(issues)


def test_over_capacity_and_wrong_group_are_detected() -> None:
    res = nest_material(_lines(), stock_length_ft=20, optimize=False)
    w_bar = res.groups[0].stock_lengths[0]
    w_bar.used_length = 250
    w_bar.waste_length = -10

    stray = replace(res.groups[1].stock_lengths[0].pieces[0])
    w_bar.pieces.append(stray)

    messages = [i.message for i in validate_result(res)]
    assert any("over capacity" in m for m in messages)
    assert any("placed in group" in m for m in messages)
    assert any("Piece count mismatch" in m for m in messages)


def test_empty_result_only_warns() -> None:
    issues = validate_result(nest_material([]))
    assert [i.level for i in issues] == ["WARN"]
    raise_on_errors(issues)
