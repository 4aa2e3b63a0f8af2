# steel_nesting/test_nesting.py
# End-to-end nesting: estimating lines -> NestingResult.

from __future__ import annotations

import pytest

from steel_nesting.config import NestingConfig
from steel_nesting.errors import InvalidNestingConfig, PieceTooLongForStock
from steel_nesting.extract import extract_nestable_pieces
from steel_nesting.nesting import nest_material, nest_with_config
from steel_nesting.sample_data import RandomLinesConfig, generate_random_lines
from steel_nesting.types import EstimatingLine
from steel_nesting.utils import result_to_dict
from steel_nesting.validate import raise_on_errors, validate_result


def _line(line_id: str, size: str = "W12x26", ft: float = 9, inch: float = 6, qty: int = 1, **kw) -> EstimatingLine:
    return EstimatingLine(
        line_id=line_id,
        shape_type="W",
        size_designation=size,
        grade="A992",
        length_ft=ft,
        length_in=inch,
        qty=qty,
        **kw,
    )


def test_single_line_qty_3_on_20ft_stock() -> None:
    res = nest_material([_line("L1", qty=3)], stock_length_ft=20, cutting_waste=0.125, optimize=False)

    assert res.recommendation is None
    assert res.stock_length_ft == 20
    assert len(res.groups) == 1
    bars = res.groups[0].stock_lengths
    assert [len(b.pieces) for b in bars] == [2, 1]
    assert (bars[0].used_length, bars[0].waste_length) == (228.25, 11.75)
    assert (bars[1].used_length, bars[1].waste_length) == (114.125, 125.875)
    assert res.total_stock_lengths == 2


def test_piece_longer_than_fixed_stock_is_reported() -> None:
    lines = [_line("L1"), _line("LONG", ft=21, inch=0)]
    with pytest.raises(PieceTooLongForStock) as ei:
        nest_material(lines, stock_length_ft=20, optimize=False)
    assert ei.value.line_id == "LONG"
    assert ei.value.piece_length_in == 252


def test_empty_lines_give_zero_result() -> None:
    res = nest_material([])
    assert res.groups == []
    assert res.total_stock_lengths == 0
    assert res.total_waste_percentage == 0
    assert res.total_weight == 0
    assert res.recommendation is None

    only_void = nest_material([_line("V", status="Void"), _line("P", material_type="Plate")])
    assert only_void.total_stock_lengths == 0
    assert only_void.recommendation is None


def test_grand_waste_is_weighted_by_capacity() -> None:
    lines = [
        _line("A", size="W8x31", ft=16, inch=8),         # 200"
        _line("B", size="W12x26", ft=8, inch=4, qty=5),  # 5 x 100"
    ]
    res = nest_material(lines, stock_length_ft=20, cutting_waste=0.125, optimize=False)
    a, b = res.groups

    assert a.total_stock_lengths == 1
    assert b.total_stock_lengths == 3
    waste = a.total_waste_length + b.total_waste_length
    capacity = (a.total_stock_lengths + b.total_stock_lengths) * 240
    assert res.total_waste_percentage == pytest.approx(waste / capacity * 100)

    mean_pct = (a.total_waste_percentage + b.total_waste_percentage) / 2
    assert res.total_waste_percentage != pytest.approx(mean_pct)


def test_optimization_recommends_40ft_for_perfect_tiling() -> None:
    # 9'-11 7/8" + 1/8" kerf = 10' exactly
    res = nest_material([_line("T", ft=9, inch=11.875, qty=4)], cutting_waste=0.125)

    assert res.recommendation is not None
    assert res.recommendation.stock_length_ft == 40
    assert res.recommendation.waste_percentage == pytest.approx(0)
    assert res.stock_length_ft == 40
    assert res.total_stock_lengths == 1
    assert res.groups[0].stock_lengths[0].length_ft == 40


def test_desired_length_joins_the_candidates() -> None:
    # 4 x 7'-5 7/8" (+kerf = 7'-6") fill a 30' bar exactly
    res = nest_material([_line("D", ft=7, inch=5.875, qty=4)], stock_length_ft=30, cutting_waste=0.125)
    assert res.recommendation.stock_length_ft == 30
    assert res.recommendation.quantity == 1


def test_recommendation_is_global_but_cutting_is_per_group() -> None:
    lines = [
        _line("A", size="W8x31", ft=9, inch=11.875, qty=2),
        _line("B", size="W12x26", ft=9, inch=11.875, qty=2),
    ]
    res = nest_material(lines, cutting_waste=0.125)

    # globally 4 x 10' fit one 40' bar, but two groups cannot share a bar
    assert res.recommendation.stock_length_ft == 40
    assert res.recommendation.quantity == 1
    assert res.total_stock_lengths == 2
    assert res.total_waste_percentage == pytest.approx(50)


def test_weights_and_group_identity() -> None:
    lines = [
        _line("A", ft=10, inch=0, qty=2, weight_per_foot=26, coating_system="Galv"),
        EstimatingLine(line_id="U", length_ft=5, qty=1),
    ]
    res = nest_material(lines, stock_length_ft=20, optimize=False)

    w, unknown = res.groups
    assert (w.shape_type, w.size_designation, w.grade) == ("W", "W12x26", "A992")
    assert w.coating_system == "Galv"
    assert w.total_weight == pytest.approx(520)
    assert w.total_pieces == 2
    assert (unknown.shape_type, unknown.size_designation, unknown.grade) == (None, None, None)
    assert unknown.label() == "Unknown"
    assert res.total_weight == pytest.approx(520)


def test_invalid_config_fails_before_packing() -> None:
    with pytest.raises(InvalidNestingConfig):
        nest_material([], stock_rounding=0)
    with pytest.raises(InvalidNestingConfig):
        nest_material([_line("A")], cutting_waste=-1)
    with pytest.raises(InvalidNestingConfig):
        nest_material([_line("A")], candidate_stock_lengths_ft=[])


def test_random_job_is_valid_and_deterministic() -> None:
    lines = generate_random_lines(RandomLinesConfig(seed=7, n_lines=40))
    cfg = NestingConfig()

    first = nest_with_config(lines, cfg)
    second = nest_with_config(list(lines), cfg)

    assert result_to_dict(first) == result_to_dict(second)

    pieces = extract_nestable_pieces(lines, cfg.stock_rounding_increment)
    issues = validate_result(first, pieces=pieces, kerf=cfg.kerf)
    raise_on_errors(issues)
    assert first.num_pieces() == len(pieces)


def test_mapping_lines_are_accepted() -> None:
    res = nest_material(
        [{"lineId": "M1", "shapeType": "L", "sizeDesignation": "L4x4x3/8", "grade": "A36", "lengthFt": 5, "qty": 3}],
        stock_length_ft=20,
        optimize=False,
    )
    assert res.total_stock_lengths == 1
    assert res.groups[0].total_pieces == 3


def test_skip_warnings_belong_to_each_call() -> None:
    lines = [_line("NEG", ft=-2, inch=0), _line("OK")]

    first = nest_material(lines, stock_length_ft=20, optimize=False)
    second = nest_material(lines, stock_length_ft=20, optimize=False)
    assert len(first.warnings) == 1
    assert len(second.warnings) == 1
    assert "NEG" in second.warnings[0]

    assert nest_material([_line("OK")]).warnings == []
    assert len(nest_material([_line("NEG", ft=-2, inch=0)]).warnings) == 1


def test_skipped_stock_lengths_become_warnings() -> None:
    res = nest_material([_line("LONG", ft=21, inch=0)], cutting_waste=0.125)
    assert res.stock_length_ft == 40
    assert res.warnings == ["20' stock skipped: a piece does not fit"]
    assert result_to_dict(res)["warnings"] == res.warnings
