# steel_nesting/nesting.py
# Public entry point: estimating lines -> NestingResult.
#
# Pipeline:
#   extract pieces -> group by material -> pick one stock length (optimizer or fixed)
#   -> pack every group at that length -> aggregate totals
#
# Pure and synchronous: no I/O beyond optional logging, no state kept between calls.

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .config import DEFAULTS, NestingConfig
from .extract import LineLike, extract_pieces
from .grouping import group_pieces_by_material, key_field
from .logger import get_logger
from .metrics import compute_bar_totals, compute_group_totals
from .optimizer import optimize_stock_length
from .packer import pack_best_fit_decreasing
from .types import GroupKey, MaterialGroup, NestingResult, Piece, StockRecommendation


def nest_group(key: GroupKey, pieces: List[Piece], stock_length_ft: float, kerf: float) -> MaterialGroup:
    """Pack one material group and fill in its totals."""
    bars = pack_best_fit_decreasing(pieces, stock_length_ft, kerf)
    totals = compute_bar_totals(bars)

    return MaterialGroup(
        shape_type=key_field(key.shape_type),
        size_designation=key_field(key.size_designation),
        grade=key_field(key.grade),
        coating_system=pieces[0].coating_system if pieces else None,
        stock_lengths=bars,
        total_stock_lengths=totals.bar_count,
        total_used_length=totals.used_inches,
        total_waste_length=totals.waste_inches,
        total_waste_percentage=totals.waste_percentage,
        total_weight=sum(p.total_weight or 0 for p in pieces),
        total_pieces=len(pieces),
    )


def nest_pieces(
    pieces: List[Piece],
    config: NestingConfig,
    warnings: Sequence[str] = (),
) -> NestingResult:
    """
    Nest already-extracted pieces. config is validated here.
    warnings (e.g. lines skipped at extraction) are carried onto the result.
    """
    config.validate()
    log = get_logger()
    notes = list(warnings)

    if not pieces:
        return NestingResult(warnings=notes)

    grouped = group_pieces_by_material(pieces)
    log.info(f"{len(pieces)} pieces in {len(grouped)} material groups")

    recommendation: Optional[StockRecommendation] = None
    if config.run_optimization:
        recommendation = optimize_stock_length(
            pieces,
            config.stock_lengths_to_try(),
            config.kerf,
            DEFAULTS.max_alternatives,
        )
        notes.extend(
            f"{length:g}' stock skipped: a piece does not fit"
            for length in recommendation.skipped_stock_lengths_ft
        )
        stock_length_ft = recommendation.stock_length_ft
        log.info(
            f"recommended stock length {stock_length_ft:g}' "
            f"({recommendation.quantity} bars, {recommendation.waste_percentage:.2f}% waste)"
        )
    else:
        stock_length_ft = config.fixed_stock_length()
        log.info(f"using fixed stock length {stock_length_ft:g}'")

    groups = [
        nest_group(key, group, stock_length_ft, config.kerf)
        for key, group in grouped.items()
    ]

    totals = compute_group_totals(groups)

    return NestingResult(
        groups=groups,
        total_stock_lengths=totals.bar_count,
        total_waste_percentage=totals.waste_percentage,
        total_weight=sum(g.total_weight for g in groups),
        recommendation=recommendation,
        stock_length_ft=stock_length_ft,
        total_used_length=totals.used_inches,
        total_waste_length=totals.waste_inches,
        warnings=notes,
    )


def nest_material(
    lines: Iterable[LineLike],
    stock_length_ft: Optional[float] = None,
    stock_rounding: float = DEFAULTS.stock_rounding_increment,
    cutting_waste: float = DEFAULTS.kerf,
    optimize: bool = True,
    *,
    candidate_stock_lengths_ft: Optional[Iterable[float]] = None,
) -> NestingResult:
    """
    Nest estimating lines into stock bars.

    stock_length_ft: desired stock length. With optimize=True it is added to the
        candidate set; with optimize=False it is used as-is (default 20').
    stock_rounding: increment for lines flagged use_stock_rounding (inches).
    cutting_waste: kerf charged per piece (inches).

    Raises InvalidNestingConfig before any packing if the settings are unusable,
    and PieceTooLongForStock if a piece cannot fit the chosen stock length.
    """
    config = NestingConfig(
        stock_rounding_increment=stock_rounding,
        kerf=cutting_waste,
        candidate_stock_lengths_ft=tuple(
            candidate_stock_lengths_ft
            if candidate_stock_lengths_ft is not None
            else DEFAULTS.candidate_stock_lengths_ft
        ),
        desired_stock_length_ft=stock_length_ft,
        run_optimization=optimize,
    )
    return nest_with_config(lines, config)


def nest_with_config(lines: Iterable[LineLike], config: NestingConfig) -> NestingResult:
    config.validate()
    extraction = extract_pieces(lines, config.stock_rounding_increment)
    return nest_pieces(extraction.pieces, config, extraction.warnings)
