# steel_nesting/__init__.py
"""
Steel nesting package (linear cutting stock for structural estimating).

Current state:
- extraction of cut pieces from estimating lines (qty expansion, stock rounding)
- grouping by shape / size / grade
- best-fit-decreasing packing into stock bars, kerf charged per piece
- stock length recommendation across the whole job (20/40/60' by default)
- cutting list CSV export and matplotlib cutting diagram
"""

from .types import (
    EstimatingLine,
    Piece,
    GroupKey,
    StockBar,
    MaterialGroup,
    StockOption,
    StockRecommendation,
    NestingResult,
)

from .errors import (
    NestingError,
    InvalidNestingConfig,
    MalformedLine,
    PieceTooLongForStock,
)

from .config import DEFAULTS, NestingConfig, make_config

from .units import to_inches, round_up_to_increment, to_feet_and_inches, format_feet_inches

from .extract import extract_nestable_pieces, extract_pieces
from .grouping import group_pieces_by_material
from .packer import pack_best_fit_decreasing
from .optimizer import optimize_stock_length
from .nesting import nest_material, nest_pieces, nest_with_config

__all__ = [
    # types
    "EstimatingLine",
    "Piece",
    "GroupKey",
    "StockBar",
    "MaterialGroup",
    "StockOption",
    "StockRecommendation",
    "NestingResult",
    # errors
    "NestingError",
    "InvalidNestingConfig",
    "MalformedLine",
    "PieceTooLongForStock",
    # config
    "DEFAULTS",
    "NestingConfig",
    "make_config",
    # units
    "to_inches",
    "round_up_to_increment",
    "to_feet_and_inches",
    "format_feet_inches",
    # engine
    "extract_nestable_pieces",
    "extract_pieces",
    "group_pieces_by_material",
    "pack_best_fit_decreasing",
    "optimize_stock_length",
    "nest_material",
    "nest_pieces",
    "nest_with_config",
]
