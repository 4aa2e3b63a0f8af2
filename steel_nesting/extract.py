# steel_nesting/extract.py
# Turn estimating lines into individual cut pieces.
#
# A line is nestable when it is not void, not a plate (plates are nested in 2D elsewhere)
# and has a positive length. qty N expands to N pieces of qty 1, in line order.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Union

from .config import DEFAULTS
from .logger import get_logger
from .types import EstimatingLine, Piece
from .units import round_up_to_increment, to_inches

LineLike = Union[EstimatingLine, Mapping]


def as_line(line: LineLike) -> EstimatingLine:
    if isinstance(line, EstimatingLine):
        return line
    return EstimatingLine.from_record(line)


def resolved_length(line: EstimatingLine, stock_rounding_increment: float) -> float:
    """Length in inches, rounded up to the stock increment when the line asks for it."""
    inches = to_inches(line.length_ft or 0, line.length_in or 0)
    if line.use_stock_rounding:
        inches = round_up_to_increment(inches, stock_rounding_increment)
    return inches


@dataclass
class Extraction:
    """Pieces plus one message per line skipped for a structural reason."""
    pieces: List[Piece] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def extract_pieces(
    lines: Iterable[LineLike],
    stock_rounding_increment: float = DEFAULTS.stock_rounding_increment,
) -> Extraction:
    """
    Expand nestable lines into unit pieces (stable order: line order, then copy number).
    Mappings are converted with EstimatingLine.from_record (MalformedLine on bad numbers).
    """
    log = get_logger()
    out = Extraction()

    for raw in lines:
        line = as_line(raw)

        if line.is_void or line.is_plate:
            continue

        if not line.length_ft and not line.length_in:
            continue

        length = resolved_length(line, stock_rounding_increment)
        if length <= 0:
            msg = f"line {line.line_id or '?'} skipped: non-positive length {length:g}\""
            log.warn(msg)
            out.warnings.append(msg)
            continue

        qty = line.qty if line.qty and line.qty > 0 else 1
        weight = (length / 12) * line.weight_per_foot if line.weight_per_foot else None

        for _ in range(qty):
            out.pieces.append(
                Piece(
                    line_id=line.line_id,
                    length_inches=length,
                    length_ft=line.length_ft or 0,
                    length_in=line.length_in or 0,
                    shape_type=line.shape_type,
                    size_designation=line.size_designation,
                    grade=line.grade,
                    coating_system=line.coating_system,
                    weight_per_foot=line.weight_per_foot,
                    total_weight=weight,
                    drawing_number=line.drawing_number,
                    detail_number=line.detail_number,
                    item_description=line.item_description,
                )
            )

    return out


def extract_nestable_pieces(
    lines: Iterable[LineLike],
    stock_rounding_increment: float = DEFAULTS.stock_rounding_increment,
) -> List[Piece]:
    return extract_pieces(lines, stock_rounding_increment).pieces
