# steel_nesting/types.py
# Core data structures for linear material nesting (cut lists from stock bars).
# Keep this file dependency-light so it can be imported everywhere.

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from .config import parse_bool
from .errors import MalformedLine


# ----------------------------
# Inputs
# ----------------------------

def _opt_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    s = str(value).strip()
    return s or None


def _opt_float(value: Any, field_name: str, line_id: str) -> Optional[float]:
    if value is None or (isinstance(value, str) and value.strip() == ""):
        return None
    if isinstance(value, bool):
        raise MalformedLine(line_id, f"{field_name} must be numeric, got {value!r}")
    try:
        x = float(value)
    except (TypeError, ValueError):
        raise MalformedLine(line_id, f"{field_name} must be numeric, got {value!r}") from None
    if not math.isfinite(x):
        raise MalformedLine(line_id, f"{field_name} must be finite, got {value!r}")
    return x


def _opt_bool(value: Any, field_name: str, line_id: str) -> bool:
    if isinstance(value, str):
        try:
            return parse_bool(value)
        except ValueError:
            raise MalformedLine(line_id, f"{field_name} must be a yes/no flag, got {value!r}") from None
    return bool(value)


def _pick(record: Mapping[str, Any], camel: str, snake: str) -> Any:
    if camel in record:
        return record[camel]
    return record.get(snake)


@dataclass(frozen=True)
class EstimatingLine:
    """
    One estimating line item as handed over by the estimating grid.
    Only the fields the nesting engine reads are modelled.
    """
    line_id: str = ""
    status: str = "Active"          # "Active" or "Void"
    material_type: str = "Rolled"   # "Rolled" or "Plate"

    shape_type: Optional[str] = None
    size_designation: Optional[str] = None
    grade: Optional[str] = None
    coating_system: Optional[str] = None

    length_ft: Optional[float] = None
    length_in: Optional[float] = None
    qty: Optional[int] = None
    weight_per_foot: Optional[float] = None
    use_stock_rounding: bool = False

    drawing_number: str = ""
    detail_number: str = ""
    item_description: str = ""

    @property
    def is_void(self) -> bool:
        return (self.status or "").strip().lower() == "void"

    @property
    def is_plate(self) -> bool:
        return (self.material_type or "").strip().lower() == "plate"

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "EstimatingLine":
        """
        Build a line from a loosely typed record (camelCase keys as stored
        upstream, snake_case accepted as well).
        Raises MalformedLine if a numeric field cannot be read as a number.
        """
        line_id = str(_pick(record, "lineId", "line_id") or "")

        qty_f = _opt_float(record.get("qty"), "qty", line_id)
        if qty_f is not None and qty_f != int(qty_f):
            raise MalformedLine(line_id, f"qty must be a whole number, got {qty_f}")

        return cls(
            line_id=line_id,
            status=str(record.get("status") or "Active"),
            material_type=str(_pick(record, "materialType", "material_type") or "Rolled"),
            shape_type=_opt_str(_pick(record, "shapeType", "shape_type")),
            size_designation=_opt_str(_pick(record, "sizeDesignation", "size_designation")),
            grade=_opt_str(record.get("grade")),
            coating_system=_opt_str(_pick(record, "coatingSystem", "coating_system")),
            length_ft=_opt_float(_pick(record, "lengthFt", "length_ft"), "lengthFt", line_id),
            length_in=_opt_float(_pick(record, "lengthIn", "length_in"), "lengthIn", line_id),
            qty=int(qty_f) if qty_f is not None else None,
            weight_per_foot=_opt_float(_pick(record, "weightPerFoot", "weight_per_foot"), "weightPerFoot", line_id),
            use_stock_rounding=_opt_bool(
                _pick(record, "useStockRounding", "use_stock_rounding"), "useStockRounding", line_id
            ),
            drawing_number=str(_pick(record, "drawingNumber", "drawing_number") or ""),
            detail_number=str(_pick(record, "detailNumber", "detail_number") or ""),
            item_description=str(_pick(record, "itemDescription", "item_description") or ""),
        )


@dataclass(frozen=True)
class Piece:
    """A single cut piece (one unit expanded from a line's qty)."""
    line_id: str
    length_inches: float            # resolved length (after optional stock rounding)
    length_ft: float = 0.0          # nominal length as entered
    length_in: float = 0.0

    shape_type: Optional[str] = None
    size_designation: Optional[str] = None
    grade: Optional[str] = None
    coating_system: Optional[str] = None

    weight_per_foot: Optional[float] = None
    total_weight: Optional[float] = None

    drawing_number: str = ""
    detail_number: str = ""
    item_description: str = ""
    qty: int = 1


@dataclass(frozen=True)
class GroupKey:
    """Nest-compatible material identity. Missing fields hold the 'Unknown' placeholder."""
    shape_type: str
    size_designation: str
    grade: str

    def text(self) -> str:
        return "|".join((self.shape_type, self.size_designation, self.grade))


# ----------------------------
# Outputs
# ----------------------------

@dataclass
class StockBar:
    """One raw stock bar with the pieces cut from it. Lengths are inches."""
    length_ft: float
    index: int = 1                  # 1-based position within its group
    pieces: List[Piece] = field(default_factory=list)
    used_length: float = 0.0
    waste_length: float = 0.0
    waste_percentage: float = 0.0

    @property
    def capacity_inches(self) -> float:
        return self.length_ft * 12

    def available(self) -> float:
        return self.capacity_inches - self.used_length

    def place(self, piece: Piece, kerf: float) -> None:
        self.pieces.append(piece)
        self.used_length += piece.length_inches + kerf


@dataclass
class MaterialGroup:
    """Packing result for one material identity."""
    shape_type: Optional[str]
    size_designation: Optional[str]
    grade: Optional[str]
    coating_system: Optional[str] = None
    stock_lengths: List[StockBar] = field(default_factory=list)

    total_stock_lengths: int = 0
    total_used_length: float = 0.0
    total_waste_length: float = 0.0
    total_waste_percentage: float = 0.0
    total_weight: float = 0.0
    total_pieces: int = 0

    def label(self) -> str:
        bits = [b for b in (self.shape_type, self.size_designation, self.grade) if b]
        return " - ".join(bits) if bits else "Unknown"


@dataclass(frozen=True)
class StockOption:
    """Outcome of packing the whole job into one candidate stock length."""
    stock_length_ft: float
    quantity: int
    waste_percentage: float
    total_waste_inches: float
    efficiency: float


@dataclass(frozen=True)
class StockRecommendation:
    stock_length_ft: float
    quantity: int
    waste_percentage: float
    total_waste_inches: float
    efficiency: float
    alternative_options: List[StockOption] = field(default_factory=list)
    # candidates that could not hold the longest piece
    skipped_stock_lengths_ft: List[float] = field(default_factory=list)


@dataclass
class NestingResult:
    """Full nesting result across all material groups."""
    groups: List[MaterialGroup] = field(default_factory=list)
    total_stock_lengths: int = 0
    total_waste_percentage: float = 0.0
    total_weight: float = 0.0
    recommendation: Optional[StockRecommendation] = None

    # Stock length actually used for every group (None when nothing was nested)
    stock_length_ft: Optional[float] = None
    total_used_length: float = 0.0
    total_waste_length: float = 0.0

    # lines and stock lengths skipped during this call
    warnings: List[str] = field(default_factory=list)

    def num_pieces(self) -> int:
        return sum(g.total_pieces for g in self.groups)

    def all_bars(self) -> List[StockBar]:
        return [bar for g in self.groups for bar in g.stock_lengths]
