# steel_nesting/grouping.py
# Partition pieces into nest-compatible material groups.

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from .config import DEFAULTS
from .types import GroupKey, Piece


def _norm(value: Optional[str]) -> str:
    return value or DEFAULTS.unknown_label


def group_key(piece: Piece) -> GroupKey:
    """(shape, size, grade). Coating is display-only and not part of the key."""
    return GroupKey(
        shape_type=_norm(piece.shape_type),
        size_designation=_norm(piece.size_designation),
        grade=_norm(piece.grade),
    )


def group_pieces_by_material(pieces: Iterable[Piece]) -> Dict[GroupKey, List[Piece]]:
    """
    Groups in order of first occurrence; pieces keep their input order inside a group.
    """
    groups: Dict[GroupKey, List[Piece]] = {}
    for p in pieces:
        groups.setdefault(group_key(p), []).append(p)
    return groups


def key_field(value: str) -> Optional[str]:
    """Inverse of the placeholder normalisation, for reporting."""
    return None if value == DEFAULTS.unknown_label else value
