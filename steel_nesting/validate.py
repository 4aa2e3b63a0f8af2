# steel_nesting/validate.py
# Validation utilities:
# - every bar within capacity, waste consistent with used length
# - every piece in a group matches the group's material identity
# - conservation: placed pieces == extracted pieces (no loss, duplication or split)
#
# Useful both in tests and to sanity-check results before exporting them.

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .grouping import group_key, key_field
from .types import MaterialGroup, NestingResult, Piece, StockBar

_EPS = 1e-6


@dataclass(frozen=True)
class ValidationIssue:
    level: str   # "ERROR" or "WARN"
    message: str
    group: Optional[str] = None
    bar_index: Optional[int] = None
    line_id: Optional[str] = None


def validate_bars(bars: Iterable[StockBar], kerf: Optional[float] = None, group: Optional[str] = None) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    for bar in bars:
        cap = bar.capacity_inches
        if bar.used_length > cap + _EPS:
            issues.append(
                ValidationIssue(
                    level="ERROR",
                    message=f"Bar over capacity: used={bar.used_length:g}\" stock={cap:g}\"",
                    group=group,
                    bar_index=bar.index,
                )
            )
        if abs(bar.waste_length - (cap - bar.used_length)) > _EPS:
            issues.append(
                ValidationIssue(
                    level="ERROR",
                    message=f"Waste {bar.waste_length:g}\" does not match stock - used",
                    group=group,
                    bar_index=bar.index,
                )
            )
        if not bar.pieces:
            issues.append(ValidationIssue(level="ERROR", message="Empty bar", group=group, bar_index=bar.index))
        if kerf is not None:
            expected = sum(p.length_inches + kerf for p in bar.pieces)
            if abs(expected - bar.used_length) > _EPS:
                issues.append(
                    ValidationIssue(
                        level="ERROR",
                        message=f"Used length {bar.used_length:g}\" != pieces + kerf {expected:g}\"",
                        group=group,
                        bar_index=bar.index,
                    )
                )
    return issues


def validate_group_purity(group: MaterialGroup) -> List[ValidationIssue]:
    """All pieces in a group share its (shape, size, grade)."""
    issues: List[ValidationIssue] = []
    for bar in group.stock_lengths:
        for p in bar.pieces:
            key = group_key(p)
            ident = (key_field(key.shape_type), key_field(key.size_designation), key_field(key.grade))
            if ident != (group.shape_type, group.size_designation, group.grade):
                issues.append(
                    ValidationIssue(
                        level="ERROR",
                        message=f"Piece {key.text()} placed in group {group.label()}",
                        group=group.label(),
                        bar_index=bar.index,
                        line_id=p.line_id,
                    )
                )
    return issues


def validate_conservation(pieces: Iterable[Piece], result: NestingResult) -> List[ValidationIssue]:
    """
    The multiset of placed pieces must equal the multiset of extracted pieces.
    Pieces are frozen dataclasses, so they compare (and hash) by value.
    """
    expected = Counter(pieces)
    placed = Counter(p for bar in result.all_bars() for p in bar.pieces)

    issues: List[ValidationIssue] = []
    for piece, n in (expected - placed).items():
        issues.append(
            ValidationIssue(
                level="ERROR",
                message=f"{n} piece(s) of {piece.length_inches:g}\" not placed",
                line_id=piece.line_id,
            )
        )
    for piece, n in (placed - expected).items():
        issues.append(
            ValidationIssue(
                level="ERROR",
                message=f"{n} unexpected piece(s) of {piece.length_inches:g}\" placed",
                line_id=piece.line_id,
            )
        )
    return issues


def validate_result(
    result: NestingResult,
    pieces: Optional[Iterable[Piece]] = None,
    kerf: Optional[float] = None,
) -> List[ValidationIssue]:
    """
    Validate a whole result. Pass the extracted pieces to also check conservation.
    """
    issues: List[ValidationIssue] = []

    for g in result.groups:
        issues.extend(validate_bars(g.stock_lengths, kerf=kerf, group=g.label()))
        issues.extend(validate_group_purity(g))
        if sum(len(b.pieces) for b in g.stock_lengths) != g.total_pieces:
            issues.append(ValidationIssue(level="ERROR", message="Piece count mismatch", group=g.label()))
        if result.stock_length_ft is not None:
            for b in g.stock_lengths:
                if b.length_ft != result.stock_length_ft:
                    issues.append(
                        ValidationIssue(
                            level="ERROR",
                            message=f"Bar is {b.length_ft:g}' but result uses {result.stock_length_ft:g}'",
                            group=g.label(),
                            bar_index=b.index,
                        )
                    )

    if pieces is not None:
        issues.extend(validate_conservation(pieces, result))

    if not result.groups:
        issues.append(ValidationIssue(level="WARN", message="Result has 0 groups."))

    return issues


def raise_on_errors(issues: List[ValidationIssue]) -> None:
    errs = [i for i in issues if i.level.upper() == "ERROR"]
    if errs:
        msg = "\n".join(
            f"[{e.level}] group={e.group} bar={e.bar_index} line={e.line_id} :: {e.message}" for e in errs
        )
        raise ValueError("Validation failed:\n" + msg)
