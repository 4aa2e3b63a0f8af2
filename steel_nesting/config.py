# steel_nesting/config.py
# Centralized defaults and configuration helpers.
# Keeps "magic numbers" (kerf, stock rounding, candidate stock lengths) in one place.

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .errors import InvalidNestingConfig


@dataclass(frozen=True)
class Defaults:
    # Round cut lengths up to 1/8"
    stock_rounding_increment: float = 0.125

    # Saw kerf charged per placed piece (inches)
    kerf: float = 0.125

    # Mill lengths commonly stocked for structural shapes (feet)
    candidate_stock_lengths_ft: Tuple[float, ...] = (20, 40, 60)
    default_stock_length_ft: float = 20

    # Two candidates closer than this (in waste %) are ranked by bar count instead
    waste_tie_pct: float = 0.01
    max_alternatives: int = 3

    unknown_label: str = "Unknown"


DEFAULTS = Defaults()


@dataclass(frozen=True)
class NestingConfig:
    stock_rounding_increment: float = DEFAULTS.stock_rounding_increment
    kerf: float = DEFAULTS.kerf
    candidate_stock_lengths_ft: Tuple[float, ...] = DEFAULTS.candidate_stock_lengths_ft
    desired_stock_length_ft: Optional[float] = None
    run_optimization: bool = True

    def validate(self) -> None:
        """Raise InvalidNestingConfig if any setting would make packing meaningless."""
        if not _positive(self.stock_rounding_increment):
            raise InvalidNestingConfig(
                f"stock_rounding_increment must be > 0, got {self.stock_rounding_increment}"
            )
        if not (math.isfinite(self.kerf) and self.kerf >= 0):
            raise InvalidNestingConfig(f"kerf must be >= 0, got {self.kerf}")
        if not self.candidate_stock_lengths_ft:
            raise InvalidNestingConfig("candidate_stock_lengths_ft must not be empty")
        for length in self.candidate_stock_lengths_ft:
            if not _positive(length):
                raise InvalidNestingConfig(f"candidate stock length must be > 0, got {length}")
        if self.desired_stock_length_ft is not None and not _positive(self.desired_stock_length_ft):
            raise InvalidNestingConfig(
                f"desired_stock_length_ft must be > 0, got {self.desired_stock_length_ft}"
            )

    def stock_lengths_to_try(self) -> Tuple[float, ...]:
        """Candidates plus the desired length (if not already there), ascending."""
        lengths = list(dict.fromkeys(self.candidate_stock_lengths_ft))
        if self.desired_stock_length_ft and self.desired_stock_length_ft not in lengths:
            lengths.append(self.desired_stock_length_ft)
        return tuple(sorted(lengths))

    def fixed_stock_length(self) -> float:
        """Stock length used when optimization is off."""
        return self.desired_stock_length_ft or DEFAULTS.default_stock_length_ft


def _positive(v: float) -> bool:
    return math.isfinite(v) and v > 0


def parse_lengths_text(text: str) -> Tuple[float, ...]:
    """
    Parse '20,40,60' -> (20.0, 40.0, 60.0)
    """
    vals = [v.strip() for v in text.split(",") if v.strip() != ""]
    if not vals:
        raise ValueError("lengths must be like '20,40,60'")
    return tuple(float(v) for v in vals)


def parse_bool(s: str) -> bool:
    s = str(s).strip().lower()
    if s in ("1", "true", "yes", "y", "t"):
        return True
    if s in ("0", "false", "no", "n", "f", ""):
        return False
    raise ValueError(f"Invalid bool: {s}")


def make_config(
    *,
    stock_rounding_increment: Optional[float] = None,
    kerf: Optional[float] = None,
    candidate_stock_lengths_ft: Optional[Iterable[float]] = None,
    desired_stock_length_ft: Optional[float] = None,
    run_optimization: bool = True,
) -> NestingConfig:
    """
    Convenience factory: None means "use the default".
    """
    return NestingConfig(
        stock_rounding_increment=float(
            stock_rounding_increment if stock_rounding_increment is not None
            else DEFAULTS.stock_rounding_increment
        ),
        kerf=float(kerf if kerf is not None else DEFAULTS.kerf),
        candidate_stock_lengths_ft=tuple(
            float(x) for x in (
                candidate_stock_lengths_ft if candidate_stock_lengths_ft is not None
                else DEFAULTS.candidate_stock_lengths_ft
            )
        ),
        desired_stock_length_ft=float(desired_stock_length_ft) if desired_stock_length_ft else None,
        run_optimization=bool(run_optimization),
    )
