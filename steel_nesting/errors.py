# steel_nesting/errors.py
# Exceptions raised by the nesting engine.
# All derive from ValueError: every failure here is bad input or bad config, never transient.

from __future__ import annotations


class NestingError(ValueError):
    """Base class for nesting failures."""


class InvalidNestingConfig(NestingError):
    """Configuration rejected before any packing runs."""


class MalformedLine(NestingError):
    """An estimating line whose fields cannot be read."""

    def __init__(self, line_id: str, reason: str):
        self.line_id = line_id
        self.reason = reason
        super().__init__(f"Line {line_id or '?'}: {reason}")


class PieceTooLongForStock(NestingError):
    """A piece (plus kerf) does not fit into an empty stock bar."""

    def __init__(self, line_id: str, piece_length_in: float, stock_length_in: float, kerf: float):
        self.line_id = line_id
        self.piece_length_in = piece_length_in
        self.stock_length_in = stock_length_in
        self.kerf = kerf
        super().__init__(
            f"Piece from line {line_id or '?'} is {piece_length_in:g}\" "
            f"(+{kerf:g}\" kerf) but stock is only {stock_length_in:g}\""
        )
