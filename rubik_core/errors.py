"""Exception hierarchy for cube state validation."""

from __future__ import annotations


class StateValidationError(ValueError):
    """Raised when an input state, move or argument is invalid."""


class InvalidColorSymbol(StateValidationError):
    """Raised when a character is not one of the six color symbols."""


class IndexOutOfRange(StateValidationError, IndexError):
    """Raised when a facelet row or column is outside 0..2."""


class MalformedState(StateValidationError):
    """Raised when a facelet grid or encoding has the wrong shape."""


class InvalidMoveNotation(StateValidationError):
    """Raised when a move token cannot be parsed."""
