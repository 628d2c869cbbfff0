"""Rubik 3x3 cube state and move engine."""

from .cube import CubeState
from .engine import rotate_clockwise, rotate_counter_clockwise
from .errors import (
    IndexOutOfRange,
    InvalidColorSymbol,
    InvalidMoveNotation,
    MalformedState,
    StateValidationError,
)
from .facelets import Color, Face
from .moves import Move, apply_moves, parse_moves
from .scramble import scramble

__all__ = [
    "Color",
    "CubeState",
    "Face",
    "IndexOutOfRange",
    "InvalidColorSymbol",
    "InvalidMoveNotation",
    "MalformedState",
    "Move",
    "StateValidationError",
    "apply_moves",
    "parse_moves",
    "rotate_clockwise",
    "rotate_counter_clockwise",
    "scramble",
]
