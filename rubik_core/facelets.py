"""Facelet colors and face identifiers."""

from __future__ import annotations

from enum import IntEnum

from .errors import InvalidColorSymbol


class Color(IntEnum):
    WHITE = 0
    YELLOW = 1
    RED = 2
    ORANGE = 3
    GREEN = 4
    BLUE = 5

    @property
    def symbol(self) -> str:
        return COLOR_TO_SYMBOL[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Color":
        try:
            return SYMBOL_TO_COLOR[symbol]
        except (KeyError, TypeError):
            raise InvalidColorSymbol(f"Unknown color symbol: {symbol!r}") from None


class Face(IntEnum):
    """Cube faces; the value is the face's storage and display position."""

    FRONT = 0
    BACK = 1
    LEFT = 2
    RIGHT = 3
    UP = 4
    DOWN = 5

    @property
    def letter(self) -> str:
        return self.name[0]

    @property
    def opposite(self) -> "Face":
        return OPPOSITE_FACE[self]


COLOR_TO_SYMBOL = {
    Color.WHITE: "W",
    Color.YELLOW: "Y",
    Color.RED: "R",
    Color.ORANGE: "O",
    Color.GREEN: "G",
    Color.BLUE: "B",
}
SYMBOL_TO_COLOR = {symbol: color for color, symbol in COLOR_TO_SYMBOL.items()}

OPPOSITE_FACE = {
    Face.FRONT: Face.BACK,
    Face.BACK: Face.FRONT,
    Face.LEFT: Face.RIGHT,
    Face.RIGHT: Face.LEFT,
    Face.UP: Face.DOWN,
    Face.DOWN: Face.UP,
}

# Canonical color scheme of a solved cube.
SOLVED_COLORS = {
    Face.FRONT: Color.GREEN,
    Face.BACK: Color.BLUE,
    Face.LEFT: Color.ORANGE,
    Face.RIGHT: Color.RED,
    Face.UP: Color.WHITE,
    Face.DOWN: Color.YELLOW,
}

# Face order of the 54-character encoding handed to solvers.
SOLVER_FACE_ORDER = (Face.UP, Face.RIGHT, Face.FRONT, Face.DOWN, Face.LEFT, Face.BACK)
LETTER_TO_FACE = {face.letter: face for face in Face}

N_FACES = 6
FACE_SIZE = 3
STICKERS_PER_FACE = FACE_SIZE * FACE_SIZE
STATE_SIZE = N_FACES * STICKERS_PER_FACE
