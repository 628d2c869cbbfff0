"""Owned 6x3x3 facelet state of a 3x3 cube."""

from __future__ import annotations

from typing import Any

import numpy as np

from .errors import IndexOutOfRange, MalformedState
from .facelets import FACE_SIZE, Color, Face
from .state_codec import (
    color_counts,
    from_solver_encoding,
    solved_facelets,
    to_display_string,
    to_solver_encoding,
    validate_face,
    validate_grid,
)


def _check_position(row: Any, col: Any) -> tuple[int, int]:
    for name, value in (("row", row), ("col", col)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise IndexOutOfRange(f"{name} must be an integer in range 0..{FACE_SIZE - 1}, got {value!r}")
        if not 0 <= value < FACE_SIZE:
            raise IndexOutOfRange(f"{name} must be in range 0..{FACE_SIZE - 1}, got {value}")
    return int(row), int(col)


class CubeState:
    """Facelet colors of a cube, indexed by (face, row, col).

    Storage is never shared: constructors and accessors copy in and out, so two
    states only change through their own setters and face turns.
    """

    __slots__ = ("_facelets",)

    def __init__(self, facelets: Any = None):
        self._facelets = solved_facelets() if facelets is None else validate_grid(facelets)

    @classmethod
    def new(cls) -> "CubeState":
        return cls()

    @classmethod
    def from_facelets(cls, grid: Any) -> "CubeState":
        return cls(grid)

    @classmethod
    def from_solver_encoding(cls, text: str) -> "CubeState":
        return cls(from_solver_encoding(text))

    def get_color(self, face: Face, row: int, col: int) -> Color:
        row, col = _check_position(row, col)
        return Color(int(self._facelets[Face(face), row, col]))

    def set_color(self, face: Face, row: int, col: int, color: Color) -> None:
        row, col = _check_position(row, col)
        if isinstance(color, bool) or not isinstance(color, (int, np.integer)) or not 0 <= color < len(Color):
            raise MalformedState(f"Facelet value must be a color, got {color!r}")
        self._facelets[Face(face), row, col] = Color(int(color))

    def get_face(self, face: Face) -> list[list[Color]]:
        return [[Color(int(code)) for code in row] for row in self._facelets[Face(face)]]

    def set_face(self, face: Face, grid: Any) -> None:
        self._facelets[Face(face)] = validate_face(grid)

    def is_solved(self) -> bool:
        """True when every face is uniform; the color scheme is not checked."""
        centers = self._facelets[:, 1:2, 1:2]
        return bool(np.all(self._facelets == centers))

    def copy(self) -> "CubeState":
        return CubeState(self._facelets)

    def apply_permutation(self, perm: np.ndarray) -> None:
        """Relocate facelets so that `new_flat[i] = old_flat[perm[i]]`."""
        flat = self._facelets.reshape(-1)[perm]
        self._facelets = flat.reshape(self._facelets.shape)

    def as_array(self) -> np.ndarray:
        """Return a copy of the color codes, shape (6, 3, 3)."""
        return self._facelets.copy()

    def color_counts(self) -> dict[Color, int]:
        return color_counts(self._facelets)

    def to_display_string(self) -> str:
        return to_display_string(self._facelets)

    def to_solver_encoding(self) -> str:
        return to_solver_encoding(self._facelets)

    def __array__(self, dtype=None, copy=None):
        return self._facelets.astype(dtype if dtype is not None else self._facelets.dtype, copy=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CubeState):
            return NotImplemented
        return bool(np.array_equal(self._facelets, other._facelets))

    __hash__ = None

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"CubeState({self.to_solver_encoding()!r})"
