"""State validation and codec helpers."""

from __future__ import annotations

from typing import Any

import numpy as np

from .errors import InvalidColorSymbol, MalformedState, StateValidationError
from .facelets import (
    FACE_SIZE,
    N_FACES,
    SOLVED_COLORS,
    SOLVER_FACE_ORDER,
    STATE_SIZE,
    STICKERS_PER_FACE,
    Color,
    Face,
)

GRID_SHAPE = (N_FACES, FACE_SIZE, FACE_SIZE)
FACE_SHAPE = (FACE_SIZE, FACE_SIZE)


def solved_facelets() -> np.ndarray:
    """Return the canonical solved grid of color codes, shape (6, 3, 3)."""
    grid = np.empty(GRID_SHAPE, dtype=np.int8)
    for face, color in SOLVED_COLORS.items():
        grid[face] = color
    return grid


def _as_color_codes(values: Any, shape: tuple[int, ...], what: str) -> np.ndarray:
    try:
        arr = np.asarray(values)
    except (OverflowError, TypeError, ValueError) as exc:
        raise MalformedState(f"{what} must be a nested grid of colors: {exc}") from exc

    if arr.shape != shape:
        raise MalformedState(f"{what} must have shape {shape}, got {arr.shape}")

    # Color is an IntEnum, so genuine colors always build an integer array.
    if arr.dtype.kind not in "iu" or np.any(arr < 0) or np.any(arr >= len(Color)):
        raise MalformedState(f"{what} contains values that are not colors")

    return arr.astype(np.int8)


def validate_grid(grid: Any) -> np.ndarray:
    """Validate a 6x3x3 color grid and return an owned int8 copy."""
    return _as_color_codes(grid, GRID_SHAPE, "Facelet grid")


def validate_face(face_grid: Any) -> np.ndarray:
    """Validate a 3x3 color grid and return an owned int8 copy."""
    return _as_color_codes(face_grid, FACE_SHAPE, "Face grid")


def encode_symbol(color: int) -> str:
    return Color(int(color)).symbol


def decode_symbol(symbol: str) -> Color:
    return Color.from_symbol(symbol)


def to_solver_encoding(facelets: np.ndarray) -> str:
    """Serialize as 54 symbols, faces U R F D L B, each face row-major."""
    return "".join(encode_symbol(code) for face in SOLVER_FACE_ORDER for code in facelets[face].reshape(-1))


def from_solver_encoding(text: str) -> np.ndarray:
    """Parse a 54-symbol solver encoding into a (6, 3, 3) grid of color codes."""
    if not isinstance(text, str):
        raise MalformedState("Solver encoding must be a string")
    text = text.strip()
    if len(text) != STATE_SIZE:
        raise MalformedState(f"Solver encoding must have {STATE_SIZE} symbols, got {len(text)}")

    grid = np.empty(GRID_SHAPE, dtype=np.int8)
    for i, face in enumerate(SOLVER_FACE_ORDER):
        chunk = text[i * STICKERS_PER_FACE : (i + 1) * STICKERS_PER_FACE]
        grid[face] = np.array([decode_symbol(ch) for ch in chunk], dtype=np.int8).reshape(FACE_SHAPE)
    return grid


def to_display_string(facelets: np.ndarray) -> str:
    blocks = []
    for face in Face:
        lines = [f"{face.name}:"]
        for row in facelets[face]:
            lines.append(" ".join(encode_symbol(code) for code in row))
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks) + "\n"


def color_counts(facelets: np.ndarray) -> dict[Color, int]:
    counts = np.bincount(np.asarray(facelets, dtype=np.int64).reshape(-1), minlength=len(Color))
    return {color: int(counts[color]) for color in Color}


def validate_color_counts(facelets: Any) -> None:
    """Raise unless each of the six colors appears exactly nine times."""
    counts = color_counts(validate_grid(facelets))
    wrong = {color.name: n for color, n in counts.items() if n != STICKERS_PER_FACE}
    if wrong:
        raise StateValidationError(
            f"Invalid sticker counts; each color must appear exactly {STICKERS_PER_FACE} times, got {wrong}"
        )
