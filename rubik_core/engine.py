"""Rotation engine: quarter turns of single faces."""

from __future__ import annotations

from .actions import ACTION_TABLE, MOVE_PERMUTATIONS
from .cube import CubeState
from .errors import StateValidationError
from .facelets import Face


def rotate(state: CubeState, face: Face, direction: int) -> CubeState:
    """Turn ``face`` a quarter turn; direction +1 is clockwise seen from outside."""
    if direction not in (+1, -1):
        raise StateValidationError(f"Direction must be +1 or -1, got {direction!r}")
    state.apply_permutation(MOVE_PERMUTATIONS[(Face(face), direction)])
    return state


def rotate_clockwise(state: CubeState, face: Face) -> CubeState:
    return rotate(state, face, +1)


def rotate_counter_clockwise(state: CubeState, face: Face) -> CubeState:
    # Inverse permutation of the clockwise turn, i.e. three clockwise turns.
    return rotate(state, face, -1)


def step(state: CubeState, action: int) -> CubeState:
    if isinstance(action, bool) or not isinstance(action, int) or not 0 <= action < len(ACTION_TABLE):
        raise StateValidationError(f"Action must be an integer in range 0..{len(ACTION_TABLE) - 1}")
    face, direction = ACTION_TABLE[action]
    return rotate(state, face, direction)
