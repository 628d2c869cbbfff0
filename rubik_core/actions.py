"""Face-turn geometry for the 3x3 cube: adjacency tables and move permutations."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from .facelets import FACE_SIZE, STATE_SIZE, STICKERS_PER_FACE, Face


class EdgeStrip(NamedTuple):
    """Three facelets of a neighbor face bordering a turned face.

    ``axis`` is ``"row"`` or ``"col"`` and ``line`` selects which one.
    With ``reverse`` set the strip is read from index 2 down to 0.
    """

    face: Face
    axis: str
    line: int
    reverse: bool = False

    def positions(self) -> list[tuple[int, int]]:
        cells = range(FACE_SIZE - 1, -1, -1) if self.reverse else range(FACE_SIZE)
        if self.axis == "row":
            return [(self.line, i) for i in cells]
        if self.axis == "col":
            return [(i, self.line) for i in cells]
        raise ValueError(f"Unsupported strip axis: {self.axis}")


# Net layout: F, R, B, L seen from outside with row 0 on top; U seen from above
# with row 2 on F; D seen from below with row 0 on F.
# Each entry lists the bordering strips clockwise around the face as seen from
# outside, every strip read in that same clockwise sense. A clockwise turn
# carries strip k onto strip k + 1.
ADJACENT_STRIPS: dict[Face, tuple[EdgeStrip, EdgeStrip, EdgeStrip, EdgeStrip]] = {
    Face.FRONT: (
        EdgeStrip(Face.UP, "row", 2),
        EdgeStrip(Face.RIGHT, "col", 0),
        EdgeStrip(Face.DOWN, "row", 0, reverse=True),
        EdgeStrip(Face.LEFT, "col", 2, reverse=True),
    ),
    Face.BACK: (
        EdgeStrip(Face.UP, "row", 0, reverse=True),
        EdgeStrip(Face.LEFT, "col", 0),
        EdgeStrip(Face.DOWN, "row", 2),
        EdgeStrip(Face.RIGHT, "col", 2, reverse=True),
    ),
    Face.LEFT: (
        EdgeStrip(Face.UP, "col", 0),
        EdgeStrip(Face.FRONT, "col", 0),
        EdgeStrip(Face.DOWN, "col", 0),
        EdgeStrip(Face.BACK, "col", 2, reverse=True),
    ),
    Face.RIGHT: (
        EdgeStrip(Face.UP, "col", 2, reverse=True),
        EdgeStrip(Face.BACK, "col", 0),
        EdgeStrip(Face.DOWN, "col", 2, reverse=True),
        EdgeStrip(Face.FRONT, "col", 2, reverse=True),
    ),
    Face.UP: (
        EdgeStrip(Face.BACK, "row", 0, reverse=True),
        EdgeStrip(Face.RIGHT, "row", 0, reverse=True),
        EdgeStrip(Face.FRONT, "row", 0, reverse=True),
        EdgeStrip(Face.LEFT, "row", 0, reverse=True),
    ),
    Face.DOWN: (
        EdgeStrip(Face.FRONT, "row", 2),
        EdgeStrip(Face.RIGHT, "row", 2),
        EdgeStrip(Face.BACK, "row", 2),
        EdgeStrip(Face.LEFT, "row", 2),
    ),
}

# Action index -> (face, direction)
# direction: +1 means clockwise from the face viewpoint, -1 means counter-clockwise.
ACTION_TABLE = [
    (Face.UP, +1),
    (Face.UP, -1),
    (Face.DOWN, +1),
    (Face.DOWN, -1),
    (Face.LEFT, +1),
    (Face.LEFT, -1),
    (Face.RIGHT, +1),
    (Face.RIGHT, -1),
    (Face.FRONT, +1),
    (Face.FRONT, -1),
    (Face.BACK, +1),
    (Face.BACK, -1),
]

_DIRECTION_SUFFIX = {+1: "", -1: "'"}

ACTION_NAMES = [f"{face.letter}{_DIRECTION_SUFFIX[direction]}" for face, direction in ACTION_TABLE]


def inverse_action(action: int) -> int:
    return action ^ 1


def facelet_index(face: Face, row: int, col: int) -> int:
    """Flat index of a facelet in the (face, row, col) row-major layout."""
    return int(face) * STICKERS_PER_FACE + row * FACE_SIZE + col


def _generate_clockwise_permutation(face: Face) -> np.ndarray:
    """Gather permutation ``p`` with ``new_flat = old_flat[p]`` for a clockwise turn."""
    perm = np.arange(STATE_SIZE, dtype=np.intp)

    for row in range(FACE_SIZE):
        for col in range(FACE_SIZE):
            perm[facelet_index(face, col, FACE_SIZE - 1 - row)] = facelet_index(face, row, col)

    strips = ADJACENT_STRIPS[face]
    for k, source in enumerate(strips):
        target = strips[(k + 1) % len(strips)]
        for (src_row, src_col), (dst_row, dst_col) in zip(source.positions(), target.positions()):
            perm[facelet_index(target.face, dst_row, dst_col)] = facelet_index(source.face, src_row, src_col)

    if not np.array_equal(np.sort(perm), np.arange(STATE_SIZE)):
        raise RuntimeError(f"Adjacency table for {face.name} is not a permutation")
    return perm


def _generate_move_permutations() -> dict[tuple[Face, int], np.ndarray]:
    perms: dict[tuple[Face, int], np.ndarray] = {}
    for face in Face:
        clockwise = _generate_clockwise_permutation(face)
        perms[(face, +1)] = clockwise
        perms[(face, -1)] = np.argsort(clockwise)
    for perm in perms.values():
        perm.setflags(write=False)
    return perms


# (face, direction) -> read-only gather permutation over the flat 54-facelet state.
MOVE_PERMUTATIONS = _generate_move_permutations()
