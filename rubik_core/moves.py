"""Face-turn notation (``U R U' L2``) and move-list replay."""

from __future__ import annotations

import logging
from typing import Iterable, NamedTuple

from .cube import CubeState
from .engine import rotate_clockwise, rotate_counter_clockwise
from .errors import InvalidMoveNotation
from .facelets import LETTER_TO_FACE, Face

logger = logging.getLogger(__name__)

_SUFFIX_TO_TURNS = {"": 1, "2": 2, "'": 3}
_TURNS_TO_SUFFIX = {turns: suffix for suffix, turns in _SUFFIX_TO_TURNS.items()}


class Move(NamedTuple):
    """A face turn; ``turns`` counts clockwise quarter turns (1, 2 or 3)."""

    face: Face
    turns: int = 1

    @property
    def notation(self) -> str:
        return f"{self.face.letter}{_TURNS_TO_SUFFIX[self.turns]}"

    def inverse(self) -> "Move":
        return Move(self.face, 4 - self.turns)

    def __str__(self) -> str:
        return self.notation


def parse_move(token: str) -> Move:
    face = LETTER_TO_FACE.get(token[:1])
    turns = _SUFFIX_TO_TURNS.get(token[1:])
    if face is None or turns is None:
        raise InvalidMoveNotation(f"Invalid move token: {token!r}")
    return Move(face, turns)


def parse_moves(text: str) -> list[Move]:
    """Parse whitespace-separated moves; an empty string is an empty sequence."""
    return [parse_move(token) for token in text.split()]


def format_moves(moves: Iterable[Move]) -> str:
    return " ".join(move.notation for move in moves)


def invert_moves(moves: Iterable[Move]) -> list[Move]:
    return [move.inverse() for move in reversed(list(moves))]


def apply_move(state: CubeState, move: Move) -> CubeState:
    if move.turns == 3:
        return rotate_counter_clockwise(state, move.face)
    if move.turns not in (1, 2):
        raise InvalidMoveNotation(f"Move turns must be 1, 2 or 3, got {move.turns!r}")
    for _ in range(move.turns):
        rotate_clockwise(state, move.face)
    return state


def apply_moves(state: CubeState, moves: str | Iterable[Move]) -> CubeState:
    """Replay a move list (or notation string) on ``state`` in place."""
    if isinstance(moves, str):
        moves = parse_moves(moves)
    moves = list(moves)
    # Reject the whole list before touching the state.
    for move in moves:
        if not isinstance(move, Move) or move.turns not in _TURNS_TO_SUFFIX:
            raise InvalidMoveNotation(f"Invalid move: {move!r}")
    for move in moves:
        apply_move(state, move)
    logger.debug("Applied %d moves: %s", len(moves), format_moves(moves))
    return state
