"""Random scrambles driven by an injected numpy generator."""

from __future__ import annotations

import logging

import numpy as np

from .actions import ACTION_NAMES, ACTION_TABLE, inverse_action
from .cube import CubeState
from .engine import step
from .errors import StateValidationError
from .moves import Move

logger = logging.getLogger(__name__)


def scramble(
    state: CubeState,
    move_count: int,
    rng: np.random.Generator,
    avoid_inverse: bool = False,
) -> list[Move]:
    """Apply ``move_count`` random quarter turns to ``state`` in place.

    Each turn is drawn uniformly from the 12 face/direction actions. With
    ``avoid_inverse`` the inverse of the previous turn is never drawn.
    Returns the applied turns in order.
    """
    if isinstance(move_count, bool) or not isinstance(move_count, int) or move_count < 0:
        raise StateValidationError("Scramble move count must be a non-negative integer")

    all_actions = np.arange(len(ACTION_TABLE), dtype=np.int32)
    action_list: list[int] = []
    prev_action: int | None = None

    for _ in range(move_count):
        if avoid_inverse and prev_action is not None:
            candidates = all_actions[all_actions != inverse_action(prev_action)]
        else:
            candidates = all_actions
        action = int(rng.choice(candidates))
        action_list.append(action)
        prev_action = action

    for action in action_list:
        step(state, action)

    logger.debug("Scrambled with %d moves: %s", move_count, " ".join(ACTION_NAMES[a] for a in action_list))
    return [Move(face, 1 if direction > 0 else 3) for face, direction in (ACTION_TABLE[a] for a in action_list)]
