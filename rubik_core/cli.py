"""CLI entrypoint for the cube state tools."""

from __future__ import annotations

import argparse
import logging

import numpy as np

from .cube import CubeState
from .errors import StateValidationError
from .moves import apply_moves, format_moves, parse_moves
from .scramble import scramble
from .state_codec import validate_color_counts

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def _load_state(state: str | None, state_file: str | None) -> CubeState:
    if state_file:
        with open(state_file, "r", encoding="utf-8") as f:
            state = f.read()
    if state:
        return CubeState.from_solver_encoding(state)
    return CubeState()


def _print_state(cube: CubeState, fmt: str) -> None:
    if fmt in ("display", "both"):
        print(cube.to_display_string())
    if fmt in ("solver", "both"):
        print(cube.to_solver_encoding())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rubik 3x3 cube state tools")
    sub = parser.add_subparsers(dest="mode", required=True)

    common = argparse.ArgumentParser(add_help=False)
    source = common.add_mutually_exclusive_group()
    source.add_argument("--state", type=str, default=None, help="54-symbol solver encoding (U R F D L B)")
    source.add_argument("--state-file", type=str, default=None)
    common.add_argument("--format", choices=["display", "solver", "both"], default="both")
    common.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="WARNING")

    sub.add_parser("show", parents=[common], help="Print the cube state")

    scr = sub.add_parser("scramble", parents=[common], help="Apply random quarter turns")
    scr.add_argument("--steps", type=int, default=20)
    scr.add_argument("--seed", type=int, default=None)
    scr.add_argument("--avoid-inverse", action="store_true")

    apply = sub.add_parser("apply", parents=[common], help="Replay a move sequence, e.g. \"R U R' U'\"")
    apply.add_argument("moves", type=str)

    sub.add_parser("validate", parents=[common], help="Check that each color appears nine times")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    try:
        cube = _load_state(args.state, args.state_file)

        if args.mode == "show":
            _print_state(cube, args.format)
            return 0

        if args.mode == "scramble":
            rng = np.random.default_rng(args.seed)
            moves = scramble(cube, args.steps, rng, avoid_inverse=args.avoid_inverse)
            print(format_moves(moves))
            _print_state(cube, args.format)
            return 0

        if args.mode == "apply":
            moves = parse_moves(args.moves)
            apply_moves(cube, moves)
            logger.info("Replayed %d moves", len(moves))
            _print_state(cube, args.format)
            return 0

        if args.mode == "validate":
            validate_color_counts(cube)
            print("solved" if cube.is_solved() else "valid")
            return 0

    except (OSError, StateValidationError) as exc:
        parser.error(str(exc))

    parser.error(f"Unsupported mode: {args.mode}")


if __name__ == "__main__":
    raise SystemExit(main())
