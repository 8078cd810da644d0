"""Simple ASCII demo for the Tetris engine.

Run with: `python -m tetris_engine`

Plays a few hard drops of a seeded game headlessly and prints the resulting
frame: the board plus the active tetromino.  ``--pygame`` opens the playable
window instead.
"""

from __future__ import annotations

import argparse
import logging

from . import EngineConfig, GameSession, InputFrame, render_grid


def _print_grid(grid: list[list[int]]) -> None:
    for row in grid:
        print("".join("#" if cell else "." for cell in row))


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="Seed for the piece generator.")
    parser.add_argument("--drops", type=int, default=5, help="Hard drops to play before printing.")
    parser.add_argument("--pygame", action="store_true", help="Open the pygame window.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")

    session = GameSession(EngineConfig(seed=args.seed))
    if args.pygame:
        from .run_pygame import main as run_window

        run_window(session)
        return

    session.start(0.0)
    now = 0.0
    for _ in range(args.drops):
        now += 1.0
        session.step(now, InputFrame(hard_drop=True))
        now += 1.0
        session.step(now, InputFrame())
        if session.game_over:
            break
    controller = session.controller
    active = controller.active if controller.visible else None
    _print_grid(render_grid(controller.board, active))
    print(f"Score: {session.score}  Level: {session.level}  Lines: {session.lines}")


if __name__ == "__main__":
    main()
