"""Play random headless games and log how they went.

Run with::

    PYTHONPATH=src python examples/simulate_games.py

Each game feeds random key presses to a :class:`tetris_engine.GameSession` at a
fixed frame rate until it ends or runs out of frames.  Pass ``--help`` to see
options for the number of games and periodic logging summaries.
"""

from __future__ import annotations

import argparse
import logging
import random
from dataclasses import dataclass

from tetris_engine import EngineConfig, EventType, GameSession, InputFrame


LOGGER = logging.getLogger(__name__)

FRAME_MS = 1000.0 / 60.0


@dataclass
class GameStats:
    score: int = 0
    lines: int = 0
    pieces: int = 0
    frames: int = 0
    game_over: bool = False


def random_frame(rng: random.Random) -> InputFrame:
    return InputFrame(
        left=rng.random() < 0.2,
        right=rng.random() < 0.2,
        down=rng.random() < 0.3,
        up=rng.random() < 0.1,
        hard_drop=rng.random() < 0.02,
    )


def play_game(seed: int, max_frames: int) -> GameStats:
    rng = random.Random(seed)
    session = GameSession(EngineConfig(seed=seed))
    session.start(0.0)
    stats = GameStats()
    for frame_idx in range(1, max_frames + 1):
        events = session.step(frame_idx * FRAME_MS, random_frame(rng))
        stats.pieces += sum(1 for event in events if event.type is EventType.PIECE_LOCKED)
        stats.frames = frame_idx
        if session.game_over:
            break
    stats.score = session.score
    stats.lines = session.lines
    stats.game_over = session.game_over
    return stats


def log_summary(results: list[GameStats], *, index: int) -> dict[str, float]:
    if not results:
        LOGGER.info("Game %d: no games played.", index)
        return {}
    count = len(results)
    summary = {
        "games": float(count),
        "avg_score": sum(r.score for r in results) / count,
        "avg_lines": sum(r.lines for r in results) / count,
        "avg_pieces": sum(r.pieces for r in results) / count,
        "best_score": float(max(r.score for r in results)),
    }
    LOGGER.info(
        "Game %d: games=%d, avg_score=%.1f, avg_lines=%.2f, avg_pieces=%.1f, best=%d",
        index,
        count,
        summary["avg_score"],
        summary["avg_lines"],
        summary["avg_pieces"],
        int(summary["best_score"]),
    )
    return summary


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--games", type=int, default=10, help="How many games to play.")
    parser.add_argument("--frames", type=int, default=20000, help="Frame limit per game.")
    parser.add_argument("--seed", type=int, default=0, help="Seed of the first game.")
    parser.add_argument(
        "--log-interval",
        type=int,
        default=5,
        help="Emit a summary every N games (0 logs only at the end).",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")

    results: list[GameStats] = []
    for game_idx in range(1, args.games + 1):
        results.append(play_game(args.seed + game_idx - 1, args.frames))
        if args.log_interval > 0 and game_idx % args.log_interval == 0:
            log_summary(results, index=game_idx)
        elif game_idx == args.games:
            log_summary(results, index=game_idx)


if __name__ == "__main__":
    main()
