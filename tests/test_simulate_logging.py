import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from examples.simulate_games import GameStats, log_summary, play_game


def test_log_summary_reports_averages(caplog):
    results = [GameStats(score=100, lines=1, pieces=10), GameStats(score=300, lines=3, pieces=20)]

    with caplog.at_level(logging.INFO, logger="examples.simulate_games"):
        summary = log_summary(results, index=2)

    assert summary["avg_score"] == 200
    assert summary["best_score"] == 300
    message = "".join(caplog.messages)
    assert "Game 2" in message
    assert "avg_score=200.0" in message


def test_play_game_respects_frame_limit():
    stats = play_game(seed=3, max_frames=120)
    assert 0 < stats.frames <= 120
    assert stats.score >= 0
