import csv

import pandas as pd
import pytest

from rl.configs.arena_config import ENV_CONFIG, make_env_kwargs
from rl.metrics_callback import CSV_COLUMNS, MetricsCallback
from rl.plot_results import load_metrics, smooth, summarize


def _info(reward, length, score):
    return {
        "episode": {"r": reward, "l": length},
        "score": score,
        "items_eaten": score // 10,
        "enemies_eaten": 0,
        "size": 12.5,
    }


def test_env_kwargs_carry_rewards():
    kwargs = make_env_kwargs()
    assert kwargs["render_mode"] is None
    assert set(kwargs["reward_config"]) == {"R_SCORE", "R_ALIVE", "R_DEATH"}
    assert kwargs["max_steps"] == ENV_CONFIG["max_steps"]


def test_metrics_callback_writes_csv(tmp_path):
    callback = MetricsCallback(log_dir=str(tmp_path), algo_name="ppo", verbose=0)
    callback._on_training_start()
    callback.record_episode(_info(1.5, 100, 30))
    callback.record_episode(_info(-2.0, 40, 0))
    callback._on_training_end()

    with open(tmp_path / "ppo_metrics.csv") as f:
        rows = list(csv.reader(f))
    assert rows[0] == CSV_COLUMNS
    assert len(rows) == 3
    assert rows[1][4] == "30"

    summary = callback.get_summary()
    assert summary["total_episodes"] == 2
    assert summary["best_score"] == 30
    assert summary["mean_score"] == pytest.approx(15.0)


def test_metrics_summary_empty(tmp_path):
    assert MetricsCallback(log_dir=str(tmp_path), algo_name="dqn", verbose=0).get_summary() == {}


def test_load_and_summarize(tmp_path):
    df = pd.DataFrame({
        "timestep": [100, 200, 300],
        "episode": [1, 2, 3],
        "reward": [0.5, 1.0, 1.5],
        "length": [50, 60, 70],
        "score": [10, 20, 60],
        "items": [1, 2, 1],
        "enemies": [0, 0, 1],
        "size": [11.0, 12.0, 14.0],
    })
    (tmp_path / "ppo").mkdir()
    df.to_csv(tmp_path / "ppo" / "ppo_metrics.csv", index=False)

    loaded = load_metrics(str(tmp_path), "ppo")
    assert list(loaded["score"]) == [10, 20, 60]
    assert load_metrics(str(tmp_path), "dqn") is None

    report = summarize({"ppo": loaded, "dqn": None})
    assert "PPO Results:" in report
    assert "Best Score: 60" in report
    assert "DQN" not in report


def test_smooth_window():
    assert list(smooth([1.0, 2.0, 3.0, 4.0], window=2)) == [1.5, 2.5, 3.5]
    assert list(smooth([1.0], window=5)) == [1.0]
