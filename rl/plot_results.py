"""
Plotting script for RL experiment results.
Generates learning curves and comparison plots from MetricsCallback CSVs.
"""

import os
import argparse
import pandas as pd
import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from typing import Dict, Optional

ALGO_COLORS = {"dqn": "#2ecc71", "ppo": "#3498db"}


def load_metrics(log_dir: str, algo: str) -> Optional[pd.DataFrame]:
    """Load metrics CSV for an algorithm."""
    csv_path = os.path.join(log_dir, algo, f"{algo}_metrics.csv")
    if os.path.exists(csv_path):
        return pd.read_csv(csv_path)

    # Also check in the direct log_dir
    csv_path = os.path.join(log_dir, f"{algo}_metrics.csv")
    if os.path.exists(csv_path):
        return pd.read_csv(csv_path)

    return None


def smooth(data: np.ndarray, window: int = 10) -> np.ndarray:
    """Apply rolling average smoothing."""
    if len(data) < window:
        return data
    kernel = np.ones(window) / window
    return np.convolve(data, kernel, mode="valid")


def _plot_series(ax, df: pd.DataFrame, column: str, window: int, **kwargs):
    values = df[column].values
    smoothed = smooth(values, window)
    ax.plot(df["timestep"].values[:len(smoothed)], smoothed, linewidth=2, **kwargs)


def plot_learning_curve(
    df: pd.DataFrame,
    algo: str,
    output_dir: str,
    window: int = 50,
):
    """Plot learning curve for a single algorithm."""
    fig, axes = plt.subplots(2, 2, figsize=(14, 10))
    fig.suptitle(f"{algo.upper()} Learning Curves", fontsize=16, fontweight="bold")

    ax = axes[0, 0]
    _plot_series(ax, df, "reward", window, label=f"{algo} (smoothed)")
    ax.set_xlabel("Timesteps")
    ax.set_ylabel("Episode Reward")
    ax.set_title("Episode Reward vs Timesteps")
    ax.legend()
    ax.grid(True, alpha=0.3)

    ax = axes[0, 1]
    _plot_series(ax, df, "score", window, color="orange")
    ax.set_xlabel("Timesteps")
    ax.set_ylabel("Final Score")
    ax.set_title("Score vs Timesteps")
    ax.grid(True, alpha=0.3)

    ax = axes[1, 0]
    _plot_series(ax, df, "items", window, color="goldenrod", label="items")
    _plot_series(ax, df, "enemies", window, color="crimson", label="enemies")
    ax.set_xlabel("Timesteps")
    ax.set_ylabel("Eaten per Episode")
    ax.set_title("Items and Enemies Eaten")
    ax.legend()
    ax.grid(True, alpha=0.3)

    ax = axes[1, 1]
    scores = df["score"].values
    ax.hist(scores, bins=50, alpha=0.7, edgecolor="black")
    ax.axvline(np.mean(scores), color="red", linestyle="--", label=f"Mean: {np.mean(scores):.1f}")
    ax.set_xlabel("Final Score")
    ax.set_ylabel("Frequency")
    ax.set_title("Score Distribution")
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    os.makedirs(output_dir, exist_ok=True)
    save_path = os.path.join(output_dir, f"{algo}_learning_curve.png")
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()

    print(f"Saved {algo} learning curve to {save_path}")
    return save_path


def plot_comparison(
    data: Dict[str, pd.DataFrame],
    output_dir: str,
    window: int = 50,
):
    """Plot comparison of all algorithms."""
    fig, axes = plt.subplots(1, 3, figsize=(18, 5))
    fig.suptitle("Algorithm Comparison", fontsize=16, fontweight="bold")

    for ax, column, label in (
        (axes[0], "reward", "Episode Reward"),
        (axes[1], "score", "Final Score"),
    ):
        for algo, df in data.items():
            if df is not None and len(df) > 0:
                _plot_series(ax, df, column, window, label=algo.upper(), color=ALGO_COLORS.get(algo))
        ax.set_xlabel("Timesteps")
        ax.set_ylabel(label)
        ax.set_title(f"{label} Comparison")
        ax.legend()
        ax.grid(True, alpha=0.3)

    # Final score box plot
    ax = axes[2]
    final_scores = []
    labels = []
    for algo, df in data.items():
        if df is not None and len(df) > 0:
            final_scores.append(df["score"].tail(100).values)
            labels.append(algo.upper())

    if final_scores:
        bp = ax.boxplot(final_scores, labels=labels, patch_artist=True)
        for patch, label in zip(bp["boxes"], labels):
            patch.set_facecolor(ALGO_COLORS.get(label.lower(), "#888888"))
            patch.set_alpha(0.6)
    ax.set_ylabel("Final Score")
    ax.set_title("Final Performance (Last 100 Episodes)")
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    os.makedirs(output_dir, exist_ok=True)
    save_path = os.path.join(output_dir, "algorithm_comparison.png")
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()

    print(f"Saved comparison plot to {save_path}")
    return save_path


def summarize(data: Dict[str, Optional[pd.DataFrame]]) -> str:
    """Text summary of every algorithm that has data."""
    report_lines = [
        "=" * 60,
        "RL EXPERIMENT SUMMARY REPORT",
        "=" * 60,
        "",
    ]

    for algo, df in data.items():
        if df is None or len(df) == 0:
            continue
        report_lines.append(f"\n{algo.upper()} Results:")
        report_lines.append("-" * 40)
        report_lines.append(f"  Total Episodes: {len(df)}")
        report_lines.append(f"  Total Timesteps: {df['timestep'].max():,}")
        report_lines.append(f"  Mean Reward: {df['reward'].mean():.2f} ± {df['reward'].std():.2f}")
        report_lines.append(f"  Mean Score: {df['score'].mean():.1f}")
        report_lines.append(f"  Best Score: {df['score'].max()}")
        report_lines.append(f"  Mean Episode Length: {df['length'].mean():.1f}")

        final = df.tail(100)
        report_lines.append(f"\n  Final Performance (last 100 episodes):")
        report_lines.append(f"    Mean Score: {final['score'].mean():.1f} ± {final['score'].std():.1f}")
        report_lines.append(f"    Mean Length: {final['length'].mean():.1f}")

    report_lines.append("\n" + "=" * 60)
    return "\n".join(report_lines)


def generate_summary_report(data: Dict[str, Optional[pd.DataFrame]], output_dir: str):
    """Print the text summary and save it next to the plots."""
    report = summarize(data)
    print(report)

    os.makedirs(output_dir, exist_ok=True)
    report_path = os.path.join(output_dir, "experiment_summary.txt")
    with open(report_path, "w") as f:
        f.write(report)

    print(f"\nSaved summary report to {report_path}")
    return report_path


def main():
    parser = argparse.ArgumentParser(description="Plot RL experiment results")
    parser.add_argument(
        "--log-dir",
        type=str,
        default="./logs",
        help="Directory containing log files",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default="./plots",
        help="Directory to save plots",
    )
    parser.add_argument(
        "--window",
        type=int,
        default=50,
        help="Smoothing window size (default: 50)",
    )
    parser.add_argument(
        "--algos",
        nargs="+",
        default=["dqn", "ppo"],
        help="Algorithms to plot",
    )

    args = parser.parse_args()

    print(f"Loading metrics from {args.log_dir}...")

    data = {}
    for algo in args.algos:
        df = load_metrics(args.log_dir, algo)
        if df is not None:
            print(f"  Loaded {algo}: {len(df)} episodes")
        else:
            print(f"  No data found for {algo}")
        data[algo] = df

    if not any(d is not None for d in data.values()):
        print("\nNo data found! Make sure training has generated metrics files.")
        return

    for algo, df in data.items():
        if df is not None:
            plot_learning_curve(df, algo, args.output_dir, args.window)

    if sum(1 for d in data.values() if d is not None) > 1:
        plot_comparison(data, args.output_dir, args.window)

    generate_summary_report(data, args.output_dir)

    print(f"\nAll plots saved to {args.output_dir}/")


if __name__ == "__main__":
    main()
