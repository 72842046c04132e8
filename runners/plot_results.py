"""
Plotting script for headless run metrics.
Generates per-run score curves and a comparison across runs.
"""

import os
import glob
import argparse
import pandas as pd
import numpy as np
import matplotlib.pyplot as plt
from typing import Dict, Optional


def load_metrics(csv_path: str) -> Optional[pd.DataFrame]:
    """Load one metrics CSV written by runners.simulate."""
    if not os.path.exists(csv_path):
        return None
    return pd.read_csv(csv_path)


def load_all_metrics(log_dir: str) -> Dict[str, pd.DataFrame]:
    """Load every ``*_metrics.csv`` in a directory, keyed by run name."""
    runs = {}
    for path in sorted(glob.glob(os.path.join(log_dir, "*_metrics.csv"))):
        name = os.path.basename(path)[: -len("_metrics.csv")]
        df = load_metrics(path)
        if df is not None and len(df) > 0:
            runs[name] = df
    return runs


def smooth(data: np.ndarray, window: int = 10) -> np.ndarray:
    """Apply rolling average smoothing."""
    if len(data) < window:
        return data
    kernel = np.ones(window) / window
    return np.convolve(data, kernel, mode="valid")


def plot_run(
    df: pd.DataFrame,
    name: str,
    output_dir: str,
    window: int = 10,
):
    """Plot score, survival and kill curves for a single run."""
    fig, axes = plt.subplots(2, 2, figsize=(14, 10))
    fig.suptitle(f"{name} Episode Metrics", fontsize=16, fontweight="bold")

    episodes = df["episode"].values

    # Score
    ax = axes[0, 0]
    scores = df["score"].values.astype(float)
    smoothed = smooth(scores, window)
    ax.plot(episodes, scores, alpha=0.3, label="raw")
    ax.plot(episodes[:len(smoothed)], smoothed, linewidth=2, label="smoothed")
    ax.set_xlabel("Episode")
    ax.set_ylabel("Score")
    ax.set_title("Score per Episode")
    ax.legend()
    ax.grid(True, alpha=0.3)

    # Time alive
    ax = axes[0, 1]
    alive = df["time_alive"].values
    smoothed_alive = smooth(alive, window)
    ax.plot(episodes[:len(smoothed_alive)], smoothed_alive, linewidth=2, color="orange")
    ax.set_xlabel("Episode")
    ax.set_ylabel("Seconds")
    ax.set_title("Time Alive")
    ax.grid(True, alpha=0.3)

    # Kills
    ax = axes[1, 0]
    ax.bar(episodes, df["kills"].values, color="green", alpha=0.7, label="kills")
    if "boss_kills" in df.columns:
        ax.bar(episodes, df["boss_kills"].values, color="purple", alpha=0.9, label="boss kills")
    ax.set_xlabel("Episode")
    ax.set_ylabel("Kills")
    ax.set_title("Kills per Episode")
    ax.legend()
    ax.grid(True, alpha=0.3)

    # Score distribution histogram
    ax = axes[1, 1]
    ax.hist(scores, bins=min(50, max(5, len(scores))), alpha=0.7, edgecolor="black")
    ax.axvline(np.mean(scores), color="red", linestyle="--", label=f"Mean: {np.mean(scores):.1f}")
    ax.set_xlabel("Score")
    ax.set_ylabel("Frequency")
    ax.set_title("Score Distribution")
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    os.makedirs(output_dir, exist_ok=True)
    save_path = os.path.join(output_dir, f"{name}_metrics.png")
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()

    print(f"Saved {name} plot to {save_path}")
    return save_path


def plot_comparison(
    data: Dict[str, pd.DataFrame],
    output_dir: str,
):
    """Compare mean score and survival across runs."""
    names = list(data)
    mean_scores = [data[n]["score"].mean() for n in names]
    std_scores = [data[n]["score"].std(ddof=0) for n in names]
    mean_alive = [data[n]["time_alive"].mean() for n in names]

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    fig.suptitle("Run Comparison", fontsize=16, fontweight="bold")

    ax = axes[0]
    ax.bar(names, mean_scores, yerr=std_scores, capsize=5, alpha=0.8)
    ax.set_ylabel("Mean Score")
    ax.set_title("Score")
    ax.grid(True, axis="y", alpha=0.3)

    ax = axes[1]
    ax.bar(names, mean_alive, color="orange", alpha=0.8)
    ax.set_ylabel("Mean Seconds Alive")
    ax.set_title("Survival")
    ax.grid(True, axis="y", alpha=0.3)

    for ax in axes:
        ax.tick_params(axis="x", rotation=30)

    plt.tight_layout()

    os.makedirs(output_dir, exist_ok=True)
    save_path = os.path.join(output_dir, "comparison.png")
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()

    print(f"Saved comparison plot to {save_path}")
    return save_path


def main():
    parser = argparse.ArgumentParser(description="Plot headless run metrics")
    parser.add_argument("--log-dir", type=str, default="./logs", help="Directory with *_metrics.csv files")
    parser.add_argument("--output-dir", type=str, default="./plots", help="Where to save figures")
    parser.add_argument("--window", type=int, default=10, help="Smoothing window")
    args = parser.parse_args()

    runs = load_all_metrics(args.log_dir)
    if not runs:
        print(f"No metrics found in {args.log_dir}")
        return

    for name, df in runs.items():
        plot_run(df, name, args.output_dir, window=args.window)

    if len(runs) > 1:
        plot_comparison(runs, args.output_dir)


if __name__ == "__main__":
    main()
