"""Corruption sweep: how often does consensus recover the dealt secret?"""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import pandas as pd  # noqa: E402

from ..recovery.solver import solve_document  # noqa: E402
from .dealer import ShareDealer, corrupt_shares, encode_document  # noqa: E402

METRICS_FILENAME = "consensus_metrics.csv"
PLOT_FILENAME = "consensus_recovery.png"


@dataclass(frozen=True)
class ExperimentConfig:
    k: int = 3
    n: int = 6
    trials: int = 20
    seed: int = 0
    coefficient_bound: int = 10**6

    def __post_init__(self) -> None:
        if not (1 <= self.k <= self.n):
            raise ValueError("Require 1 <= k <= n for the corruption sweep.")
        if self.trials < 1:
            raise ValueError("trials must be positive.")


def collect_metrics(config: ExperimentConfig) -> pd.DataFrame:
    """Run ``trials`` solves for each corruption count 0..n-k."""
    rng = np.random.default_rng(config.seed)
    dealer = ShareDealer(config.k, config.n, config.coefficient_bound, rng=rng)
    records: list[dict[str, object]] = []
    for corrupted in range(config.n - config.k + 1):
        for trial in range(config.trials):
            dealt = dealer.deal()
            shares, _ = corrupt_shares(dealt.shares, corrupted, rng)
            document = encode_document(shares, config.k, rng)
            t0 = time.perf_counter()
            result = solve_document(document)
            elapsed_ms = (time.perf_counter() - t0) * 1000.0
            records.append(
                {
                    "corrupted": corrupted,
                    "trial": trial,
                    "recovered": result.secret == str(dealt.secret),
                    "inliers": len(result.used_shares),
                    "subsets_evaluated": result.consensus.subsets_evaluated,
                    "elapsed_ms": elapsed_ms,
                }
            )
    return pd.DataFrame(records)


def _plot_results(df: pd.DataFrame, config: ExperimentConfig, out_path: Path) -> None:
    summary = df.groupby("corrupted").agg(
        recovery_rate=("recovered", "mean"),
        elapsed_ms=("elapsed_ms", "mean"),
    )
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    axes[0].plot(summary.index, summary["recovery_rate"], marker="o")
    axes[0].axvline((config.n - config.k) / 2, linestyle="--", color="gray")
    axes[0].set_xlabel("Corrupted shares")
    axes[0].set_ylabel("Recovery rate")
    axes[0].set_ylim(-0.05, 1.05)
    axes[0].set_title(f"Secret recovery (k={config.k}, n={config.n})")

    axes[1].bar(summary.index, summary["elapsed_ms"], color="#1f77b4")
    axes[1].set_xlabel("Corrupted shares")
    axes[1].set_ylabel("Mean solve time [ms]")
    axes[1].set_title("Consensus search cost")

    fig.tight_layout()
    fig.savefig(out_path, dpi=200)
    plt.close(fig)


def run_corruption_sweep(config: ExperimentConfig, output: Path) -> tuple[Path, Path]:
    df = collect_metrics(config)
    output.mkdir(parents=True, exist_ok=True)
    metrics_path = output / METRICS_FILENAME
    df.to_csv(metrics_path, index=False)
    plot_path = output / PLOT_FILENAME
    _plot_results(df, config, plot_path)
    return metrics_path, plot_path


__all__ = ["ExperimentConfig", "collect_metrics", "run_corruption_sweep"]
