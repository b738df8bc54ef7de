"""Share dealing and corruption experiments."""

from .dealer import DealtShares, ShareDealer, corrupt_shares, encode_document, evaluate_int
from .experiment import ExperimentConfig, collect_metrics, run_corruption_sweep

__all__ = [
    "DealtShares",
    "ShareDealer",
    "corrupt_shares",
    "encode_document",
    "evaluate_int",
    "ExperimentConfig",
    "collect_metrics",
    "run_corruption_sweep",
]
