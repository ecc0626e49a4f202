"""src/holtwinters/modeling/__init__.py"""

from .evaluation import MetricPack, compute_metrics, in_sample_metrics, mae, rmse, smape

__all__ = [
    "MetricPack",
    "compute_metrics",
    "in_sample_metrics",
    "rmse",
    "mae",
    "smape",
]
