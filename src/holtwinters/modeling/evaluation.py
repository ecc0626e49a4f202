"""src/holtwinters/modeling/evaluation.py"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from holtwinters.forecasting.holt_winters import ForecastResult


def _paired_finite(observed: Iterable[float], fitted: Iterable[float]) -> tuple[np.ndarray, np.ndarray]:
    yt = np.asarray(list(observed), dtype=float)
    yp = np.asarray(list(fitted), dtype=float)
    if yt.shape != yp.shape:
        raise ValueError(f"length mismatch: observed={yt.size}, fitted={yp.size}")
    keep = np.isfinite(yt) & np.isfinite(yp)
    return yt[keep], yp[keep]


def rmse(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    if y_true.size == 0:
        return float("nan")
    return float(np.sqrt(np.mean((y_true - y_pred) ** 2)))


def mae(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    if y_true.size == 0:
        return float("nan")
    return float(np.mean(np.abs(y_true - y_pred)))


def smape(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """Symmetric MAPE in percent; a 0/0 point counts as a perfect fit."""
    if y_true.size == 0:
        return float("nan")
    denom = (np.abs(y_true) + np.abs(y_pred)) / 2.0
    denom = np.where(denom == 0, 1.0, denom)
    return float(np.mean(np.abs(y_true - y_pred) / denom) * 100.0)


@dataclass(frozen=True)
class MetricPack:
    rmse: float
    mae: float
    smape: float
    n: int = 0

    def as_dict(self) -> dict[str, float]:
        return {"RMSE": float(self.rmse), "MAE": float(self.mae), "SMAPE": float(self.smape)}


def compute_metrics(observed: Iterable[float], fitted: Iterable[float]) -> MetricPack:
    """Error metrics over the pairs where both values are finite."""
    yt, yp = _paired_finite(observed, fitted)
    return MetricPack(rmse=rmse(yt, yp), mae=mae(yt, yp), smape=smape(yt, yp), n=int(yt.size))


def in_sample_metrics(series: Iterable[float], result: ForecastResult) -> MetricPack:
    """
    How closely the smoothed reconstruction tracks the observed series.

    The first point is copied from the input and is left out.
    """
    observed = np.asarray(list(series), dtype=float)
    smoothed = result.smoothed
    if observed.size != smoothed.size:
        raise ValueError(
            f"series has {observed.size} points but the result smoothed {smoothed.size}"
        )
    return compute_metrics(observed[1:], smoothed[1:])
