"""
src/holtwinters/forecasting/holt_winters.py

Triple exponential smoothing (Holt-Winters).

Each entry point takes a seasonal historical series and returns the smoothed
series with `prediction_length` forecasts appended. Invalid parameters are not
raised: they come back in `ForecastResult.error` with `values` set to None.

Parameters shared by all entry points:
    series: historical seasonal data, at least one full season, starting at
        the beginning of a season. Two or more seasons give a better trend.
    season_length: observations per season, at least 2.
    alpha: smoothing coefficient for the level, in [0, 1].
    beta: smoothing coefficient for the trend, in [0, 1].
    gamma: smoothing coefficient for the seasonal component, in [0, 1].
    prediction_length: number of forecasts to append, 0 to only smooth.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Literal, Sequence

import numpy as np

from holtwinters.forecasting.initial import (
    initial_seasonal_components,
    initial_seasonal_factors,
    initial_trend,
)
from holtwinters.validation.checks import InvalidParameterError, validate_params

logger = logging.getLogger(__name__)

Model = Literal["additive", "multiplicative"]


@dataclass(frozen=True, eq=False)
class ForecastResult:
    """
    Smoothed values plus forecasts, or the reason there are none.

    Unpacks as `(values, error)`:

        values, err = predict(series, 12, 0.5, 0.1, 0.3, 6)
    """
    values: np.ndarray | None
    error: InvalidParameterError | None = None
    n_observed: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def smoothed(self) -> np.ndarray:
        return self.raise_if_failed()[: self.n_observed]

    @property
    def forecast(self) -> np.ndarray:
        return self.raise_if_failed()[self.n_observed:]

    def raise_if_failed(self) -> np.ndarray:
        if self.error is not None:
            raise self.error
        if self.values is None:
            raise ValueError("ForecastResult holds neither values nor an error")
        return self.values

    def __iter__(self) -> Iterator[object]:
        return iter((self.values, self.error))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ForecastResult):
            return NotImplemented
        if self.n_observed != other.n_observed or str(self.error) != str(other.error):
            return False
        if self.values is None or other.values is None:
            return self.values is None and other.values is None
        return np.array_equal(self.values, other.values, equal_nan=True)

    __hash__ = None  # type: ignore[assignment]


# Smoothing steps return the updated (level, trend, seasonal slot) and the output value.
def _additive_step(val, seasonal, level, trend, alpha, beta, gamma):
    prior = level
    level = alpha * (val - seasonal) + (1 - alpha) * (prior + trend)
    trend = beta * (level - prior) + (1 - beta) * trend
    seasonal = gamma * (val - level) + (1 - gamma) * seasonal
    return level, trend, seasonal, level + trend + seasonal


def _multiplicative_step(val, seasonal, level, trend, alpha, beta, gamma):
    prior = level
    level = alpha * (val / seasonal) + (1 - alpha) * (prior + trend)
    trend = beta * (level - prior) + (1 - beta) * trend
    seasonal = gamma * (val / level) + (1 - gamma) * seasonal
    return level, trend, seasonal, level + trend * seasonal


def _additive_forecast(level, trend, seasonal, m):
    return level + m * trend + seasonal


def _multiplicative_forecast(level, trend, seasonal, m):
    return (level + m * trend) * seasonal


_MODELS = {
    "additive": (initial_seasonal_components, _additive_step, _additive_forecast),
    "multiplicative": (initial_seasonal_factors, _multiplicative_step, _multiplicative_forecast),
}


def holt_winters(
    series: Sequence[float] | np.ndarray,
    season_length: int,
    alpha: float,
    beta: float,
    gamma: float,
    prediction_length: int,
    *,
    model: Model | str = "additive",
) -> ForecastResult:
    """Smooth `series` and append forecasts using the given composition model."""
    key = str(model).strip().lower()
    if key not in _MODELS:
        raise ValueError(f"Unknown model {model!r}; expected one of {sorted(_MODELS)}")

    check = validate_params(series, season_length, alpha, beta, gamma, prediction_length)
    if not check.ok:
        logger.info("%s", check.error)
        return ForecastResult(values=None, error=check.error)

    values = np.asarray(series, dtype=np.float64)
    n = len(values)
    init_seasonals, step, extrapolate = _MODELS[key]

    level = values[0]
    trend = initial_trend(values, season_length)
    seasonals = init_seasonals(values, season_length)
    logger.debug("%s start: level=%r trend=%r seasonals=%r", key, level, trend, seasonals)

    out = np.empty(n + prediction_length, dtype=np.float64)
    out[0] = values[0]
    with np.errstate(divide="ignore", invalid="ignore"):
        for i in range(1, n + prediction_length):
            p = i % season_length
            if i >= n:
                out[i] = extrapolate(level, trend, seasonals[p], i - n + 1)
                continue
            level, trend, seasonals[p], out[i] = step(
                values[i], seasonals[p], level, trend, alpha, beta, gamma
            )

    return ForecastResult(values=out, n_observed=n)


def predict_additive(
    series: Sequence[float] | np.ndarray,
    season_length: int,
    alpha: float,
    beta: float,
    gamma: float,
    prediction_length: int,
) -> ForecastResult:
    """Holt-Winters with additive trend and seasonality."""
    return holt_winters(series, season_length, alpha, beta, gamma, prediction_length, model="additive")


def predict_multiplicative(
    series: Sequence[float] | np.ndarray,
    season_length: int,
    alpha: float,
    beta: float,
    gamma: float,
    prediction_length: int,
) -> ForecastResult:
    """
    Holt-Winters with multiplicative seasonality.

    A zero seasonal factor or level is divided by as-is and shows up as inf or
    NaN in the output.
    """
    return holt_winters(series, season_length, alpha, beta, gamma, prediction_length, model="multiplicative")


def predict(
    series: Sequence[float] | np.ndarray,
    season_length: int,
    alpha: float,
    beta: float,
    gamma: float,
    prediction_length: int,
) -> ForecastResult:
    """Same as `predict_additive`; kept for backward compatibility."""
    return predict_additive(series, season_length, alpha, beta, gamma, prediction_length)
