"""
src/holtwinters/forecasting/initial.py

Starting trend and seasonal state for the smoothing recurrence.

All sums here are accumulated left to right over float64 values. The builtin
sum() and np.mean() use compensated/pairwise summation, which changes results
in the last bits, so they are not used.
"""

from __future__ import annotations

import numpy as np


def initial_trend(series: np.ndarray, season_length: int) -> float:
    """
    Average per-step trend between the first and second seasons.

    With less than two full seasons, falls back to the difference of the first
    two points.
    """
    if len(series) < season_length * 2:
        return series[1] - series[0]

    total = np.float64(0.0)
    for i in range(season_length):
        total += (series[i + season_length] - series[i]) / season_length
    return total / season_length


def season_averages(series: np.ndarray, season_length: int) -> list[np.float64]:
    """Mean of each complete season; a trailing partial season is ignored."""
    n_seasons = len(series) // season_length
    averages = []
    for s in range(n_seasons):
        total = np.float64(0.0)
        for j in range(season_length * s, season_length * s + season_length):
            total += series[j]
        averages.append(total / season_length)
    return averages


def initial_seasonal_components(series: np.ndarray, season_length: int) -> list[np.float64]:
    """Additive offsets: mean deviation of each position from its season's average."""
    averages = season_averages(series, season_length)
    n_seasons = len(averages)
    seasonals = []
    for i in range(season_length):
        total = np.float64(0.0)
        for j in range(n_seasons):
            total += series[season_length * j + i] - averages[j]
        seasonals.append(total / n_seasons)
    return seasonals


def initial_seasonal_factors(series: np.ndarray, season_length: int) -> list[np.float64]:
    """Multiplicative factors: mean ratio of each position to its season's average."""
    averages = season_averages(series, season_length)
    n_seasons = len(averages)
    seasonals = []
    with np.errstate(divide="ignore", invalid="ignore"):
        for i in range(season_length):
            total = np.float64(0.0)
            for j in range(n_seasons):
                total += series[season_length * j + i] / averages[j]
            seasonals.append(total / n_seasons)
    return seasonals
