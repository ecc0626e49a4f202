"""src/holtwinters/forecasting/__init__.py"""

from .holt_winters import (
    ForecastResult,
    Model,
    holt_winters,
    predict,
    predict_additive,
    predict_multiplicative,
)
from .initial import (
    initial_seasonal_components,
    initial_seasonal_factors,
    initial_trend,
    season_averages,
)

__all__ = [
    "ForecastResult",
    "Model",
    "holt_winters",
    "predict",
    "predict_additive",
    "predict_multiplicative",
    "initial_trend",
    "season_averages",
    "initial_seasonal_components",
    "initial_seasonal_factors",
]
