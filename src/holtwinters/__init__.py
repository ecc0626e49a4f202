"""
holtwinters

Triple exponential smoothing (Holt-Winters) for seasonal series, with additive
and multiplicative seasonality.

    from holtwinters import predict_additive

    values, err = predict_additive([1, 2, 3, 2, 1, 1.1, 1.9, 3.1], 5, 0.9, 0.9, 0.9, 5)
"""

from holtwinters.forecasting.holt_winters import (
    ForecastResult,
    holt_winters,
    predict,
    predict_additive,
    predict_multiplicative,
)
from holtwinters.validation.checks import CheckResult, InvalidParameterError, validate_params

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ForecastResult",
    "holt_winters",
    "predict",
    "predict_additive",
    "predict_multiplicative",
    "CheckResult",
    "InvalidParameterError",
    "validate_params",
]
