"""src/holtwinters/validation/checks.py"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Sized

logger = logging.getLogger(__name__)

_PREFIX = "Invalid parameter for prediction; "


class InvalidParameterError(ValueError):
    """A prediction parameter is out of range."""

    def __init__(self, message: str, parameter: str | None = None, value: Any = None) -> None:
        super().__init__(message)
        self.parameter = parameter
        self.value = value


@dataclass(frozen=True)
class CheckResult:
    ok: bool
    error: InvalidParameterError | None = None

    def raise_if_failed(self) -> None:
        if not self.ok:
            raise self.error if self.error is not None else InvalidParameterError("Validation failed.")


def _fail(message: str, parameter: str, value: Any) -> CheckResult:
    logger.debug("Rejected %s=%r", parameter, value)
    return CheckResult(ok=False, error=InvalidParameterError(_PREFIX + message, parameter=parameter, value=value))


def _outside_unit_interval(x: float) -> bool:
    # NaN compares false both ways and is let through.
    return x < 0.0 or x > 1.0


def validate_params(
    series: Sized,
    season_length: int,
    alpha: float,
    beta: float,
    gamma: float,
    prediction_length: int,
) -> CheckResult:
    """
    Check prediction parameters in a fixed order and report the first failure:
      1) season length >= 2
      2) prediction length >= 0
      3) alpha, beta, gamma each within [0, 1]
      4) at least one full season of data
    """
    if season_length <= 1:
        return _fail(f"season length must be at least 2, is {season_length}", "season_length", season_length)
    if prediction_length < 0:
        return _fail(
            f"prediction length must be at least 0, cannot be negative, is {prediction_length}",
            "prediction_length",
            prediction_length,
        )
    for name, value in (("alpha", alpha), ("beta", beta), ("gamma", gamma)):
        if _outside_unit_interval(value):
            return _fail(f"{name} must be between 0 and 1, is {value:.6f}", name, value)
    if len(series) < season_length:
        return _fail(
            "must have at least 1 season of data to predict, "
            f"season length: {season_length}, series length: {len(series)}",
            "series",
            len(series),
        )
    return CheckResult(ok=True)
