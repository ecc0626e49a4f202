"""src/holtwinters/validation/__init__.py"""

from __future__ import annotations

from .checks import CheckResult, InvalidParameterError, validate_params

__all__ = [
    "CheckResult",
    "InvalidParameterError",
    "validate_params",
]
