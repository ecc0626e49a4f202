"""src/holtwinters/common/__init__.py"""

from .config import MODELS, AppConfig, ForecastSettings, load_config
from .logging import setup_logging

__all__ = [
    "MODELS",
    "AppConfig",
    "ForecastSettings",
    "load_config",
    "setup_logging",
]
