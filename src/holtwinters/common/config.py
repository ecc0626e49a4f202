"""src/holtwinters/common/config.py"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

MODELS = ("additive", "multiplicative")


def _as_path(p: str | Path) -> Path:
    return p if isinstance(p, Path) else Path(p)


@dataclass(frozen=True)
class ForecastSettings:
    """Default prediction parameters, overridable from the CLI."""
    model: str = "additive"
    season_length: int = 2
    alpha: float = 0.5
    beta: float = 0.5
    gamma: float = 0.5
    prediction_length: int = 0


@dataclass(frozen=True)
class AppConfig:
    """Config wrapper with project-root relative paths."""

    raw: Dict[str, Any]
    config_path: Path | None = None

    @property
    def project_root(self) -> Path:
        # configs/config.yaml -> project root is parent of "configs"
        if self.config_path is None:
            return Path.cwd().resolve()
        return self.config_path.parent.parent.resolve()

    @property
    def logging(self) -> Dict[str, Any]:
        return self.raw.get("logging") or {}

    @property
    def forecast(self) -> Dict[str, Any]:
        return self.raw.get("forecast") or {}

    def forecast_defaults(self) -> ForecastSettings:
        f = self.forecast
        base = ForecastSettings()
        model = str(f.get("model", base.model)).strip().lower()
        if model not in MODELS:
            raise ValueError(f"forecast.model must be one of {list(MODELS)}, got {model!r}")
        return ForecastSettings(
            model=model,
            season_length=int(f.get("season_length", base.season_length)),
            alpha=float(f.get("alpha", base.alpha)),
            beta=float(f.get("beta", base.beta)),
            gamma=float(f.get("gamma", base.gamma)),
            prediction_length=int(f.get("prediction_length", base.prediction_length)),
        )


def load_config(config_path: str | Path | None) -> AppConfig:
    if config_path is None:
        return AppConfig(raw={})
    config_path = _as_path(config_path).resolve()
    if not config_path.exists():
        raise FileNotFoundError(f"Missing config file {config_path}.")
    with config_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{config_path}: expected a mapping at top level.")
    return AppConfig(raw=raw, config_path=config_path)
