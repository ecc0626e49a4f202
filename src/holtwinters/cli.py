"""src/holtwinters/cli.py"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Optional

import typer
from rich import print
from rich.table import Table

from holtwinters.common.config import MODELS, ForecastSettings, load_config
from holtwinters.common.logging import setup_logging
from holtwinters.forecasting.holt_winters import holt_winters
from holtwinters.modeling.evaluation import in_sample_metrics
from holtwinters.reporting.tables import result_frame, summarize_result
from holtwinters.validation.checks import validate_params

app = typer.Typer(help="Holt-Winters smoothing and forecasting CLI")

DEFAULT_CONFIG = "configs/config.yaml"

SeriesOpt = typer.Option(..., "--series", "-s", help="Comma-separated observations, e.g. '1,2,3,2,1'")
ConfigOpt = typer.Option(DEFAULT_CONFIG, "--config", "-c", help="Path to YAML config with forecast defaults")
SeasonOpt = typer.Option(None, "--season-length", "-L", help="Observations per season")
AlphaOpt = typer.Option(None, help="Level smoothing coefficient [0, 1]")
BetaOpt = typer.Option(None, help="Trend smoothing coefficient [0, 1]")
GammaOpt = typer.Option(None, help="Seasonal smoothing coefficient [0, 1]")
HorizonOpt = typer.Option(None, "--prediction-length", "-n", help="Number of forecasts to append")
ModelOpt = typer.Option(None, "--model", "-m", help=f"One of: {', '.join(MODELS)}")
LogLevelOpt = typer.Option(None, "--log-level", help="Override logging.level from config")


def parse_series(text: str) -> list[float]:
    parts = [p.strip() for p in text.replace(";", ",").split(",")]
    try:
        return [float(p) for p in parts if p]
    except ValueError as e:
        raise typer.BadParameter(f"series must be comma-separated numbers: {e}") from e


def _settings(
    config_path: Optional[str],
    log_level: Optional[str],
    *,
    model: Optional[str],
    season_length: Optional[int],
    alpha: Optional[float],
    beta: Optional[float],
    gamma: Optional[float],
    prediction_length: Optional[int],
) -> ForecastSettings:
    # The default config is optional; an explicitly passed one must exist.
    if config_path == DEFAULT_CONFIG and not Path(config_path).exists():
        config_path = None
    cfg = load_config(config_path)
    setup_logging(cfg, level_override=log_level)
    base = cfg.forecast_defaults()

    if model is not None and model.strip().lower() not in MODELS:
        raise typer.BadParameter(f"model must be one of {list(MODELS)}, got {model!r}")

    return ForecastSettings(
        model=model.strip().lower() if model is not None else base.model,
        season_length=season_length if season_length is not None else base.season_length,
        alpha=alpha if alpha is not None else base.alpha,
        beta=beta if beta is not None else base.beta,
        gamma=gamma if gamma is not None else base.gamma,
        prediction_length=prediction_length if prediction_length is not None else base.prediction_length,
    )


@app.command()
def predict(
    series: str = SeriesOpt,
    season_length: Optional[int] = SeasonOpt,
    alpha: Optional[float] = AlphaOpt,
    beta: Optional[float] = BetaOpt,
    gamma: Optional[float] = GammaOpt,
    prediction_length: Optional[int] = HorizonOpt,
    model: Optional[str] = ModelOpt,
    config_path: Optional[str] = ConfigOpt,
    log_level: Optional[str] = LogLevelOpt,
) -> None:
    """Smooth the series and append forecasts."""
    values = parse_series(series)
    s = _settings(
        config_path,
        log_level,
        model=model,
        season_length=season_length,
        alpha=alpha,
        beta=beta,
        gamma=gamma,
        prediction_length=prediction_length,
    )

    result = holt_winters(
        values, s.season_length, s.alpha, s.beta, s.gamma, s.prediction_length, model=s.model
    )
    if not result.ok:
        print(f"[bold red]{result.error}[/bold red]")
        raise typer.Exit(code=1)

    frame = result_frame(result, s.season_length, values)
    table = Table(title=f"Holt-Winters ({s.model}, season length {s.season_length})")
    for col in ("Step", "Observed", "Value", "Kind"):
        table.add_column(col, justify="right" if col != "Kind" else "left")
    for row in frame.itertuples(index=False):
        observed = "" if math.isnan(row.Observed) else f"{row.Observed:g}"
        table.add_row(str(row.Step), observed, f"{row.Value:.6f}", row.Kind)
    print(table)

    summary = summarize_result(frame)
    for row in summary.itertuples(index=False):
        print(f"{row.Kind}: {row.Steps} steps, mean {row.Value_Mean:.6f}")

    metrics = in_sample_metrics(values, result)
    print(
        f"[bold]In-sample fit[/bold] RMSE={metrics.rmse:.6f} MAE={metrics.mae:.6f} SMAPE={metrics.smape:.3f}%"
    )


@app.command()
def validate(
    series: str = SeriesOpt,
    season_length: Optional[int] = SeasonOpt,
    alpha: Optional[float] = AlphaOpt,
    beta: Optional[float] = BetaOpt,
    gamma: Optional[float] = GammaOpt,
    prediction_length: Optional[int] = HorizonOpt,
    config_path: Optional[str] = ConfigOpt,
    log_level: Optional[str] = LogLevelOpt,
) -> None:
    """Check prediction parameters without computing anything."""
    values = parse_series(series)
    s = _settings(
        config_path,
        log_level,
        model=None,
        season_length=season_length,
        alpha=alpha,
        beta=beta,
        gamma=gamma,
        prediction_length=prediction_length,
    )
    check = validate_params(values, s.season_length, s.alpha, s.beta, s.gamma, s.prediction_length)
    if not check.ok:
        print(f"[bold red]{check.error}[/bold red]")
        raise typer.Exit(code=1)
    print("[bold green]Parameters are valid.[/bold green]")


if __name__ == "__main__":
    app()
