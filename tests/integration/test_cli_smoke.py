"""tests/integration/test_cli_smoke.py"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from holtwinters.cli import DEFAULT_CONFIG, app, parse_series
from holtwinters.common.config import load_config

runner = CliRunner()

ARGS = ["--series", "1,2,3,2,1", "--season-length", "5", "--alpha", "0.9", "--beta", "0.9", "--gamma", "0.9"]


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch):
    # configs/config.yaml is resolved against the working directory
    monkeypatch.chdir(tmp_path)
    yield
    logging.basicConfig(level=logging.WARNING, force=True, handlers=[logging.NullHandler()])


def test_predict_additive_prints_table() -> None:
    result = runner.invoke(app, ["predict", *ARGS, "--prediction-length", "3"])
    assert result.exit_code == 0, result.output
    assert "2.840000" in result.output
    assert "forecast" in result.output
    assert "In-sample fit" in result.output


def test_predict_multiplicative() -> None:
    result = runner.invoke(app, ["predict", *ARGS, "--model", "multiplicative"])
    assert result.exit_code == 0, result.output
    assert "2.741902" in result.output


def test_predict_invalid_parameter_exits_1() -> None:
    args = ["predict", "--series", "1,2,3,2,1", "--season-length", "1"]
    result = runner.invoke(app, args)
    assert result.exit_code == 1
    assert "season length must be at least 2, is 1" in result.output


def test_predict_unknown_model_is_usage_error() -> None:
    result = runner.invoke(app, ["predict", *ARGS, "--model", "damped"])
    assert result.exit_code == 2


def test_predict_uses_config_defaults(config_file: Path) -> None:
    result = runner.invoke(app, ["predict", "--series", "1,2,3,2,1", "--config", str(config_file)])
    assert result.exit_code == 0, result.output
    # config asks for 5 forecasts with season length 5
    assert "0.866925" in result.output


def test_cli_options_override_config(config_file: Path) -> None:
    result = runner.invoke(
        app, ["validate", "--series", "1,2,3,2,1", "--config", str(config_file), "--alpha=1.5"]
    )
    assert result.exit_code == 1
    assert "alpha must be between 0 and 1, is 1.500000" in result.output


def test_validate_ok() -> None:
    result = runner.invoke(app, ["validate", *ARGS])
    assert result.exit_code == 0, result.output
    assert "Parameters are valid." in result.output


def test_parse_series() -> None:
    assert parse_series("1, 2.5;3,") == [1.0, 2.5, 3.0]
    with pytest.raises(typer.BadParameter):
        parse_series("1,two,3")


def test_default_config_is_loaded_from_working_directory(config_file: Path) -> None:
    # config_file lives at <cwd>/configs/config.yaml: season length 5, 5 forecasts
    result = runner.invoke(app, ["predict", "--series", "1,2,3,2,1"])
    assert result.exit_code == 0, result.output
    assert "0.866925" in result.output


def test_missing_default_config_falls_back_to_builtin_defaults() -> None:
    result = runner.invoke(app, ["predict", "--series", "1,2,3,2,1"])
    assert result.exit_code == 0, result.output
    # season length 2, coefficients 0.5: first smoothed value is 1.75 + 0.625 + 0.125
    assert "2.500000" in result.output
    assert "forecast" not in result.output


def test_missing_explicit_config_is_an_error(tmp_path: Path) -> None:
    result = runner.invoke(app, ["predict", "--series", "1,2,3,2,1", "--config", str(tmp_path / "nope.yaml")])
    assert result.exit_code != 0
    assert isinstance(result.exception, FileNotFoundError)


def test_shipped_config_matches_monthly_defaults() -> None:
    shipped = Path(__file__).resolve().parents[2] / DEFAULT_CONFIG
    s = load_config(shipped).forecast_defaults()
    assert s.model == "additive"
    assert s.season_length == 12
    assert (s.alpha, s.beta, s.gamma) == (0.716, 0.029, 0.993)
    assert s.prediction_length == 24
