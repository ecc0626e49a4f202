"""tests/conftest.py"""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml


@pytest.fixture
def one_season() -> list[float]:
    return [1, 2, 3, 2, 1]


@pytest.fixture
def two_seasons() -> list[float]:
    return [1, 2, 3, 2, 1, 1.1, 1.9, 3.1, 2.1, 1.1]


@pytest.fixture
def monthly_series() -> list[float]:
    """Six years of a monthly-style seasonal series (season length 12)."""
    return [
        30, 21, 29, 31, 40, 48, 53, 47, 37, 39, 31, 29, 17, 9, 20, 24, 27, 35, 41, 38,
        27, 31, 27, 26, 21, 13, 21, 18, 33, 35, 40, 36, 22, 24, 21, 20, 17, 14, 17, 19,
        26, 29, 40, 31, 20, 24, 18, 26, 17, 9, 17, 21, 28, 32, 46, 33, 23, 28, 22, 27,
        18, 8, 17, 21, 31, 34, 44, 38, 31, 30, 26, 32,
    ]


def write_config(project_root: Path, raw: dict) -> Path:
    """Write configs/config.yaml under project_root, mirroring the repository layout."""
    cfg_dir = project_root / "configs"
    cfg_dir.mkdir(parents=True, exist_ok=True)
    path = cfg_dir / "config.yaml"
    path.write_text(yaml.safe_dump(raw), encoding="utf-8")
    return path


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    return write_config(
        tmp_path,
        {
            "forecast": {
                "model": "additive",
                "season_length": 5,
                "alpha": 0.9,
                "beta": 0.9,
                "gamma": 0.9,
                "prediction_length": 5,
            },
            "logging": {"level": "WARNING"},
        },
    )


@pytest.fixture
def make_config(tmp_path: Path):
    """Factory fixture: make_config({...}) -> path to a config.yaml under tmp_path."""
    def _make(raw: dict) -> Path:
        return write_config(tmp_path, raw)
    return _make
