"""src/holtwinters/reporting/tables.py"""

from __future__ import annotations

from typing import Iterable

import numpy as np
import pandas as pd

from holtwinters.forecasting.holt_winters import ForecastResult

RESULT_COLUMNS = ["Step", "Season_Position", "Observed", "Value", "Kind"]


def result_frame(
    result: ForecastResult,
    season_length: int,
    series: Iterable[float] | None = None,
) -> pd.DataFrame:
    """
    One row per output step:
        Step, Season_Position, Observed, Value, Kind

    Kind is "observed" for step 0 (copied from the input), "smoothed" for the
    rest of the history and "forecast" beyond it. Observed is NaN where no
    input value exists.
    """
    values = result.raise_if_failed()
    n_obs = result.n_observed
    steps = np.arange(values.size, dtype=int)

    observed = np.full(values.size, np.nan, dtype=float)
    if series is not None:
        s = np.asarray(list(series), dtype=float)
        if s.size != n_obs:
            raise ValueError(f"series has {s.size} points, result was built from {n_obs}")
        observed[:n_obs] = s

    kind = np.where(steps < n_obs, "smoothed", "forecast").astype(object)
    if values.size:
        kind[0] = "observed"

    return pd.DataFrame(
        {
            "Step": steps,
            "Season_Position": steps % int(season_length),
            "Observed": observed,
            "Value": values.astype(float),
            "Kind": kind,
        }
    )[RESULT_COLUMNS]


def summarize_result(frame: pd.DataFrame) -> pd.DataFrame:
    """
    Input from `result_frame`.

    Output summary (by Kind):
        Kind, Steps, Step_Start, Step_End, Value_Min, Value_Max, Value_Mean
    """
    cols = ["Kind", "Steps", "Step_Start", "Step_End", "Value_Min", "Value_Max", "Value_Mean"]
    if frame.empty:
        return pd.DataFrame(columns=cols)

    d = frame.copy()
    d["Value"] = pd.to_numeric(d["Value"], errors="coerce")

    order = {"observed": 0, "smoothed": 1, "forecast": 2}
    out = (
        d.groupby("Kind", as_index=False)
        .agg(
            Steps=("Step", "size"),
            Step_Start=("Step", "min"),
            Step_End=("Step", "max"),
            Value_Min=("Value", "min"),
            Value_Max=("Value", "max"),
            Value_Mean=("Value", "mean"),
        )
    )
    out = out.sort_values("Kind", key=lambda k: k.map(order)).reset_index(drop=True)
    return out[cols]
