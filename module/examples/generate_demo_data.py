#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Generate a synthetic coffee / health survey for dotplt demo charts.

Writes examples/data/synthetic_coffee_health.csv with the seven columns the
record loader expects:

  ID, Age, Gender, Country, Coffee_Intake, Caffeine_mg, Sleep_Hours

Caffeine follows coffee intake (about 95 mg per cup plus noise) and sleep
drops slightly with caffeine, so the three metric views tell a consistent
story.

Run from repo root with PYTHONPATH including module/:
  PYTHONPATH=module python module/examples/generate_demo_data.py
"""

import random
from pathlib import Path

import pandas as pd

# Default seed for reproducible dummy data
DEFAULT_SEED = 42
DEFAULT_ROWS = 2000

COUNTRIES = [
    "Germany", "Brazil", "Japan", "USA", "Italy",
    "Finland", "South Korea", "Canada", "Mexico", "Australia",
]
GENDERS = ["Female", "Male", "Other"]
MG_PER_CUP = 95.0


def _data_dir() -> Path:
    return Path(__file__).resolve().parent / "data"


def _gauss_clip(mu: float, sigma: float, low: float, high: float) -> float:
    x = random.gauss(mu, sigma)
    return max(low, min(high, x))


def make_survey_df(n: int = DEFAULT_ROWS, seed: int = DEFAULT_SEED) -> pd.DataFrame:
    """One row per respondent; IDs run from 1 to *n*."""
    random.seed(seed)
    rows = []
    for i in range(1, n + 1):
        coffee = round(_gauss_clip(2.5, 1.5, 0, 8), 1)
        caffeine = round(_gauss_clip(coffee * MG_PER_CUP, 25, 0, 800), 1)
        sleep = round(_gauss_clip(7.2 - caffeine / 400, 0.9, 3, 10), 1)
        rows.append({
            "ID": i,
            "Age": random.randint(18, 80),
            "Gender": random.choices(GENDERS, weights=[48, 48, 4])[0],
            "Country": random.choice(COUNTRIES),
            "Coffee_Intake": coffee,
            "Caffeine_mg": caffeine,
            "Sleep_Hours": sleep,
        })
    return pd.DataFrame(rows)


def main() -> None:
    out_dir = _data_dir()
    out_dir.mkdir(parents=True, exist_ok=True)
    df = make_survey_df()
    path = out_dir / "synthetic_coffee_health.csv"
    df.to_csv(path, index=False)
    print(f"Wrote {path} ({len(df)} rows)")


if __name__ == "__main__":
    main()
