"""Record store: the parsed survey, loaded once and read-only afterwards.

One row of the CSV is one respondent. Loading goes through pandas so that
numeric coercion happens column-wise; rows that break the validity rules
(non-positive or non-numeric age, negative metric, bad or duplicate ID) are
dropped silently and only the count is logged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple

import pandas as pd

logger = logging.getLogger(__name__)

ALL_COUNTRIES = "all"

# CSV header -> Record field
COLUMNS = {
    "ID": "id",
    "Age": "age",
    "Gender": "gender",
    "Country": "country",
    "Coffee_Intake": "coffee",
    "Caffeine_mg": "caffeine",
    "Sleep_Hours": "sleep",
}
METRIC_COLUMNS = ("coffee", "caffeine", "sleep")


class LoadFailure(Exception):
    """The survey file is missing, empty, unparsable or lacks columns."""


@dataclass(frozen=True)
class Record:
    """One survey respondent."""

    id: int
    age: int
    gender: str
    country: str
    coffee: float
    caffeine: float
    sleep: float

    def value(self, metric: str) -> float:
        """Return the value of *metric* (``coffee``, ``caffeine`` or ``sleep``)."""
        name = getattr(metric, "value", metric)
        if name not in METRIC_COLUMNS:
            raise ValueError(f"Unknown metric: {metric!r}")
        return getattr(self, name)


def filter_by_country(records: Iterable[Record], country: str) -> Tuple[Record, ...]:
    """Records whose country equals *country*; ``"all"`` keeps everything."""
    if country == ALL_COUNTRIES:
        return tuple(records)
    return tuple(r for r in records if r.country == country)


class RecordStore:
    """Immutable working set of valid records."""

    def __init__(self, records: Iterable[Record] = ()) -> None:
        self._records: Tuple[Record, ...] = tuple(records)

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> "RecordStore":
        """Build a store from a DataFrame carrying the survey CSV header."""
        missing = [c for c in COLUMNS if c not in df.columns]
        if missing:
            raise LoadFailure(
                f"CSV is missing required columns: {missing}. Found: {list(df.columns)}"
            )

        out = df[list(COLUMNS)].rename(columns=COLUMNS).copy()
        out["id"] = pd.to_numeric(out["id"], errors="coerce")
        out["age"] = pd.to_numeric(out["age"], errors="coerce")
        for c in METRIC_COLUMNS:
            out[c] = pd.to_numeric(out[c], errors="coerce").fillna(0.0).astype(float)
        out["gender"] = out["gender"].fillna("").astype(str).str.strip()
        out["country"] = out["country"].fillna("").astype(str).str.strip()

        keep = (
            out["id"].notna()
            & (out["id"] % 1 == 0)
            & out["age"].notna()
            & (out["age"] % 1 == 0)
            & (out["age"] > 0)
        )
        for c in METRIC_COLUMNS:
            keep &= out[c] >= 0
        valid = out.loc[keep]
        valid = valid.loc[~valid["id"].duplicated()]

        dropped = len(out) - len(valid)
        if dropped:
            logger.info(f"Excluded {dropped} invalid rows out of {len(out)}")

        records: List[Record] = [
            Record(
                id=int(row.id),
                age=int(row.age),
                gender=row.gender,
                country=row.country,
                coffee=float(row.coffee),
                caffeine=float(row.caffeine),
                sleep=float(row.sleep),
            )
            for row in valid.itertuples(index=False)
        ]
        return cls(records)

    # Public API -----------------------------------------------------
    @property
    def records(self) -> Tuple[Record, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def countries(self) -> List[str]:
        """Distinct countries in order of first appearance."""
        seen: dict[str, None] = {}
        for r in self._records:
            seen.setdefault(r.country, None)
        return list(seen)

    def filter(self, country: str = ALL_COUNTRIES) -> Tuple[Record, ...]:
        """Return the records for *country* without touching the store."""
        return filter_by_country(self._records, country)


def load_records(path: str | Path) -> RecordStore:
    """Read the survey CSV at *path* into a RecordStore.

    Raises LoadFailure when the file cannot be read or parsed.
    """
    path = Path(path)
    logger.info(f"Loading survey data from: {path}")
    if not path.exists():
        raise LoadFailure(f"File not found: {path}")
    try:
        df = pd.read_csv(path)
    except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError) as e:
        raise LoadFailure(f"Could not parse {path}: {e}") from e
    except OSError as e:
        raise LoadFailure(f"Could not read {path}: {e}") from e

    store = RecordStore.from_frame(df)
    logger.info(f"Loaded {len(store)} records ({len(store.countries())} countries)")
    return store
