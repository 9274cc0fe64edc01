"""Grouper: split a filtered record set into labelled groups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from .records import Record


@dataclass(frozen=True)
class Group:
    """Named bucket of records; members keep input order."""

    label: str
    members: Tuple[Record, ...]

    @property
    def count(self) -> int:
        return len(self.members)


@dataclass(frozen=True)
class AgeBand:
    label: str
    low: int
    high: int  # inclusive

    def __contains__(self, age: int) -> bool:
        return self.low <= age <= self.high


AGE_BANDS: Tuple[AgeBand, ...] = (
    AgeBand("18-25", 18, 25),
    AgeBand("26-35", 26, 35),
    AgeBand("36-45", 36, 45),
    AgeBand("46-55", 46, 55),
    AgeBand("56+", 56, 100),
)


def group_by_country(records: Iterable[Record]) -> List[Group]:
    """One group per country, in order of first appearance."""
    buckets: Dict[str, List[Record]] = {}
    for r in records:
        buckets.setdefault(r.country, []).append(r)
    return [Group(label, tuple(members)) for label, members in buckets.items()]


def group_by_age(records: Iterable[Record]) -> List[Group]:
    """One group per non-empty age band, in band order.

    Ages outside every band (under 18 or over 100) are left out.
    """
    records = list(records)
    groups: List[Group] = []
    for band in AGE_BANDS:
        members = tuple(r for r in records if r.age in band)
        if members:
            groups.append(Group(band.label, members))
    return groups
