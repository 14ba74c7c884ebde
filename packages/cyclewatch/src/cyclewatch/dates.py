"""
Date normalization: turns raw records into a sorted list of calendar dates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import MAXYEAR, MINYEAR, date, timedelta
from typing import List, Sequence

import pandas as pd

from cyclewatch.records import RawRecord


@dataclass
class NormalizedDates:
    dates: List[date] = field(default_factory=list)
    discarded: int = 0

    def __len__(self) -> int:
        return len(self.dates)

    @property
    def last(self) -> date:
        return self.dates[-1]


def is_valid_record(record: RawRecord) -> bool:
    """Month in 1..12 and day in 1..31; month lengths are not checked."""
    return 1 <= record.month <= 12 and 1 <= record.day <= 31


def _representable(record: RawRecord) -> bool:
    return MINYEAR <= record.year <= MAXYEAR


def _to_date(record: RawRecord) -> date:
    # Start from the first of the month so overflowing days roll forward
    return date(record.year, record.month, 1) + timedelta(days=record.day - 1)


def normalize_dates(records: Sequence[RawRecord]) -> NormalizedDates:
    """
    Validate records and convert them to dates sorted oldest -> newest.

    A day past the end of its month rolls over into the next month
    (2023-04-31 becomes 2023-05-01). Years that ``datetime.date`` cannot
    hold are discarded along with invalid records.
    """
    valid = [
        record
        for record in records
        if is_valid_record(record) and _representable(record)
    ]
    discarded = len(records) - len(valid)
    if not valid:
        return NormalizedDates(dates=[], discarded=discarded)

    df = pd.DataFrame({"date": [_to_date(record) for record in valid]})
    df = df.sort_values("date", kind="stable").reset_index(drop=True)
    return NormalizedDates(dates=list(df["date"]), discarded=discarded)
