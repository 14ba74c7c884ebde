"""
Record loading for cyclewatch.

Reads period start dates from a comma separated file with one
``year,month,day`` row per period. Rows that do not have exactly three
integer fields are skipped and counted, never raised.
"""

from __future__ import annotations

import csv
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from cyclewatch.errors import RecordFileError

_INTEGER = re.compile(r"[+-]?[0-9]+")

FIELDS_PER_RECORD = 3


@dataclass(frozen=True)
class RawRecord:
    """A single unvalidated ``(year, month, day)`` row."""

    year: int
    month: int
    day: int


@dataclass
class LoadResult:
    records: List[RawRecord] = field(default_factory=list)
    skipped: int = 0

    def __len__(self) -> int:
        return len(self.records)


def _parse_int(value: str) -> Optional[int]:
    if not _INTEGER.fullmatch(value):
        return None
    return int(value)


def parse_row(row: Sequence[str]) -> Optional[RawRecord]:
    """
    Convert one CSV row into a RawRecord.

    Returns:
        RawRecord, or None if the row has the wrong number of fields or a
        field is not an integer
    """
    if len(row) != FIELDS_PER_RECORD:
        return None

    values = [_parse_int(value) for value in row]
    if any(value is None for value in values):
        return None

    year, month, day = values
    return RawRecord(year=year, month=month, day=day)


def parse_rows(rows: Iterable[Sequence[str]]) -> LoadResult:
    result = LoadResult()
    for row in rows:
        # csv yields [] for blank lines
        if not row:
            continue
        record = parse_row(row)
        if record is None:
            result.skipped += 1
            continue
        result.records.append(record)
    return result


def load_records(filepath: Union[str, Path]) -> LoadResult:
    """
    Load raw period records from CSV.

    Expected format (no header):
    2024,1,1
    2024,1,29
    2024,2,26
    ...

    Raises:
        RecordFileError: If the file cannot be opened or read
    """
    path = Path(filepath)
    try:
        with path.open("r", newline="", encoding="utf-8-sig") as handle:
            return parse_rows(csv.reader(handle))
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise RecordFileError(path, str(exc)) from exc
