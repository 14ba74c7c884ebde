"""
Cycle statistics for cyclewatch.

Cycle lengths are the whole-day gaps between adjacent period start dates.
Gaps outside ``[tolerance, MAX_CYCLE_LENGTH]`` are treated as missed or
duplicated entries and left out of the statistics.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Sequence

import numpy as np
import pandas as pd

from cyclewatch.config import DEFAULT_TOLERANCE, MAX_CYCLE_LENGTH
from cyclewatch.errors import InsufficientCycleDataError


@dataclass
class CycleStatistics:
    """
    Aggregates over the cycle lengths that passed filtering.

    Attributes:
        cycle_lengths: Kept gaps, oldest first
        average: Unrounded mean of the kept gaps
        minimum: Shortest kept gap
        maximum: Longest kept gap
        discarded: Gaps rejected by the tolerance window
    """

    cycle_lengths: List[int] = field(default_factory=list)
    average: float = 0.0
    minimum: int = 0
    maximum: int = 0
    discarded: int = 0


def compute_cycle_lengths(dates: Sequence[date]) -> List[int]:
    """
    Whole days between each pair of adjacent dates.

    The hour count is divided by 24 and truncated, so partial days never
    round up.
    """
    if len(dates) < 2:
        return []

    starts = pd.Series(pd.to_datetime(list(dates)))
    hours = starts.diff().iloc[1:].dt.total_seconds() // 3600
    return [int(h / 24) for h in hours]


def filter_cycle_lengths(
    cycle_lengths: Sequence[int],
    tolerance: int = DEFAULT_TOLERANCE,
    max_length: int = MAX_CYCLE_LENGTH,
) -> List[int]:
    """Keep gaps with ``tolerance <= gap <= max_length``, order preserved."""
    return [length for length in cycle_lengths if tolerance <= length <= max_length]


def calculate_cycle_stats(
    dates: Sequence[date], tolerance: int = DEFAULT_TOLERANCE
) -> CycleStatistics:
    """
    Compute average, shortest and longest cycle length.

    Args:
        dates: Period start dates sorted oldest -> newest
        tolerance: Shortest gap still counted as a cycle

    Returns:
        CycleStatistics over the kept gaps

    Raises:
        InsufficientCycleDataError: If no gap survives filtering
    """
    all_lengths = compute_cycle_lengths(dates)
    kept = filter_cycle_lengths(all_lengths, tolerance)
    discarded = len(all_lengths) - len(kept)

    if not kept:
        raise InsufficientCycleDataError(discarded=discarded)

    return CycleStatistics(
        cycle_lengths=kept,
        average=float(np.mean(kept)),
        minimum=int(np.min(kept)),
        maximum=int(np.max(kept)),
        discarded=discarded,
    )
