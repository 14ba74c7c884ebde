"""
Runtime configuration for cyclewatch.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_RECORD_PATH = Path("./menstruation_records.csv")
DEFAULT_DELAY_DAYS = 5
DEFAULT_TOLERANCE = 15

# Anything longer is not a plausible cycle and is treated as a missed entry
MAX_CYCLE_LENGTH = 35

MIN_RECORDS = 2

DATE_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True)
class PredictorConfig:
    """
    Parameters shared by the statistics engine and the predictor.

    Attributes:
        record_path: CSV file with one ``year,month,day`` row per period start
        delay_days: Days added/subtracted around the average cycle length
        tolerance: Shortest gap (days) still counted as a cycle
        verbose: Print progress details while loading
    """

    record_path: Path = DEFAULT_RECORD_PATH
    delay_days: int = DEFAULT_DELAY_DAYS
    tolerance: int = DEFAULT_TOLERANCE
    verbose: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "record_path", Path(self.record_path))

    @classmethod
    def from_args(cls, args) -> "PredictorConfig":
        return cls(
            record_path=args.records,
            delay_days=args.delay_days,
            tolerance=args.tolerance,
            verbose=args.verbose,
        )

