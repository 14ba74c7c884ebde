"""
Prediction utilities for cyclewatch.
Shared by the CLI and the test suite.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from pathlib import Path
from typing import List, Optional, Sequence, Union

from cyclewatch.config import DATE_FORMAT, DEFAULT_DELAY_DAYS, MIN_RECORDS, PredictorConfig
from cyclewatch.dates import normalize_dates
from cyclewatch.errors import InsufficientRecordsError
from cyclewatch.records import RawRecord, load_records
from cyclewatch.stats import CycleStatistics, calculate_cycle_stats


@dataclass(frozen=True)
class PredictionWindow:
    earliest: date
    latest: date

    def format(self) -> str:
        return f"{self.earliest.strftime(DATE_FORMAT)} to {self.latest.strftime(DATE_FORMAT)}"


@dataclass
class CycleReport:
    """
    Everything a single run produces, in the order the CLI prints it.
    """

    statistics: CycleStatistics
    last_date: date
    window: PredictionWindow
    skipped_rows: int = 0
    invalid_dates: int = 0

    @property
    def cycle_lengths(self) -> List[int]:
        return self.statistics.cycle_lengths


def predict_window(
    last_date: date, average_cycle: float, delay_days: int = DEFAULT_DELAY_DAYS
) -> PredictionWindow:
    """
    Project the next period start range from the last known start.

    The average is truncated toward zero before use. No ordering check is
    made: a delay larger than the average puts ``earliest`` before
    ``last_date``.
    """
    average_days = int(average_cycle)
    return PredictionWindow(
        earliest=last_date + timedelta(days=average_days - delay_days),
        latest=last_date + timedelta(days=average_days + delay_days),
    )


@dataclass
class CyclePredictor:
    """
    Runs the load -> normalize -> statistics -> prediction pipeline.
    """

    config: PredictorConfig = field(default_factory=PredictorConfig)

    def _log(self, message: str) -> None:
        if self.config.verbose:
            print(message)

    def predict_from_records(
        self, records: Sequence[RawRecord], skipped_rows: int = 0
    ) -> CycleReport:
        """
        Predict the next cycle from already loaded records.

        Raises:
            InsufficientRecordsError: If fewer than two records were loaded
            InsufficientCycleDataError: If no cycle length passes filtering
        """
        # Counts every loaded record, including ones normalization drops later
        if len(records) < MIN_RECORDS:
            raise InsufficientRecordsError(len(records), MIN_RECORDS)

        normalized = normalize_dates(records)
        if normalized.discarded:
            self._log(f"  Discarded {normalized.discarded} invalid date(s)")

        statistics = calculate_cycle_stats(normalized.dates, self.config.tolerance)
        if statistics.discarded:
            self._log(
                f"  Ignored {statistics.discarded} cycle length(s) outside "
                f"the {self.config.tolerance}-day tolerance window"
            )

        last_date = normalized.last
        window = predict_window(last_date, statistics.average, self.config.delay_days)

        return CycleReport(
            statistics=statistics,
            last_date=last_date,
            window=window,
            skipped_rows=skipped_rows,
            invalid_dates=normalized.discarded,
        )

    def predict_from_csv(self, csv_path: Optional[Union[str, Path]] = None) -> CycleReport:
        """
        Convenience method to predict from a CSV file.

        Args:
            csv_path: Path to a ``year,month,day`` CSV; defaults to the
                configured record path

        Returns:
            CycleReport: Statistics and the predicted window

        Raises:
            RecordFileError: If the file cannot be read
        """
        path = Path(csv_path) if csv_path is not None else self.config.record_path
        loaded = load_records(path)
        self._log(f"✓ Loaded {len(loaded)} records from {path}")
        if loaded.skipped:
            self._log(f"  Skipped {loaded.skipped} malformed row(s)")

        return self.predict_from_records(loaded.records, skipped_rows=loaded.skipped)
