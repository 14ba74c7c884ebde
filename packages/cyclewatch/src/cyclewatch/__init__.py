"""
cyclewatch: menstrual cycle statistics and next-period prediction.
"""

from cyclewatch.config import PredictorConfig
from cyclewatch.dates import NormalizedDates, is_valid_record, normalize_dates
from cyclewatch.errors import (
    CycleWatchError,
    InsufficientCycleDataError,
    InsufficientRecordsError,
    RecordFileError,
)
from cyclewatch.predictor import CyclePredictor, CycleReport, PredictionWindow, predict_window
from cyclewatch.records import LoadResult, RawRecord, load_records
from cyclewatch.stats import (
    CycleStatistics,
    calculate_cycle_stats,
    compute_cycle_lengths,
    filter_cycle_lengths,
)

__all__ = [
    "CyclePredictor",
    "CycleReport",
    "CycleStatistics",
    "CycleWatchError",
    "InsufficientCycleDataError",
    "InsufficientRecordsError",
    "LoadResult",
    "NormalizedDates",
    "PredictionWindow",
    "PredictorConfig",
    "RawRecord",
    "RecordFileError",
    "calculate_cycle_stats",
    "compute_cycle_lengths",
    "filter_cycle_lengths",
    "is_valid_record",
    "load_records",
    "normalize_dates",
    "predict_window",
]
