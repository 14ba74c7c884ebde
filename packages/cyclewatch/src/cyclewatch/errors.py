"""
Exceptions raised by the cyclewatch pipeline.
"""

from pathlib import Path
from typing import Union


class CycleWatchError(Exception):
    """Base class for every error the CLI reports to the user."""


class RecordFileError(CycleWatchError):
    """The record file could not be opened or read."""

    def __init__(self, path: Union[str, Path], reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Error reading CSV file {self.path}: {reason}")


class InsufficientRecordsError(CycleWatchError):
    """Fewer records were loaded than a cycle length needs."""

    def __init__(self, count: int, required: int) -> None:
        self.count = count
        self.required = required
        super().__init__("Not enough records to calculate cycle lengths.")


class InsufficientCycleDataError(CycleWatchError):
    """No cycle length survived the tolerance window."""

    def __init__(self, discarded: int = 0) -> None:
        self.discarded = discarded
        super().__init__("Insufficient valid cycle data to calculate statistics.")
