"""Shared fixtures for cyclewatch tests."""

from pathlib import Path
from typing import Callable, Iterable, Union

import pytest


@pytest.fixture
def write_records(tmp_path: Path) -> Callable[..., Path]:
    """Write CSV lines to a temporary record file and return its path."""

    def _write(lines: Iterable[Union[str, tuple]], name: str = "records.csv") -> Path:
        path = tmp_path / name
        rendered = [
            line if isinstance(line, str) else ",".join(str(value) for value in line)
            for line in lines
        ]
        path.write_text("\n".join(rendered) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def scenario_a_rows() -> list:
    return [(2024, 1, 1), (2024, 1, 29), (2024, 2, 26)]
