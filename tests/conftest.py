"""Shared test fixtures and sample feed payloads."""

from __future__ import annotations

import pytest

from livetiming._logging import LOG_FILENAME, configure_trace_log
from livetiming.models.timing import TimingDataDriver
from livetiming.models.timing_app import TimingAppDataDriver


def _make_sector(value: str) -> dict:
    return {
        "stopped": False,
        "value": value,
        "previousValue": None,
        "status": 0,
        "overallFastest": False,
        "personalFastest": False,
        "segments": [],
    }


SAMPLE_TIMING_DRIVER = {
    "gapToLeader": "+5.000",
    "intervalToPositionAhead": {"value": "+0.273", "catching": False},
    "line": 1,
    "racingNumber": "1",
    "sectors": [
        _make_sector("26.259"),
        _make_sector("26.880"),
        _make_sector("27.093"),
    ],
    "bestLapTime": {"value": "1:20.000"},
    "lastLaptime": {
        "value": "1:21.000",
        "status": 0,
        "overallFastest": False,
        "personalFastest": False,
    },
}

SAMPLE_STINT = {"totalLaps": 10, "compound": "SOFT", "new": "true"}

SAMPLE_TIRE_DRIVER = {
    "racingNumber": "1",
    "stints": [SAMPLE_STINT],
    "line": 1,
    "gridPos": "1",
}


@pytest.fixture
def timing_driver() -> TimingDataDriver:
    return TimingDataDriver.model_validate(SAMPLE_TIMING_DRIVER)


@pytest.fixture
def tire_driver() -> TimingAppDataDriver:
    return TimingAppDataDriver.model_validate(SAMPLE_TIRE_DRIVER)


@pytest.fixture(autouse=True)
def trace_log(tmp_path):
    """Send trace output to tmp_path for each test, then restore the default."""
    configure_trace_log(tmp_path)
    yield tmp_path / LOG_FILENAME
    configure_trace_log(None)
