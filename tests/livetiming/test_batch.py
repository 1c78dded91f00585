"""Tests for per-line dispatch of multi-competitor messages."""

from __future__ import annotations

import pytest

from livetiming.batch import iter_lines, reconcile_timing_lines, reconcile_tire_lines
from livetiming.models.timing import TimingDataDriver
from livetiming.models.timing_app import TimingAppDataDriver


class TestIterLines:
    def test_yields_lines(self) -> None:
        update = {"lines": {"1": {"gapToLeader": ""}, "44": {}}}
        assert list(iter_lines(update)) == [("1", {"gapToLeader": ""}), ("44", {})]

    @pytest.mark.parametrize("update", [None, {}, {"lines": [1, 2]}, "lines"])
    def test_no_lines(self, update) -> None:
        assert list(iter_lines(update)) == []


class TestReconcileTimingLines:
    def test_reconciles_known_drivers(self, timing_driver: TimingDataDriver) -> None:
        drivers = {"1": timing_driver, "44": timing_driver}
        update = {
            "lines": {
                "44": {"gapToLeader": "+3.000"},
                "1": {"line": 1},
            }
        }
        records = reconcile_timing_lines(7, drivers, update)

        assert [r.nr for r in records] == ["44"]
        assert records[0].lap == 7
        assert records[0].leader_gap == 3000

    def test_skips_unknown_drivers(self, timing_driver: TimingDataDriver, trace_log) -> None:
        records = reconcile_timing_lines(1, {"1": timing_driver}, {"lines": {"99": {"gapToLeader": "+1.0"}}})

        assert records == []
        assert "SKIP LINE: 99 -> no last known timing state" in trace_log.read_text()


class TestReconcileTireLines:
    def test_reconciles_known_drivers(self, tire_driver: TimingAppDataDriver) -> None:
        update = {
            "lines": {
                "1": {"stints": [{"totalLaps": 11}]},
                "63": {"stints": [{"compound": "MEDIUM", "totalLaps": 1}]},
            }
        }
        records = reconcile_tire_lines(11, {"1": tire_driver}, update)

        assert len(records) == 1
        assert records[0].compound == "SOFT"
        assert records[0].laps == 11
