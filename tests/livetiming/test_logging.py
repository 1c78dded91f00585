"""Tests for trace logging: file output, redirection and failure tolerance."""

from __future__ import annotations

import io
import logging

import pytest

from livetiming._logging import LOGGER_NAME, configure_trace_log, log_reconcile_call
from livetiming.models.timing import TimingDataDriver
from livetiming.parsers import parse_gap, parse_laptime, parse_sector
from livetiming.reconcile import reconcile_timing_driver


class TestUnwritableLog:
    def test_parsers_still_return_values(self, tmp_path) -> None:
        blocker = tmp_path / "logs"
        blocker.write_text("not a directory")
        configure_trace_log(blocker)

        assert parse_gap("+0.273") == 273
        assert parse_laptime("1:21.306") == 81306
        assert parse_sector("26.259") == 26259

    def test_reconciler_still_returns_record(self, tmp_path, timing_driver: TimingDataDriver) -> None:
        blocker = tmp_path / "logs"
        blocker.write_text("not a directory")
        configure_trace_log(blocker)

        parsed = reconcile_timing_driver("1", 2, timing_driver, {"lastLaptime": {"value": "1:22.000"}})

        assert parsed is not None
        assert parsed.laptime == 82000


class TestTraceFile:
    def test_nothing_created_until_first_trace(self, tmp_path) -> None:
        log_dir = tmp_path / "nested" / "logs"
        configure_trace_log(log_dir)
        assert not log_dir.exists()

        parse_sector("26.259")

        assert (log_dir / "reconcile.log").exists()

    def test_foreign_handler_does_not_suppress_file(self, trace_log) -> None:
        logger = logging.getLogger(LOGGER_NAME)
        foreign = logging.StreamHandler(io.StringIO())
        logger.addHandler(foreign)
        try:
            parse_gap("+1.000")
        finally:
            logger.removeHandler(foreign)

        assert "PARSE: gap('+1.000') -> parsed (1000)" in trace_log.read_text()

    def test_redirect_moves_output(self, tmp_path, trace_log) -> None:
        parse_gap("+1.000")
        other = tmp_path / "other"
        configure_trace_log(other)
        parse_gap("+2.000")

        assert "+2.000" not in trace_log.read_text()
        assert "+2.000" in (other / "reconcile.log").read_text()


class TestLogReconcileCall:
    def test_logs_failure_and_reraises(self, trace_log) -> None:
        @log_reconcile_call
        def broken(nr: str, lap: int | None) -> None:
            raise RuntimeError("bad state")

        with pytest.raises(RuntimeError, match="bad state"):
            broken("44", 3)

        content = trace_log.read_text()
        assert "FAIL:" in content
        assert "('44', 3)" in content
        assert "RuntimeError: bad state" in content
