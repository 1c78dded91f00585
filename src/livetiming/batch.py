"""Apply the per-competitor reconcilers to a multi-competitor feed message.

Feed messages group competitor deltas under ``lines`` keyed by racing
number. Each line is reconciled on its own; nothing is combined across
competitors.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from livetiming._constants import LINES_KEY
from livetiming._logging import trace_skip
from livetiming.models.records import TimingRecord, TireRecord
from livetiming.models.timing import TimingDataDriver
from livetiming.models.timing_app import TimingAppDataDriver
from livetiming.reconcile import reconcile_timing_driver, reconcile_tire_driver


def iter_lines(update: Any) -> Iterator[tuple[str, Any]]:
    """Yield ``(nr, line_delta)`` pairs from a feed message."""
    if not isinstance(update, Mapping):
        return
    lines = update.get(LINES_KEY)
    if not isinstance(lines, Mapping):
        return
    for nr, line in lines.items():
        yield str(nr), line


def reconcile_timing_lines(
    lap: int | None,
    drivers: Mapping[str, TimingDataDriver],
    update: Any,
) -> list[TimingRecord]:
    """Reconcile every known competitor in a timing message, in line order."""
    records: list[TimingRecord] = []
    for nr, line in iter_lines(update):
        driver = drivers.get(nr)
        if driver is None:
            trace_skip(nr, "no last known timing state")
            continue
        record = reconcile_timing_driver(nr, lap, driver, line)
        if record is not None:
            records.append(record)
    return records


def reconcile_tire_lines(
    lap: int | None,
    drivers: Mapping[str, TimingAppDataDriver],
    update: Any,
) -> list[TireRecord]:
    """Reconcile every known competitor in a tire message, in line order."""
    records: list[TireRecord] = []
    for nr, line in iter_lines(update):
        driver = drivers.get(nr)
        if driver is None:
            trace_skip(nr, "no last known tire state")
            continue
        record = reconcile_tire_driver(nr, lap, driver, line)
        if record is not None:
            records.append(record)
    return records
