"""Delta reconciler: merges sparse feed updates with the last known driver state.

A delta only carries what changed since the previous message. For each field
the reconciler takes the delta's value when it has one and otherwise falls
back to the last known record, so every emitted record is fully populated.
When the delta touches none of the tracked fields no record is emitted.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from livetiming._constants import STINTS_POINTER, TIMING_POINTERS
from livetiming._logging import log_reconcile_call
from livetiming._pointer import as_document, as_source
from livetiming.models.records import TimingRecord, TireRecord
from livetiming.models.timing import TimingDataDriver
from livetiming.models.timing_app import TimingAppDataDriver
from livetiming.parsers import parse_gap, parse_laptime, parse_sector

T = TypeVar("T")


def resolve_or_default(value: T | None, fallback: Callable[[], T | None], default: T) -> T:
    """Return ``value`` if present, else ``fallback()`` if present, else ``default``."""
    if value is not None:
        return value
    previous = fallback()
    if previous is not None:
        return previous
    return default


def _interval_value(driver: TimingDataDriver) -> str | None:
    interval = driver.interval_to_position_ahead
    return interval.value if interval is not None else None


@log_reconcile_call
def reconcile_timing_driver(
    nr: str,
    lap: int | None,
    driver: TimingDataDriver,
    update: Any = None,
) -> TimingRecord | None:
    """Merge a timing delta for competitor ``nr`` with its last known state.

    Args:
        nr: Racing number of the competitor.
        lap: Current lap, passed through to the record.
        driver: Last known full timing record. Never modified.
        update: Parsed delta document, a FieldSource, or None.

    Returns:
        A fully populated TimingRecord, or None when the delta carries none of
        interval, gap to leader, last lap time or the three sector values.
    """
    source = as_source(update)
    found = {field: source.lookup(pointer) for field, pointer in TIMING_POINTERS.items()}

    if all(value is None for value in found.values()):
        return None

    gap = resolve_or_default(found["gap"], lambda: _interval_value(driver), "")
    leader_gap = resolve_or_default(found["leader_gap"], lambda: driver.gap_to_leader, "")
    laptime = resolve_or_default(found["laptime"], lambda: driver.last_lap_time.value, "")
    sector_1 = resolve_or_default(found["sector_1"], lambda: driver.sector_value(0), "")
    sector_2 = resolve_or_default(found["sector_2"], lambda: driver.sector_value(1), "")
    sector_3 = resolve_or_default(found["sector_3"], lambda: driver.sector_value(2), "")

    return TimingRecord(
        nr=nr,
        lap=lap,
        gap=parse_gap(gap),
        leader_gap=parse_gap(leader_gap),
        laptime=parse_laptime(laptime),
        sector_1=parse_sector(sector_1),
        sector_2=parse_sector(sector_2),
        sector_3=parse_sector(sector_3),
    )


@log_reconcile_call
def reconcile_tire_driver(
    nr: str,
    lap: int | None,
    driver: TimingAppDataDriver,
    update: Any = None,
) -> TireRecord | None:
    """Merge a tire delta for competitor ``nr`` with its last known stint.

    Only the newest stint matters: the last stint of the delta is compared
    against the last stint of ``driver``. Returns None when the delta's last
    stint has neither a compound nor a lap count.

    ``update`` must be a parsed delta, None or a DocumentSource; other
    FieldSource implementations raise TypeError.
    """
    source = as_document(update)
    update_stint = source.last_item(STINTS_POINTER)
    last_stint = driver.last_stint

    compound = update_stint.lookup("/compound") if update_stint is not None else None
    laps = update_stint.lookup_int("/totalLaps") if update_stint is not None else None

    if compound is None and laps is None:
        return None

    return TireRecord(
        nr=nr,
        lap=lap,
        compound=resolve_or_default(
            compound, lambda: last_stint.compound if last_stint else None, ""
        ),
        laps=resolve_or_default(
            laps, lambda: last_stint.total_laps if last_stint else None, 0
        ),
    )
