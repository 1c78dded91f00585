"""livetiming — Reconcile sparse live timing deltas into numeric driver snapshots."""

from livetiming._logging import configure_trace_log
from livetiming._pointer import DocumentSource, FieldSource, resolve_pointer
from livetiming.batch import iter_lines, reconcile_timing_lines, reconcile_tire_lines
from livetiming.exceptions import LiveTimingError, LiveTimingValidationError
from livetiming.models import (
    Stint,
    TimingAppDataDriver,
    TimingDataDriver,
    TimingRecord,
    TireRecord,
)
from livetiming.parsers import parse_gap, parse_laptime, parse_sector
from livetiming.reconcile import (
    reconcile_timing_driver,
    reconcile_tire_driver,
    resolve_or_default,
)
from livetiming.snapshot import (
    validate_timing_driver,
    validate_timing_lines,
    validate_tire_driver,
    validate_tire_lines,
)

__all__ = [
    "DocumentSource",
    "FieldSource",
    "LiveTimingError",
    "LiveTimingValidationError",
    "Stint",
    "TimingAppDataDriver",
    "TimingDataDriver",
    "TimingRecord",
    "TireRecord",
    "configure_trace_log",
    "iter_lines",
    "parse_gap",
    "parse_laptime",
    "parse_sector",
    "reconcile_timing_driver",
    "reconcile_timing_lines",
    "reconcile_tire_driver",
    "reconcile_tire_lines",
    "resolve_or_default",
    "resolve_pointer",
    "validate_timing_driver",
    "validate_timing_lines",
    "validate_tire_driver",
    "validate_tire_lines",
]

__version__ = "0.1.0"
