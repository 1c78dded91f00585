"""Live timing data models."""

from livetiming.models.records import TimingRecord, TireRecord
from livetiming.models.timing import (
    BestLapTime,
    IntervalToPositionAhead,
    LastLapTime,
    Sector,
    Segment,
    TimingDataDriver,
)
from livetiming.models.timing_app import Stint, TimingAppDataDriver

__all__ = [
    "BestLapTime",
    "IntervalToPositionAhead",
    "LastLapTime",
    "Sector",
    "Segment",
    "Stint",
    "TimingAppDataDriver",
    "TimingDataDriver",
    "TimingRecord",
    "TireRecord",
]
