"""Normalized per-competitor records produced by the reconciler."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TimingRecord(BaseModel):
    """Numeric timing snapshot. All times in milliseconds, ``0`` when unknown."""

    model_config = ConfigDict(frozen=True)

    nr: str
    lap: int | None = None
    gap: int
    leader_gap: int
    laptime: int
    sector_1: int
    sector_2: int
    sector_3: int


class TireRecord(BaseModel):
    """Current tire state. ``compound`` is ``""`` and ``laps`` is ``0`` when unknown."""

    model_config = ConfigDict(frozen=True)

    nr: str
    lap: int | None = None
    compound: str
    laps: int
