"""Last-known timing state for one competitor."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_FEED_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class Segment(BaseModel):
    model_config = _FEED_CONFIG

    status: int = 0


class Sector(BaseModel):
    """One of the three timed sectors of the current lap."""

    model_config = _FEED_CONFIG

    value: str = ""
    previous_value: str | None = None
    stopped: bool = False
    status: int = 0
    overall_fastest: bool = False
    personal_fastest: bool = False
    segments: list[Segment] = Field(default_factory=list)


class IntervalToPositionAhead(BaseModel):
    model_config = _FEED_CONFIG

    value: str = ""
    catching: bool = False


class LastLapTime(BaseModel):
    model_config = _FEED_CONFIG

    value: str = ""
    status: int = 0
    overall_fastest: bool = False
    personal_fastest: bool = False


class BestLapTime(BaseModel):
    model_config = _FEED_CONFIG

    value: str = ""
    lap: int | None = None


class TimingDataDriver(BaseModel):
    """Full previous timing snapshot of a competitor, as kept by the session state."""

    model_config = _FEED_CONFIG

    racing_number: str
    line: int
    gap_to_leader: str = ""
    interval_to_position_ahead: IntervalToPositionAhead | None = None
    # The feed spells it "lastLaptime" in deltas; accept both spellings
    last_lap_time: LastLapTime = Field(
        default_factory=LastLapTime,
        validation_alias=AliasChoices("lastLaptime", "lastLapTime", "last_lap_time"),
    )
    best_lap_time: BestLapTime = Field(default_factory=BestLapTime)
    sectors: list[Sector] = Field(default_factory=list)
    stats: list[dict[str, Any]] | None = None
    time_diff_to_fastest: str | None = None
    time_diff_to_position_ahead: str | None = None

    def sector_value(self, index: int) -> str:
        """Raw text of sector ``index``, or ``""`` when the sector is missing."""
        if 0 <= index < len(self.sectors):
            return self.sectors[index].value
        return ""
