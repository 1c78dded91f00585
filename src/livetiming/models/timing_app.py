"""Last-known tire state for one competitor."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Stint(BaseModel):
    """Continuous driving stint on one set of tires."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    compound: str | None = None
    total_laps: int | None = None
    is_new: bool | None = Field(default=None, alias="new")


class TimingAppDataDriver(BaseModel):
    """Full previous tire snapshot of a competitor, stints in session order."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    racing_number: str
    line: int
    grid_pos: str = ""
    stints: list[Stint] = Field(default_factory=list)

    @property
    def last_stint(self) -> Stint | None:
        """The current stint, or None before the first one is known."""
        return self.stints[-1] if self.stints else None
