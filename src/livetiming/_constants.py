"""Feed encoding constants and fixed delta document locations."""

from __future__ import annotations

# Gaps such as "1L" / "20L" / "LAP1" count laps, not time.
LAP_MARKER = "L"
GAP_SIGN = "+"

TIMING_POINTERS: dict[str, str] = {
    "gap": "/intervalToPositionAhead/value",
    "leader_gap": "/gapToLeader",
    "laptime": "/lastLaptime/value",
    "sector_1": "/sectors/0/value",
    "sector_2": "/sectors/1/value",
    "sector_3": "/sectors/2/value",
}

STINTS_POINTER = "/stints"
LINES_KEY = "lines"

NO_VALUE = "\u2014"
