"""Field parsers for the textual time encodings used by the timing feed.

Every parser returns an integer millisecond count and never raises: empty,
lapped or unparseable input yields ``0``, the "unknown" sentinel.
"""

from __future__ import annotations

import math

from livetiming._constants import GAP_SIGN, LAP_MARKER
from livetiming._logging import trace_parse


def _is_plain(text: str) -> bool:
    """Reject the digit separators, padding and non-ASCII digits Python would accept."""
    return text.isascii() and not any(c == "_" or c.isspace() for c in text)


def _seconds_to_ms(text: str) -> int | None:
    """Convert a decimal seconds string to milliseconds, or None if it is not one."""
    if not _is_plain(text):
        return None
    try:
        ms = float(text) * 1000
    except ValueError:
        return None
    if not math.isfinite(ms):
        return None
    return int(round(ms))


def _minutes(text: str) -> int | None:
    if not _is_plain(text):
        return None
    try:
        return int(text)
    except ValueError:
        return None


# "LAP1" / "" / "+0.273" / "1L" / "20L"
def parse_gap(gap: str) -> int:
    """Parse a gap or interval such as ``"+0.273"`` into milliseconds."""
    if not gap:
        trace_parse("gap", gap, "empty", 0)
        return 0
    if LAP_MARKER in gap:
        trace_parse("gap", gap, "lapped", 0)
        return 0

    ms = _seconds_to_ms(gap.removeprefix(GAP_SIGN))
    if ms is None:
        trace_parse("gap", gap, "failed", 0)
        return 0
    trace_parse("gap", gap, "parsed", ms)
    return ms


# "1:21.306" / ""
def parse_laptime(lap: str) -> int:
    """Parse a ``minutes:seconds.fraction`` lap time into milliseconds."""
    if not lap:
        trace_parse("laptime", lap, "empty", 0)
        return 0

    parts = lap.split(":")
    if len(parts) == 2:
        minutes = _minutes(parts[0])
        seconds_ms = _seconds_to_ms(parts[1])
        if minutes is not None and seconds_ms is not None:
            ms = minutes * 60_000 + seconds_ms
            trace_parse("laptime", lap, "parsed", ms)
            return ms

    trace_parse("laptime", lap, "failed", 0)
    return 0


# "26.259" / ""
def parse_sector(sector: str) -> int:
    """Parse a sector time in plain seconds into milliseconds."""
    if not sector:
        trace_parse("sector", sector, "empty", 0)
        return 0

    ms = _seconds_to_ms(sector)
    if ms is None:
        trace_parse("sector", sector, "failed", 0)
        return 0
    trace_parse("sector", sector, "parsed", ms)
    return ms
