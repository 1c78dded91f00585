"""Formatting helpers for normalized millisecond values."""

from __future__ import annotations

from livetiming._constants import GAP_SIGN, NO_VALUE


def format_laptime_ms(ms: int) -> str:
    """Format milliseconds as m:ss.fff, or '\u2014' for the unknown sentinel."""
    if ms == 0:
        return NO_VALUE
    mins, rest = divmod(ms, 60_000)
    secs, millis = divmod(rest, 1000)
    return f"{mins}:{secs:02d}.{millis:03d}"


def format_gap_ms(ms: int) -> str:
    """Format a gap as +s.fff, or '\u2014' for the unknown sentinel."""
    if ms == 0:
        return NO_VALUE
    sign = "-" if ms < 0 else GAP_SIGN
    secs, millis = divmod(abs(ms), 1000)
    return f"{sign}{secs}.{millis:03d}"
