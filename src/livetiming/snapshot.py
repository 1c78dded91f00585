"""Build last-known driver records from full feed snapshots."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel

from livetiming._constants import LINES_KEY
from livetiming.exceptions import LiveTimingValidationError
from livetiming.models.timing import TimingDataDriver
from livetiming.models.timing_app import TimingAppDataDriver

M = TypeVar("M", bound=BaseModel)


def _validate(model_type: type[M], data: Any) -> M:
    """Validate a raw dict against a Pydantic model."""
    try:
        return model_type.model_validate(data)
    except Exception as exc:
        raise LiveTimingValidationError(
            f"Failed to validate {model_type.__name__} snapshot: {exc}"
        ) from exc


def validate_timing_driver(data: Any) -> TimingDataDriver:
    """Parse one competitor's full timing snapshot."""
    return _validate(TimingDataDriver, data)


def validate_tire_driver(data: Any) -> TimingAppDataDriver:
    """Parse one competitor's full tire snapshot."""
    return _validate(TimingAppDataDriver, data)


def _validate_lines(model_type: type[M], snapshot: Any) -> dict[str, M]:
    lines = snapshot.get(LINES_KEY) if isinstance(snapshot, Mapping) else None
    if not isinstance(lines, Mapping):
        raise LiveTimingValidationError(
            f"{model_type.__name__} snapshot has no {LINES_KEY!r} mapping"
        )
    return {str(nr): _validate(model_type, line) for nr, line in lines.items()}


def validate_timing_lines(snapshot: Any) -> dict[str, TimingDataDriver]:
    """Parse a full ``{"lines": {nr: {...}}}`` timing snapshot keyed by racing number."""
    return _validate_lines(TimingDataDriver, snapshot)


def validate_tire_lines(snapshot: Any) -> dict[str, TimingAppDataDriver]:
    """Parse a full ``{"lines": {nr: {...}}}`` tire snapshot keyed by racing number."""
    return _validate_lines(TimingAppDataDriver, snapshot)
