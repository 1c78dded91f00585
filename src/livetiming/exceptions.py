"""Custom exceptions for the live timing reconciler."""

from __future__ import annotations


class LiveTimingError(Exception):
    """Base exception for all livetiming errors."""


class LiveTimingValidationError(LiveTimingError):
    """Raised when a last-known driver record fails model validation."""
