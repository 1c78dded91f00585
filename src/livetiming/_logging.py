"""Trace logging for the field parsers and the delta reconciler.

Traces go to ``logs/reconcile.log`` under the working directory unless
:func:`configure_trace_log` points them elsewhere. Tracing is best-effort:
when the log file cannot be opened the traces are dropped.
"""

from __future__ import annotations

import functools
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "livetiming.trace"
LOG_FILENAME = "reconcile.log"

_LOG_DIR = os.path.join(os.getcwd(), "logs")
_LOG_FILE = os.path.join(_LOG_DIR, LOG_FILENAME)

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def _has_trace_handler(logger: logging.Logger, log_file: str) -> bool:
    # Foreign handlers (pytest's capture handlers, say) do not count
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == log_file:
            return True
        if isinstance(handler, logging.NullHandler):
            return True
    return False


def _attach_trace_handler(logger: logging.Logger) -> None:
    log_file = os.path.abspath(_LOG_FILE)
    if _has_trace_handler(logger, log_file):
        return
    try:
        os.makedirs(_LOG_DIR, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError:
        handler = logging.NullHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
    )
    logger.addHandler(handler)


def _get_logger() -> logging.Logger:
    """Return the trace logger, creating log dir and handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
        _attach_trace_handler(logger)
        _logger = logger

    return _logger


def configure_trace_log(log_dir: str | os.PathLike[str] | None = None) -> None:
    """Send traces to ``log_dir``, or back to ``./logs`` when None.

    Detaches the current trace handler; the new file is opened lazily on the
    next trace, so nothing is created until something is logged.
    """
    global _logger, _LOG_DIR, _LOG_FILE
    with _logger_lock:
        logger = logging.getLogger(LOGGER_NAME)
        for handler in logger.handlers[:]:
            if isinstance(handler, (logging.FileHandler, logging.NullHandler)):
                handler.close()
                logger.removeHandler(handler)
        _LOG_DIR = os.fspath(log_dir) if log_dir is not None else os.path.join(os.getcwd(), "logs")
        _LOG_FILE = os.path.join(_LOG_DIR, LOG_FILENAME)
        _logger = None


def trace_parse(field: str, raw: str, outcome: str, result: int) -> None:
    """Record one parse step: which field, the raw text, and what came of it."""
    _get_logger().debug("PARSE: %s(%r) -> %s (%d)", field, raw, outcome, result)


def trace_skip(nr: str, reason: str) -> None:
    _get_logger().info("SKIP LINE: %s -> %s", nr, reason)


def log_reconcile_call(fn: F) -> F:
    """Decorator that logs reconciler calls and whether they produced a record."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        # Only the competitor and lap; the records themselves are large
        arg_parts = [repr(a) for a in args[:2]]
        arg_parts += [f"{k}={v!r}" for k, v in kwargs.items() if k in ("nr", "lap")]
        arg_str = ", ".join(arg_parts)
        logger.debug("CALL: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            elapsed = time.monotonic() - start
            logger.error(
                "FAIL: %s(%s) -> %s: %s (%.6fs)",
                fn.__qualname__, arg_str, type(exc).__name__, exc, elapsed,
            )
            raise
        elapsed = time.monotonic() - start
        if result is None:
            logger.debug(
                "SKIP: %s(%s) -> no update (%.6fs)",
                fn.__qualname__, arg_str, elapsed,
            )
        else:
            logger.debug(
                "OK: %s(%s) -> %r (%.6fs)",
                fn.__qualname__, arg_str, result, elapsed,
            )
        return result

    return wrapper  # type: ignore[return-value]
