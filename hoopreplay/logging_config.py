"""
Structured logging configuration for hoopreplay.

Provides JSON-formatted logs with trace_id support so that diagnostics from
one game's parse and replay can be correlated.

Environment Variables:
    HOOPREPLAY_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: INFO
    HOOPREPLAY_LOG_FORMAT: Log format (json, text) - default: json

Usage:
    from hoopreplay.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, trace_id="lakers_vs_wolves")
    logger.warning("Unresolved player in action", extra={"line_no": 12})
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter


def setup_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """
    Configure root logger with structured logging.

    Explicit arguments win over the environment:
    - HOOPREPLAY_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
    - HOOPREPLAY_LOG_FORMAT: json, text (default: json)

    Logs go to stderr so command output on stdout stays machine readable.
    """
    log_level = (level or os.getenv("HOOPREPLAY_LOG_LEVEL", "INFO")).upper()
    fmt = (log_format or os.getenv("HOOPREPLAY_LOG_FORMAT", "json")).lower()

    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    resolved = level_map.get(log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(resolved)
    handler.addFilter(TraceIDFilter())

    if fmt == "json":
        formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(trace_id)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
            json_ensure_ascii=False,
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [trace_id=%(trace_id)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str, trace_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger with optional trace_id for correlation.

    Args:
        name: Logger name (typically __name__)
        trace_id: Trace ID for correlating logs (typically the game id)

    Returns:
        LoggerAdapter with trace_id in extra fields
    """
    logger = logging.getLogger(name)
    return TraceLoggerAdapter(logger, {"trace_id": trace_id or "N/A"})


class TraceLoggerAdapter(logging.LoggerAdapter):
    """LoggerAdapter that merges per-call extra fields with the trace_id."""

    def process(self, msg, kwargs):
        kwargs["extra"] = {**self.extra, **(kwargs.get("extra") or {})}
        return msg, kwargs


class TraceIDFilter(logging.Filter):
    """
    Logging filter that adds trace_id to all log records.

    Ensures all logs have a trace_id field, even if not set via LoggerAdapter.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "trace_id"):
            record.trace_id = "N/A"  # type: ignore
        return True
