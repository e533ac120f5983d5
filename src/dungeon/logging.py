"""Logging configuration for Dungeon."""

import hashlib
import sys
from pathlib import Path
from typing import Any

import structlog

# Narration can run to several sentences; keep log lines readable.
NARRATION_LOG_LIMIT = 80

_LEVELS = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
    "CRITICAL": 50,
}


def hash_fingerprint_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Hash player fingerprints in log events for privacy."""
    fp = event_dict.pop("fingerprint", None)
    if fp and fp != "unknown":
        event_dict["fingerprint_hash"] = hashlib.sha256(fp.encode()).hexdigest()[:12]
    elif fp:
        event_dict["fingerprint"] = fp
    return event_dict


def truncate_narration_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Shorten narration text attached to game events."""
    narration = event_dict.get("narration")
    if isinstance(narration, str) and len(narration) > NARRATION_LOG_LIMIT:
        event_dict["narration"] = narration[: NARRATION_LOG_LIMIT - 3] + "..."
    return event_dict


def configure_logging(
    log_level: str = "INFO",
    log_file: Path | None = None,
    json_logs: bool = False,
    hash_fingerprints: bool = True,
) -> None:
    """Configure structured logging for the application."""
    if log_file:
        output_stream = open(log_file, "a")
    else:
        output_stream = sys.stdout

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(
            fmt="iso" if json_logs else "%Y-%m-%d %H:%M:%S"
        ),
        truncate_narration_processor,
    ]

    if hash_fingerprints:
        processors.append(hash_fingerprint_processor)

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=output_stream.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            _LEVELS.get(log_level.upper(), 20)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output_stream),
        cache_logger_on_first_use=True,
    )


def bind_player(fingerprint: str) -> None:
    """Attach the current player's fingerprint to every log line of a request."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(fingerprint=fingerprint)


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a logger instance for a module."""
    return structlog.get_logger(name)
