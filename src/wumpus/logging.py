"""Logging configuration for Wumpus."""

import sys
from pathlib import Path
from typing import Any, TextIO

import structlog

# Event fields holding zero-based room ids; logs show them the way players see them.
ROOM_FIELDS = ("room", "from_room", "to_room", "hunter", "wumpus", "target")
ROOM_LIST_FIELDS = ("path", "tunnels")


def one_based_rooms_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Render room ids 1-based so logs match the console."""
    for key in ROOM_FIELDS:
        value = event_dict.get(key)
        if isinstance(value, int) and not isinstance(value, bool):
            event_dict[key] = value + 1
    for key in ROOM_LIST_FIELDS:
        value = event_dict.get(key)
        if isinstance(value, (list, tuple)):
            event_dict[key] = [room + 1 for room in value]
    placements = event_dict.get("placements")
    if isinstance(placements, dict):
        event_dict["placements"] = {name: room + 1 for name, room in placements.items()}
    return event_dict


def _level_to_int(level: str) -> int:
    levels = {
        "DEBUG": 10,
        "INFO": 20,
        "WARNING": 30,
        "ERROR": 40,
        "CRITICAL": 50,
    }
    return levels.get(level.upper(), 30)


def configure_logging(
    log_level: str = "WARNING",
    log_file: Path | None = None,
    json_logs: bool = False,
) -> TextIO:
    """Configure structured logging.

    Logs go to ``log_file`` or stderr, never stdout, which belongs to the game.
    Returns the stream written to; closing it is up to the caller.
    """
    if log_file:
        output_stream = open(log_file, "a")
    else:
        output_stream = sys.stderr

    base_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(
            fmt="iso" if json_logs else "%Y-%m-%d %H:%M:%S"
        ),
        one_based_rooms_processor,
    ]

    if json_logs:
        processors = base_processors + [structlog.processors.JSONRenderer()]
    else:
        processors = base_processors + [
            structlog.dev.ConsoleRenderer(colors=output_stream.isatty())
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_level_to_int(log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output_stream),
        cache_logger_on_first_use=True,
    )
    return output_stream


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a logger instance for a module."""
    return structlog.get_logger(name)
