"""Core – logger state and public entry points."""

from logthis.core.facade import (
    BoundLogger,
    Log,
    LogFacade,
    debug,
    error,
    format_message,
    get_default_facade,
    get_logger,
    info,
    log,
    reset_default_facade,
    warn,
)
from logthis.core.state import LogEvent, LoggerState

__all__ = [
    "BoundLogger",
    "Log",
    "LogEvent",
    "LogFacade",
    "LoggerState",
    "debug",
    "error",
    "format_message",
    "get_default_facade",
    "get_logger",
    "info",
    "log",
    "reset_default_facade",
    "warn",
]
