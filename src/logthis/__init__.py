"""
logthis – process-wide logging for multi-threaded programs.

Every line carries a level, an owner (call-site location, type name or
custom tag), the calling thread's display name and a local timestamp::

    import logthis
    from logthis import ENCLOSING_TYPE, Level, Log

    Log.set_level(Level.DEBUG)
    Log.set_current_thread_name("MainThread")
    logthis.info("Hello, {}!", "world")
    logthis.warn("disk almost full", owner="storage")

    class Worker:
        def run(self) -> None:
            logthis.info("started", owner=ENCLOSING_TYPE)

Output goes to the console by default; ``Log.set_file("log.txt")`` appends
plain lines to a file instead.
"""

from logthis.config import LoggerSettings
from logthis.context import (
    ENCLOSING_TYPE,
    LOCATION,
    OwnerMarker,
    current_thread_display_name,
    set_current_thread_display_name,
)
from logthis.core import (
    BoundLogger,
    Log,
    LogEvent,
    LogFacade,
    LoggerState,
    debug,
    error,
    get_default_facade,
    get_logger,
    info,
    log,
    reset_default_facade,
    warn,
)
from logthis.kernel import (
    ConfigError,
    Console,
    Destination,
    File,
    InvalidLevelError,
    Level,
    LogThisError,
    SinkWriteError,
)

__version__ = "0.1.0"
__all__ = [
    "ENCLOSING_TYPE",
    "LOCATION",
    "BoundLogger",
    "ConfigError",
    "Console",
    "Destination",
    "File",
    "InvalidLevelError",
    "Level",
    "Log",
    "LogEvent",
    "LogFacade",
    "LogThisError",
    "LoggerSettings",
    "LoggerState",
    "OwnerMarker",
    "SinkWriteError",
    "__version__",
    "current_thread_display_name",
    "debug",
    "error",
    "get_default_facade",
    "get_logger",
    "info",
    "log",
    "reset_default_facade",
    "set_current_thread_display_name",
    "warn",
]
