"""Kernel – levels, destinations and errors."""

from logthis.kernel.destination import Console, Destination, File, as_destination
from logthis.kernel.errors import (
    ConfigError,
    InvalidLevelError,
    InvalidSettingValueError,
    LogThisError,
    SinkWriteError,
)
from logthis.kernel.level import Level

__all__ = [
    "ConfigError",
    "Console",
    "Destination",
    "File",
    "InvalidLevelError",
    "InvalidSettingValueError",
    "Level",
    "LogThisError",
    "SinkWriteError",
    "as_destination",
]
