"""Kernel errors – LogThisError hierarchy.

Hierarchy::

    LogThisError
    ├── ConfigError
    │   ├── InvalidLevelError
    │   └── InvalidSettingValueError
    └── SinkWriteError
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class LogThisError(Exception):
    """Root of the error hierarchy.

    ``code`` is a machine-readable slug; ``detail`` holds the offending values.
    """

    code: str = "logthis_error"

    def __init__(self, message: str, *, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = detail or {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class ConfigError(LogThisError):
    """Raised when a configuration value cannot be interpreted."""

    code = "config_error"


class InvalidLevelError(ConfigError):
    """A severity level name or number is not one of DEBUG/INFO/WARN/ERROR."""

    code = "invalid_level"

    def __init__(self, value: object) -> None:
        super().__init__(f"Unknown log level {value!r}", detail={"value": repr(value)})
        self.value = value


class InvalidSettingValueError(ConfigError):
    """A setting's value is present but semantically invalid."""

    code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(f"Setting '{setting_name}' has invalid value {value!r}: {reason}")
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


class SinkWriteError(LogThisError):
    """The file destination could not be opened or appended to.

    Raised from the underlying ``OSError`` and propagated to the logging
    caller; the failed line is not retried or redirected.
    """

    code = "sink_write_error"

    def __init__(self, path: Path) -> None:
        super().__init__(f"Could not append to log file '{path}'", detail={"path": str(path)})
        self.path = path


__all__ = [
    "ConfigError",
    "InvalidLevelError",
    "InvalidSettingValueError",
    "LogThisError",
    "SinkWriteError",
]
