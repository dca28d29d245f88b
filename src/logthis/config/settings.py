"""Config – LoggerSettings.

Settings are plain dataclasses applied through the programmatic API; there
is no environment or command-line loader.
"""
from __future__ import annotations

import dataclasses
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, Mapping

from logthis.kernel.destination import Destination, File, as_destination
from logthis.kernel.errors import ConfigError, InvalidLevelError, InvalidSettingValueError
from logthis.kernel.level import Level

if TYPE_CHECKING:
    from logthis.core.state import LoggerState


@dataclasses.dataclass
class LoggerSettings:
    """Threshold and destination for a :class:`~logthis.core.state.LoggerState`.

    ``level`` accepts anything :meth:`Level.parse` does; ``file`` is a path,
    or ``None`` for the console.
    """

    level: Level | int | str = Level.INFO
    file: str | os.PathLike[str] | None = None

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        try:
            self.level = Level.parse(self.level)
        except InvalidLevelError as exc:
            raise InvalidSettingValueError(
                "level", self.level, "expected one of DEBUG, INFO, WARN, ERROR"
            ) from exc
        if self.file is not None:
            if not isinstance(self.file, (str, os.PathLike)):
                raise InvalidSettingValueError("file", self.file, "expected a path or None")
            if not str(self.file).strip():
                raise InvalidSettingValueError("file", self.file, "path must not be empty")
            self.file = Path(self.file)

    @property
    def destination(self) -> Destination:
        return as_destination(self.file)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "LoggerSettings":
        """Build settings from a plain mapping, rejecting unknown keys."""
        known = {field.name for field in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(
                f"Unknown logger setting(s): {', '.join(unknown)}",
                detail={"unknown": unknown},
            )
        return cls(**dict(data))

    @classmethod
    def from_state(cls, state: "LoggerState") -> "LoggerSettings":
        level, destination = state.snapshot()
        return cls(level=level, file=destination.path if isinstance(destination, File) else None)

    def apply(self, state: "LoggerState") -> None:
        state.configure_threshold(self.level)
        state.configure_destination(self.destination)


__all__ = ["LoggerSettings"]
