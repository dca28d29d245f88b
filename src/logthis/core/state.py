"""Core – process-wide logger state (threshold + destination) and LogEvent."""
from __future__ import annotations

import dataclasses
import os
import threading
from typing import Any

from logthis.kernel.destination import Destination, File, as_destination
from logthis.kernel.level import Level
from logthis.rendering.processors import ConsoleLineRenderer, PlainLineRenderer, wrap_sink
from logthis.rendering.sinks import ConsoleSink, ConsoleWriter, FileAppender, FileSink


@dataclasses.dataclass(frozen=True)
class LogEvent:
    """One log line before rendering. Exists only for the duration of a call."""

    level: Level
    owner: str
    thread_name: str
    message: str

    def to_event_dict(self) -> dict[str, Any]:
        return {
            "level": self.level,
            "owner": self.owner,
            "thread_name": self.thread_name,
            "event": self.message,
        }


class LoggerState:
    """Threshold and destination shared by every thread.

    All operations take the same lock, so an emission never sees a torn
    threshold/destination pair and two emissions never interleave their
    writes. The lock is held for one format-and-write at most.

    Each destination is written through a structlog logger wrapping a
    :class:`~logthis.rendering.sinks.ConsoleSink` or
    :class:`~logthis.rendering.sinks.FileSink`; switching destinations swaps
    that logger under the lock.

    Args:
        threshold: Minimum level emitted (default INFO).
        destination: ``Console()``, ``File(path)``, a path, or ``None`` for
            the console.
        console: Writer used for the console destination.
        file_appender: Appender used for file destinations.
        colors: Style console lines with ANSI codes.
    """

    def __init__(
        self,
        threshold: Level | int | str = Level.INFO,
        destination: Destination | str | os.PathLike[str] | None = None,
        *,
        console: ConsoleWriter | None = None,
        file_appender: FileAppender | None = None,
        colors: bool = True,
    ) -> None:
        self._lock = threading.Lock()
        self._threshold = Level.parse(threshold)
        self._file_appender = file_appender or FileAppender()
        self._console_logger = wrap_sink(ConsoleSink(console or ConsoleWriter()), ConsoleLineRenderer(colors=colors))
        self._destination = as_destination(destination)
        self._logger = self._logger_for(self._destination)

    def _logger_for(self, destination: Destination) -> Any:
        if isinstance(destination, File):
            return wrap_sink(FileSink(self._file_appender, destination.path), PlainLineRenderer())
        return self._console_logger

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def configure_threshold(self, level: Level | int | str) -> None:
        new_level = Level.parse(level)
        with self._lock:
            self._threshold = new_level

    def configure_destination(self, destination: Destination | str | os.PathLike[str] | None) -> None:
        """Route every later emission to *destination*.

        A previous file destination is left as it is; it is simply no longer
        written to.
        """
        new_destination = as_destination(destination)
        new_logger = self._logger_for(new_destination)
        with self._lock:
            self._destination = new_destination
            self._logger = new_logger

    @property
    def threshold(self) -> Level:
        with self._lock:
            return self._threshold

    @property
    def destination(self) -> Destination:
        with self._lock:
            return self._destination

    def snapshot(self) -> tuple[Level, Destination]:
        """Return ``(threshold, destination)`` read under one lock acquisition."""
        with self._lock:
            return self._threshold, self._destination

    # ------------------------------------------------------------------
    # Emission
    # ------------------------------------------------------------------

    def should_emit(self, level: Level) -> bool:
        """Cheap pre-check; :meth:`emit` decides again under its own lock."""
        with self._lock:
            return level >= self._threshold

    def emit(self, event: LogEvent) -> bool:
        """Write *event* to the current destination if it passes the threshold.

        Threshold and destination are read under the same lock acquisition
        as the write. Returns whether the line was written.

        Raises:
            SinkWriteError: the file destination could not be appended to.
        """
        with self._lock:
            if event.level < self._threshold:
                return False
            getattr(self._logger, event.level.name.lower())(**event.to_event_dict())
        return True

    def __repr__(self) -> str:
        threshold, destination = self.snapshot()
        return f"LoggerState(threshold={threshold.name}, destination={destination!r})"


__all__ = ["LogEvent", "LoggerState"]
