"""Rendering – sinks that write one rendered line."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

import colorama

from logthis.kernel.errors import SinkWriteError
from logthis.kernel.level import Level

_console_prepared = False


def _prepare_console() -> None:
    global _console_prepared
    if not _console_prepared:
        colorama.just_fix_windows_console()
        _console_prepared = True


class ConsoleWriter:
    """Write lines to stdout, or stderr for ERROR.

    Streams default to whatever :data:`sys.stdout`/:data:`sys.stderr` are at
    write time, so redirected or captured streams are honoured.
    """

    def __init__(self, stdout: TextIO | None = None, stderr: TextIO | None = None) -> None:
        self._stdout = stdout
        self._stderr = stderr

    def stream_for(self, level: Level) -> TextIO:
        if level >= Level.ERROR:
            return self._stderr or sys.stderr
        return self._stdout or sys.stdout

    def write(self, level: Level, line: str) -> None:
        _prepare_console()
        stream = self.stream_for(level)
        stream.write(line + "\n")
        stream.flush()


class FileAppender:
    """Append lines to a file, opening and closing it for every line.

    No handle outlives a call, so switching destinations never leaves a
    file open.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def append(self, path: Path, line: str) -> None:
        try:
            with open(path, "a", encoding=self._encoding) as fh:
                fh.write(line + "\n")
        except OSError as exc:
            raise SinkWriteError(path) from exc


class ConsoleSink:
    """structlog logger over a :class:`ConsoleWriter`.

    The method name picks the stream: ``error`` goes to stderr.
    """

    def __init__(self, writer: ConsoleWriter) -> None:
        self._writer = writer

    def debug(self, line: str) -> None:
        self._writer.write(Level.DEBUG, line)

    def info(self, line: str) -> None:
        self._writer.write(Level.INFO, line)

    def warn(self, line: str) -> None:
        self._writer.write(Level.WARN, line)

    def error(self, line: str) -> None:
        self._writer.write(Level.ERROR, line)

    def __repr__(self) -> str:
        return "ConsoleSink()"


class FileSink:
    """structlog logger appending every line to one file."""

    def __init__(self, appender: FileAppender, path: Path) -> None:
        self._appender = appender
        self.path = path

    def msg(self, line: str) -> None:
        self._appender.append(self.path, line)

    debug = info = warn = error = msg

    def __repr__(self) -> str:
        return f"FileSink(path={str(self.path)!r})"


__all__ = ["ConsoleSink", "ConsoleWriter", "FileAppender", "FileSink"]
