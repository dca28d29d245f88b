"""Shared fixtures: isolated logger state and a clean process default."""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from logthis.context import reset_current_thread_display_name
from logthis.core import LogFacade, LoggerState, reset_default_facade

# <ts> <tag padded to 7> <owner field> |: <message>
LINE_RE = re.compile(
    r"^(?P<ts>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}) "
    r"(?P<tag>\[(?:DEBUG|INFO|WARN|ERROR)\]) +"
    r"(?P<owner>.+?) @(?P<thread>.*?) *\|: (?P<message>.*)$"
)


@pytest.fixture(autouse=True)
def _isolate_process_state():
    reset_default_facade(None)
    reset_current_thread_display_name()
    yield
    reset_default_facade(None)
    reset_current_thread_display_name()


@pytest.fixture
def state() -> LoggerState:
    return LoggerState(colors=False)


@pytest.fixture
def facade(state: LoggerState) -> LogFacade:
    return LogFacade(state, debug_enabled=True)


@pytest.fixture
def default_facade() -> LogFacade:
    """Install an uncoloured, debug-enabled process-default facade."""
    installed = LogFacade(LoggerState(colors=False), debug_enabled=True)
    reset_default_facade(installed)
    return installed


@pytest.fixture
def log_file(tmp_path: Path) -> Path:
    return tmp_path / "log.txt"


@pytest.fixture
def read_lines():
    def _read(path: Path) -> list[str]:
        return path.read_text(encoding="utf-8").splitlines()

    return _read


@pytest.fixture
def parse_line():
    """Return a parser that splits one rendered plain line into its fields."""

    def _parse(line: str) -> dict[str, str]:
        match = LINE_RE.match(line)
        assert match is not None, f"malformed line: {line!r}"
        return match.groupdict()

    return _parse
