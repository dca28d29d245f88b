"""conftest.py for benchmarks.

Provides facades writing to a throwaway file so timings include one real
open-append-close per emitted line.
"""

from __future__ import annotations

import pytest

from logthis.core import LogFacade, LoggerState
from logthis.kernel import Level


@pytest.fixture
def file_facade(tmp_path):
    """Debug-enabled facade appending to ``bench.log`` under ``tmp_path``."""
    return LogFacade(LoggerState(Level.INFO, tmp_path / "bench.log"), debug_enabled=True)
