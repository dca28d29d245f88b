"""Tests for the process-default facade, module functions and Log."""

from __future__ import annotations

import os
import subprocess
import sys
import textwrap
import threading
from pathlib import Path

import pytest

import logthis
from logthis import ENCLOSING_TYPE, Console, File, Level, Log, LoggerSettings
from logthis.core import LogFacade, get_default_facade, reset_default_facade

SRC_DIR = Path(__file__).resolve().parents[3] / "src"


class Greeter:
    def greet(self) -> None:
        logthis.info("Here is in Greeter.greet!", owner=ENCLOSING_TYPE)


class TestDefaultFacade:
    def test_created_lazily_once(self) -> None:
        first = get_default_facade()
        assert get_default_facade() is first
        assert first.state.threshold is Level.INFO
        assert first.state.destination == Console()

    def test_concurrent_first_use_yields_one_instance(self) -> None:
        seen: list[LogFacade] = []
        barrier = threading.Barrier(8)

        def grab() -> None:
            barrier.wait()
            seen.append(get_default_facade())

        threads = [threading.Thread(target=grab) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len({id(f) for f in seen}) == 1

    def test_reset_installs_facade(self) -> None:
        custom = LogFacade()
        reset_default_facade(custom)
        assert get_default_facade() is custom


class TestModuleFunctions:
    def test_hello_world_scenario(self, default_facade: LogFacade, capsys: pytest.CaptureFixture[str]) -> None:
        logthis.info("Hello, world!")
        logthis.debug("invisible")
        out = capsys.readouterr().out.splitlines()
        assert len(out) == 1
        line = out[0]
        assert "[INFO]" in line
        assert f"{Path(__file__).name}:" in line
        assert f"@ThreadId({threading.get_ident()})" in line
        assert line.endswith("|: Hello, world!")

    def test_all_levels_to_file(self, default_facade: LogFacade, log_file: Path, read_lines, parse_line) -> None:
        Log.set_level(Level.DEBUG)
        Log.set_file(log_file)
        logthis.debug("x")
        logthis.info("y")
        logthis.warn("{}", "w")
        logthis.error("z")
        logthis.log("error", "runtime")
        tags = [parse_line(line)["tag"] for line in read_lines(log_file)]
        assert tags == ["[DEBUG]", "[INFO]", "[WARN]", "[ERROR]", "[ERROR]"]

    def test_location_owner_is_caller(self, default_facade: LogFacade, log_file: Path, read_lines, parse_line) -> None:
        Log.set_file(log_file)
        lineno = sys._getframe().f_lineno + 1
        logthis.warn("where")
        owner = parse_line(read_lines(log_file)[0])["owner"].strip()
        assert Path(owner.rsplit(":", 2)[0]).resolve() == Path(__file__).resolve()
        assert int(owner.rsplit(":", 2)[1]) == lineno

    def test_enclosing_type_owner(self, default_facade: LogFacade, log_file: Path, read_lines, parse_line) -> None:
        Log.set_file(log_file)
        Greeter().greet()
        assert parse_line(read_lines(log_file)[0])["owner"].strip() == f"{__name__}.Greeter"

    def test_get_logger(self, default_facade: LogFacade, log_file: Path, read_lines, parse_line) -> None:
        Log.set_file(log_file)
        logthis.get_logger(Greeter).info("bound")
        assert parse_line(read_lines(log_file)[0])["owner"].strip() == f"{__name__}.Greeter"


class TestLog:
    def test_set_level(self, default_facade: LogFacade) -> None:
        Log.set_level("warn")
        assert Log.level() is Level.WARN

    def test_set_file_and_back(self, default_facade: LogFacade, log_file: Path) -> None:
        Log.set_file(str(log_file))
        assert Log.destination() == File(log_file)
        Log.set_file(None)
        assert Log.destination() == Console()

    def test_set_destination(self, default_facade: LogFacade, log_file: Path) -> None:
        Log.set_destination(File(log_file))
        assert Log.destination() == File(log_file)

    def test_thread_name(self) -> None:
        Log.set_current_thread_name("MainThread")
        assert Log.current_thread_name() == "MainThread"

    def test_configure(self, default_facade: LogFacade, log_file: Path) -> None:
        Log.configure(LoggerSettings(level="error", file=log_file))
        assert Log.level() is Level.ERROR
        assert Log.destination() == File(log_file)


class TestOptimizedBuild:
    def test_debug_erased_under_dash_o(self, tmp_path: Path) -> None:
        script = textwrap.dedent(
            f"""
            import logthis
            from logthis import Level, Log

            Log.set_level(Level.DEBUG)
            Log.set_file({str(tmp_path / "log.txt")!r})
            calls = []
            logthis.debug(lambda: calls.append(1) or "module")
            logthis.get_default_facade().debug(lambda: calls.append(1) or "facade")
            logthis.get_logger("bound").debug(lambda: calls.append(1) or "bound")
            logthis.info("kept")
            print(len(calls), logthis.get_default_facade().debug_enabled)
            """
        )
        env = {**os.environ, "PYTHONPATH": os.pathsep.join(filter(None, [str(SRC_DIR), os.environ.get("PYTHONPATH")]))}
        result = subprocess.run(
            [sys.executable, "-O", "-c", script],
            capture_output=True,
            text=True,
            env=env,
            check=True,
        )
        assert result.stdout.split() == ["0", "False"]
        lines = (tmp_path / "log.txt").read_text(encoding="utf-8").splitlines()
        assert len(lines) == 1
        assert lines[0].endswith("|: kept")
