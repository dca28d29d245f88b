"""Threads, display names and owner shapes.

Run with ``python docs/examples/use.py``; ``python -O`` drops the debug line.
"""
from __future__ import annotations

import threading

import logthis
from logthis import ENCLOSING_TYPE, Level, Log


class MyStruct:
    def __init__(self) -> None:
        logthis.info("Here is in MyStruct.__init__!", owner=ENCLOSING_TYPE)


def worker() -> None:
    logthis.debug("This is a debug message!")
    Log.set_current_thread_name("SpawnThread")
    logthis.info("This is an info message!")
    logthis.warn("This is a warn message!")
    logthis.error("This is an error message!", owner="Message")
    MyStruct()


def main() -> None:
    Log.set_level(Level.DEBUG)
    logthis.info("Hello, world!")
    Log.set_current_thread_name("MainThread")

    logthis.warn("This is a warning!")
    logthis.error("This is an error!")
    MyStruct()

    thread = threading.Thread(target=worker)
    thread.start()
    thread.join()


if __name__ == "__main__":
    main()
