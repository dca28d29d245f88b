"""Append log lines to ``log.txt`` in the working directory."""
from __future__ import annotations

import logthis
from logthis import Log


def main() -> None:
    Log.set_file("log.txt")

    logthis.info("Hello, world!")
    logthis.info("This is an {} message!", "info")
    logthis.error("Why are you doing this?")


if __name__ == "__main__":
    main()
