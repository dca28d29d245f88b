"""Kernel – output Destination (console XOR file)."""
from __future__ import annotations

import dataclasses
import os
from pathlib import Path
from typing import Union


@dataclasses.dataclass(frozen=True)
class Console:
    """Write styled lines to stdout (stderr for ERROR)."""

    def __str__(self) -> str:
        return "console"


@dataclasses.dataclass(frozen=True)
class File:
    """Append plain lines to the file at *path*, creating it if absent."""

    path: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))

    def __str__(self) -> str:
        return str(self.path)


Destination = Union[Console, File]


def as_destination(value: "Destination | str | os.PathLike[str] | None") -> Destination:
    """Coerce ``None``/paths to a :data:`Destination`."""
    if value is None:
        return Console()
    if isinstance(value, (Console, File)):
        return value
    if isinstance(value, (str, os.PathLike)):
        return File(Path(value))
    raise TypeError(f"Cannot use {value!r} as a log destination")


__all__ = ["Console", "Destination", "File", "as_destination"]
