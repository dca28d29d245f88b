"""Kernel – severity Level."""
from __future__ import annotations

from enum import IntEnum

from logthis.kernel.errors import InvalidLevelError

_ALIASES = {"WARNING": "WARN"}


class Level(IntEnum):
    """Severity of a log line, ordered ``DEBUG < INFO < WARN < ERROR``.

    Values match the stdlib :mod:`logging` numbers so the two can be
    compared directly.
    """

    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

    @property
    def tag(self) -> str:
        return f"[{self.name}]"

    @classmethod
    def parse(cls, value: "Level | int | str") -> "Level":
        """Coerce *value* to a :class:`Level`.

        Accepts a member, its integer value, or a case-insensitive name
        (``"warning"`` is accepted for WARN).
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().upper()
            name = _ALIASES.get(name, name)
            try:
                return cls[name]
            except KeyError:
                raise InvalidLevelError(value) from None
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise InvalidLevelError(value) from None
        raise InvalidLevelError(value)

    @classmethod
    def from_stdlib(cls, levelno: int) -> "Level":
        """Map a stdlib ``levelno`` to the highest member not above it."""
        for member in sorted(cls, reverse=True):
            if levelno >= member:
                return member
        return cls.DEBUG


__all__ = ["Level"]
