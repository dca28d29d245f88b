"""Core – public logging entry points.

A :class:`LogFacade` wraps one :class:`~logthis.core.state.LoggerState` and
exposes ``debug``/``info``/``warn``/``error``. The module-level functions of
the same names act on a lazily created process-default facade.

Each call resolves the owner at the call site, formats the message, reads the
calling thread's display name, and emits only if the level passes the
threshold. A callable message is evaluated only after that check.

``debug`` is erased when ``__debug__`` is false (``python -O``): the
module-level function body is compiled out and the default facade's
``debug`` is a no-op, so lazy debug messages are never evaluated.
"""
from __future__ import annotations

import os
import threading
from typing import TYPE_CHECKING, Any, Callable, Union

from logthis.context.owner import LOCATION, OwnerSpec, resolve_owner, type_name
from logthis.context.thread_name import (
    current_thread_display_name,
    set_current_thread_display_name,
)
from logthis.core.state import LogEvent, LoggerState
from logthis.kernel.destination import Destination
from logthis.kernel.level import Level

if TYPE_CHECKING:
    from logthis.config.settings import LoggerSettings

Message = Union[str, Callable[[], Any]]


def format_message(message: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    """Substitute *args*/*kwargs* into *message* with :meth:`str.format`.

    A message without substitution arguments is used verbatim, so literal
    braces need no escaping.
    """
    text = message if isinstance(message, str) else str(message)
    if args or kwargs:
        return text.format(*args, **kwargs)
    return text


def _disabled_debug(*args: Any, **kwargs: Any) -> None:  # noqa: ARG001
    return None


class LogFacade:
    """Severity entry points bound to one :class:`LoggerState`.

    Args:
        state: Shared threshold/destination; a fresh console state if omitted.
        debug_enabled: When false, :meth:`debug` does nothing and evaluates
            nothing. Defaults to ``__debug__``.
    """

    def __init__(self, state: LoggerState | None = None, *, debug_enabled: bool = __debug__) -> None:
        self.state = state or LoggerState()
        self.debug_enabled = debug_enabled
        if not debug_enabled:
            self.debug = _disabled_debug  # type: ignore[method-assign]

    def _log(
        self,
        level: Level,
        message: Message,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
        owner: OwnerSpec,
        stacklevel: int,
    ) -> None:
        resolved = resolve_owner(owner, stacklevel + 1)
        lazy = callable(message)
        text = "" if lazy else format_message(message, args, kwargs)
        thread_name = current_thread_display_name()
        if not self.state.should_emit(level):
            return
        if lazy:
            text = format_message(message(), args, kwargs)  # type: ignore[operator]
        self.state.emit(LogEvent(level=level, owner=resolved, thread_name=thread_name, message=text))

    def log(self, level: Level | int | str, message: Message, *args: Any, owner: OwnerSpec = LOCATION, **kwargs: Any) -> None:
        """Log at a level chosen at runtime."""
        level = Level.parse(level)
        if level is Level.DEBUG and not self.debug_enabled:
            return
        self._log(level, message, args, kwargs, owner, 1)

    def debug(self, message: Message, *args: Any, owner: OwnerSpec = LOCATION, **kwargs: Any) -> None:
        self._log(Level.DEBUG, message, args, kwargs, owner, 1)

    def info(self, message: Message, *args: Any, owner: OwnerSpec = LOCATION, **kwargs: Any) -> None:
        self._log(Level.INFO, message, args, kwargs, owner, 1)

    def warn(self, message: Message, *args: Any, owner: OwnerSpec = LOCATION, **kwargs: Any) -> None:
        self._log(Level.WARN, message, args, kwargs, owner, 1)

    def error(self, message: Message, *args: Any, owner: OwnerSpec = LOCATION, **kwargs: Any) -> None:
        self._log(Level.ERROR, message, args, kwargs, owner, 1)

    def bind(self, owner: OwnerSpec = LOCATION) -> "BoundLogger":
        """Return a logger whose calls all use *owner*."""
        return BoundLogger(self, owner)

    def __repr__(self) -> str:
        return f"LogFacade(state={self.state!r}, debug_enabled={self.debug_enabled})"


class BoundLogger:
    """The four entry points with a fixed owner.

    Markers (``LOCATION``/``ENCLOSING_TYPE``) are still resolved at each call
    site; classes are resolved once, when bound.
    """

    def __init__(self, facade: LogFacade, owner: OwnerSpec = LOCATION) -> None:
        self._facade = facade
        self._owner: OwnerSpec = type_name(owner) if isinstance(owner, type) else owner

    @property
    def owner(self) -> OwnerSpec:
        return self._owner

    def bind(self, owner: OwnerSpec) -> "BoundLogger":
        return BoundLogger(self._facade, owner)

    def debug(self, message: Message, *args: Any, **kwargs: Any) -> None:
        if self._facade.debug_enabled:
            self._facade._log(Level.DEBUG, message, args, kwargs, self._owner, 1)

    def info(self, message: Message, *args: Any, **kwargs: Any) -> None:
        self._facade._log(Level.INFO, message, args, kwargs, self._owner, 1)

    def warn(self, message: Message, *args: Any, **kwargs: Any) -> None:
        self._facade._log(Level.WARN, message, args, kwargs, self._owner, 1)

    def error(self, message: Message, *args: Any, **kwargs: Any) -> None:
        self._facade._log(Level.ERROR, message, args, kwargs, self._owner, 1)

    def __repr__(self) -> str:
        return f"BoundLogger(owner={self._owner!r})"


# ---------------------------------------------------------------------------
# Process-default facade
# ---------------------------------------------------------------------------

_DEFAULT: LogFacade | None = None
_DEFAULT_LOCK = threading.Lock()


def get_default_facade() -> LogFacade:
    """Return the process-default facade, creating it on first use."""
    global _DEFAULT
    facade = _DEFAULT
    if facade is None:
        with _DEFAULT_LOCK:
            if _DEFAULT is None:
                _DEFAULT = LogFacade()
            facade = _DEFAULT
    return facade


def reset_default_facade(facade: LogFacade | None = None) -> None:
    """Replace the process-default facade (``None`` recreates it lazily)."""
    global _DEFAULT
    with _DEFAULT_LOCK:
        _DEFAULT = facade


if __debug__:

    def debug(message: Message, *args: Any, owner: OwnerSpec = LOCATION, **kwargs: Any) -> None:
        facade = get_default_facade()
        if facade.debug_enabled:
            facade._log(Level.DEBUG, message, args, kwargs, owner, 1)

else:

    def debug(message: Message, *args: Any, owner: OwnerSpec = LOCATION, **kwargs: Any) -> None:  # noqa: ARG001
        return None


def info(message: Message, *args: Any, owner: OwnerSpec = LOCATION, **kwargs: Any) -> None:
    get_default_facade()._log(Level.INFO, message, args, kwargs, owner, 1)


def warn(message: Message, *args: Any, owner: OwnerSpec = LOCATION, **kwargs: Any) -> None:
    get_default_facade()._log(Level.WARN, message, args, kwargs, owner, 1)


def error(message: Message, *args: Any, owner: OwnerSpec = LOCATION, **kwargs: Any) -> None:
    get_default_facade()._log(Level.ERROR, message, args, kwargs, owner, 1)


def log(level: Level | int | str, message: Message, *args: Any, owner: OwnerSpec = LOCATION, **kwargs: Any) -> None:
    facade = get_default_facade()
    level = Level.parse(level)
    if level is Level.DEBUG and not facade.debug_enabled:
        return
    facade._log(level, message, args, kwargs, owner, 1)


def get_logger(owner: OwnerSpec = LOCATION) -> BoundLogger:
    """Return a :class:`BoundLogger` on the process-default facade."""
    return get_default_facade().bind(owner)


class Log:
    """Configuration of the process-default logger."""

    @staticmethod
    def set_level(level: Level | int | str) -> None:
        """Set the minimum level emitted. INFO by default."""
        get_default_facade().state.configure_threshold(level)

    @staticmethod
    def level() -> Level:
        return get_default_facade().state.threshold

    @staticmethod
    def set_file(file: str | os.PathLike[str] | None) -> None:
        """Append to *file* from now on; ``None`` goes back to the console."""
        get_default_facade().state.configure_destination(file)

    @staticmethod
    def set_destination(destination: Destination | str | os.PathLike[str] | None) -> None:
        get_default_facade().state.configure_destination(destination)

    @staticmethod
    def destination() -> Destination:
        return get_default_facade().state.destination

    @staticmethod
    def set_current_thread_name(name: str) -> None:
        """Set the name shown for the calling thread. ``ThreadId(<id>)`` by default."""
        set_current_thread_display_name(name)

    @staticmethod
    def current_thread_name() -> str:
        return current_thread_display_name()

    @staticmethod
    def configure(settings: "LoggerSettings") -> None:
        settings.apply(get_default_facade().state)


__all__ = [
    "BoundLogger",
    "Log",
    "LogFacade",
    "Message",
    "debug",
    "error",
    "format_message",
    "get_default_facade",
    "get_logger",
    "info",
    "log",
    "reset_default_facade",
    "warn",
]
