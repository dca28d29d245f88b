"""Integrations – route stdlib :mod:`logging` records through logthis.

Typical usage::

    import logging
    from logthis.integrations import LogThisHandler

    logging.getLogger().addHandler(LogThisHandler())

Records then obey the logthis threshold and destination, and show the
calling thread's logthis display name.
"""
from __future__ import annotations

import logging
from typing import Literal

from logthis.context.thread_name import current_thread_display_name
from logthis.core.facade import LogFacade, get_default_facade
from logthis.core.state import LogEvent
from logthis.kernel.level import Level

OwnerSource = Literal["location", "name"]


class LogThisHandler(logging.Handler):
    """A :class:`logging.Handler` that emits through a :class:`LogFacade`.

    Parameters
    ----------
    facade:
        Target facade. Defaults to the process-default facade, looked up at
        emit time.
    owner:
        ``"location"`` shows ``pathname:lineno`` of the logging call,
        ``"name"`` shows the stdlib logger name.
    level:
        Stdlib level filter, applied before the logthis threshold.
    """

    def __init__(
        self,
        facade: LogFacade | None = None,
        *,
        owner: OwnerSource = "location",
        level: int = logging.NOTSET,
    ) -> None:
        if owner not in ("location", "name"):
            raise ValueError(f"owner must be 'location' or 'name', got {owner!r}")
        super().__init__(level)
        self._facade = facade
        self._owner_source = owner

    @property
    def facade(self) -> LogFacade:
        return self._facade or get_default_facade()

    def owner_for(self, record: logging.LogRecord) -> str:
        if self._owner_source == "name":
            return record.name
        return f"{record.pathname}:{record.lineno}"

    def emit(self, record: logging.LogRecord) -> None:
        facade = self.facade
        level = Level.from_stdlib(record.levelno)
        if level is Level.DEBUG and not facade.debug_enabled:
            return
        try:
            if not facade.state.should_emit(level):
                return
            event = LogEvent(
                level=level,
                owner=self.owner_for(record),
                thread_name=current_thread_display_name(),
                message=self.format(record),
            )
            facade.state.emit(event)
        except RecursionError:
            raise
        except Exception:  # noqa: BLE001
            self.handleError(record)


__all__ = ["LogThisHandler"]
