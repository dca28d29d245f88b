"""Rendering – structlog-style processors that turn an event dict into a line.

Every processor has the structlog signature ``(logger, method_name,
event_dict)``; the last one in a chain returns the rendered ``str``.

Event dict keys: ``level`` (:class:`~logthis.kernel.Level`), ``owner``,
``thread_name``, ``event`` (the message) and, once stamped, ``timestamp``.
"""
from __future__ import annotations

from typing import Any, Callable

import structlog
from colorama import Back, Fore, Style

from logthis.kernel.level import Level

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
TAG_WIDTH = 7
OWNER_WIDTH = 60
THREAD_NAME_WIDTH = 20

Processor = Callable[[Any, str, dict[str, Any]], Any]

_LEVEL_STYLES: dict[Level, tuple[str, str]] = {
    # level -> (tag style, line style)
    Level.DEBUG: (Fore.GREEN + Style.DIM, Fore.GREEN),
    Level.INFO: (Fore.BLUE, Fore.BLUE),
    Level.WARN: (Fore.YELLOW + Style.BRIGHT, Fore.YELLOW),
    Level.ERROR: (Back.RED + Fore.WHITE + Style.BRIGHT, Fore.RED),
}


def local_timestamper() -> structlog.processors.TimeStamper:
    """Stamp ``timestamp`` with local time at second resolution."""
    return structlog.processors.TimeStamper(fmt=TIMESTAMP_FORMAT, utc=False, key="timestamp")


def add_owner_field(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Combine owner and thread name into ``owner_field``: ``"<owner> @<thread>"``."""
    thread_name = event_dict.get("thread_name", "")
    event_dict["owner_field"] = f"{event_dict.get('owner', '')} @{thread_name:<{THREAD_NAME_WIDTH}}"
    return event_dict


def _layout(event_dict: dict[str, Any], tag: str) -> str:
    return (
        f"{event_dict.get('timestamp', '')} {tag} "
        f"{event_dict['owner_field']:>{OWNER_WIDTH}} |: {event_dict.get('event', '')}"
    )


class PlainLineRenderer:
    """Render an event as an unstyled line (no trailing newline)."""

    def __call__(
        self,
        logger: Any,  # noqa: ARG002
        method_name: str,  # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> str:
        level: Level = event_dict["level"]
        return _layout(event_dict, f"{level.tag:<{TAG_WIDTH}}")


class ConsoleLineRenderer:
    """Render an event with severity-coded ANSI styling.

    With ``colors=False`` the output is identical to :class:`PlainLineRenderer`.
    """

    def __init__(self, colors: bool = True) -> None:
        self._colors = colors

    def __call__(
        self,
        logger: Any,  # noqa: ARG002
        method_name: str,  # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> str:
        level: Level = event_dict["level"]
        tag = f"{level.tag:<{TAG_WIDTH}}"
        if not self._colors:
            return _layout(event_dict, tag)
        tag_style, line_style = _LEVEL_STYLES[level]
        # Pad before styling so escape codes do not count towards the width.
        styled_tag = f"{tag_style}{level.tag}{Style.RESET_ALL}{line_style}{tag[len(level.tag):]}"
        return f"{line_style}{_layout(event_dict, styled_tag)}{Style.RESET_ALL}"


def build_chain(renderer: Processor) -> list[Processor]:
    return [local_timestamper(), add_owner_field, renderer]


def wrap_sink(sink: Any, renderer: Processor) -> Any:
    """Wrap *sink* in a structlog logger whose chain ends in *renderer*.

    Calling ``debug``/``info``/``warn``/``error`` on the result renders the
    keyword arguments into one line and hands it to the sink method of the
    same name.
    """
    return structlog.wrap_logger(
        sink,
        processors=build_chain(renderer),
        wrapper_class=structlog.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=True,
    )


__all__ = [
    "OWNER_WIDTH",
    "TAG_WIDTH",
    "THREAD_NAME_WIDTH",
    "TIMESTAMP_FORMAT",
    "ConsoleLineRenderer",
    "PlainLineRenderer",
    "Processor",
    "add_owner_field",
    "build_chain",
    "local_timestamper",
    "wrap_sink",
]
