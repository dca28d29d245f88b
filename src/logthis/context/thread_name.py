"""Context – per-thread display name.

Each thread owns its name; nothing here is shared between threads, so no
lock is taken.
"""
from __future__ import annotations

import threading

_LOCAL = threading.local()


def default_thread_display_name() -> str:
    """Textual form of the calling thread's runtime identifier."""
    return f"ThreadId({threading.get_ident()})"


def current_thread_display_name() -> str:
    """Return the calling thread's display name, initialising it on first use."""
    name: str | None = getattr(_LOCAL, "name", None)
    if name is None:
        name = default_thread_display_name()
        _LOCAL.name = name
    return name


def set_current_thread_display_name(name: str) -> None:
    """Rename the calling thread in subsequent log lines."""
    _LOCAL.name = str(name)


def reset_current_thread_display_name() -> None:
    """Forget the calling thread's override; the default id is shown again."""
    _LOCAL.__dict__.pop("name", None)


__all__ = [
    "current_thread_display_name",
    "default_thread_display_name",
    "reset_current_thread_display_name",
    "set_current_thread_display_name",
]
