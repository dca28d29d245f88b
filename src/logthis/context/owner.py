"""Context – call-site owner resolution.

The owner names what produced a log line. At each call site it is one of:

* an explicit string,
* :data:`ENCLOSING_TYPE`, the qualified name of the class whose body
  lexically contains the call (read from the static ``co_qualname`` of the
  calling code object),
* a class object, rendered as ``module.QualName``,
* :data:`LOCATION` (the default), ``file:line:column`` of the call.

``stacklevel`` follows one convention throughout: ``0`` means the caller of
the function receiving it, ``1`` that caller's caller, and so on.
"""
from __future__ import annotations

import enum
import inspect
import os
import sys
from types import FrameType
from typing import Union


class OwnerMarker(enum.Enum):
    """Markers resolved against the calling frame."""

    LOCATION = "location"
    ENCLOSING_TYPE = "enclosing_type"

    def __repr__(self) -> str:
        return f"logthis.{self.name}"


LOCATION = OwnerMarker.LOCATION
ENCLOSING_TYPE = OwnerMarker.ENCLOSING_TYPE

OwnerSpec = Union[str, type, OwnerMarker, None]


def _caller_frame(stacklevel: int) -> FrameType:
    # +2 skips this helper and the public function that called it.
    return sys._getframe(stacklevel + 2)


def _display_path(filename: str) -> str:
    cwd = os.getcwd()
    if filename.startswith(cwd + os.sep):
        return os.path.relpath(filename, cwd)
    return filename


def capture_location(stacklevel: int = 0) -> str:
    """Return ``"<file>:<line>:<column>"`` of a frame above the caller.

    The column is 1-based and points at the start of the call expression.
    It is omitted when the interpreter does not record positions.
    """
    frame = _caller_frame(stacklevel)
    try:
        info = inspect.getframeinfo(frame, context=0)
        location = f"{_display_path(info.filename)}:{info.lineno}"
        positions = getattr(info, "positions", None)
        if positions is not None and positions.col_offset is not None:
            location = f"{location}:{positions.col_offset + 1}"
        return location
    finally:
        del frame


def enclosing_type_name(stacklevel: int = 0) -> str:
    """Return ``module.QualName`` of the class lexically enclosing the call.

    Called directly in a class body, that class is the enclosing type.
    Module-level code and plain functions have no enclosing class; the
    module name is returned for them.
    """
    frame = _caller_frame(stacklevel)
    try:
        module = frame.f_globals.get("__name__", "__main__")
        code = frame.f_code
        qualname = code.co_qualname
        in_class_body = (
            not code.co_flags & inspect.CO_OPTIMIZED
            and frame.f_locals.get("__qualname__") == qualname
        )
    finally:
        del frame

    if in_class_body:
        return f"{module}.{qualname}"
    # Drop the function itself, then any function scopes it is nested in.
    scope = qualname.rpartition(".")[0]
    while scope.endswith("<locals>"):
        scope = scope[: -len("<locals>")].rstrip(".")
        scope = scope.rpartition(".")[0]
    return f"{module}.{scope}" if scope else module


def type_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def resolve_owner(owner: OwnerSpec = None, stacklevel: int = 0) -> str:
    """Resolve *owner* to the string shown in the log line."""
    if owner is None or owner is LOCATION:
        return capture_location(stacklevel + 1)
    if owner is ENCLOSING_TYPE:
        return enclosing_type_name(stacklevel + 1)
    if isinstance(owner, str):
        return owner
    if isinstance(owner, type):
        return type_name(owner)
    raise TypeError(
        f"owner must be a string, a class, LOCATION or ENCLOSING_TYPE; got {type(owner).__name__}"
    )


__all__ = [
    "ENCLOSING_TYPE",
    "LOCATION",
    "OwnerMarker",
    "OwnerSpec",
    "capture_location",
    "enclosing_type_name",
    "resolve_owner",
    "type_name",
]
