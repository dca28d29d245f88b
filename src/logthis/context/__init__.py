"""Context – per-thread display names and call-site owners."""

from logthis.context.owner import (
    ENCLOSING_TYPE,
    LOCATION,
    OwnerMarker,
    OwnerSpec,
    capture_location,
    enclosing_type_name,
    resolve_owner,
    type_name,
)
from logthis.context.thread_name import (
    current_thread_display_name,
    default_thread_display_name,
    reset_current_thread_display_name,
    set_current_thread_display_name,
)

__all__ = [
    "ENCLOSING_TYPE",
    "LOCATION",
    "OwnerMarker",
    "OwnerSpec",
    "capture_location",
    "current_thread_display_name",
    "default_thread_display_name",
    "enclosing_type_name",
    "reset_current_thread_display_name",
    "resolve_owner",
    "set_current_thread_display_name",
    "type_name",
]
