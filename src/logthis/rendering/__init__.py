"""Rendering – line processors and sinks."""

from logthis.rendering.processors import (
    OWNER_WIDTH,
    TAG_WIDTH,
    THREAD_NAME_WIDTH,
    TIMESTAMP_FORMAT,
    ConsoleLineRenderer,
    PlainLineRenderer,
    add_owner_field,
    build_chain,
    local_timestamper,
    wrap_sink,
)
from logthis.rendering.sinks import ConsoleSink, ConsoleWriter, FileAppender, FileSink

__all__ = [
    "OWNER_WIDTH",
    "TAG_WIDTH",
    "THREAD_NAME_WIDTH",
    "TIMESTAMP_FORMAT",
    "ConsoleLineRenderer",
    "ConsoleSink",
    "ConsoleWriter",
    "FileAppender",
    "FileSink",
    "PlainLineRenderer",
    "add_owner_field",
    "build_chain",
    "local_timestamper",
    "wrap_sink",
]
