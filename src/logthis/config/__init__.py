"""Config – programmatic logger settings."""

from logthis.config.settings import LoggerSettings

__all__ = ["LoggerSettings"]
