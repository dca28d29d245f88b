"""Integrations – bridges from other logging front-ends."""

from logthis.integrations.stdlib import LogThisHandler

__all__ = ["LogThisHandler"]
