"""Exceptions raised by basics CLI commands."""


class BasicsError(Exception):
    """Base class for errors reported to the user with a clean message."""
