"""Exceptions raised by path operations."""


class AvPathError(Exception):
    """Base class for all path related errors."""


class EmptyPathError(AvPathError, IndexError):
    """An operation needs at least one command but the path is empty."""


class InvalidCommandSequenceError(AvPathError, ValueError):
    """The command sequence violates the structure a path operation relies on.

    Paths built from an explicit command list are never validated, so a
    malformed sequence surfaces here once an operation walks it.
    """
