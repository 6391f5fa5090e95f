"""Exception types raised or synthesised by the branch logger.

Two families live here. :class:`LoggedError` is the value the logger creates
when a caller reports a failure by message; it belongs to the caller's
domain and is meant to be raised by them. :class:`UsageError` and its
subclasses signal structural bugs in the calling code (unbalanced scoping,
a corrupted logger tree) and are raised directly, never routed through
:meth:`lib_log_branch.Logger.error`.
"""

from __future__ import annotations


class LoggedError(Exception):
    """Error value created by ``Logger.error`` from a message or arbitrary input."""


class UsageError(RuntimeError):
    """Base class for misuse of the logger API by the caller."""


class UnbalancedTrimError(UsageError):
    """``trim`` was called without a matching ``branch``."""

    def __init__(self, message: str = "logger trim was called more times than branch") -> None:
        super().__init__(message)


class LoggerTreeError(UsageError):
    """The parent chain is cyclic or deeper than the configured cap."""


__all__ = ["LoggedError", "LoggerTreeError", "UnbalancedTrimError", "UsageError"]
