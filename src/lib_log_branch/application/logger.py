"""Scoped, hierarchical logging buffer.

Purpose
-------
Accumulate log entries inside nested branches of work, hold them back until
someone flushes, and compose loggers into a parent/child tree so a sub-task's
entries surface through its owner exactly once.

Contents
--------
* :class:`Logger` - the branch/trim stack, error deduplication, and the
  ancestor-first ``write`` algorithm.
* :data:`DiagnosticHook` - optional observer for internal lifecycle events.
* :data:`DEFAULT_MAX_DEPTH` - lineage cap guarding ``write`` against cycles.

System Role
-----------
Application-layer core. Depends only on the domain types and the
:class:`~lib_log_branch.application.ports.LogSinkPort` /
:class:`~lib_log_branch.application.ports.ClockPort` protocols; concrete sinks
are injected by the caller or by :func:`lib_log_branch.create_logger`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from functools import singledispatchmethod
from threading import RLock
from typing import Any, Optional, TypeVar

from lib_log_branch.application.ports import ClockPort, LogSinkPort, UnitOfWork
from lib_log_branch.domain import (
    HandledErrors,
    LogEntry,
    LoggedError,
    LoggerTreeError,
    LogLevel,
    UnbalancedTrimError,
    coerce_level,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

DiagnosticHook = Optional[Callable[[str, dict[str, Any]], None]]

DEFAULT_MAX_DEPTH = 256
"""Deepest parent chain ``write`` will walk before declaring the tree corrupt."""


class Logger:
    """Buffer log entries per branch and flush them ancestor-first.

    Parameters
    ----------
    parent:
        Owning logger. Set once; use :meth:`get_child_logger` rather than
        passing it by hand.
    sink:
        Rendering target. Required for a root logger; children inherit their
        parent's sink. :func:`lib_log_branch.create_logger` builds a root with
        the configured sink.
    clock:
        Timestamp source for new entries (inherited; UTC now when absent).
    max_depth:
        Cap on the parent chain walked by :meth:`write` (inherited).
    diagnostic_hook:
        Callable receiving ``(event_name, payload)`` for branch, error, and
        flush events (inherited).

    Examples
    --------
    >>> from lib_log_branch.adapters import MemorySink
    >>> sink = MemorySink()
    >>> root = Logger(sink=sink)
    >>> child = root.get_child_logger()
    >>> root.info("setup", "ready")
    >>> child.info("step", "working")
    >>> child.write()
    >>> sink.messages()
    ['ready', 'working']
    """

    def __init__(
        self,
        parent: Logger | None = None,
        *,
        sink: LogSinkPort | None = None,
        clock: ClockPort | None = None,
        max_depth: int | None = None,
        diagnostic_hook: DiagnosticHook = None,
    ) -> None:
        self._parent = parent
        self._groups: list[list[LogEntry]] = [[]]
        self._handled = HandledErrors()
        self._lock = RLock()
        if parent is not None:
            sink = sink if sink is not None else parent._sink
            clock = clock if clock is not None else parent._clock
            max_depth = max_depth if max_depth is not None else parent._max_depth
            diagnostic_hook = diagnostic_hook if diagnostic_hook is not None else parent._diagnostic
        if sink is None:
            raise ValueError("a root logger needs a sink; use create_logger() for a configured one")
        resolved_depth = DEFAULT_MAX_DEPTH if max_depth is None else max_depth
        if resolved_depth <= 0:
            raise ValueError("max_depth must be positive")
        self._sink = sink
        self._clock: ClockPort | None = clock
        self._max_depth = resolved_depth
        self._diagnostic = diagnostic_hook

    @property
    def parent(self) -> Logger | None:
        """Return the owning logger, ``None`` for a root."""

        return self._parent

    @property
    def depth(self) -> int:
        """Return the number of open groups, the root group included."""

        with self._lock:
            return len(self._groups)

    @property
    def sink(self) -> LogSinkPort:
        return self._sink

    def entries(self) -> list[LogEntry]:
        """Return a snapshot of every entry, outermost group first."""

        with self._lock:
            return [entry for group in self._groups for entry in group]

    def pending(self) -> list[LogEntry]:
        """Return a snapshot of the entries :meth:`write` has not rendered yet."""

        return [entry for entry in self.entries() if not entry.has_been_rendered]

    def is_handled(self, error: BaseException) -> bool:
        """Return ``True`` when ``error`` was already reported to this logger."""

        with self._lock:
            return error in self._handled

    def log(self, level: LogLevel | str, message: str, name: str | None = None) -> None:
        """Append an entry to the innermost group without rendering it."""

        entry = LogEntry(level=coerce_level(level), message=message, timestamp=self._now(), name=name)
        with self._lock:
            self._groups[-1].append(entry)

    def _now(self) -> datetime:
        if self._clock is None:
            return datetime.now(timezone.utc)
        return self._clock.now()

    def info(self, name: str, message: str) -> None:
        self.log(LogLevel.INFO, message, name)

    def warn(self, name: str, message: str) -> None:
        self.log(LogLevel.WARNING, message, name)

    warning = warn

    @singledispatchmethod
    def error(self, value: object) -> BaseException:
        """Record a failure once, flush everything pending, and return the error.

        ``value`` may be a message (always a fresh :class:`LoggedError`), an
        exception (logged only the first time this logger sees that object),
        or anything else (stringified into a fresh :class:`LoggedError`). The
        returned exception is what the caller should raise.
        """
        return self._error_from_exception(LoggedError(str(value)))

    @error.register(str)
    def _error_from_message(self, value: str) -> BaseException:
        created = LoggedError(value)
        self._record_error(created, value)
        return created

    @error.register(BaseException)
    def _error_from_exception(self, value: BaseException) -> BaseException:
        with self._lock:
            if value in self._handled:
                logger.debug("error %r already handled; skipping", value)
                self._emit("error_deduplicated", {"error": type(value).__name__})
                return value
            self._record_error(value, str(value) or type(value).__name__)
        return value

    def _record_error(self, error: BaseException, message: str) -> None:
        # Locks are only ever taken child before ancestor.
        with self._lock:
            self.log(LogLevel.ERROR, message)
            self._handled.add(error)
            if self._parent is not None:
                self._parent._mark_handled(error)
            self._emit("error_logged", {"error": type(error).__name__, "message": message})
            self.write()

    def _mark_handled(self, error: BaseException) -> None:
        with self._lock:
            self._handled.add(error)

    def branch(self, work: UnitOfWork[T] | None = None) -> T | None:
        """Open a new group and, when ``work`` is given, run it inside it.

        Without ``work`` the group stays open until :meth:`trim`. With
        ``work`` the group is closed on every exit path; an exception raised
        by ``work`` is reported through :meth:`error` before it propagates.
        """
        if work is None:
            self._push()
            return None
        with self.scoped():
            return work()

    @contextmanager
    def scoped(self) -> Iterator[Logger]:
        """Context-manager form of :meth:`branch`.

        Examples
        --------
        >>> from lib_log_branch.adapters import MemorySink
        >>> log = Logger(sink=MemorySink())
        >>> with log.scoped():
        ...     log.depth
        2
        >>> log.depth
        1
        """
        self._push()
        try:
            yield self
        except Exception as exc:
            reported = self.error(exc)
            if reported is exc:
                raise
            raise reported from exc
        finally:
            self.trim()

    def _push(self) -> None:
        with self._lock:
            self._groups.append([])
            depth = len(self._groups)
        logger.debug("branch opened at depth %d", depth)
        self._emit("branch_opened", {"depth": depth})

    def trim(self) -> None:
        """Close the innermost group; the root group can never be closed."""

        with self._lock:
            if len(self._groups) <= 1:
                raise UnbalancedTrimError()
            self._groups.pop()
            depth = len(self._groups)
        logger.debug("branch closed, depth now %d", depth)
        self._emit("branch_closed", {"depth": depth})

    def get_child_logger(self) -> Logger:
        return Logger(self)

    def write(self) -> None:
        """Render every unrendered entry, ancestors first, each exactly once."""

        for node in self._lineage():
            node._render_pending()

    def _lineage(self) -> list[Logger]:
        """Return the chain from the root down to ``self``."""
        chain: list[Logger] = []
        seen: set[int] = set()
        node: Logger | None = self
        while node is not None:
            if id(node) in seen:
                raise LoggerTreeError("logger parent chain contains a cycle")
            if len(chain) >= self._max_depth:
                raise LoggerTreeError(f"logger parent chain exceeds {self._max_depth} levels")
            seen.add(id(node))
            chain.append(node)
            node = node._parent
        chain.reverse()
        return chain

    def _render_pending(self) -> None:
        rendered = 0
        with self._lock:
            for group in self._groups:
                for entry in group:
                    if entry.has_been_rendered:
                        continue
                    self._render(entry)
                    entry.mark_rendered()
                    rendered += 1
        if rendered:
            self._emit("flushed", {"rendered": rendered})

    def _render(self, entry: LogEntry) -> None:
        if entry.level is LogLevel.INFO:
            self._sink.info(entry.message)
        elif entry.level is LogLevel.WARNING:
            self._sink.warning(entry.message)
        elif entry.level is LogLevel.ERROR:
            self._sink.error(entry.message)

    def _emit(self, event: str, payload: dict[str, Any]) -> None:
        if self._diagnostic is not None:
            self._diagnostic(event, payload)


__all__ = ["DEFAULT_MAX_DEPTH", "DiagnosticHook", "Logger"]
