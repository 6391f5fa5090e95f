"""Identity-keyed, non-owning registry of exceptions a logger has reported.

Purpose
-------
Let a logger recognise an exception object it has already logged, no matter
how many branches it bubbles through, without keeping that exception alive.

Contents
--------
* :class:`HandledErrors` - per-logger membership set.

System Role
-----------
Built-in exception instances reject weak references, so a ``WeakSet`` cannot
hold them. Instead each registry owns an opaque key object and stamps the
exception's ``__dict__`` with an immutable ``(id(error), keys)`` pair. The
registry itself stores nothing about the exception, so lifetime is untouched.

The stamp is bound to the object it was written on: copies, pickled round
trips and exceptions returned from other processes carry the attribute along,
but their ``id`` differs from the recorded one (and unpickled keys are fresh
objects), so they are never mistaken for the handled original.
"""

from __future__ import annotations

_MARKER = "__lib_log_branch_handled__"


class HandledErrors:
    """Membership set of exception objects, tested by identity.

    Examples
    --------
    >>> handled = HandledErrors()
    >>> first, twin = ValueError("boom"), ValueError("boom")
    >>> handled.add(first)
    >>> first in handled, twin in handled
    (True, False)
    """

    __slots__ = ("_key",)

    def __init__(self) -> None:
        self._key = object()

    def add(self, error: BaseException) -> None:
        """Record ``error`` as handled by this registry."""
        keys = _stamped_keys(error)
        if any(key is self._key for key in keys):
            return
        # Rebind rather than mutate: copies may share the previous tuple.
        vars(error)[_MARKER] = (id(error), (*keys, self._key))

    def __contains__(self, error: object) -> bool:
        if not isinstance(error, BaseException):
            return False
        return any(key is self._key for key in _stamped_keys(error))


def _stamped_keys(error: BaseException) -> tuple[object, ...]:
    """Return the registry keys stamped on ``error`` itself, ignoring inherited stamps."""
    stamp = vars(error).get(_MARKER)
    if not isinstance(stamp, tuple) or len(stamp) != 2 or stamp[0] != id(error):
        return ()
    return tuple(stamp[1])


__all__ = ["HandledErrors"]
