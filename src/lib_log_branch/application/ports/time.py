"""Ports for time and unit-of-work semantics."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class ClockPort(Protocol):
    """Provide the current timestamp."""

    def now(self) -> datetime: ...


#: Zero-argument unit of work executed inside a branch.
UnitOfWork = Callable[[], T]


__all__ = ["ClockPort", "UnitOfWork"]
