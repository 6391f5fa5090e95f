"""Helpers behind the CLI: the metadata banner and the logger demo.

Purpose
-------
Keep CLI commands thin by hosting their behaviour here, where doctests and
unit tests can call it without Click.

Contents
--------
* :func:`summary_info` - metadata banner shared by ``info`` and the bare CLI.
* :func:`logdemo` - runs a parent/child branch scenario on a configured sink.
"""

from __future__ import annotations

from typing import Any

from .config import LoggerSettings
from .runtime import create_logger


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point and docs.

    Outputs
    -------
    str
        Multi-line banner ending with a newline.
    """

    from . import __init__conf__

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


def logdemo(settings: LoggerSettings, *, fail: bool = False) -> dict[str, Any]:
    """Run a root/child branch scenario and report what reached the sink.

    The child buffers two entries inside a branch. Without ``fail`` the branch
    flushes them itself before it closes; with ``fail`` the branch raises, the
    error is rendered immediately together with everything pending, and the
    root re-reporting the same exception renders nothing new.

    Returns
    -------
    dict[str, Any]
        ``rendered`` (messages handed to the sink), ``errors`` (error entries
        recorded), ``deduplicated`` (re-reports skipped), ``failed``.

    Examples
    --------
    >>> logdemo(LoggerSettings(sink="memory"), fail=True)
    {'rendered': 5, 'errors': 1, 'deduplicated': 1, 'failed': True}
    """
    counters = {"rendered": 0, "errors": 0, "deduplicated": 0}

    def record(event: str, payload: dict[str, Any]) -> None:
        if event == "flushed":
            counters["rendered"] += payload["rendered"]
        elif event == "error_logged":
            counters["errors"] += 1
        elif event == "error_deduplicated":
            counters["deduplicated"] += 1

    root = create_logger(settings, diagnostic_hook=record)
    root.info("demo", "starting demo run")
    child = root.get_child_logger()

    def step() -> None:
        child.info("fetch", "fetched 3 records")
        child.warn("fetch", "record 2 has no timestamp")
        if fail:
            raise RuntimeError("demo failure inside child branch")
        child.write()

    failed = False
    try:
        child.branch(step)
    except RuntimeError as exc:
        root.error(exc)
        failed = True
    root.info("demo", "demo run finished")
    child.write()
    return {**counters, "failed": failed}


__all__ = ["logdemo", "summary_info"]
