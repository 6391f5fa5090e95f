"""Application layer: the branch logger and the ports it depends on."""

from __future__ import annotations

from .logger import DEFAULT_MAX_DEPTH, DiagnosticHook, Logger

__all__ = ["DEFAULT_MAX_DEPTH", "DiagnosticHook", "Logger"]
