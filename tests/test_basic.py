"""Behavioral tests for the metadata banner and demo helpers."""

from __future__ import annotations

from lib_log_branch import LoggerSettings, summary_info
from lib_log_branch.lib_log_branch import logdemo


def test_summary_info_contains_metadata() -> None:
    summary = summary_info()
    assert "Info for lib_log_branch" in summary
    assert "version" in summary
    assert summary.endswith("\n")


def test_summary_info_is_idempotent() -> None:
    assert summary_info() == summary_info()


def test_logdemo_success_flushes_child_branch_before_it_closes() -> None:
    result = logdemo(LoggerSettings(sink="memory"))
    assert result == {"rendered": 4, "errors": 0, "deduplicated": 0, "failed": False}


def test_logdemo_failure_deduplicates_the_reraised_error() -> None:
    result = logdemo(LoggerSettings(sink="memory"), fail=True)
    assert result["failed"] is True
    assert result["errors"] == 1
    assert result["deduplicated"] == 1
