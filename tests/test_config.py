from __future__ import annotations

import pytest

from lib_log_branch.config import (
    CONSOLE_STYLE_THEMES,
    LoggerSettings,
    load_settings,
    should_use_dotenv,
    with_overrides,
)

_ENV_VARS = (
    "LOG_BRANCH_SINK",
    "LOG_BRANCH_FORCE_COLOR",
    "LOG_BRANCH_NO_COLOR",
    "LOG_BRANCH_THEME",
    "LOG_BRANCH_CONSOLE_STYLES",
    "LOG_BRANCH_MAX_DEPTH",
    "LOG_BRANCH_PYTHON_LOGGER",
    "LOG_BRANCH_SHOW_ICONS",
    "NO_COLOR",
)


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_environment() -> None:
    settings = load_settings()
    assert settings == LoggerSettings()
    assert settings.sink == "console"
    assert settings.max_depth == 256


def test_environment_overrides_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_BRANCH_SINK", "Logging")
    monkeypatch.setenv("LOG_BRANCH_FORCE_COLOR", "yes")
    monkeypatch.setenv("LOG_BRANCH_THEME", "neon")
    monkeypatch.setenv("LOG_BRANCH_CONSOLE_STYLES", "error=bold red, INFO=green")
    monkeypatch.setenv("LOG_BRANCH_MAX_DEPTH", "12")
    monkeypatch.setenv("LOG_BRANCH_PYTHON_LOGGER", "app.branches")
    monkeypatch.setenv("LOG_BRANCH_SHOW_ICONS", "on")

    settings = load_settings()

    assert settings.sink == "logging"
    assert settings.force_color is True
    assert settings.console_theme == "neon"
    assert settings.console_styles == {"ERROR": "bold red", "INFO": "green"}
    assert settings.max_depth == 12
    assert settings.python_logger_name == "app.branches"
    assert settings.show_icons is True


def test_keyword_overrides_beat_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_BRANCH_SINK", "logging")
    assert load_settings(sink="memory", console_theme=None).sink == "memory"


def test_no_color_convention_is_honoured(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "")
    assert load_settings().no_color is True


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"sink": "file"}, "Unknown sink"),
        ({"max_depth": 0}, "max_depth"),
        ({"console_theme": "sunset"}, "Unknown console theme"),
        ({"console_styles": {"verbose": "dim"}}, "Unknown log level"),
    ],
)
def test_invalid_settings_are_rejected(kwargs: dict, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        LoggerSettings(**kwargs)


def test_invalid_depth_in_environment_is_reported(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_BRANCH_MAX_DEPTH", "deep")
    with pytest.raises(ValueError, match="LOG_BRANCH_MAX_DEPTH"):
        load_settings()


def test_resolved_styles_merge_theme_and_overrides() -> None:
    settings = LoggerSettings(console_theme="Pastel", console_styles={"warning": "underline"})
    styles = settings.resolved_styles()
    assert styles["INFO"] == CONSOLE_STYLE_THEMES["pastel"]["INFO"]
    assert styles["WARNING"] == "underline"


def test_with_overrides_skips_none_values() -> None:
    base = LoggerSettings(sink="memory")
    assert with_overrides(base, sink=None, console_theme="dark") == LoggerSettings(sink="memory", console_theme="dark")


@pytest.mark.parametrize(
    "explicit, env_value, expected",
    [
        (True, None, True),
        (False, "1", False),
        (None, "on", True),
        (None, "0", False),
        (None, None, False),
    ],
)
def test_should_use_dotenv(explicit: bool | None, env_value: str | None, expected: bool) -> None:
    assert should_use_dotenv(explicit=explicit, env_value=env_value) is expected
