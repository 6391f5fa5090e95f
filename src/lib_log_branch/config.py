"""Environment-driven configuration for branch loggers.

Purpose
-------
Resolve how a root logger is wired (which sink, colours, lineage cap) from
defaults, ``LOG_BRANCH_*`` environment variables, optional ``.env`` files, and
explicit keyword overrides, in that order of increasing precedence.

Contents
--------
* :data:`CONSOLE_STYLE_THEMES` - built-in Rich palettes.
* :class:`LoggerSettings` and :func:`load_settings`.
* dotenv helpers: :data:`DOTENV_ENV_VAR`, :func:`should_use_dotenv`,
  :func:`enable_dotenv`.

System Role
-----------
Consumed by :func:`lib_log_branch.create_logger` and the CLI; the logger core
never reads the environment itself.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Mapping

from dotenv import load_dotenv

from lib_log_branch.application.logger import DEFAULT_MAX_DEPTH
from lib_log_branch.domain.levels import LogLevel

DOTENV_ENV_VAR = "LOG_BRANCH_USE_DOTENV"

SINK_CHOICES: tuple[str, ...] = ("console", "logging", "memory")

CONSOLE_STYLE_THEMES: dict[str, dict[str, str]] = {
    "classic": {
        "INFO": "cyan",
        "WARNING": "yellow",
        "ERROR": "red",
    },
    "dark": {
        "INFO": "bright_white",
        "WARNING": "bold gold3",
        "ERROR": "bold red3",
    },
    "neon": {
        "INFO": "#39ff14",
        "WARNING": "#fff700",
        "ERROR": "#ff073a",
    },
    "pastel": {
        "INFO": "light_sky_blue1",
        "WARNING": "khaki1",
        "ERROR": "light_salmon1",
    },
}
"""Built-in console palettes keyed by theme name."""

_DOTENV_LOADED: Path | None = None


@dataclass(frozen=True)
class LoggerSettings:
    """Resolved wiring options for a root logger.

    Attributes
    ----------
    sink:
        One of :data:`SINK_CHOICES`.
    force_color, no_color:
        Colour control forwarded to the Rich console sink.
    console_theme:
        Optional key of :data:`CONSOLE_STYLE_THEMES`.
    console_styles:
        Per-level Rich styles applied on top of the theme.
    show_icons:
        Prefix console lines with the level icon.
    max_depth:
        Lineage cap for ``Logger.write``.
    python_logger_name:
        Target of the stdlib ``logging`` sink.
    """

    sink: str = "console"
    force_color: bool = False
    no_color: bool = False
    console_theme: str | None = None
    console_styles: Mapping[str, str] = field(default_factory=dict)
    show_icons: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH
    python_logger_name: str = "lib_log_branch"

    def __post_init__(self) -> None:
        if self.sink not in SINK_CHOICES:
            raise ValueError(f"Unknown sink {self.sink!r}; expected one of {', '.join(SINK_CHOICES)}")
        if self.max_depth <= 0:
            raise ValueError("max_depth must be positive")
        if self.console_theme is not None and self.console_theme.lower() not in CONSOLE_STYLE_THEMES:
            raise ValueError(f"Unknown console theme: {self.console_theme!r}")
        for key in self.console_styles:
            LogLevel.from_name(key)
        object.__setattr__(self, "console_styles", dict(self.console_styles))

    def resolved_styles(self) -> dict[str, str]:
        """Return theme styles merged with explicit ``console_styles``.

        Examples
        --------
        >>> LoggerSettings(console_theme='dark', console_styles={'ERROR': 'bold'}).resolved_styles()['ERROR']
        'bold'
        """
        styles: dict[str, str] = {}
        if self.console_theme:
            styles.update(CONSOLE_STYLE_THEMES[self.console_theme.lower()])
        styles.update({key.upper(): value for key, value in self.console_styles.items()})
        return styles


def load_settings(**overrides: Any) -> LoggerSettings:
    """Build :class:`LoggerSettings` from the environment plus ``overrides``.

    Keyword arguments set to ``None`` are ignored so CLI options can be passed
    through unconditionally.
    """
    values: dict[str, Any] = {}
    sink = os.getenv("LOG_BRANCH_SINK")
    if sink:
        values["sink"] = sink.strip().lower()
    values["force_color"] = _env_bool("LOG_BRANCH_FORCE_COLOR", False)
    values["no_color"] = _env_bool("LOG_BRANCH_NO_COLOR", "NO_COLOR" in os.environ)
    values["show_icons"] = _env_bool("LOG_BRANCH_SHOW_ICONS", False)
    theme = os.getenv("LOG_BRANCH_THEME")
    if theme:
        values["console_theme"] = theme.strip()
    styles = _parse_console_styles(os.getenv("LOG_BRANCH_CONSOLE_STYLES"))
    if styles:
        values["console_styles"] = styles
    max_depth = os.getenv("LOG_BRANCH_MAX_DEPTH")
    if max_depth:
        try:
            values["max_depth"] = int(max_depth)
        except ValueError as exc:
            raise ValueError(f"LOG_BRANCH_MAX_DEPTH must be an integer, got {max_depth!r}") from exc
    python_logger = os.getenv("LOG_BRANCH_PYTHON_LOGGER")
    if python_logger:
        values["python_logger_name"] = python_logger.strip()
    values.update({key: value for key, value in overrides.items() if value is not None})
    return LoggerSettings(**values)


def _env_bool(name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Examples
    --------
    >>> import os
    >>> _ = os.environ.pop('LOG_BRANCH_EXAMPLE_BOOL', None)
    >>> _env_bool('LOG_BRANCH_EXAMPLE_BOOL', default=True)
    True
    >>> os.environ['LOG_BRANCH_EXAMPLE_BOOL'] = '0'
    >>> _env_bool('LOG_BRANCH_EXAMPLE_BOOL', default=True)
    False
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _parse_console_styles(raw: str | None) -> dict[str, str]:
    """Convert ``LEVEL=style`` comma-separated strings into a dictionary.

    Examples
    --------
    >>> _parse_console_styles('INFO=green, ERROR = bold red')
    {'INFO': 'green', 'ERROR': 'bold red'}
    >>> _parse_console_styles(None)
    {}
    """
    if not raw:
        return {}
    result: dict[str, str] = {}
    for chunk in raw.split(","):
        if "=" not in chunk:
            continue
        key, value = chunk.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key or not value:
            continue
        result[key.upper()] = value
    return result


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is enabled.

    An explicit CLI flag wins; otherwise :data:`DOTENV_ENV_VAR` decides.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value='1')
    False
    >>> should_use_dotenv(env_value='yes')
    True
    >>> should_use_dotenv()
    False
    """
    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in {"1", "true", "yes", "on"}


def enable_dotenv(search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` above ``search_from`` (default: cwd).

    Existing environment variables keep precedence. The file is loaded at most
    once per process; later calls return the cached path.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED is not None:
        return _DOTENV_LOADED
    start = (search_from or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            load_dotenv(candidate, override=False)
            _DOTENV_LOADED = candidate
            return candidate
    return None


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED
    _DOTENV_LOADED = None


def with_overrides(settings: LoggerSettings, **changes: Any) -> LoggerSettings:
    """Return a copy of ``settings`` with non-``None`` ``changes`` applied."""

    return replace(settings, **{key: value for key, value in changes.items() if value is not None})


__all__ = [
    "CONSOLE_STYLE_THEMES",
    "DOTENV_ENV_VAR",
    "LoggerSettings",
    "SINK_CHOICES",
    "enable_dotenv",
    "load_settings",
    "should_use_dotenv",
    "with_overrides",
]
