"""Where config and log files live.

Both locations default to the repository root so a checkout is portable:

- Config: ``<repo_root>/config/config.toml``, or ``$TRACKMUX_CONFIG``.
- Log file: ``<repo_root>/logs/trackmux.log``, or ``$TRACKMUX_LOG_FILE``.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Final

CONFIG_ENV_VAR: Final[str] = "TRACKMUX_CONFIG"
LOG_FILE_ENV_VAR: Final[str] = "TRACKMUX_LOG_FILE"

_REPO_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Return the first of ``explicit_path``, ``env[env_var]`` or the default.

    Blank environment values count as unset. The result is absolute.
    """
    if explicit_path is not None:
        chosen = Path(explicit_path)
    else:
        mapping = os.environ if env is None else env
        override = (mapping.get(env_var) or "").strip() if env_var else ""
        chosen = Path(override) if override else default_factory()
    return chosen.expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Walk up from ``start`` (this module by default) to a repository marker.

    Falls back to the current working directory when nothing is found.
    """
    origin = (start or Path(__file__).resolve()).parent
    for candidate in (origin, *origin.parents):
        if any((candidate / marker).exists() for marker in _REPO_MARKERS):
            return candidate
    return Path.cwd()


def default_config_path() -> Path:
    return resolve_overridable_path(
        explicit_path=None,
        env=None,
        env_var=CONFIG_ENV_VAR,
        default_factory=lambda: _detect_repo_root() / "config" / "config.toml",
    )


def default_log_dir() -> Path:
    return (_detect_repo_root() / "logs").resolve()


def default_log_file() -> Path:
    """Log file used by the CLI when ``log_file`` is not configured."""

    return resolve_overridable_path(
        explicit_path=None,
        env=None,
        env_var=LOG_FILE_ENV_VAR,
        default_factory=lambda: default_log_dir() / "trackmux.log",
    )


__all__ = [
    "CONFIG_ENV_VAR",
    "LOG_FILE_ENV_VAR",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
