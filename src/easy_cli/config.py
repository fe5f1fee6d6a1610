"""Launcher configuration.

Values are resolved from the command line first, then from
``EASY_CLI_*`` environment variables, then from built-in defaults.
The result is an immutable :class:`LauncherConfig`.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from easy_cli.exceptions import ConfigurationError

DEFAULT_CLI_NAME = "cli"
DEFAULT_SHELL = "zsh"
DEFAULT_LOG_LEVEL = logging.WARNING

ENV_CLI_NAME = "EASY_CLI_NAME"
ENV_SHELL = "EASY_CLI_SHELL"
ENV_JOBS = "EASY_CLI_JOBS"
ENV_LOG_LEVEL = "EASY_CLI_LOG_LEVEL"


@dataclass(frozen=True, slots=True)
class LauncherConfig:
    """Everything the launcher needs to build and dispatch a CLI."""

    source_dir: Path
    """Directory whose scripts become commands."""

    cli_name: str = DEFAULT_CLI_NAME
    """Program name shown in generated help and usage."""

    executed: bool = False
    """Run the script directly instead of emitting shell text for ``eval``."""

    shell: str = DEFAULT_SHELL
    """Interpreter used in executed mode."""

    max_workers: int | None = None
    """Thread-pool size for scanning; ``None`` uses the executor default."""

    log_level: int = DEFAULT_LOG_LEVEL
    list_only: bool = False


def _parse_jobs(raw: int | str | None) -> int | None:
    if raw is None or raw == "":
        return None
    try:
        jobs = int(raw)
    except ValueError as exc:
        raise ConfigurationError(
            f"Invalid job count: {raw!r}",
            hint=f"{ENV_JOBS} must be a positive integer.",
        ) from exc
    if jobs < 1:
        raise ConfigurationError(
            f"Invalid job count: {jobs}",
            hint="Use at least one worker.",
        )
    return jobs


def _parse_log_level(raw: str | None) -> int:
    if not raw:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {raw!r}",
            hint=f"{ENV_LOG_LEVEL} must be one of DEBUG, INFO, WARNING, ERROR.",
        )
    return level


def resolve_config(
    source_dir: str | Path,
    *,
    cli_name: str | None = None,
    executed: bool = False,
    shell: str | None = None,
    jobs: int | None = None,
    verbose: bool = False,
    list_only: bool = False,
    environ: Mapping[str, str] | None = None,
) -> LauncherConfig:
    """Merge explicit settings with the environment.

    Raises
    ------
    ConfigurationError
        When a job count or log level is invalid.
    """
    env = os.environ if environ is None else environ

    log_level = logging.DEBUG if verbose else _parse_log_level(env.get(ENV_LOG_LEVEL))

    return LauncherConfig(
        source_dir=Path(source_dir),
        cli_name=cli_name or env.get(ENV_CLI_NAME) or DEFAULT_CLI_NAME,
        executed=executed,
        shell=shell or env.get(ENV_SHELL) or DEFAULT_SHELL,
        max_workers=_parse_jobs(jobs if jobs is not None else env.get(ENV_JOBS)),
        log_level=log_level,
        list_only=list_only,
    )
