"""Infrastructure: build a :class:`CommandModel` from a directory of scripts.

Every regular, non-hidden file directly inside the source directory is
parsed independently on a thread pool.  A file that fails to load is
logged and skipped; it never prevents its siblings from loading.
Commands are ordered by file name so the generated CLI is stable.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from easy_cli.core.models import CommandModel, ScriptCommand
from easy_cli.exceptions import EasyCliError, SourceDirectoryError
from easy_cli.infra.script_loader import load_script_command

logger = logging.getLogger(__name__)


def list_script_files(source_dir: Path) -> list[Path]:
    """Return the candidate script files of *source_dir*, sorted by name.

    Raises
    ------
    SourceDirectoryError
        When *source_dir* is missing, not a directory, or unreadable.
    """
    if not source_dir.is_dir():
        raise SourceDirectoryError(
            f"Script directory not found: {source_dir}",
            hint="Pass the directory that contains your scripts.",
        )
    try:
        entries = [
            entry
            for entry in source_dir.iterdir()
            if entry.is_file() and not entry.name.startswith(".")
        ]
    except OSError as exc:
        raise SourceDirectoryError(
            f"Cannot list {source_dir}: {exc.strerror or exc}",
        ) from exc
    return sorted(entries, key=lambda entry: entry.name)


def _load_isolated(path: Path) -> ScriptCommand | None:
    """Load one script; per-file failures are logged and yield ``None``."""
    try:
        return load_script_command(path)
    except EasyCliError as exc:
        logger.warning("Skipping %s: %s", path, exc)
        return None


def _drop_duplicates(commands: list[ScriptCommand]) -> list[ScriptCommand]:
    """Keep the first command for each name."""
    seen: dict[str, ScriptCommand] = {}
    for command in commands:
        first = seen.get(command.name)
        if first is not None:
            logger.warning(
                "Skipping %s: command %r is already defined by %s",
                command.path,
                command.name,
                first.path,
            )
            continue
        seen[command.name] = command
    return list(seen.values())


def load_model(source_dir: str | Path, *, max_workers: int | None = None) -> CommandModel:
    """Scan *source_dir* and return the resulting command model.

    Parameters
    ----------
    source_dir:
        Directory whose files become commands.
    max_workers:
        Thread-pool size; ``None`` uses the executor default.

    Raises
    ------
    SourceDirectoryError
        When *source_dir* cannot be listed.
    """
    paths = list_script_files(Path(source_dir))
    logger.debug("Scanning %d file(s) in %s", len(paths), source_dir)

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        loaded = list(executor.map(_load_isolated, paths))

    commands = _drop_duplicates([command for command in loaded if command is not None])
    return CommandModel(commands=tuple(commands))
