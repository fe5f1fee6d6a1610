"""Infrastructure: read one script and build its command.

This is the only module that touches a script's contents on disk.
Reading happens once, fully into memory; scanning and assembly are
delegated to the pure core.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path
from typing import TypeVar, Union

from easy_cli.core.assembler import parse_script
from easy_cli.core.models import CommandArgument, CommandDescription, CommandOption, ScriptCommand
from easy_cli.core.naming import default_command_name
from easy_cli.exceptions import CommandAssemblyError, ScriptReadError

logger = logging.getLogger(__name__)

_Named = TypeVar("_Named", bound=Union[CommandArgument, CommandOption, CommandDescription])


def read_script(path: Path) -> str:
    """Return the full text of *path*.

    Raises
    ------
    ScriptReadError
        When the file cannot be read or is not UTF-8 text.
    """
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ScriptReadError(
            f"{path} is not a UTF-8 text file.",
            hint="Only text scripts can carry annotations.",
        ) from exc
    except OSError as exc:
        raise ScriptReadError(f"Cannot read {path}: {exc.strerror or exc}") from exc


def load_script_command(path: Path) -> ScriptCommand | None:
    """Read and parse *path* into a :class:`ScriptCommand`.

    Returns ``None`` when the script opts out with ``@ignore``.
    Repeated option, argument or sub-command names within one command
    keep their first occurrence; later ones are logged and dropped.

    Raises
    ------
    ScriptReadError
        When the file cannot be read.
    CommandAssemblyError
        When the annotations are structurally invalid.
    """
    text = read_script(path)
    try:
        command = parse_script(text, default_command_name(path))
    except CommandAssemblyError as exc:
        raise CommandAssemblyError(f"{path}: {exc}", hint=exc.hint) from exc

    if command is None:
        logger.debug("Ignoring %s (@ignore)", path)
        return None
    command = _drop_repeated_names(path, command)

    logger.debug(
        "Loaded %s as %r (%d options, %d arguments, %d sub-commands)",
        path,
        command.name,
        len(command.options),
        len(command.arguments),
        len(command.sub_commands),
    )
    return ScriptCommand(path=path, command=command)


# ---------------------------------------------------------------------------
# Repeated names
# ---------------------------------------------------------------------------

def _first_by_name(path: Path, owner: str, kind: str, items: Sequence[_Named]) -> tuple[_Named, ...]:
    seen: set[str] = set()
    kept: list[_Named] = []
    for item in items:
        if item.name in seen:
            logger.warning("%s: ignoring repeated %s %r of command %r", path, kind, item.name, owner)
            continue
        seen.add(item.name)
        kept.append(item)
    return tuple(kept)


def _drop_repeated_names(path: Path, command: CommandDescription) -> CommandDescription:
    """Keep the first option, argument and sub-command of each name, recursively.

    Repeats would collide in the generated parser, so later ones are
    dropped with a warning instead of failing the whole launcher.
    """
    sub_commands = _first_by_name(path, command.name, "sub-command", command.sub_commands)
    return replace(
        command,
        options=_first_by_name(path, command.name, "option", command.options),
        arguments=_first_by_name(path, command.name, "argument", command.arguments),
        sub_commands=tuple(_drop_repeated_names(path, sub) for sub in sub_commands),
    )
