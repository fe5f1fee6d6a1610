"""Fold grouped tags into a :class:`~easy_cli.core.models.CommandDescription`.

Policy, in priority order:

1. **No tags at all** — the file is an un-annotated script.  It gets the
   default name and a single optional variadic ``args`` argument so it
   can be called with anything.
2. **First tag is ``@ignore``** — no command; the file is excluded.
3. **Otherwise** — group 0 describes the root command and every later
   group one embedded sub-command, in source order.

Guarantees
----------
* Pure — no I/O, no logging, deterministic.
* Only :class:`~easy_cli.exceptions.CommandAssemblyError` escapes, and
  only for a group that does not start with a sub tag.
"""

from __future__ import annotations

from collections.abc import Sequence

from easy_cli.core.grouping import group_tags
from easy_cli.core.models import ArgType, CommandArgument, CommandDescription, CommandOption
from easy_cli.core.scanner import iter_tags
from easy_cli.core.tags import AboutTag, ArgTag, IgnoreTag, NameTag, OptTag, SubTag, Tag
from easy_cli.exceptions import CommandAssemblyError

PASS_THROUGH_ARGUMENT = CommandArgument(
    name="args",
    optional=True,
    variadic=True,
    arg_type=ArgType.UNKNOWN,
    description="Any arguments are passed to the script",
)


def untagged_command(default_name: str) -> CommandDescription:
    """Describe a script that carries no annotations."""
    return CommandDescription(
        name=default_name,
        description=None,
        options=(),
        arguments=(PASS_THROUGH_ARGUMENT,),
    )


def _fold_group(
    name: str,
    tags: Sequence[Tag],
    *,
    allow_rename: bool,
    sub_commands: tuple[CommandDescription, ...] = (),
) -> CommandDescription:
    """Accumulate arguments/options in order; last about and name win."""
    arguments: list[CommandArgument] = []
    options: list[CommandOption] = []
    description: str | None = None

    for tag in tags:
        if isinstance(tag, ArgTag):
            arguments.append(tag.argument)
        elif isinstance(tag, OptTag):
            options.append(tag.option)
        elif isinstance(tag, AboutTag):
            description = tag.text
        elif isinstance(tag, NameTag) and allow_rename:
            name = tag.name

    return CommandDescription(
        name=name,
        description=description,
        options=tuple(options),
        arguments=tuple(arguments),
        sub_commands=sub_commands,
    )


def _assemble_sub_command(index: int, group: Sequence[Tag]) -> CommandDescription:
    head = group[0] if group else None
    if not isinstance(head, SubTag):
        raise CommandAssemblyError(
            f"Tag group {index} does not start with a @sub tag.",
            hint="Every group after the first must begin with '# @sub <name>'.",
        )
    return _fold_group(head.name, group[1:], allow_rename=False)


def assemble_command(
    groups: Sequence[Sequence[Tag]],
    default_name: str,
) -> CommandDescription | None:
    """Build the command tree for one file from its tag *groups*.

    Returns ``None`` when the file opts out with ``@ignore``.

    Raises
    ------
    CommandAssemblyError
        If any group after the first does not start with a sub tag.
    """
    if not groups or (len(groups) == 1 and not groups[0]):
        return untagged_command(default_name)

    root_tags = groups[0]
    if root_tags and isinstance(root_tags[0], IgnoreTag):
        return None

    sub_commands = tuple(
        _assemble_sub_command(index, group)
        for index, group in enumerate(groups[1:], start=1)
    )
    return _fold_group(
        default_name,
        root_tags,
        allow_rename=True,
        sub_commands=sub_commands,
    )


def parse_script(text: str, default_name: str) -> CommandDescription | None:
    """Scan, group and assemble the annotations of one script's *text*."""
    return assemble_command(group_tags(iter_tags(text)), default_name)
