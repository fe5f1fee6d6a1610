"""Translate a :class:`CommandModel` into an ``argparse`` parser.

Every script command becomes a sub-parser of the top-level parser, and
every embedded sub-command a sub-parser of its parent.  Options and
arguments keep their definition order.

The namespace is flat, so destinations are qualified by the nesting
level of the command that declares them (see :func:`option_dest`,
:func:`argument_dest` and :func:`command_dest`); :mod:`easy_cli.cli.dispatch`
reads them back with the same helpers.
"""

from __future__ import annotations

import argparse
from typing import Any

from easy_cli.core.models import ArgType, CommandArgument, CommandDescription, CommandModel, CommandOption
from easy_cli.version import __version__

COMMAND_METAVAR = "COMMAND"


# ---------------------------------------------------------------------------
# Namespace destinations
# ---------------------------------------------------------------------------

def command_dest(level: int) -> str:
    """Destination holding the command name chosen at *level* (0 = script)."""
    return f"command{level}"


def option_dest(level: int, name: str) -> str:
    return f"opt{level}:{name}"


def argument_dest(level: int, name: str) -> str:
    return f"arg{level}:{name}"


# ---------------------------------------------------------------------------
# Help text
# ---------------------------------------------------------------------------

def command_help(command: CommandDescription) -> str:
    """Description of *command*, or a generic one when it has none."""
    return command.description or f"Runs the {command.name} script"


def _escape(text: str | None) -> str | None:
    """argparse %-formats help strings; keep literal percent signs."""
    return text.replace("%", "%%") if text is not None else None


def _argument_help(argument: CommandArgument) -> str | None:
    if argument.arg_type is ArgType.UNKNOWN:
        return argument.description
    prefix = f"<{argument.arg_type.value}>"
    return f"{prefix} {argument.description}" if argument.description else prefix


def _nargs(argument: CommandArgument) -> str | None:
    """``argparse`` arity for a positional argument."""
    if argument.variadic:
        return "*" if argument.optional else "+"
    return "?" if argument.optional else None


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def _add_option(parser: argparse.ArgumentParser, level: int, option: CommandOption) -> None:
    flags = [f"--{option.name}"]
    if option.short is not None:
        flags.insert(0, f"-{option.short}")

    kwargs: dict[str, Any] = {
        "dest": option_dest(level, option.name),
        "help": _escape(option.description) or "",
    }
    if option.has_parameter:
        kwargs["metavar"] = "VALUE"
    else:
        kwargs["action"] = "store_true"

    parser.add_argument(*flags, **kwargs)


def _add_argument(parser: argparse.ArgumentParser, level: int, argument: CommandArgument) -> None:
    parser.add_argument(
        argument_dest(level, argument.name),
        metavar=argument.name,
        nargs=_nargs(argument),
        help=_escape(_argument_help(argument)),
    )


def _add_command(
    subparsers: Any,
    command: CommandDescription,
    level: int,
) -> None:
    """Register *command* (and its children) under *subparsers*."""
    help_text = command_help(command)
    parser = subparsers.add_parser(
        command.name,
        help=_escape(help_text),
        description=help_text,
        conflict_handler="resolve",
    )

    for option in command.options:
        _add_option(parser, level, option)
    for argument in command.arguments:
        _add_argument(parser, level, argument)

    if command.has_sub_commands:
        nested = parser.add_subparsers(
            dest=command_dest(level + 1),
            metavar=COMMAND_METAVAR,
            required=True,
        )
        for child in command.sub_commands:
            _add_command(nested, child, level + 1)


def build_parser(model: CommandModel, prog: str) -> argparse.ArgumentParser:
    """Build the parser for the CLI described by *model*.

    A command is always required; commands with sub-commands require
    one of those too.
    """
    parser = argparse.ArgumentParser(prog=prog)
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    subparsers = parser.add_subparsers(
        dest=command_dest(0),
        metavar=COMMAND_METAVAR,
        required=True,
    )
    for script in model.commands:
        _add_command(subparsers, script.command, 0)
    return parser
