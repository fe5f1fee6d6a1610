"""Resolved command invocations and their shell renderings.

An :class:`Invocation` is what the user selected on the command line:
the script, the chain of embedded sub-commands below it, and the
values bound to every option and argument on that chain.  This module
turns it into either an argv for direct execution or shell text for
``eval`` by the calling shell.

Every function here is a pure transformation.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass

from easy_cli.core.models import CommandArgument, CommandDescription, CommandOption, ScriptCommand

FLAG_SET = "true"
FLAG_UNSET = "false"
VALUE_SEPARATOR = ","


# ---------------------------------------------------------------------------
# Bound values
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class OptionValue:
    """An option together with what the user passed for it."""

    option: CommandOption
    value: bool | str | None
    """``bool`` for flags, the parameter (or ``None``) otherwise."""

    def render(self) -> str:
        if isinstance(self.value, bool):
            return FLAG_SET if self.value else FLAG_UNSET
        return self.value if self.value is not None else ""


@dataclass(frozen=True, slots=True)
class ArgumentValue:
    """A positional argument together with its values."""

    argument: CommandArgument
    values: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Invocation:
    """A fully resolved selection of one script command."""

    script: ScriptCommand
    sub_path: tuple[str, ...] = ()
    """Names of the embedded sub-commands, root to leaf."""

    options: tuple[OptionValue, ...] = ()
    arguments: tuple[ArgumentValue, ...] = ()

    @property
    def leaf(self) -> CommandDescription:
        """The command at the end of :attr:`sub_path`."""
        command = self.script.command
        for name in self.sub_path:
            child = command.get_sub_command(name)
            if child is None:
                raise KeyError(f"{command.name} has no sub-command {name!r}")
            command = child
        return command


# ---------------------------------------------------------------------------
# Executed mode
# ---------------------------------------------------------------------------

def build_script_argv(invocation: Invocation) -> list[str]:
    """Return the arguments passed to the script in executed mode.

    Order: sub-command names, then option values, then argument values
    (variadic values spread), each in definition order.
    """
    argv: list[str] = list(invocation.sub_path)
    argv.extend(value.render() for value in invocation.options)
    for bound in invocation.arguments:
        argv.extend(bound.values)
    return argv


# ---------------------------------------------------------------------------
# Evaluated mode
# ---------------------------------------------------------------------------

def _assoc_pairs(pairs: list[tuple[str, str]]) -> str:
    return " ".join(f"{shlex.quote(key)} {shlex.quote(value)}" for key, value in pairs)


def render_eval_script(invocation: Invocation) -> str:
    """Render shell text that sets up ``cli_args``/``cli_opts`` and runs the script.

    The script is sourced; when the selection ends in an embedded
    sub-command, its name is emitted last so the sourced function runs.
    """
    args = [
        (bound.argument.name, VALUE_SEPARATOR.join(bound.values))
        for bound in invocation.arguments
    ]
    opts = [(value.option.name, value.render()) for value in invocation.options]

    lines = [
        "#eval",
        "typeset -A cli_args",
        f"cli_args=({_assoc_pairs(args)})",
        "typeset -A cli_opts",
        f"cli_opts=({_assoc_pairs(opts)})",
        f"source {shlex.quote(str(invocation.script.path))}",
    ]
    if invocation.sub_path:
        lines.append(shlex.quote(invocation.sub_path[-1]))
    return "\n".join(lines) + "\n"


def render_echo_script(text: str) -> str:
    """Render *text* as a single ``echo`` line for the calling shell."""
    return f"echo {shlex.quote(text.rstrip())}\n"
