"""Resolve a parsed namespace back into the model and dispatch it.

Two modes:

* **executed** — the script is run directly through the
  :class:`~easy_cli.core.execution_service.ExecutionService`.
* **evaluated** — shell text is written to stdout for the calling shell
  function to ``eval``.  In this mode ``argparse`` output (help, usage,
  errors) is captured and re-emitted as an ``echo`` line.
"""

from __future__ import annotations

import argparse
import io
import logging
import sys
from collections.abc import Sequence
from contextlib import redirect_stderr, redirect_stdout
from typing import Any, TextIO

from easy_cli.cli import exit_codes
from easy_cli.cli.parser_builder import argument_dest, command_dest, option_dest
from easy_cli.core.execution_service import ExecutionService
from easy_cli.core.invocation import (
    ArgumentValue,
    Invocation,
    OptionValue,
    render_echo_script,
    render_eval_script,
)
from easy_cli.core.models import CommandModel
from easy_cli.core.protocols import ScriptRunner

logger = logging.getLogger(__name__)


def _as_values(raw: Any) -> tuple[str, ...]:
    if raw is None:
        return ()
    if isinstance(raw, list):
        return tuple(str(value) for value in raw)
    return (str(raw),)


def resolve_invocation(model: CommandModel, namespace: argparse.Namespace) -> Invocation:
    """Map a namespace from :func:`build_parser` to an :class:`Invocation`.

    Options and arguments are collected for every command on the path
    from the script down to the selected leaf, in definition order.
    """
    script_name = getattr(namespace, command_dest(0))
    script = model.get_command(script_name)
    if script is None:
        raise LookupError(f"No command named {script_name!r} in the model")

    command = script.command
    level = 0
    sub_path: list[str] = []
    options: list[OptionValue] = []
    arguments: list[ArgumentValue] = []

    while True:
        for option in command.options:
            options.append(
                OptionValue(option, getattr(namespace, option_dest(level, option.name), None))
            )
        for argument in command.arguments:
            raw = getattr(namespace, argument_dest(level, argument.name), None)
            arguments.append(ArgumentValue(argument, _as_values(raw)))

        child_name = getattr(namespace, command_dest(level + 1), None)
        child = command.get_sub_command(child_name) if child_name else None
        if child is None:
            break
        command = child
        sub_path.append(child.name)
        level += 1

    return Invocation(
        script=script,
        sub_path=tuple(sub_path),
        options=tuple(options),
        arguments=tuple(arguments),
    )


# ---------------------------------------------------------------------------
# Modes
# ---------------------------------------------------------------------------

def run_executed(
    model: CommandModel,
    parser: argparse.ArgumentParser,
    command_args: Sequence[str],
    *,
    shell: str,
    runner: ScriptRunner,
) -> int:
    """Parse *command_args* and run the selected script; return its exit code.

    ``argparse`` prints help and errors itself and exits.
    """
    namespace = parser.parse_args(list(command_args))
    invocation = resolve_invocation(model, namespace)
    logger.debug("Executing %s %s", invocation.script.path, invocation.sub_path)
    return ExecutionService(runner).execute(invocation, shell=shell)


def run_evaluated(
    model: CommandModel,
    parser: argparse.ArgumentParser,
    command_args: Sequence[str],
    *,
    out: TextIO | None = None,
) -> int:
    """Parse *command_args* and write shell text for ``eval`` to *out*."""
    stream = out if out is not None else sys.stdout
    captured = io.StringIO()

    try:
        with redirect_stdout(captured), redirect_stderr(captured):
            namespace = parser.parse_args(list(command_args))
    except SystemExit as exc:
        stream.write(render_echo_script(captured.getvalue()))
        if exc.code is None:
            return exit_codes.SUCCESS
        return exc.code if isinstance(exc.code, int) else exit_codes.USAGE_ERROR

    invocation = resolve_invocation(model, namespace)
    logger.debug("Evaluating %s %s", invocation.script.path, invocation.sub_path)
    stream.write(render_eval_script(invocation))
    return exit_codes.SUCCESS
