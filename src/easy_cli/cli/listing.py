"""``easy-cli --list`` — render the assembled command model.

Shows one row per command and sub-command with its arguments, options
and description, so script authors can check how their annotations
were understood.  Rendered as a Rich table, or as plain text when Rich
is not installed.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator

from easy_cli.cli import exit_codes
from easy_cli.cli.console import console
from easy_cli.cli.parser_builder import command_help
from easy_cli.core.models import ArgType, CommandArgument, CommandDescription, CommandModel, CommandOption

Row = tuple[str, str, str, str]


# ---------------------------------------------------------------------------
# Row builders (pure)
# ---------------------------------------------------------------------------

def format_argument(argument: CommandArgument) -> str:
    """``<name>`` when required, ``[name]`` when optional; ``...`` marks variadic."""
    text = argument.name
    if argument.arg_type is not ArgType.UNKNOWN:
        text = f"{text}:{argument.arg_type.value}"
    if argument.variadic:
        text = f"{text}..."
    return f"[{text}]" if argument.optional else f"<{text}>"


def format_option(option: CommandOption) -> str:
    text = f"--{option.name}"
    if option.short is not None:
        text = f"-{option.short}, {text}"
    if option.has_parameter:
        text = f"{text} VALUE"
    return text


def _walk(command: CommandDescription, prefix: str) -> Iterator[Row]:
    path = f"{prefix} {command.name}".strip()
    yield (
        path,
        " ".join(format_argument(argument) for argument in command.arguments),
        "; ".join(format_option(option) for option in command.options),
        command_help(command),
    )
    for child in command.sub_commands:
        yield from _walk(child, path)


def model_rows(model: CommandModel) -> list[Row]:
    """Flatten *model* depth-first into (command, arguments, options, description)."""
    rows: list[Row] = []
    for script in model.commands:
        rows.extend(_walk(script.command, ""))
    return rows


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _print_plain_table(rows: list[Row]) -> None:
    """Render the listing without Rich."""
    print(f"{'Command':<24} {'Arguments':<24} {'Options':<24} Description", file=sys.stderr)
    print("-" * 88, file=sys.stderr)
    for path, arguments, options, description in rows:
        print(f"{path:<24} {arguments:<24} {options:<24} {description}", file=sys.stderr)


def render_model(model: CommandModel) -> int:
    """Print the command model; always returns :data:`exit_codes.SUCCESS`."""
    rows = model_rows(model)
    if not rows:
        console.print("No commands found.")
        return exit_codes.SUCCESS

    try:
        from rich.markup import escape
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_table(rows)
        return exit_codes.SUCCESS

    table = Table(
        title="Commands",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Command", style="bold")
    table.add_column("Arguments")
    table.add_column("Options")
    table.add_column("Description")

    for row in rows:
        # Argument summaries use [...] which Rich would read as markup.
        table.add_row(*(escape(cell) for cell in row))

    console.print(table)
    return exit_codes.SUCCESS
