"""Launcher entry point and error boundary for easy-cli.

This module is the **sole error boundary** for the entire application.
It catches :class:`~easy_cli.exceptions.EasyCliError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Usage
-----
``easy-cli [options] SOURCE [COMMAND_ARGS ...]``

*SOURCE* is scanned into a command model, a parser is generated from
the model, and *COMMAND_ARGS* are parsed against it.  By default the
result is written to stdout as shell text for ``eval``; with
``--executed`` the selected script is run directly.
"""

from __future__ import annotations

import argparse
import logging
import sys

from easy_cli.cli import exit_codes
from easy_cli.cli.console import console
from easy_cli.config import LauncherConfig, resolve_config
from easy_cli.exceptions import EasyCliError
from easy_cli.version import __version__

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the launcher's own argument parser.

    Everything after *SOURCE* belongs to the generated CLI and is
    collected verbatim into ``command_args``.
    """
    parser = argparse.ArgumentParser(
        prog="easy-cli",
        description="A launcher for annotated scripts.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-n",
        "--name",
        default=None,
        help="Name of the generated CLI, used in help and usage (default: cli).",
    )
    parser.add_argument(
        "-e",
        "--executed",
        action="store_true",
        help="Run the selected script directly instead of emitting shell text for eval.",
    )
    parser.add_argument(
        "--shell",
        default=None,
        help="Shell used to run scripts in executed mode (default: zsh).",
    )
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        default=None,
        help="Number of worker threads used to scan scripts.",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        dest="list_only",
        help="Show the commands found in SOURCE and exit.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )
    parser.add_argument(
        "source",
        metavar="SOURCE",
        nargs="?",
        default=None,
        help="The directory containing the scripts to be called. Launcher options go before it.",
    )
    parser.add_argument(
        "command_args",
        nargs=argparse.REMAINDER,
        help="Arguments for the generated CLI.",
    )
    return parser


def _configure_logging(level: int) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_cli(config: LauncherConfig, command_args: list[str]) -> int:
    """Scan the source directory, build the CLI and dispatch *command_args*."""
    from easy_cli.cli.dispatch import run_evaluated, run_executed
    from easy_cli.cli.parser_builder import build_parser
    from easy_cli.infra.directory_scanner import load_model
    from easy_cli.infra.script_runner import SubprocessScriptRunner

    model = load_model(config.source_dir, max_workers=config.max_workers)
    logger.debug("Model has %d command(s)", len(model))

    if config.list_only:
        from easy_cli.cli.listing import render_model

        return render_model(model)

    parser = build_parser(model, prog=config.cli_name)
    logger.debug("args: %s", " ".join(command_args))

    if config.executed:
        return run_executed(
            model,
            parser,
            command_args,
            shell=config.shell,
            runner=SubprocessScriptRunner(),
        )
    return run_evaluated(model, parser, command_args)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the easy-cli launcher.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.source is None:
        parser.print_help()
        return exit_codes.SUCCESS

    config = resolve_config(
        args.source,
        cli_name=args.name,
        executed=args.executed,
        shell=args.shell,
        jobs=args.jobs,
        verbose=args.verbose,
        list_only=args.list_only,
    )
    _configure_logging(config.log_level)

    return _handle_cli(config, list(args.command_args))


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except EasyCliError as exc:
        console.error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
