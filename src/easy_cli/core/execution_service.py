"""Core execution service — hands a resolved invocation to a script runner.

This service delegates the actual process launch to a
:class:`~easy_cli.core.protocols.ScriptRunner` injected at
construction time.  It is responsible for:

* Building the script argv from the invocation.
* Delegating to the runner.
* Ensuring only :class:`~easy_cli.exceptions.EasyCliError` subclasses
  escape.
"""

from __future__ import annotations

from easy_cli.core.invocation import Invocation, build_script_argv
from easy_cli.core.protocols import ScriptRunner
from easy_cli.exceptions import EasyCliError, ScriptExecutionError


class ExecutionService:
    """Stateless service that runs the script behind an invocation.

    Parameters
    ----------
    runner:
        Any object satisfying the :class:`ScriptRunner` protocol.
    """

    def __init__(self, runner: ScriptRunner) -> None:
        self._runner: ScriptRunner = runner

    def execute(self, invocation: Invocation, *, shell: str) -> int:
        """Run the selected script with *shell*; return its exit code.

        Raises
        ------
        ScriptExecutionError
            When the script cannot be started.
        """
        argv = build_script_argv(invocation)
        try:
            return self._runner.run(shell, invocation.script.path, argv)
        except EasyCliError:
            raise
        except Exception as exc:
            raise ScriptExecutionError(
                f"Unexpected error running {invocation.script.path}: {exc}",
            ) from exc
