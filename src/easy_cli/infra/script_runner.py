"""Subprocess-backed implementation of :class:`~easy_cli.core.protocols.ScriptRunner`.

This module is the **only** place in the codebase that starts a
process.  Launch failures are caught here and re-raised as
:class:`~easy_cli.exceptions.ScriptExecutionError`; a script that runs
and fails is not an error — its exit code is returned.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from easy_cli.exceptions import ScriptExecutionError

logger = logging.getLogger(__name__)


class SubprocessScriptRunner:
    """Concrete :class:`ScriptRunner` that runs ``shell script argv...``.

    The child inherits stdin, stdout and stderr, so interactive scripts
    behave as if called directly.
    """

    def run(self, shell: str, script: Path, argv: Sequence[str]) -> int:
        """Run *script* with *shell* and wait for it to finish.

        Raises
        ------
        ScriptExecutionError
            When *shell* cannot be found or started.
        """
        command = [shell, str(script), *argv]
        logger.debug("Running %s", command)

        try:
            completed = subprocess.run(command, check=False)
        except FileNotFoundError as exc:
            raise ScriptExecutionError(
                f"Shell not found: {shell}",
                hint="Install it or choose another one with --shell / EASY_CLI_SHELL.",
            ) from exc
        except OSError as exc:
            raise ScriptExecutionError(
                f"Cannot run {script} with {shell}: {exc.strerror or exc}",
            ) from exc

        logger.debug("%s exited with %d", script, completed.returncode)
        return completed.returncode
