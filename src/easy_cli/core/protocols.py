"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol


class ScriptRunner(Protocol):
    """Contract for backends that execute a script file.

    Any object that implements :meth:`run` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def run(self, shell: str, script: Path, argv: Sequence[str]) -> int:
        """Run ``shell script argv...`` and return its exit code.

        Implementations must map all backend-specific exceptions to
        :class:`~easy_cli.exceptions.EasyCliError` subclasses.

        Raises
        ------
        ScriptExecutionError
            When the shell cannot be started.
        """
        ...  # pragma: no cover
