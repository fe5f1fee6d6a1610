"""Shared pytest fixtures and configuration for the easy-cli test suite.

Guidelines
----------
* No test starts a real shell — the script runner is mocked at the
  subprocess boundary.
* Core tests must be pure — no side effects.
* Filesystem tests use ``tmp_path`` only.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

ScriptWriter = Callable[..., Path]


@pytest.fixture
def script_dir(tmp_path: Path) -> Path:
    """An empty directory to hold test scripts."""
    directory = tmp_path / "scripts"
    directory.mkdir()
    return directory


@pytest.fixture
def write_script(script_dir: Path) -> ScriptWriter:
    """Factory that writes ``content`` to ``script_dir / name``."""

    def _write(name: str, content: str = "") -> Path:
        path = script_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


MULTI_SCRIPT = """\
#!/usr/bin/env zsh

# Demonstrates the default (non-embedded) mode, whereby easy-cli calls this script and passes the
# sub-command as the first argument, and then the args and options in the order they were defined.

# @about A command with multiple sub-commands

# Each @sub tag starts a new sub-command, tags after it are applied to
# that sub-command.

# @sub one
# @about Prints a message
# @opt option 'o' An option for this sub-command
# @arg Message Will be printed
# This sub-command will accept one arguments
one() {
  [[ $1 == "true" ]] && echo "option set" || echo "option not set"

  echo "Sub-command 'one' called with message: $2"
}

# @sub two
# This sub-command will accept no arguments
two() {
  echo "two: $@"
}

"$1" "${@:2}"
"""
"""The ``multi.sh`` example: a root command with two embedded sub-commands."""

LIST_SCRIPT = """\
#!/usr/bin/env zsh

# @about List files in the current directory
# @arg directory <dir> The directory to list files in

ls -ltr $1"""
"""The ``list.sh`` example; note the missing final line break."""


@pytest.fixture
def multi_script_text() -> str:
    return MULTI_SCRIPT


@pytest.fixture
def list_script_text() -> str:
    return LIST_SCRIPT
