"""Core / service layer — tag scanning, command assembly, invocation rendering.

Rules
-----
* No ``print()`` calls and no logging.
* No filesystem, process or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from easy_cli.core.assembler import assemble_command, parse_script
from easy_cli.core.execution_service import ExecutionService
from easy_cli.core.grouping import group_tags
from easy_cli.core.models import (
    ArgType,
    CommandArgument,
    CommandDescription,
    CommandModel,
    CommandOption,
    ScriptCommand,
)
from easy_cli.core.protocols import ScriptRunner
from easy_cli.core.scanner import iter_tags, scan_tags

__all__: list[str] = [
    "ArgType",
    "CommandArgument",
    "CommandDescription",
    "CommandModel",
    "CommandOption",
    "ExecutionService",
    "ScriptCommand",
    "ScriptRunner",
    "assemble_command",
    "group_tags",
    "iter_tags",
    "parse_script",
    "scan_tags",
]
