"""Infrastructure layer — filesystem and process integration.

This layer reads script files, enumerates the source directory and
launches scripts.  Every raw ``OSError`` or ``subprocess`` failure is
caught here and re-raised as a
:class:`~easy_cli.exceptions.EasyCliError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering); logging only.
* Must expose clean, typed interfaces consumed by the core and CLI layers.
"""

from easy_cli.infra.directory_scanner import load_model
from easy_cli.infra.script_loader import load_script_command, read_script
from easy_cli.infra.script_runner import SubprocessScriptRunner

__all__: list[str] = [
    "SubprocessScriptRunner",
    "load_model",
    "load_script_command",
    "read_script",
]
