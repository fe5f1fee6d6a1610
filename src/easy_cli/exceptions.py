"""Custom exception hierarchy for easy-cli.

All exceptions that cross layer boundaries must inherit from
:class:`EasyCliError`.  Raw ``OSError`` / ``subprocess`` failures must
NEVER propagate beyond the infrastructure layer — they are caught
there and re-raised as a typed subclass defined here.

Malformed annotation tags are *not* errors: the scanner drops them
silently.  Only structural problems surface as exceptions.

Hierarchy
---------
EasyCliError
├── CommandAssemblyError
├── ScriptReadError
├── SourceDirectoryError
├── ScriptExecutionError
├── ConfigurationError
└── EnvironmentError
"""

from __future__ import annotations


class EasyCliError(Exception):
    """Base exception for all easy-cli errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Model assembly --------------------------------------------------------

class CommandAssemblyError(EasyCliError):
    """Raised when a tag group cannot be folded into a command."""


# --- Filesystem --------------------------------------------------------------

class ScriptReadError(EasyCliError):
    """Raised when a script file cannot be read or decoded."""


class SourceDirectoryError(EasyCliError):
    """Raised when the script source directory is missing or unusable."""


# --- Execution ---------------------------------------------------------------

class ScriptExecutionError(EasyCliError):
    """Raised when the target script cannot be started."""


# --- Configuration / environment ---------------------------------------------

class ConfigurationError(EasyCliError):
    """Raised when a configuration value is invalid."""


class EnvironmentError(EasyCliError):
    """Raised when a required runtime dependency is not available."""
