"""Launcher exit codes.

In executed mode the launcher exits with whatever the script returned;
these values cover every exit the launcher decides itself.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Command model built and dispatched, or help/version shown."""

GENERAL_ERROR: int = 1
"""An :class:`~easy_cli.exceptions.EasyCliError` was reported to the user."""

USAGE_ERROR: int = 2
"""The generated parser rejected the command line (``argparse`` convention)."""

UNEXPECTED_ERROR: int = 2
"""Any other exception reached the error boundary."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""
