"""Command naming helpers."""

from __future__ import annotations

from pathlib import PurePath


def default_command_name(path: str | PurePath) -> str:
    """Return the file name of *path* with its last suffix stripped.

    ``list.sh`` → ``list``, ``backup.tar.sh`` → ``backup.tar``,
    ``deploy`` → ``deploy``.
    """
    return PurePath(path).stem
