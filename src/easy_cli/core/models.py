"""Domain models for easy-cli.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  Ordered collections are tuples, so a
command tree cannot change once the assembler has produced it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


# ---------------------------------------------------------------------------
# Argument type
# ---------------------------------------------------------------------------

class ArgType(Enum):
    """Kind of value a positional argument expects."""

    UNKNOWN = "unknown"
    PATH = "path"
    DIR = "dir"
    FILE = "file"

    @classmethod
    def from_token(cls, token: str) -> ArgType:
        """Map a ``<type>`` token case-insensitively; unmatched → ``UNKNOWN``."""
        try:
            return cls(token.strip().lower())
        except ValueError:
            return cls.UNKNOWN


# ---------------------------------------------------------------------------
# Arguments and options
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandArgument:
    """A positional argument of a command.

    A variadic argument should be the last one of its command; this is
    not enforced here.
    """

    name: str
    optional: bool = False
    variadic: bool = False
    arg_type: ArgType = ArgType.UNKNOWN
    description: str | None = None


@dataclass(frozen=True, slots=True)
class CommandOption:
    """A ``--flag`` style option of a command."""

    name: str
    short: str | None = None
    """Single-character short flag, or ``None``."""

    has_parameter: bool = False
    description: str | None = None


# ---------------------------------------------------------------------------
# Command tree
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandDescription:
    """One node of the assembled command tree.

    Each node owns its children by value; traversal is always top-down.
    """

    name: str
    description: str | None = None
    options: tuple[CommandOption, ...] = ()
    arguments: tuple[CommandArgument, ...] = ()
    sub_commands: tuple[CommandDescription, ...] = ()

    @property
    def has_sub_commands(self) -> bool:
        return len(self.sub_commands) > 0

    def get_sub_command(self, name: str) -> CommandDescription | None:
        """Return the direct child called *name*, or ``None``."""
        return next((sub for sub in self.sub_commands if sub.name == name), None)


@dataclass(frozen=True, slots=True)
class ScriptCommand:
    """A command backed by a script file.

    Only roots are script-backed; every nested node is an embedded
    :class:`CommandDescription` handled inside the same script.
    """

    path: Path
    command: CommandDescription

    @property
    def name(self) -> str:
        return self.command.name


@dataclass(frozen=True, slots=True)
class CommandModel:
    """Immutable, ordered collection of :class:`ScriptCommand` entries."""

    commands: tuple[ScriptCommand, ...]

    def __len__(self) -> int:
        return len(self.commands)

    def __bool__(self) -> bool:
        return len(self.commands) > 0

    def get_command(self, name: str) -> ScriptCommand | None:
        """Return the script command called *name*, or ``None``."""
        return next((cmd for cmd in self.commands if cmd.name == name), None)
