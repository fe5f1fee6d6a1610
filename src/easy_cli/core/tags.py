"""Annotation tags recognised by the scanner.

A tag is one ``# @keyword ...`` comment line turned into a typed value.
The set of kinds is closed; :data:`Tag` is their union.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from easy_cli.core.models import CommandArgument, CommandOption

IGNORE_TAG = "ignore"
NAME_TAG = "name"
SUB_TAG = "sub"
ABOUT_TAG = "about"
ARG_TAG = "arg"
VAR_ARG_TAG = "vararg"
OPT_TAG = "opt"


@dataclass(frozen=True, slots=True)
class IgnoreTag:
    """Excludes the whole file from the model."""


@dataclass(frozen=True, slots=True)
class NameTag:
    """Overrides the command's display name."""

    name: str


@dataclass(frozen=True, slots=True)
class SubTag:
    """Starts a nested sub-command."""

    name: str
    path: str | None = None
    """Reserved for an external script reference; never set by the grammar."""


@dataclass(frozen=True, slots=True)
class AboutTag:
    """Free-text description of the current command."""

    text: str


@dataclass(frozen=True, slots=True)
class ArgTag:
    argument: CommandArgument


@dataclass(frozen=True, slots=True)
class OptTag:
    option: CommandOption


Tag = Union[IgnoreTag, NameTag, SubTag, AboutTag, ArgTag, OptTag]
