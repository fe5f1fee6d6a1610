"""Per-keyword detail parsers for annotation tags.

Each parser receives the remainder of a tag line (everything after the
keyword, newline excluded) and returns the matching tag, or ``None``
when the remainder carries no usable payload.  Parsers never raise:
a malformed tag is simply not a tag.

Detail grammar
--------------
* ``name`` / ``sub``:  ``<identifier> [ignored text]``
* ``about``:           ``[text]``
* ``arg`` / ``vararg``: ``<name> [true|false] [<type>] [description]``
* ``opt``:             ``<name> ['c'] [true|false] [description]``
* ``ignore``:          anything (discarded)
"""

from __future__ import annotations

import re
from collections.abc import Callable

from easy_cli.core.models import ArgType, CommandArgument, CommandOption
from easy_cli.core.tags import (
    ABOUT_TAG,
    ARG_TAG,
    IGNORE_TAG,
    NAME_TAG,
    OPT_TAG,
    SUB_TAG,
    VAR_ARG_TAG,
    AboutTag,
    ArgTag,
    IgnoreTag,
    NameTag,
    OptTag,
    SubTag,
    Tag,
)

TagParser = Callable[[str], "Tag | None"]

_BOOL = re.compile(r"(true|false)(?=\s|$)", re.IGNORECASE)
_ARG_TYPE = re.compile(r"<([^>]+)>")
_SHORT_FLAG = re.compile(r"'(\S)'")

_SPACE = " \t"


# ---------------------------------------------------------------------------
# Token helpers
# ---------------------------------------------------------------------------

def _split_name(remainder: str) -> tuple[str, str] | None:
    """Split off the leading whitespace-delimited token."""
    parts = remainder.split(maxsplit=1)
    if not parts:
        return None
    rest = parts[1] if len(parts) > 1 else ""
    return parts[0], rest


def _take(pattern: re.Pattern[str], text: str) -> tuple[re.Match[str] | None, str]:
    """Match *pattern* at the start of *text*; return the match and what follows."""
    match = pattern.match(text)
    if match is None:
        return None, text
    return match, text[match.end():].lstrip(_SPACE)


def _take_bool(text: str) -> tuple[bool | None, str]:
    match, rest = _take(_BOOL, text)
    if match is None:
        return None, text
    return match.group(1).lower() == "true", rest


def _description(text: str) -> str | None:
    stripped = text.strip()
    return stripped or None


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------

def parse_ignore(remainder: str) -> Tag | None:
    return IgnoreTag()


def parse_name(remainder: str) -> Tag | None:
    split = _split_name(remainder)
    if split is None:
        return None
    return NameTag(name=split[0])


def parse_sub(remainder: str) -> Tag | None:
    split = _split_name(remainder)
    if split is None:
        return None
    return SubTag(name=split[0], path=None)


def parse_about(remainder: str) -> Tag | None:
    """The whole remainder, left-trimmed, is the description (may be empty)."""
    return AboutTag(text=remainder.lstrip(_SPACE))


def _parse_argument(remainder: str, *, variadic: bool) -> Tag | None:
    split = _split_name(remainder)
    if split is None:
        return None
    name, rest = split

    optional, rest = _take_bool(rest)
    type_match, rest = _take(_ARG_TYPE, rest)
    arg_type = (
        ArgType.from_token(type_match.group(1))
        if type_match is not None
        else ArgType.UNKNOWN
    )

    return ArgTag(
        CommandArgument(
            name=name,
            optional=bool(optional),
            variadic=variadic,
            arg_type=arg_type,
            description=_description(rest),
        )
    )


def parse_arg(remainder: str) -> Tag | None:
    return _parse_argument(remainder, variadic=False)


def parse_vararg(remainder: str) -> Tag | None:
    return _parse_argument(remainder, variadic=True)


def parse_opt(remainder: str) -> Tag | None:
    """Parse an option; a short flag is only recognised inside quotes.

    ``fooBar A great option`` therefore keeps ``A`` in the description.
    """
    split = _split_name(remainder)
    if split is None:
        return None
    name, rest = split

    short_match, rest = _take(_SHORT_FLAG, rest)
    has_parameter, rest = _take_bool(rest)

    return OptTag(
        CommandOption(
            name=name,
            short=short_match.group(1) if short_match is not None else None,
            has_parameter=bool(has_parameter),
            description=_description(rest),
        )
    )


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

TAG_PARSERS: dict[str, TagParser] = {
    IGNORE_TAG: parse_ignore,
    NAME_TAG: parse_name,
    SUB_TAG: parse_sub,
    ABOUT_TAG: parse_about,
    ARG_TAG: parse_arg,
    VAR_ARG_TAG: parse_vararg,
    OPT_TAG: parse_opt,
}


def parse_tag(keyword: str, remainder: str) -> Tag | None:
    """Parse *remainder* with the parser registered for *keyword*.

    Unknown keywords yield ``None``.
    """
    parser = TAG_PARSERS.get(keyword)
    if parser is None:
        return None
    return parser(remainder)
