"""Line-oriented scanner that extracts annotation tags from script text.

A tag line is: optional indentation, the comment character ``#``,
optional blanks, ``@``, a keyword (no whitespace, no hyphen), then the
keyword-specific remainder.  Every other line contributes nothing.

Tags never span lines, and the final line is scanned whether or not it
ends with a line break.  Lines end at ``\n`` only (a preceding ``\r`` is
dropped); form feeds and Unicode line separators are ordinary characters.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from easy_cli.core.tag_parsers import parse_tag
from easy_cli.core.tags import Tag

COMMENT_CHAR = "#"
ANNOTATION_CHAR = "@"

_KEYWORD = re.compile(r"[^\s-]+")


def scan_line(line: str) -> Tag | None:
    """Return the tag carried by a single *line*, or ``None``."""
    stripped = line.lstrip()
    if not stripped.startswith(COMMENT_CHAR):
        return None

    body = stripped[len(COMMENT_CHAR):].lstrip(" \t")
    if not body.startswith(ANNOTATION_CHAR):
        return None

    match = _KEYWORD.match(body, len(ANNOTATION_CHAR))
    if match is None:
        return None

    return parse_tag(match.group(0), body[match.end():])


def iter_tags(text: str) -> Iterator[Tag]:
    """Yield recognised tags in source order."""
    for line in text.split("\n"):
        tag = scan_line(line.rstrip("\r"))
        if tag is not None:
            yield tag


def scan_tags(text: str) -> list[Tag]:
    """Return every recognised tag of *text* as a list."""
    return list(iter_tags(text))
