"""Partition a flat tag stream into per-command groups.

Group 0 holds every tag before the first ``@sub``; each later group
starts with exactly one :class:`~easy_cli.core.tags.SubTag` and runs up
to the next one.  ``len(groups) == 1 + number of sub tags`` always
holds, including for an empty stream.
"""

from __future__ import annotations

from collections.abc import Iterable

from easy_cli.core.tags import SubTag, Tag


def group_tags(tags: Iterable[Tag]) -> list[list[Tag]]:
    """Fold *tags* into groups, starting a new group at every sub tag."""
    groups: list[list[Tag]] = [[]]
    for tag in tags:
        if isinstance(tag, SubTag):
            groups.append([tag])
        else:
            groups[-1].append(tag)
    return groups
