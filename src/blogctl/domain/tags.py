"""Tag domain logic — normalisation, merging, and menu selection."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from blogctl.domain.slugs import slugify

_MENU_INDEX = re.compile(r"^[0-9]+$")


@dataclass(frozen=True)
class TagSelection:
    """Tags picked for a post from one line of author input.

    Attributes:
        tags: Tags for the post, in input order, without duplicates.
        new_tags: The subset of *tags* that the tag store does not know yet.
        ignored: Input tokens that resolved to nothing (out-of-range menu
            numbers, free text that slugifies to an empty string).
    """

    tags: list[str] = field(default_factory=list)
    new_tags: list[str] = field(default_factory=list)
    ignored: list[str] = field(default_factory=list)


def normalize_tag(raw: str) -> str:
    """Normalise free text into a kebab-case tag ("" if nothing is left)."""
    return slugify(raw)


def merge_tags(existing: Iterable[str], new: Iterable[str]) -> list[str]:
    """Union two tag collections, lowercased, de-duplicated, and sorted.

    Examples:
        >>> merge_tags(["swift", "python"], ["new-feature", "Swift"])
        ['new-feature', 'python', 'swift']
    """
    return sorted({tag.lower() for tag in (*existing, *new)})


def resolve_tag_selection(raw_input: str, available: Sequence[str]) -> TagSelection:
    """Resolve a comma-separated tag answer against the numbered menu.

    All-digit tokens are 1-based indices into *available*; any other
    token is treated as a free-text tag and normalised.

    Examples:
        >>> resolve_tag_selection("1, new-feature", ["swift"]).tags
        ['swift', 'new-feature']
    """
    known = {tag.lower() for tag in available}
    tags: list[str] = []
    new_tags: list[str] = []
    ignored: list[str] = []

    for token in (part.strip() for part in raw_input.split(",")):
        if not token:
            continue
        if _MENU_INDEX.match(token):
            index = int(token) - 1
            if 0 <= index < len(available):
                tag = available[index]
            else:
                ignored.append(token)
                continue
        else:
            tag = normalize_tag(token)
            if not tag:
                ignored.append(token)
                continue
        if tag in tags:
            continue
        tags.append(tag)
        if tag not in known:
            new_tags.append(tag)

    return TagSelection(tags=tags, new_tags=new_tags, ignored=ignored)
