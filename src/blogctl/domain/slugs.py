"""Slug pattern and slugification.

The same pattern guards ``slug`` and ``translationKey`` at scaffold time
and at check time, so a post the scaffolder accepts is never rejected
by the validator for its identifiers.
"""

from __future__ import annotations

import re

SLUG_PATTERN: re.Pattern[str] = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

_NON_SLUG_RUN = re.compile(r"[^a-z0-9]+")


def is_valid_slug(value: object) -> bool:
    """Return True when *value* is a kebab-case string."""
    return isinstance(value, str) and SLUG_PATTERN.match(value) is not None


def slugify(value: str) -> str:
    """Turn free text into a kebab-case slug.

    Examples:
        >>> slugify("My Article")
        'my-article'
        >>> slugify("  Swift & SwiftUI: Tips!  ")
        'swift-swiftui-tips'
        >>> slugify("already-a-slug")
        'already-a-slug'
    """
    text = value.strip().lower()
    text = _NON_SLUG_RUN.sub("-", text)
    return text.strip("-")
