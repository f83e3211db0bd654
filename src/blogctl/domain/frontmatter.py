"""Restricted frontmatter grammar for blog posts.

Deliberately *not* YAML. A header is a ``---`` delimited block of
independent lines, each one of:

- ``key: value``            plain scalar
- ``key: 'value'``          quoted scalar (single or double quotes)
- ``key: [a, 'b', "c"]``    inline list
- ``- item``                bullet appended to the most recent key

Anything else is skipped. Keeping the grammar this small keeps posts
diffable and lets the writer below guarantee a lossless read-back.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence

FrontmatterValue = str | list[str]
Frontmatter = dict[str, FrontmatterValue]

DELIMITER = "---"

_KEY_LINE = re.compile(r"^([A-Za-z0-9_]+):\s*(.*)$")
_BULLET_LINE = re.compile(r"^\s*-\s+(.*)$")
_QUOTES = ("'", "\"")


def _unquote(value: str) -> str:
    """Strip a leading and a trailing quote, each independently.

    A fully single-quoted scalar also reads the ``''`` escape back as
    ``'``.
    """
    if len(value) >= 2 and value[0] == value[-1] == "'":
        return value[1:-1].replace("''", "'")
    if value.startswith(_QUOTES):
        value = value[1:]
    if value.endswith(_QUOTES):
        value = value[:-1]
    return value


def _parse_inline_list(raw: str) -> list[str]:
    inner = raw[1:-1].strip()
    if not inner:
        return []
    return [_unquote(item.strip()) for item in inner.split(",")]


def split_frontmatter(content: str) -> tuple[str, str] | None:
    """Split *content* into ``(header_block, body)``.

    Returns None when the first line is not exactly ``---`` or the
    closing delimiter line is missing. Handles ``\\r\\n`` line endings.
    """
    normalized = content.replace("\r\n", "\n")
    lines = normalized.split("\n")
    if not lines or lines[0] != DELIMITER:
        return None

    for i, line in enumerate(lines[1:], start=1):
        if line.rstrip() == DELIMITER:
            header = "\n".join(lines[1:i])
            body = "\n".join(lines[i + 1 :])
            return header, body
    return None


def parse_frontmatter(content: str) -> Frontmatter | None:
    """Parse the frontmatter header of a markdown document.

    Returns a mapping of key to scalar string or list of strings, or
    None when the document has no frontmatter. Never raises on malformed
    lines; they are skipped.

    Examples:
        >>> parse_frontmatter("---\\nslug: 'hello'\\ntags: [a, b]\\n---\\nBody")
        {'slug': 'hello', 'tags': ['a', 'b']}
        >>> parse_frontmatter("No header") is None
        True
    """
    parts = split_frontmatter(content)
    if parts is None:
        return None
    header, _body = parts

    data: Frontmatter = {}
    current_key: str | None = None
    for line in header.split("\n"):
        bullet = _BULLET_LINE.match(line)
        if bullet and current_key is not None:
            item = _unquote(bullet.group(1).strip())
            existing = data.get(current_key)
            if isinstance(existing, list):
                existing.append(item)
            elif existing:
                data[current_key] = [existing, item]
            else:
                data[current_key] = [item]
            continue

        match = _KEY_LINE.match(line)
        if match is None:
            continue
        key, raw = match.group(1), match.group(2).strip()
        current_key = key
        if raw.startswith("[") and raw.endswith("]"):
            data[key] = _parse_inline_list(raw)
        else:
            data[key] = _unquote(raw)
    return data


def _quote(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def _render_value(value: str | Sequence[str]) -> str:
    if isinstance(value, str):
        return _quote(value)
    return "[" + ", ".join(_quote(item) for item in value) + "]"


def render_frontmatter(fields: Mapping[str, str | Sequence[str]], body: str) -> str:
    """Render *fields* as a header followed by *body*.

    Keys keep their mapping order. Scalars are single-quoted and lists
    are written inline, so :func:`parse_frontmatter` reads back the same
    values.
    """
    lines = [DELIMITER]
    lines.extend(f"{key}: {_render_value(value)}" for key, value in fields.items())
    lines.append(DELIMITER)
    return "\n".join(lines) + "\n\n" + body
