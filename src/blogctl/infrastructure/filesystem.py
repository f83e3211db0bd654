"""Filesystem operations for blog content.

INVARIANT: Files are truth. Nothing here caches or indexes content;
every call reads the disk as it is now.

Pure parsing/rendering utilities live in :mod:`blogctl.domain.frontmatter`
(correct dependency direction: infrastructure -> domain). This module
handles actual file I/O and post discovery.
"""

from __future__ import annotations

from pathlib import Path

# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------


def find_post_files(content_root: Path) -> list[Path]:
    """Discover every ``*.md`` file under *content_root*, recursively.

    Hidden directories (``.git``, ``.obsidian`` ...) are skipped. The
    result is sorted so repeated runs visit files in the same order.
    Returns an empty list when *content_root* does not exist.
    """
    if not content_root.is_dir():
        return []

    results: list[Path] = []
    for path in content_root.rglob("*.md"):
        if not path.is_file():
            continue
        relative = path.relative_to(content_root)
        if any(part.startswith(".") for part in relative.parts[:-1]):
            continue
        results.append(path)
    return sorted(results)


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


def read_post_file(path: Path) -> str:
    """Read a post as UTF-8 text."""
    return path.read_text(encoding="utf-8")


def write_post_file(path: Path, content: str) -> None:
    """Write a post as UTF-8 text, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def write_binary_file(path: Path, data: bytes) -> None:
    """Write raw bytes (hero images), creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
