"""TagStore — the persisted tag taxonomy.

The store is a single UTF-8 JSON file holding a sorted array of
lowercase kebab-case tags. Access follows load -> mutate in memory ->
save, with whole-file replacement on save. Single writer; no locking.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from blogctl.domain.tags import merge_tags

logger = logging.getLogger(__name__)


class TagStoreError(Exception):
    """The tag file exists but is not a JSON array of strings."""


class TagStore:
    """Repository over one tag JSON file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[str]:
        """Return the known tags; a missing file means no tags yet."""
        if not self._path.exists():
            return []
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            msg = f"Invalid JSON in {self._path}: {exc}"
            raise TagStoreError(msg) from exc
        if not isinstance(data, list) or not all(isinstance(tag, str) for tag in data):
            msg = f"Tag file must contain a JSON array of strings: {self._path}"
            raise TagStoreError(msg)
        return data

    def save(self, tags: Iterable[str]) -> None:
        """Replace the file with *tags*, pretty-printed with a trailing newline."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(list(tags), indent=2, ensure_ascii=False)
        self._path.write_text(payload + "\n", encoding="utf-8")

    def merge(self, new_tags: Iterable[str]) -> list[str]:
        """Add *new_tags* to the store, returning the ones actually introduced.

        The file is rewritten only when something new was added, so a
        redundant merge leaves it byte-identical.
        """
        existing = self.load()
        known = {tag.lower() for tag in existing}
        added: list[str] = []
        for tag in new_tags:
            lowered = tag.lower()
            if lowered and lowered not in known:
                known.add(lowered)
                added.append(lowered)

        if not added:
            logger.debug("No new tags for %s", self._path)
            return []

        self.save(merge_tags(existing, added))
        logger.debug("Added %d tag(s) to %s", len(added), self._path)
        return added
