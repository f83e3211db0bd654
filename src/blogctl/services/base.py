"""BaseService — shared foundation for blogctl services."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from blogctl.config.settings import BlogSettings


class BaseService:
    """Base for service-layer classes.

    Every service receives the resolved :class:`BlogSettings` and reads
    paths and rules from it; nothing else is shared between services.
    """

    def __init__(self, settings: BlogSettings) -> None:
        self._settings = settings

    @property
    def settings(self) -> BlogSettings:
        return self._settings

    def _display_path(self, path: Path) -> str:
        """Show *path* relative to the project root when it lives inside it."""
        try:
            return str(path.relative_to(self._settings.project_root))
        except ValueError:
            return str(path)
