"""Shared pytest fixtures and test helpers for blogctl tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from blogctl.config.settings import BlogSettings
from blogctl.domain.frontmatter import render_frontmatter
from blogctl.domain.posts import placeholder_hero_png

CONTENT_ROOT = Path("src/content/blog")
TAGS_FILE = Path("src/data/tags.json")


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host BLOGCTL_* variables out of every test."""
    for name in ("BLOGCTL_CONFIG", "BLOGCTL_CHECK__STRICT", "BLOGCTL_PROJECT_ROOT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo handlers the CLI installs so they never outlive a CliRunner stream."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    blog = logging.getLogger("blogctl")
    blog_level = blog.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    blog.setLevel(blog_level)


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary blog repository with the default content layout."""
    (tmp_path / CONTENT_ROOT).mkdir(parents=True)
    (tmp_path / TAGS_FILE).parent.mkdir(parents=True)
    return tmp_path


@pytest.fixture
def settings(project_root: Path) -> BlogSettings:
    return BlogSettings.from_cli(project_root=project_root)


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp project so the CLI resolves paths inside it.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    monkeypatch.chdir(project_root)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def post_fields(**overrides: str | list[str]) -> dict[str, str | list[str]]:
    """A valid English post header with keyword overrides applied."""
    fields: dict[str, str | list[str]] = {
        "title": "My Article",
        "description": "TODO",
        "pubDate": "Mar 5 2025",
        "heroImage": "./hero.png",
        "lang": "en",
        "translationKey": "my-article",
        "slug": "my-article",
        "tags": ["swift"],
    }
    fields.update(overrides)
    return fields


def write_post(
    project_root: Path,
    relative: str,
    fields: dict[str, str | list[str]] | None = None,
    *,
    drop: tuple[str, ...] = (),
    hero: bool = True,
    raw: str | None = None,
) -> Path:
    """Write a post under the content root and return its path.

    *raw* writes the text verbatim; otherwise *fields* (default: a valid
    header) minus *drop* are rendered. A hero image is written next to
    the post unless *hero* is False.
    """
    path = project_root / CONTENT_ROOT / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    if raw is None:
        header = {k: v for k, v in (fields or post_fields()).items() if k not in drop}
        raw = render_frontmatter(header, "Body.\n")
    path.write_text(raw, encoding="utf-8")
    if hero:
        (path.parent / "hero.png").write_bytes(placeholder_hero_png())
    return path


def write_tags(project_root: Path, tags: list[str]) -> Path:
    path = project_root / TAGS_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(tags, indent=2) + "\n", encoding="utf-8")
    return path
