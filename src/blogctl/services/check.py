"""CheckService — pre-publish content validation.

Single read-only pass following the linter pattern: discover every post,
run every rule on every file, report every issue. Nothing is modified.

Core rules (always on): frontmatter present, ``slug`` shape,
``translationKey`` shape, ``pubDate`` parses, ``heroImage`` exists.
Strict rules (opt-in): translation pairing, ``lang`` enum,
``updatedDate`` parses, ``tags`` shape, ``title`` present.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from blogctl.domain.dates import parse_pub_date
from blogctl.domain.frontmatter import Frontmatter, parse_frontmatter
from blogctl.domain.slugs import is_valid_slug
from blogctl.infrastructure.filesystem import find_post_files, read_post_file
from blogctl.services.base import BaseService
from blogctl.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

Issue = dict[str, str]
IssueCallback = Callable[[Issue], None]

# Default ``lang`` when a post omits it.
DEFAULT_LANG = "en"

# ---------------------------------------------------------------------------
# Rule identifiers
# ---------------------------------------------------------------------------

RULE_READ = "read"
RULE_FRONTMATTER = "frontmatter"
RULE_SLUG = "slug"
RULE_TRANSLATION_KEY = "translation_key"
RULE_PUB_DATE = "pub_date"
RULE_HERO_IMAGE = "hero_image"
RULE_TITLE = "title"
RULE_LANG = "lang"
RULE_UPDATED_DATE = "updated_date"
RULE_TAGS = "tags"
RULE_TRANSLATION = "translation"


def format_issue(issue: Issue) -> str:
    """Render an issue as ``<reason>: <path>``."""
    return f"{issue['reason']}: {issue['path']}"


class CheckService(BaseService):
    """Validates every post under the content root."""

    def check(
        self,
        *,
        strict: bool | None = None,
        on_issue: IssueCallback | None = None,
    ) -> ServiceResult:
        """Validate all posts.

        Args:
            strict: Also run the strict rule set. Defaults to the
                ``[check] strict`` setting.
            on_issue: Called with each issue as soon as it is found.
        """
        if strict is None:
            strict = self._settings.check.strict

        content_root = self._settings.content_root
        files = find_post_files(content_root)
        if not files:
            return ServiceResult(
                ok=False,
                op="check",
                error=ServiceError(
                    code="NO_POSTS",
                    message=f"No markdown files found under {self._display_path(content_root)}.",
                ),
            )

        logger.debug("Checking %d post file(s) under %s", len(files), content_root)
        issues: list[Issue] = []

        def report(rule: str, reason: str, path: str) -> None:
            issue = {"rule": rule, "reason": reason, "path": path}
            issues.append(issue)
            logger.debug("%s: %s", reason, path)
            if on_issue is not None:
                on_issue(issue)

        parsed: list[tuple[Path, Frontmatter]] = []
        for path in files:
            fm = self._check_file(path, report, strict=strict)
            if fm is not None:
                parsed.append((path, fm))

        if strict:
            self._check_translations(parsed, report)

        files_with_issues = len({issue["path"] for issue in issues})
        if issues:
            return ServiceResult(
                ok=False,
                op="check",
                error=ServiceError(
                    code="CONTENT_INVALID",
                    message=f"{len(issues)} issue(s) found across {len(files)} file(s).",
                    detail={
                        "files": len(files),
                        "files_with_issues": files_with_issues,
                        "count": len(issues),
                        "issues": issues,
                    },
                ),
            )

        return ServiceResult(
            ok=True,
            op="check",
            data={"files": len(files), "count": 0, "issues": [], "strict": strict},
        )

    # ------------------------------------------------------------------
    # Per-file rules
    # ------------------------------------------------------------------

    def _check_file(
        self,
        path: Path,
        report: Callable[[str, str, str], None],
        *,
        strict: bool,
    ) -> Frontmatter | None:
        shown = self._display_path(path)
        try:
            content = read_post_file(path)
        except (OSError, UnicodeDecodeError) as exc:
            report(RULE_READ, f"Unreadable file ({exc.__class__.__name__})", shown)
            return None

        fm = parse_frontmatter(content)
        if fm is None:
            report(RULE_FRONTMATTER, "Missing or invalid frontmatter", shown)
            return None

        if not is_valid_slug(fm.get("slug")):
            report(RULE_SLUG, "Invalid or missing slug", shown)

        translation_key = fm.get("translationKey")
        if translation_key not in (None, "") and not is_valid_slug(translation_key):
            report(RULE_TRANSLATION_KEY, "Invalid translationKey", shown)

        if parse_pub_date(fm.get("pubDate")) is None:
            report(RULE_PUB_DATE, "Invalid or missing pubDate", shown)

        hero = fm.get("heroImage")
        if hero:
            if not isinstance(hero, str):
                report(RULE_HERO_IMAGE, "Invalid heroImage", shown)
            else:
                hero_path = (path.parent / hero).resolve()
                if not hero_path.exists():
                    report(RULE_HERO_IMAGE, "heroImage not found", str(hero_path))

        if strict:
            self._check_strict_fields(fm, shown, report)
        return fm

    def _check_strict_fields(
        self,
        fm: Frontmatter,
        shown: str,
        report: Callable[[str, str, str], None],
    ) -> None:
        title = fm.get("title")
        if not isinstance(title, str) or not title.strip():
            report(RULE_TITLE, "Missing title", shown)

        lang = fm.get("lang")
        if lang is not None and lang not in self._settings.content.languages:
            report(RULE_LANG, "Invalid lang", shown)

        updated = fm.get("updatedDate")
        if updated not in (None, "") and parse_pub_date(updated) is None:
            report(RULE_UPDATED_DATE, "Invalid updatedDate", shown)

        tags = fm.get("tags")
        if tags is not None and (
            not isinstance(tags, list) or not all(tag.strip() for tag in tags)
        ):
            report(RULE_TAGS, "Invalid tags", shown)

    # ------------------------------------------------------------------
    # Cross-file rules
    # ------------------------------------------------------------------

    def _check_translations(
        self,
        parsed: list[tuple[Path, Frontmatter]],
        report: Callable[[str, str, str], None],
    ) -> None:
        """Every translationKey must exist in every configured language."""
        by_key: dict[str, dict[str, Path]] = {}
        for path, fm in parsed:
            key = fm.get("translationKey")
            if not isinstance(key, str) or not key:
                continue
            lang = fm.get("lang") or DEFAULT_LANG
            if not isinstance(lang, str):
                continue
            by_key.setdefault(key, {}).setdefault(lang, path)

        for key in sorted(by_key):
            present = by_key[key]
            anchor = min(present.values())
            for lang in self._settings.content.languages:
                if lang not in present:
                    report(
                        RULE_TRANSLATION,
                        f"Missing translation ({lang}) for translationKey '{key}'",
                        self._display_path(anchor),
                    )


def summarize_issues(issues: list[dict[str, Any]]) -> dict[str, int]:
    """Count issues per rule, for verbose output."""
    counts: dict[str, int] = {}
    for issue in issues:
        counts[issue["rule"]] = counts.get(issue["rule"], 0) + 1
    return dict(sorted(counts.items()))
