"""ScaffoldService — new post skeletons.

Pipeline: RESOLVE → GUARD → TAGS → WRITE → RESPOND

RESOLVE turns raw answers into an immutable :class:`PostOptions` and
fails fast on bad input. GUARD refuses to write into a date folder that
already holds a post. TAGS persists newly-typed tags before any post
file exists, so no post ever references an unpersisted tag. WRITE
creates the folder, one stub per language, and a placeholder hero image.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date

from blogctl.domain.dates import parse_scaffold_date
from blogctl.domain.frontmatter import render_frontmatter
from blogctl.domain.posts import PostFrontmatter, PostOptions, placeholder_hero_png, post_folder
from blogctl.domain.slugs import is_valid_slug, slugify
from blogctl.domain.tags import resolve_tag_selection
from blogctl.infrastructure.filesystem import write_binary_file, write_post_file
from blogctl.infrastructure.tag_store import TagStore, TagStoreError
from blogctl.infrastructure.templates import render_post_body
from blogctl.services.base import BaseService
from blogctl.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

_KEBAB_HINT = "lowercase letters, numbers, hyphens"


class ScaffoldError(Exception):
    """A scaffold precondition failed; nothing has been written."""

    def __init__(self, code: str, message: str, **detail: object) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.detail = detail


class ScaffoldService(BaseService):
    """Creates dated, paired-language post skeletons."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def tag_store(self) -> TagStore:
        return TagStore(self._settings.tags_path)

    def available_tags(self) -> list[str]:
        """Tags offered in the numbered selection menu."""
        return self.tag_store.load()

    def resolve_options(
        self,
        *,
        title: str | None,
        slug: str | None = None,
        date_text: str | None = None,
        translation_key: str | None = None,
        tag_input: str = "",
        available: Sequence[str] | None = None,
        today: date | None = None,
    ) -> tuple[PostOptions, list[str]]:
        """Validate raw answers and freeze them into :class:`PostOptions`.

        Empty values fall back to defaults: slug from the title, today's
        date, translationKey equal to the slug, no tags.

        Returns:
            The options plus any tag tokens that were ignored.

        Raises:
            ScaffoldError: on a missing title, a non-kebab-case slug or
                translationKey, or a date not shaped ``YYYY-MM-DD``.
        """
        clean_title = (title or "").strip()
        if not clean_title:
            raise ScaffoldError("TITLE_REQUIRED", "Title is required.")

        clean_slug = (slug or "").strip() or slugify(clean_title)
        if not is_valid_slug(clean_slug):
            raise ScaffoldError(
                "INVALID_SLUG",
                f"Slug must be kebab-case ({_KEBAB_HINT}).",
                slug=clean_slug,
            )

        clean_date = (date_text or "").strip()
        if clean_date:
            try:
                pub_date = parse_scaffold_date(clean_date)
            except ValueError as exc:
                raise ScaffoldError(
                    "INVALID_DATE", "Invalid --date. Use YYYY-MM-DD.", date=clean_date
                ) from exc
        else:
            pub_date = today or date.today()

        clean_key = (translation_key or "").strip() or clean_slug
        if not is_valid_slug(clean_key):
            raise ScaffoldError(
                "INVALID_TRANSLATION_KEY",
                f"translationKey must be kebab-case ({_KEBAB_HINT}).",
                translation_key=clean_key,
            )

        if available is None:
            available = self.available_tags()
        selection = resolve_tag_selection(tag_input, available)

        options = PostOptions(
            title=clean_title,
            slug=clean_slug,
            pub_date=pub_date,
            translation_key=clean_key,
            tags=selection.tags,
            new_tags=selection.new_tags,
        )
        return options, selection.ignored

    def scaffold(self, options: PostOptions) -> ServiceResult:
        """Write the post skeleton described by *options*."""
        settings = self._settings
        folder = post_folder(settings.content_root, options.pub_date)
        languages = settings.content.languages

        candidates = [folder / f"{lang}.md" for lang in languages]
        existing = [path for path in candidates if path.exists()]
        if existing:
            return ServiceResult(
                ok=False,
                op="new_post",
                error=ServiceError(
                    code="POST_EXISTS",
                    message=f"Post folder already exists: {self._display_path(folder)}",
                    detail={"existing": [self._display_path(p) for p in existing]},
                ),
            )

        try:
            added = self.tag_store.merge(options.new_tags)
        except (TagStoreError, OSError) as exc:
            return ServiceResult(
                ok=False,
                op="new_post",
                error=ServiceError(code="TAG_STORE_ERROR", message=str(exc)),
            )

        files: list[str] = []
        for lang in languages:
            fm = PostFrontmatter.for_language(options, lang, hero_image=settings.content.hero_image)
            body = render_post_body(
                lang,
                project_root=settings.project_root,
                title=options.title,
                slug=options.slug,
            )
            path = folder / f"{lang}.md"
            write_post_file(path, render_frontmatter(fm.to_fields(), body))
            files.append(self._display_path(path))

        hero_path = folder / settings.content.hero_image
        hero_created = not hero_path.exists()
        if hero_created:
            write_binary_file(hero_path, placeholder_hero_png())

        logger.debug("Scaffolded %s with %d file(s)", folder, len(files))
        return ServiceResult(
            ok=True,
            op="new_post",
            data={
                "folder": self._display_path(folder),
                "files": files,
                "slug": options.slug,
                "translation_key": options.translation_key,
                "pub_date": options.pub_date.isoformat(),
                "tags": list(options.tags),
                "new_tags": added,
                "hero_created": hero_created,
            },
        )

    def create_post(
        self,
        *,
        title: str | None,
        slug: str | None = None,
        date_text: str | None = None,
        translation_key: str | None = None,
        tag_input: str = "",
        available: Sequence[str] | None = None,
        today: date | None = None,
    ) -> ServiceResult:
        """Resolve and scaffold in one call, reporting failures as results."""
        try:
            options, ignored = self.resolve_options(
                title=title,
                slug=slug,
                date_text=date_text,
                translation_key=translation_key,
                tag_input=tag_input,
                available=available,
                today=today,
            )
        except ScaffoldError as exc:
            return self.failure(exc)
        except TagStoreError as exc:
            return ServiceResult(
                ok=False,
                op="new_post",
                error=ServiceError(code="TAG_STORE_ERROR", message=str(exc)),
            )

        result = self.scaffold(options)
        if not result.ok or not ignored:
            return result
        warnings = [f"Ignored tag selection {token!r}" for token in ignored]
        return result.model_copy(update={"warnings": [*result.warnings, *warnings]})

    @staticmethod
    def failure(exc: ScaffoldError) -> ServiceResult:
        """Convert a precondition failure into a failed ServiceResult."""
        return ServiceResult(
            ok=False,
            op="new_post",
            error=ServiceError(code=exc.code, message=exc.message, detail=dict(exc.detail)),
        )

    def list_tags(self) -> ServiceResult:
        """Report the tag store contents in menu order."""
        try:
            tags = self.available_tags()
        except TagStoreError as exc:
            return ServiceResult(
                ok=False,
                op="tags",
                error=ServiceError(code="TAG_STORE_ERROR", message=str(exc)),
            )
        return ServiceResult(
            ok=True,
            op="tags",
            data={
                "path": self._display_path(self._settings.tags_path),
                "tags": tags,
                "count": len(tags),
            },
        )
