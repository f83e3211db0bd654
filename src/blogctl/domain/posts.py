"""Post models — scaffold intent, generated header, and folder layout.

Posts live at ``<content-root>/<yyyy>/<mm>/<dd>/<lang>.md`` with one
shared ``hero.png`` per folder. Language variants of the same article
share a ``translationKey``.
"""

from __future__ import annotations

import base64
from datetime import date
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from blogctl.domain.dates import format_pub_date

LANGUAGES: tuple[str, ...] = ("en", "es")

DEFAULT_DESCRIPTION = "TODO"
HERO_IMAGE_NAME = "hero.png"

# Smallest valid PNG: a single grey pixel.
HERO_PNG_BASE64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mP8/wcAAwAB/6XbXz8AAAAASUVORK5CYII="
)


class PostOptions(BaseModel):
    """Resolved scaffold intent, fixed before any file is touched."""

    model_config = ConfigDict(frozen=True)

    title: str
    slug: str
    pub_date: date
    translation_key: str
    tags: list[str] = Field(default_factory=list)
    new_tags: list[str] = Field(default_factory=list)


class PostFrontmatter(BaseModel):
    """Header of one language variant, in canonical key order."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    description: str = DEFAULT_DESCRIPTION
    pub_date: str = Field(alias="pubDate")
    hero_image: str = Field(default=f"./{HERO_IMAGE_NAME}", alias="heroImage")
    lang: str = "en"
    translation_key: str = Field(alias="translationKey")
    slug: str
    tags: list[str] = Field(default_factory=list)

    @classmethod
    def for_language(
        cls, options: PostOptions, lang: str, *, hero_image: str = HERO_IMAGE_NAME
    ) -> PostFrontmatter:
        return cls(
            title=options.title,
            pub_date=format_pub_date(options.pub_date),
            hero_image=f"./{hero_image}",
            lang=lang,
            translation_key=options.translation_key,
            slug=options.slug,
            tags=list(options.tags),
        )

    def to_fields(self) -> dict[str, str | list[str]]:
        """Return header fields keyed by their on-disk names."""
        return self.model_dump(by_alias=True)


def post_folder(content_root: Path, pub_date: date) -> Path:
    """Return ``<content_root>/<yyyy>/<mm>/<dd>`` for *pub_date*."""
    return content_root / f"{pub_date.year:04d}" / f"{pub_date.month:02d}" / f"{pub_date.day:02d}"


def placeholder_hero_png() -> bytes:
    """Decode the embedded 1x1 placeholder hero image."""
    return base64.b64decode(HERO_PNG_BASE64)
