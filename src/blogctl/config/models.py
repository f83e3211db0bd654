"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, blogctl.toml only contains
overrides. A repository following the default layout needs no config file.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from blogctl.domain.posts import HERO_IMAGE_NAME, LANGUAGES


class ContentConfig(BaseModel):
    """[content] section."""

    model_config = {"frozen": True}

    root: str = "src/content/blog"
    tags_file: str = "src/data/tags.json"
    languages: list[str] = Field(default_factory=lambda: list(LANGUAGES))
    hero_image: str = HERO_IMAGE_NAME


class CheckConfig(BaseModel):
    """[check] section."""

    model_config = {"frozen": True}

    strict: bool = False
