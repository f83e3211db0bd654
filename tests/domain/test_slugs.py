"""Tests for slug validation and slugification."""

from __future__ import annotations

import pytest

from blogctl.domain.slugs import is_valid_slug, slugify


class TestIsValidSlug:
    @pytest.mark.parametrize("value", ["a", "my-article", "swift-5-9", "2025"])
    def test_valid(self, value: str) -> None:
        assert is_valid_slug(value)

    @pytest.mark.parametrize(
        "value",
        ["", "Bad_Slug", "UPPER", "double--hyphen", "-leading", "trailing-", "has space"],
    )
    def test_invalid(self, value: str) -> None:
        assert not is_valid_slug(value)

    def test_non_string(self) -> None:
        assert not is_valid_slug(None)
        assert not is_valid_slug(["my-article"])


class TestSlugify:
    def test_title(self) -> None:
        assert slugify("My Article") == "my-article"

    def test_punctuation_runs_collapse(self) -> None:
        assert slugify("  Swift & SwiftUI: Tips!!  ") == "swift-swiftui-tips"

    def test_underscores_and_hyphens(self) -> None:
        assert slugify("Bad_Slug--Here") == "bad-slug-here"

    def test_non_ascii_letters_are_separators(self) -> None:
        assert slugify("Año Nuevo") == "a-o-nuevo"

    def test_nothing_left(self) -> None:
        assert slugify("!!!") == ""

    @pytest.mark.parametrize(
        "title", ["My Article", "C++ in 2025?", "  x  ", "Ünïcode Títle", "a__b--c"]
    )
    def test_result_is_valid_or_empty(self, title: str) -> None:
        slug = slugify(title)
        assert slug == "" or is_valid_slug(slug)

    @pytest.mark.parametrize("slug", ["my-article", "a", "swift-5-9"])
    def test_idempotent_on_valid_slugs(self, slug: str) -> None:
        assert slugify(slug) == slug
        assert slugify(slugify(slug)) == slug
