"""Tests for BlogSettings — unified settings with TOML source."""

from __future__ import annotations

from pathlib import Path

import click
import pytest

from blogctl.config.discovery import find_config
from blogctl.config.settings import BlogSettings


class TestBlogSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = BlogSettings.from_cli(project_root=tmp_path)
        assert settings.project_root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.content.root == "src/content/blog"
        assert settings.content.tags_file == "src/data/tags.json"
        assert settings.content.languages == ["en", "es"]
        assert settings.content.hero_image == "hero.png"
        assert settings.check.strict is False

    def test_derived_paths(self, tmp_path: Path) -> None:
        settings = BlogSettings.from_cli(project_root=tmp_path)
        assert settings.content_root == tmp_path / "src" / "content" / "blog"
        assert settings.tags_path == tmp_path / "src" / "data" / "tags.json"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = BlogSettings.from_cli(project_root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_sparse_override(self, tmp_path: Path) -> None:
        (tmp_path / "blogctl.toml").write_text('[content]\nroot = "posts"\n', encoding="utf-8")
        settings = BlogSettings.from_cli(project_root=tmp_path)
        assert settings.content.root == "posts"
        assert settings.content.tags_file == "src/data/tags.json"
        assert settings.config_path == tmp_path / "blogctl.toml"

    def test_walk_up_sets_project_root(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "blogctl.toml").write_text("[check]\nstrict = true\n", encoding="utf-8")
        nested = tmp_path / "src" / "content"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        settings = BlogSettings.from_cli()
        assert settings.project_root == tmp_path.resolve()
        assert settings.check.strict is True

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[content]\nlanguages = ["en"]\n', encoding="utf-8")
        settings = BlogSettings.from_cli(config_path=str(custom), project_root=tmp_path)
        assert settings.content.languages == ["en"]
        assert settings.config_path == custom

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "blogctl.toml").write_text("[content\n", encoding="utf-8")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            BlogSettings.from_cli(project_root=tmp_path)

    def test_missing_explicit_config(self, tmp_path: Path) -> None:
        with pytest.raises(click.ClickException, match="Config file not found"):
            BlogSettings.from_cli(config_path=str(tmp_path / "nope.toml"), project_root=tmp_path)


class TestEnvOverrides:
    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "blogctl.toml").write_text("[check]\nstrict = false\n", encoding="utf-8")
        monkeypatch.setenv("BLOGCTL_CHECK__STRICT", "true")
        settings = BlogSettings.from_cli(project_root=tmp_path)
        assert settings.check.strict is True

    def test_cli_flag_beats_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BLOGCTL_QUIET", "true")
        settings = BlogSettings.from_cli(project_root=tmp_path, quiet=False)
        assert settings.quiet is False


class TestFindConfig:
    def test_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config = tmp_path / "elsewhere.toml"
        config.write_text("", encoding="utf-8")
        monkeypatch.setenv("BLOGCTL_CONFIG", str(config))
        assert find_config(tmp_path / "nowhere") == config

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BLOGCTL_CONFIG", str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None

    def test_not_found(self, tmp_path: Path) -> None:
        assert find_config(tmp_path) is None
