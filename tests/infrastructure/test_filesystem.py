"""Tests for filesystem operations — discovery and file writes."""

from __future__ import annotations

from pathlib import Path

from blogctl.infrastructure.filesystem import (
    find_post_files,
    read_post_file,
    write_binary_file,
    write_post_file,
)


class TestFindPostFiles:
    def test_missing_root(self, tmp_path: Path) -> None:
        assert find_post_files(tmp_path / "nope") == []

    def test_recursive_and_sorted(self, tmp_path: Path) -> None:
        for rel in ("2025/03/05/es.md", "2024/01/02/en.md", "2025/03/05/en.md"):
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("x", encoding="utf-8")
        found = [p.relative_to(tmp_path).as_posix() for p in find_post_files(tmp_path)]
        assert found == ["2024/01/02/en.md", "2025/03/05/en.md", "2025/03/05/es.md"]

    def test_only_markdown(self, tmp_path: Path) -> None:
        (tmp_path / "post.md").write_text("x", encoding="utf-8")
        (tmp_path / "hero.png").write_bytes(b"png")
        (tmp_path / "notes.mdx").write_text("x", encoding="utf-8")
        assert find_post_files(tmp_path) == [tmp_path / "post.md"]

    def test_skips_hidden_directories(self, tmp_path: Path) -> None:
        hidden = tmp_path / ".drafts" / "a.md"
        hidden.parent.mkdir()
        hidden.write_text("x", encoding="utf-8")
        assert find_post_files(tmp_path) == []


class TestWrites:
    def test_write_post_creates_parents(self, tmp_path: Path) -> None:
        path = tmp_path / "2025" / "03" / "05" / "en.md"
        write_post_file(path, "hola ñ")
        assert read_post_file(path) == "hola ñ"

    def test_write_binary(self, tmp_path: Path) -> None:
        path = tmp_path / "a" / "hero.png"
        write_binary_file(path, b"\x89PNG")
        assert path.read_bytes() == b"\x89PNG"
