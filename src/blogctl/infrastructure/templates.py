"""Jinja2 template loading for post stubs with per-project overrides."""

from __future__ import annotations

from pathlib import Path

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, PackageLoader

OVERRIDE_DIR = ".blogctl/templates"


def build_template_environment(group: str, *, project_root: Path | None = None) -> Environment:
    """Build a Jinja2 environment with user overrides before packaged defaults.

    User overrides are loaded from ``.blogctl/templates/`` inside the
    project. Both a namespaced directory (``.blogctl/templates/post/``)
    and the shared root are searched.
    """

    loaders: list[BaseLoader] = []
    if project_root is not None:
        template_root = project_root / OVERRIDE_DIR
        loaders.append(FileSystemLoader([str(template_root / group), str(template_root)]))

    loaders.append(PackageLoader("blogctl", f"templates/{group}"))
    return Environment(loader=ChoiceLoader(loaders), keep_trailing_newline=True)


def render_post_body(lang: str, *, project_root: Path | None = None, **context: object) -> str:
    """Render the placeholder body for *lang*, falling back to ``default.md.j2``.

    Templates see ``lang`` plus the keyword *context* (the scaffolder
    passes ``title`` and ``slug``), which project overrides may use.
    """
    env = build_template_environment("post", project_root=project_root)
    template = env.select_template([f"{lang}.md.j2", "default.md.j2"])
    return template.render(lang=lang, **context)
