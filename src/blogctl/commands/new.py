"""Command: scaffold a new bilingual post."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

import click

from blogctl.domain.slugs import slugify

if TYPE_CHECKING:
    from blogctl.commands._context import AppContext

_TAGS_PROMPT = "Tags (numbers and/or names, comma-separated; empty for none)"


def _ask(interactive: bool, value: str | None, label: str, default: str) -> str | None:
    """Return *value* if given, else prompt (interactive) or fall back to *default*."""
    if value is not None:
        return value
    if not interactive:
        return default or None
    return click.prompt(label, default=default, show_default=bool(default))


@click.command()
@click.option("--title", default=None, help="Post title.")
@click.option("--slug", default=None, help="URL slug (default: slugified title).")
@click.option(
    "--date", "date_text", default=None, help="Publish date, YYYY-MM-DD (default: today)."
)
@click.option(
    "--translationKey",
    "--translation-key",
    "translation_key",
    default=None,
    help="Key linking the language variants (default: the slug).",
)
@click.option(
    "--tags",
    "tag_input",
    default=None,
    help="Tag menu numbers and/or names, comma-separated (skips the tag prompt).",
)
@click.pass_obj
def new(
    app: AppContext,
    title: str | None,
    slug: str | None,
    date_text: str | None,
    translation_key: str | None,
    tag_input: str | None,
) -> None:
    """Create a dated post folder with en/es stubs and a placeholder hero image.

    Omitted values are prompted for when running in a terminal.
    """
    from blogctl.infrastructure.tag_store import TagStoreError
    from blogctl.output.renderers import format_tag_menu
    from blogctl.services.scaffold import ScaffoldError, ScaffoldService

    svc = ScaffoldService(app.settings)
    interactive = app.interactive

    title = _ask(interactive, title, "Title", "")
    if not (title or "").strip():
        app.emit(svc.failure(ScaffoldError("TITLE_REQUIRED", "Title is required.")))
        return

    slug = _ask(interactive, slug, "Slug", slugify(title))
    date_text = _ask(interactive, date_text, "Date [YYYY-MM-DD]", date.today().isoformat())
    translation_key = _ask(interactive, translation_key, "translationKey", (slug or "").strip())

    try:
        available = svc.available_tags()
    except TagStoreError as exc:
        from blogctl.services.result import ServiceError, ServiceResult

        app.emit(
            ServiceResult(
                ok=False,
                op="new_post",
                error=ServiceError(code="TAG_STORE_ERROR", message=str(exc)),
            )
        )
        return

    if tag_input is None and interactive:
        if available:
            click.echo("Available tags:")
            for line in format_tag_menu(available):
                click.echo(line)
        tag_input = click.prompt(_TAGS_PROMPT, default="", show_default=False)

    app.emit(
        svc.create_post(
            title=title,
            slug=slug,
            date_text=date_text,
            translation_key=translation_key,
            tag_input=tag_input or "",
            available=available,
        )
    )
