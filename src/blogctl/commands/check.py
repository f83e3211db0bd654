"""Command: pre-publish content validation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from blogctl.commands._context import AppContext


@click.command()
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Also require translation pairs, a known lang, and well-formed tags.",
)
@click.pass_obj
def check(app: AppContext, strict: bool | None) -> None:
    """Validate every post's frontmatter and referenced hero image.

    Each problem is printed as it is found; the exit code is 1 if any
    post fails or no posts exist.
    """
    from blogctl.output.renderers import render_issue
    from blogctl.services.check import CheckService

    def echo_issue(issue: dict[str, str]) -> None:
        click.echo(render_issue(issue))

    on_issue = None if app.settings.json_output else echo_issue
    app.emit(CheckService(app.settings).check(strict=strict, on_issue=on_issue))
