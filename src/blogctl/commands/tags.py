"""Command: list the tag store."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from blogctl.commands._context import AppContext


@click.command()
@click.pass_obj
def tags(app: AppContext) -> None:
    """List known tags with the numbers used by ``blogctl new``."""
    from blogctl.services.scaffold import ScaffoldService

    app.emit(ScaffoldService(app.settings).list_tags())
