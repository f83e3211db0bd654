"""Subcommand modules for blogctl.

Provides register_commands() which uses deferred imports to keep
``blogctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from blogctl.commands.check import check
    from blogctl.commands.new import new
    from blogctl.commands.tags import tags

    cli.add_command(check)
    cli.add_command(new)
    cli.add_command(tags)
