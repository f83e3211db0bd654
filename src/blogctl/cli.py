"""Root CLI group for blogctl with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from blogctl import __version__
from blogctl.commands import register_commands
from blogctl.commands._context import AppContext
from blogctl.config.settings import BlogSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="blogctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-interact", is_flag=True, help="Non-interactive mode (no prompts).")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--root",
    "project_root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project root (default: directory of blogctl.toml, else CWD).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    config_path: str | None,
    project_root: Path | None,
) -> None:
    """blogctl — scaffold and validate bilingual blog posts."""
    ctx.ensure_object(dict)
    settings = BlogSettings.from_cli(
        config_path=config_path,
        project_root=project_root,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        no_interact=no_interact,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
