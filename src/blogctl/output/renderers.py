"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from rich.text import Text

from blogctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from blogctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if result.op == "new_post":
        return str(result.data.get("folder", ""))
    if result.op == "tags":
        return "\n".join(result.data.get("tags", []))
    return f"OK: {result.op}"


def render_issue(issue: dict[str, str]) -> str:
    """Render one check issue as ``<reason>: <path>``."""
    console = create_console()
    line = Text()
    line.append(issue["reason"], style="blog.reason")
    line.append(": ")
    line.append(issue["path"], style="blog.path")
    console.print(line)
    return get_output(console).rstrip("\n")


# ── Renderers ─────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    status = Text("OK", style="blog.ok")
    status.append(f" {result.op}", style="blog.op")
    console.print(status)
    for key, value in result.data.items():
        line = Text(f"  {key}: ", style="blog.key")
        line.append(str(value))
        console.print(line)


def _render_check(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    console.print(Text("Content check passed.", style="blog.ok"))
    if verbose:
        mode = "strict" if result.data.get("strict") else "default"
        console.print(
            Text(f"  {result.data.get('files', 0)} file(s) checked, {mode} rules", style="blog.key")
        )


def _render_new_post(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    data = result.data
    line = Text("Created post skeleton in ")
    line.append(str(data.get("folder", "")), style="blog.path")
    console.print(line)
    if verbose:
        for path in data.get("files", []):
            console.print(Text(f"  {path}", style="blog.path"))
    new_tags = data.get("new_tags") or []
    if new_tags:
        added = Text("Added tags: ")
        added.append(", ".join(new_tags), style="blog.tag")
        console.print(added)
    console.print("Next: replace hero.png and update frontmatter/contents.")


def _render_tags(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    tags = result.data.get("tags", [])
    if not tags:
        console.print(Text("No tags yet.", style="blog.key"))
        return
    for line in format_tag_menu(tags):
        console.print(Text(line))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    error = result.error
    line = Text("ERROR", style="blog.error")
    line.append(f" {result.op}", style="blog.op")
    line.append(" — ")
    line.append(error.message if error else "Unknown error")
    console.print(line)
    if error is None:
        return
    if verbose and error.code == "CONTENT_INVALID":
        from blogctl.services.check import summarize_issues

        for rule, count in summarize_issues(error.detail.get("issues", [])).items():
            console.print(Text(f"  {rule}: {count}", style="blog.key"))
    for path in error.detail.get("existing", []):
        console.print(Text(f"  {path}", style="blog.path"))


def format_tag_menu(tags: list[str]) -> list[str]:
    """Numbered menu lines (1-based) shared by ``tags`` and ``new``."""
    return [f"  {index}) {tag}" for index, tag in enumerate(tags, start=1)]


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "check": _render_check,
    "new_post": _render_new_post,
    "tags": _render_tags,
}
