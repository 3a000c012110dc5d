"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from rubyfilter.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from rubyfilter.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS[result.op]
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if result.error is not None:
        return f"ERROR: {result.op}: {result.error.message}"
    if result.op == "render":
        return str(result.data.get("html", "")).rstrip("\n")
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="rf.ok")
    op = Text(f"  {result.op}", style="rf.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    console.print(Text.assemble((f"  {key}: ", "rf.key"), str(value)))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    assert err is not None
    console.print(
        Text.assemble(("ERROR", "rf.error"), (f"  {result.op}", "rf.op"), f": {err.message}")
    )
    for issue in err.detail.get("issues", []):
        console.print(Text(f"  {issue.get('start')}: {issue.get('source')}"))
    if verbose and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_html(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Write the rendered document as-is so it can be piped."""
    console.out(str(result.data.get("html", "")), highlight=False, end="")


def _render_segments(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the segment sequence as a table."""
    items: list[dict[str, Any]] = result.data.get("items", [])
    _status_line(console, result)
    _field(console, "count", result.data.get("count", len(items)))

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Offset", justify="right", style="dim")
    table.add_column("Kind", no_wrap=True)
    table.add_column("Source")
    table.add_column("Groups")

    for item in items:
        kind = str(item.get("kind", ""))
        if kind == "annotation":
            groups = " ".join(
                f"{base}/{reading}"
                for base, reading in zip(item.get("base", []), item.get("ruby", []), strict=False)
            )
        else:
            groups = str(item.get("error", ""))
        table.add_row(
            str(item.get("start", "")),
            Text(kind, style=style_for_kind(kind)),
            Text(str(item.get("source", ""))),
            Text(groups),
        )
    console.print(table)


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(Text("OK", style="rf.ok"), Text("  No malformed ruby commands."))


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "render": _render_html,
    "segments": _render_segments,
    "check": _render_check,
}
