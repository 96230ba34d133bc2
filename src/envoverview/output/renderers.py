"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from envoverview.domain.columns import COLUMNS, Cell
from envoverview.domain.models import EnvironmentRow
from envoverview.domain.types import ColumnRole
from envoverview.output.console import create_console, get_output, style_for_tone

if TYPE_CHECKING:
    from rich.console import Console

    from envoverview.services.result import ServiceResult


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

    items = result.data.get("rows") or result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item.get("env", "")) for item in items if isinstance(item, dict))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="env.ok")
    op = Text(f"  {result.op}", style="env.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="env.key")
    v = Text(str(value), style="env.title" if key == "title" else "")
    console.print(k, v, end="")
    console.print()


def cell_text(cell: Cell) -> Text:
    """Style a column cell according to its semantic role."""
    if cell.role is ColumnRole.LINK and cell.target:
        return Text(cell.text, style=Style(color="cyan", underline=True, link=cell.target))
    if cell.role is ColumnRole.BADGE:
        return Text(cell.text, style=style_for_tone(cell.tone))
    return Text(cell.text, style="env.name")


def environment_table(rows: list[EnvironmentRow]) -> Table:
    """Build a Rich Table from the fixed column descriptors."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    for column in COLUMNS:
        table.add_column(column.title, no_wrap=column.role is not ColumnRole.LINK)
    for row in rows:
        table.add_row(*(cell_text(column.render(row)) for column in COLUMNS))
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    if err is not None and err.code == "MISSING_REQUIRED":
        _render_missing_annotation(result, console, verbose=verbose)
        return

    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="env.error")
    op = Text(f"  {result.op}", style="env.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


def _render_missing_annotation(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    """Render the missing-annotation placeholder shown instead of a table."""
    if result.error is None:
        return
    detail = result.error.detail
    body = Text()
    body.append("Missing annotation: ", style="env.warning")
    body.append(str(detail.get("annotation", "")))
    if verbose:
        for item in detail.get("missing", []):
            body.append(f"\n  {item.get('env', '?')}: ", style="env.key")
            body.append(str(item.get("display", "")))
    console.print(Text("ERROR", style="env.error"), Text(f"  {result.op}", style="env.op"))
    console.print(Panel(body, title="Missing Annotation", expand=False))


# ── Operation renderers ───────────────────────────────────────────────


def _render_overview(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the environment overview as a titled table."""
    d = result.data
    rows = [EnvironmentRow.model_validate(item) for item in d.get("rows", [])]
    console.print(Text(str(d.get("title", "")), style="env.title"))
    if not rows:
        console.print(Text("  No environments configured", style="dim"))
        return
    console.print(environment_table(rows))
    if verbose:
        _field(console, "count", d.get("count", len(rows)))


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    required = result.data.get("required", [])
    _field(console, "required", ", ".join(required) if required else "(none)")
    _field(console, "healthy", result.data.get("healthy", True))


def _render_keys(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Environment", style="env.name", no_wrap=True)
    attributes = [c.field for c in COLUMNS if c.field not in ("env", "status")]
    for attr in attributes:
        table.add_column(attr.title() if attr != "ip" else "IP", style="env.key")
    for item in result.data.get("items", []):
        table.add_row(
            str(item.get("env", "")),
            *(str(item.get(attr) or "—") for attr in attributes),
        )
    console.print(table)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_Renderer = Callable[..., None]

_OP_RENDERERS: dict[str, _Renderer] = {
    "overview": _render_overview,
    "check": _render_check,
    "keys": _render_keys,
}
