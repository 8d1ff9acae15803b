"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from imperium_calendar.output.console import create_console, get_output, style_for_element

if TYPE_CHECKING:
    from rich.console import Console

    from imperium_calendar.services.result import ServiceResult


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
    """Render minimal output for ``--quiet`` mode.

    Date operations print just the code, Gregorian conversion just the
    ISO date, and tables one tab-separated row per item.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "to_gregorian":
        return str(result.data.get("gregorian", ""))

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join("\t".join(str(v) for v in item.values()) for item in items)

    code = result.data.get("code")
    if code is not None:
        return str(code)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="imp.ok")
    op = Text(f"  {result.op}", style="imp.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="imp.key")
    if key == "code":
        v = Text(str(value), style="imp.code")
    elif key == "gregorian":
        v = Text(str(value), style="imp.gregorian")
    else:
        v = Text(str(value), style=style_for_element(key))
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="imp.error")
    op = Text(f"  {result.op}", style="imp.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Date renderers ────────────────────────────────────────────────────


def _render_date(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a decoded or converted date, element by element."""
    _status_line(console, result)
    d = result.data
    _field(console, "code", d.get("code", ""))
    for key in ("millennium", "year", "year_fraction"):
        if d.get(key) is not None:
            _field(console, key, d[key])
    if d.get("check_number") is not None:
        _field(console, "check_number", f"{d['check_number']} ({d.get('check_description', '')})")
    if "gregorian" in d:
        _field(console, "gregorian", d["gregorian"])
    if "seconds" in d:
        _field(console, "seconds", d["seconds"])
    if verbose or result.op == "to_duration":
        _field(console, "duration", d.get("duration", 0))
    if verbose:
        _render_meta(console, result)


def _render_gregorian(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render an imperial-to-Gregorian conversion."""
    _status_line(console, result)
    d = result.data
    _field(console, "code", d.get("code", ""))
    _field(console, "gregorian", d.get("gregorian", ""))
    if verbose:
        _field(console, "day_of_year", d.get("day_of_year", ""))
        _field(console, "hour", d.get("hour", ""))
        _render_meta(console, result)


# ── Table renderers ───────────────────────────────────────────────────


def _render_check_numbers(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    """Render the check-number reference table."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Index", style="imp.element.check_number", justify="right")
    table.add_column("Description")
    for item in result.data.get("items", []):
        table.add_row(str(item.get("index", "")), str(item.get("description", "")))
    console.print(table)


def _render_millennium_table(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    """Render the year-by-year conversion of a millennium."""
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Code", style="imp.code", no_wrap=True)
    table.add_column("Gregorian", style="imp.gregorian", no_wrap=True)
    for item in items:
        table.add_row(str(item.get("code", "")), str(item.get("gregorian", "")))
    console.print(table)
    count = result.data.get("count", len(items))
    console.print(f"\n{count} years of M{result.data.get('millennium')}")


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "decode": _render_date,
    "encode": _render_date,
    "to_duration": _render_date,
    "from_duration": _render_date,
    "from_gregorian": _render_date,
    "to_gregorian": _render_gregorian,
    "check_numbers": _render_check_numbers,
    "millennium_table": _render_millennium_table,
}
