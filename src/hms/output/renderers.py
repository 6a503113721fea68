"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  Renderers
are dispatched by ``result.op`` in :func:`render_result`; every conversion
op shares the value-table renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from hms.output.console import create_console, get_output
from hms.output.table import build_table

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from hms.services.result import ServiceResult


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
    """Render only the formatted values, one per line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    display = result.data.get("display")
    if isinstance(display, list):
        return "\n".join(display)
    return f"OK: {result.op}"


def render_warnings(warnings: list[str]) -> str:
    """Render non-fatal warnings as ``WARNING: ...`` lines for stderr."""
    console = create_console()
    for warning in warnings:
        console.print(Text.assemble(("WARNING", "hms.warning"), f": {warning}"), soft_wrap=True)
    return get_output(console).rstrip("\n")


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="hms.error")
    op = Text(f"  {result.op}", style="hms.op")
    console.print(label, op, Text(" — "), msg)
    if verbose and err is not None:
        console.print(Text(f"  code: {err.code}", style="hms.key"))
        for key, value in err.detail.items():
            console.print(Text(f"  {key}: {value}", style="hms.key"))


def _render_values(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Table of input / seconds / hms, right-aligned like ``format_hms``."""
    items: list[dict[str, Any]] = result.data.get("items", [])
    if not items:
        console.print(Text("hms()", style="hms.missing"))
        return

    columns: dict[str, list[Any]] = {}
    if "input" in items[0]:
        columns["input"] = [item["input"] for item in items]
    if verbose:
        columns["seconds"] = [item["seconds"] for item in items]
    columns["hms"] = result.data.get("display") or [item["hms"] for item in items]

    console.print(build_table(columns, right_justify={"seconds", "hms"}))
    if verbose and result.data.get("tz"):
        console.print(Text(f"  tz: {result.data['tz']}", style="hms.key"))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(Text("OK", style="hms.ok"), Text(f"  {result.op}", style="hms.op"))
    for key, value in result.data.items():
        console.print(Text.assemble((f"  {key}: ", "hms.key"), str(value)))


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "format": _render_values,
    "parse": _render_values,
    "build": _render_values,
    "time_of_day": _render_values,
}
