"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  Renderers are
dispatched by ``result.op`` in :func:`render_result`; unknown ops fall
through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from roadhub.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from roadhub.services.result import ServiceResult

type _Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    width: int | None = None,
    max_listed: int = 20,
) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose, max_listed=max_listed)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render the bare answer for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    if result.op == "demo":
        return "\n".join(str(run["capital"]) for run in result.data.get("runs", []))
    if "capital" in result.data:
        return str(result.data["capital"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="road.ok"), Text(f"  {result.op}", style="road.op"), sep="")


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    console.print(Text(f"  {key}: ", style="road.key"), Text(str(value), style=style), sep="")


def _capital_text(capital: int) -> Text:
    if capital < 0:
        return Text("none (-1)", style="road.warning")
    return Text(str(capital), style="road.capital")


def _city_list(cities: list[int], max_listed: int) -> str:
    shown = ", ".join(str(c) for c in cities[:max_listed])
    hidden = len(cities) - max_listed
    return f"{shown} (+{hidden} more)" if hidden > 0 else shown


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including the telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(console: Console, span_data: dict[str, Any], indent: int = 4) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {name}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="road.error"),
        Text(f"  {result.op}", style="road.op"),
        Text(f": {msg}"),
        sep="",
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Election renderers ────────────────────────────────────────────────


def _render_capital(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    max_listed: int = 20,
) -> None:
    d = result.data
    _status_line(console, result)
    console.print(Text("  capital: ", style="road.key"), _capital_text(d["capital"]), sep="")
    _field(console, "direction", d.get("direction", ""))
    _field(console, "cities", d.get("city_count", 0))
    _field(console, "roads", d.get("road_count", 0))

    stragglers = d.get("stragglers") or []
    if stragglers:
        _field(console, "stragglers", _city_list(stragglers, max_listed), style="road.straggler")
    if verbose:
        _field(console, "candidate", d.get("candidate", ""), style="road.city")
        _render_meta(console, result)


def _render_analyze(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    max_listed: int = 20,
) -> None:
    d = result.data
    _status_line(console, result)
    console.print(Text("  capital: ", style="road.key"), _capital_text(d["capital"]), sep="")
    _field(console, "direction", d.get("direction", ""))
    _field(console, "sink components", len(d.get("sink_components", [])))

    items = d.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("City", style="road.city", justify="right", no_wrap=True)
    table.add_column("Reached By", justify="right")
    table.add_column("Capital", justify="center")
    for item in items[:max_listed]:
        table.add_row(
            str(item["id"]),
            str(item["reached_by"]),
            "yes" if item["capital"] else "",
        )
    console.print()
    console.print(table)

    if len(items) > max_listed:
        console.print(f"{max_listed} of {len(items)} cities shown")
    else:
        console.print(f"{len(items)} cities")
    if verbose:
        _render_meta(console, result)


def _render_demo(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    max_listed: int = 20,
) -> None:
    _status_line(console, result)
    for run in result.data.get("runs", []):
        console.print(
            Text(f"  from={run['from']} to={run['to']}: ", style="road.key"),
            _capital_text(run["capital"]),
            sep="",
        )
    if verbose:
        _render_meta(console, result)


def _render_generic(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    max_listed: int = 20,
) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, _Renderer] = {
    "capital": _render_capital,
    "analyze": _render_analyze,
    "demo": _render_demo,
}
