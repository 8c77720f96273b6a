"""Rich renderers for ServiceResult, chosen by ``result.op``.

Graph views get tables; every other success is printed as indented
key-value fields. Failures list each message of the rejecting stage.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from edugraph.output.console import create_console, get_output, style_for_type

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from edugraph.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
        for warning in result.warnings:
            console.print(Text("  warning:", style="edu.warning"), Text(warning))
    else:
        _render_error(result, console, verbose=verbose)

    if verbose:
        _render_meta(console, result)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: ids on success, messages on error."""
    if not result.ok:
        return "\n".join(result.error.messages) if result.error else "Unknown error"
    if "id" in result.data:
        return str(result.data["id"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="edu.ok"), Text(f"  {result.op}", style="edu.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="edu.key")
    if key == "id" or key in ("start", "end"):
        v = Text(str(value), style="edu.id")
    elif key == "name":
        v = Text(str(value), style="edu.name")
    elif key == "type":
        v = Text(str(value), style=style_for_type(str(value)))
    else:
        v = Text(str(value))
    console.print(k, v)


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print timing spans and any other meta keys (verbose only)."""
    meta = dict(result.meta or {})
    tree = meta.pop("telemetry", None)
    if not meta and tree is None:
        return
    console.print(Text("  timing:", style="dim"))
    if tree is not None:
        _render_telemetry_tree(console, tree)
    for key, value in meta.items():
        console.print(Text(f"    {key}: {value}"))


def _render_telemetry_tree(console: Console, span_data: dict[str, Any], indent: int = 4) -> None:
    prefix = " " * indent
    duration = span_data.get("duration_ms", 0.0)
    line = f"{prefix}[dim]{duration:>8.2f}ms[/dim]  {span_data.get('name', '?')}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)
    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    code = f" [{err.code}]" if err else ""
    console.print(Text("ERROR", style="edu.error"), Text(f"  {result.op}{code}", style="edu.op"))
    messages = err.messages if err and err.messages else [err.message if err else "Unknown error"]
    for message in messages:
        console.print(Text(f"  - {message}"))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Success renderers ─────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_overview(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    data = result.data

    node_table = Table(title=f"Nodes ({data['node_count']})", show_header=True, pad_edge=False)
    node_table.add_column("ID", style="edu.id", no_wrap=True)
    node_table.add_column("Type")
    node_table.add_column("Name", style="edu.name")
    if verbose:
        node_table.add_column("Modified", style="dim")
    names: dict[str, str] = {}
    for node in data["nodes"]:
        names[node["id"]] = node["name"]
        row = [
            Text(node["id"]),
            Text(node["type"], style=style_for_type(node["type"])),
            Text(node["name"]),
        ]
        if verbose:
            row.append(Text(node["modified"]))
        node_table.add_row(*row)
    console.print(node_table)

    edge_table = Table(title=f"Yields ({data['edge_count']})", show_header=True, pad_edge=False)
    edge_table.add_column("ID", style="edu.id", no_wrap=True)
    edge_table.add_column("Start")
    edge_table.add_column("End")
    for edge in data["edges"]:
        edge_table.add_row(
            Text(edge["id"]),
            Text(names.get(edge["start"], edge["start"])),
            Text(names.get(edge["end"], edge["end"])),
        )
    console.print(edge_table)


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    issues = result.data.get("issues", [])
    if not issues:
        console.print("  no issues found")
        return
    for issue in issues:
        label = Text(f"  {issue['category']}:", style="edu.warning")
        console.print(label, Text(issue["message"]))


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "overview": _render_overview,
    "check": _render_check,
}
