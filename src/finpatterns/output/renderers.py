"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from finpatterns.output.console import create_console, get_output, style_for_theme

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from finpatterns.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
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
        return f"ERROR: {result.op}: {msg}"

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item.get("name", "")) for item in items)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="fin.ok"), Text(f"  {result.op}", style="fin.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    if key == "name":
        style = "fin.name"
    elif key in ("balance", "monthly_savings", "initial_savings", "total_savings"):
        style = "fin.money"
    else:
        style = ""
    console.print(Text(f"  {key}: ", style="fin.key"), Text(str(value), style=style))


def _details_panel(console: Console, details: str, *, title: str) -> None:
    console.print(Panel(Text(details), title=title, border_style="dim", expand=False))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="fin.error"),
        Text(f"  {result.op}", style="fin.op"),
        Text(f": {msg}"),
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Prototype renderers ───────────────────────────────────────────────


def _render_plan(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render show_plan / create_plan / register_plan results."""
    d = result.data
    _status_line(console, result)
    _field(console, "name", d.get("name", ""))
    if d.get("customized"):
        _field(console, "customized", ", ".join(d["customized"]))
    if "replaced" in d and verbose:
        _field(console, "replaced", d["replaced"])
    _details_panel(console, d.get("details", ""), title=str(d.get("name", "Plan")))


def _render_plan_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    if not items:
        console.print(Text("No plan templates registered.", style="dim"))
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Name", style="fin.name", no_wrap=True)
    table.add_column("Goal")
    table.add_column("Months", justify="right")
    table.add_column("Monthly", style="fin.money", justify="right")
    table.add_column("Initial", style="fin.money", justify="right")
    if verbose:
        table.add_column("Incentives")

    for item in items:
        row = [
            str(item.get("name", "")),
            str(item.get("goal", "")),
            str(item.get("duration", "")),
            f"${item.get('monthly_savings', '')}",
            f"${item.get('initial_savings', '')}",
        ]
        if verbose:
            row.append(", ".join(item.get("incentives", [])))
        table.add_row(*row)

    console.print(table)
    console.print(Text(f"  {result.data.get('count', len(items))} template(s)", style="dim"))


# ── Builder renderers ─────────────────────────────────────────────────


def _render_simulator(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    if "recipe" in d:
        _field(console, "recipe", d["recipe"])
    _details_panel(console, d.get("details", ""), title=str(d.get("goal", "Simulator")))


# ── Factory renderers ─────────────────────────────────────────────────


def _render_account(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    console.print(Text(f"  {d.get('summary', '')}"))
    if verbose:
        for key in ("account_type", "interest_rate", "balance", "currency"):
            if key in d:
                _field(console, key, d[key])


def _render_recommendation(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _status_line(console, result)
    _field(console, "goal_type", result.data.get("goal_type", ""))
    console.print(Text(f"  {result.data.get('recommendation', '')}"))


def _render_dashboard(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    theme = str(result.data.get("theme", ""))
    style = style_for_theme(theme)
    _status_line(console, result)
    _field(console, "theme", theme)
    for line in result.data.get("lines", []):
        console.print(Text("  "), Text(line, style=style))


# ── Demo renderer ─────────────────────────────────────────────────────


def _render_demo(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    for index, section in enumerate(result.data.get("sections", [])):
        if index:
            console.print()
        console.print(Rule(Text(section.get("title", ""), style="fin.section")))
        for line in section.get("lines", []):
            console.print(Text(line))


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    for warning in result.warnings if verbose else []:
        console.print(Text(f"  warning: {warning}", style="fin.warning"))


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "show_plan": _render_plan,
    "create_plan": _render_plan,
    "register_plan": _render_plan,
    "list_plans": _render_plan_table,
    "run_recipe": _render_simulator,
    "simulate": _render_simulator,
    "open_account": _render_account,
    "recommend": _render_recommendation,
    "render_dashboard": _render_dashboard,
    "demo": _render_demo,
}
