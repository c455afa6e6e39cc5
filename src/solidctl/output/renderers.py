"""Human-readable rendering of a ServiceResult, one renderer per ``op``.

Renderers register themselves with :func:`_renders` and print into a
console from :func:`create_console`.  Ops without a renderer get a
plain key/value listing of their data.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from solidctl.output.console import (
    create_console,
    get_output,
    style_for_code,
    style_for_family,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from solidctl.services.result import ServiceResult

    Renderer = Callable[[ServiceResult, Console, bool], None]

_RENDERERS: dict[str, Renderer] = {}

_ID_KEYS = frozenset({"reference", "email"})
_MONEY_KEYS = frozenset({"amount", "balance", "total"})


def _renders(*ops: str) -> Callable[[Renderer], Renderer]:
    def decorator(fn: Renderer) -> Renderer:
        for op in ops:
            _RENDERERS[op] = fn
        return fn

    return decorator


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Text for *result*; ANSI codes are dropped when not writing to a terminal."""
    console = create_console()
    if not result.ok:
        _render_error(result, console, verbose)
    else:
        _RENDERERS.get(result.op, _render_generic)(result, console, verbose)
        if verbose and result.meta:
            console.print()
            _mapping(console, "meta", result.meta)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """One line: ``OK: op`` or ``ERROR: op — message``."""
    if result.ok:
        return f"OK: {result.op}"
    message = result.error.message if result.error else "Unknown error"
    return f"ERROR: {result.op} — {message}"


# ── Building blocks ───────────────────────────────────────────────────


def _headline(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="solid.ok"), Text(f"  {result.op}", style="solid.op"), sep="")


def _value_style(key: str) -> str:
    if key.endswith("_id") or key in _ID_KEYS:
        return "solid.id"
    if key in _MONEY_KEYS:
        return "solid.money"
    return ""


def _field(console: Console, key: str, value: Any) -> None:
    if isinstance(value, (dict, list)):
        value = _json.dumps(value, separators=(",", ":"))
    console.print(
        Text(f"  {key}: ", style="solid.key"),
        Text(str(value), style=_value_style(key)),
        sep="",
    )


def _mapping(console: Console, title: str, values: dict[str, Any]) -> None:
    console.print(Text(f"  {title}:", style="dim"))
    for key, value in values.items():
        console.print(f"    {key}: {value}")


def _table(*columns: str | tuple[str, dict[str, Any]]) -> Table:
    """A compact table; a column is a header or ``(header, column_kwargs)``."""
    table = Table(pad_edge=False, box=None, show_edge=False)
    for column in columns:
        header, options = (column, {}) if isinstance(column, str) else column
        table.add_column(header, **options)
    return table


def _render_error(result: ServiceResult, console: Console, verbose: bool) -> None:
    err = result.error
    console.print(
        Text("ERROR", style="solid.error"),
        Text(f"  {result.op}", style="solid.op"),
        Text(" — "),
        err.message if err else "Unknown error",
        sep="",
    )
    if err is None:
        return
    console.print(
        Text("  code: ", style="solid.key"),
        Text(err.code, style=style_for_code(err.code)),
        sep="",
    )
    if verbose and err.detail:
        _mapping(console, "detail", err.detail)
    if "balance" in result.data:
        _field(console, "balance", result.data["balance"])


# ── Per-op renderers ──────────────────────────────────────────────────


@_renders("account_simulate")
def _render_account(result: ServiceResult, console: Console, verbose: bool) -> None:
    data = result.data
    _headline(console, result)
    _field(console, "owner", data.get("owner", ""))
    _field(console, "balance", data.get("balance", ""))

    if history := data.get("history"):
        table = _table(
            "Kind",
            ("Amount", {"style": "solid.money", "justify": "right"}),
            ("Balance", {"justify": "right"}),
        )
        for entry in history:
            table.add_row(entry["kind"], str(entry["amount"]), str(entry["balance_after"]))
        console.print()
        console.print(table)


@_renders("shapes_area")
def _render_areas(result: ServiceResult, console: Console, verbose: bool) -> None:
    columns: list[Any] = ["Shape", ("Area", {"justify": "right"})]
    if verbose:
        columns.append(("Capabilities", {"style": "dim"}))
    table = _table(*columns)
    for item in result.data.get("items", []):
        row = [item["shape"], f"{float(item['area']):.4f}"]
        if verbose:
            row.append(", ".join(item.get("capabilities", [])))
        table.add_row(*row)
    console.print(table)
    console.print(f"\ntotal area: {float(result.data.get('total_area', 0.0)):.4f}")


@_renders("animals_speak", "vehicles_drive")
def _render_lines(result: ServiceResult, console: Console, verbose: bool) -> None:
    _headline(console, result)
    for line in result.data.get("lines", []):
        console.print(f"  {line}")


@_renders("users_register")
def _render_users(result: ServiceResult, console: Console, verbose: bool) -> None:
    items = result.data.get("items", [])
    table = _table(
        ("Email", {"style": "solid.id", "no_wrap": True}),
        "Name",
        ("Age", {"justify": "right"}),
        "Adult",
    )
    for user in items:
        adult = "yes" if user.get("adult") else "no"
        table.add_row(user["email"], user["name"], str(user["age"]), adult)
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} users registered")


@_renders("principles_list")
def _render_principles(result: ServiceResult, console: Console, verbose: bool) -> None:
    columns: list[Any] = [
        ("Key", {"style": "solid.id", "no_wrap": True}),
        "Name",
        "Family",
        "Summary",
    ]
    if verbose:
        columns.append(("Module", {"style": "dim"}))
    table = _table(*columns)
    for principle in result.data.get("items", []):
        family = principle.get("family", "")
        row: list[Any] = [
            principle["key"],
            principle["name"],
            Text(family, style=style_for_family(family)),
            principle.get("summary", ""),
        ]
        if verbose:
            row.append(principle.get("module", ""))
        table.add_row(*row)
    console.print(table)


@_renders("principle_show")
def _render_principle(result: ServiceResult, console: Console, verbose: bool) -> None:
    data = result.data
    body = "\n".join(
        [
            data.get("summary", ""),
            "",
            f"flaw:   {data.get('violation', '')}",
            f"remedy: {data.get('remedy', '')}",
            f"module: {data.get('module', '')}",
        ]
    )
    border = style_for_family(data.get("family", "")) or "dim"
    title = f"{data.get('key', '?')}: {data.get('name', '')}"
    console.print(Panel(body, title=title, border_style=border, expand=False))


def _render_generic(result: ServiceResult, console: Console, verbose: bool) -> None:
    _headline(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
