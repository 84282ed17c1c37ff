"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table
from rich.text import Text

from pkgverify.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from pkgverify.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.op == "verify":
        _render_verify(result, console, verbose=verbose)
    elif result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        lines = [f"ERROR: {result.op} — {msg}"]
        lines.extend(str(i.get("message", "")) for i in result.data.get("issues", []))
        return "\n".join(lines)

    if result.op == "resolve":
        return str(result.data.get("directory", ""))
    if result.op == "paths":
        return "\n".join(str(item["path"]) for item in result.data.get("items", []))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="pkg.ok")
    op = Text(f"  {result.op}", style="pkg.op")
    console.print(label, op, sep="")


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="pkg.key")
    if key in ("name", "package"):
        v = Text(str(value), style="pkg.name")
    elif key in ("directory", "from"):
        v = Text(str(value), style="pkg.path")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="pkg.error")
    op = Text(f"  {result.op}", style="pkg.op")
    dash = Text(" — ")
    console.print(label, op, dash, Text(msg), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {escape(str(v))}")


# ── Verify renderer ───────────────────────────────────────────────────


def _render_verify(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render verification results with one line per issue."""
    d = result.data
    issues = d.get("issues", [])

    if result.ok:
        _status_line(console, result)
    else:
        _render_error(result, console, verbose=False)

    _field(console, "package", d.get("package", ""))
    _field(console, "directory", d.get("directory", ""))
    _field(console, "packages_checked", d.get("packages", 0))

    if issues:
        console.print()
        for issue in issues:
            kind = escape(str(issue.get("kind", "")))
            msg = escape(str(issue.get("message", "")))
            console.print(f"  [pkg.error]error[/pkg.error] [pkg.kind]{kind}[/pkg.kind]: {msg}")
            if verbose and issue.get("directory"):
                console.print(f"    [pkg.path]{escape(str(issue['directory']))}[/pkg.path]")

    bindings = d.get("bindings", [])
    if bindings:
        _field(console, "native_bindings", ", ".join(bindings))

    if verbose:
        for path in d.get("paths", []):
            console.print(f"  [pkg.path]{escape(str(path))}[/pkg.path]")


# ── Resolver renderers ────────────────────────────────────────────────


def _render_resolve(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("name", "from", "directory"):
        if key in result.data:
            _field(console, key, result.data[key])


def _render_paths(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the ordered search path as a table."""
    _status_line(console, result)
    _field(console, "from", result.data.get("from", ""))

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Path", style="pkg.path")
    table.add_column("Exists")
    for idx, item in enumerate(result.data.get("items", []), start=1):
        exists = "[pkg.ok]yes[/pkg.ok]" if item.get("exists") else "no"
        table.add_row(str(idx), escape(str(item.get("path", ""))), exists)
    console.print(table)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "resolve": _render_resolve,
    "paths": _render_paths,
}
