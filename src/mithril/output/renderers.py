"""Rich renderers for ServiceResult.

:func:`render_result` picks a renderer by ``result.op``; ops without one
get a flat key-value listing. Each printed line is a single ``Text`` so
spacing is exactly what the renderer builds.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from mithril.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from mithril.services.result import ServiceResult

DEFAULT_BYTES_PER_ROW = 16


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    bytes_per_row: int = DEFAULT_BYTES_PER_ROW,
) -> str:
    """Render a ServiceResult as plain text for a human reader."""
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, bytes_per_row=bytes_per_row)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console)


def render_quiet(result: ServiceResult) -> str:
    """One line for ``--quiet``: the hex head, ``OK: op`` or the error."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"
    head = result.data.get("head")
    return head if isinstance(head, str) else f"OK: {result.op}"


def hexdump_rows(
    data: bytes, *, bytes_per_row: int = DEFAULT_BYTES_PER_ROW
) -> list[tuple[str, str, str]]:
    """Split *data* into ``(offset, hex, ascii)`` display rows.

    Non-printable bytes show as ``.`` in the ASCII column.

    Examples:
        >>> hexdump_rows(b"PB\\x00")
        [('00000000', '50 42 00', 'PB.')]
    """
    rows: list[tuple[str, str, str]] = []
    for start in range(0, len(data), bytes_per_row):
        chunk = data[start : start + bytes_per_row]
        hex_part = " ".join(f"{b:02x}" for b in chunk)
        ascii_part = "".join(chr(b) if 0x20 <= b < 0x7F else "." for b in chunk)
        rows.append((f"{start:08x}", hex_part, ascii_part))
    return rows


def _status_line(label: str, label_style: str, op: str) -> Text:
    return Text.assemble((label, label_style), "  ", (op, "mithril.op"))


def _field(key: str, value: Any, *, indent: int = 2, style: str = "") -> Text:
    return Text.assemble(" " * indent, (f"{key}: ", "mithril.key"), (str(value), style))


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        console.print(_field(key, value, indent=4))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    line = _status_line("ERROR", "mithril.error", result.op)
    line.append(" - ")
    line.append(err.message if err else "Unknown error")
    console.print(line)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for key, value in err.detail.items():
            console.print(_field(key, value, indent=4))


def _render_generic(
    result: ServiceResult, console: Console, *, bytes_per_row: int = DEFAULT_BYTES_PER_ROW
) -> None:
    console.print(_status_line("OK", "mithril.ok", result.op))
    for key, value in result.data.items():
        console.print(_field(key, value))


def _render_inspect(
    result: ServiceResult, console: Console, *, bytes_per_row: int = DEFAULT_BYTES_PER_ROW
) -> None:
    """Replay summary, then a hex dump of the payload head."""
    console.print(_status_line("OK", "mithril.ok", result.op))
    if result.meta and "source" in result.meta:
        console.print(_field("source", result.meta["source"], style="mithril.source"))
    console.print(_field("payload_nbytes", result.data.get("payload_nbytes", 0)))
    console.print(_field("head_nbytes", result.data.get("head_nbytes", 0)))

    head = bytes.fromhex(result.data.get("head", ""))
    if not head:
        return
    table = Table(show_header=True, pad_edge=False, box=None)
    table.add_column("Offset", style="mithril.offset", no_wrap=True)
    table.add_column("Hex", style="mithril.hex", no_wrap=True)
    table.add_column("ASCII", style="mithril.ascii", no_wrap=True)
    for row in hexdump_rows(head, bytes_per_row=bytes_per_row):
        table.add_row(*row)
    console.print()
    console.print(table)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "inspect_demo": _render_inspect,
}
