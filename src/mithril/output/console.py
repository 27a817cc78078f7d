"""Rich console used to build CLI output as a string.

The console records what is printed and hands it back as text, so
renderers stay pure ``ServiceResult -> str`` functions and click decides
where the text goes.
"""

from __future__ import annotations

import io

from rich.console import Console
from rich.theme import Theme

MITHRIL_THEME = Theme(
    {
        "mithril.ok": "bold green",
        "mithril.error": "bold red",
        "mithril.op": "bold cyan",
        "mithril.key": "dim",
        "mithril.offset": "dim",
        "mithril.hex": "bold",
        "mithril.ascii": "magenta",
        "mithril.source": "bold blue",
    }
)

DEFAULT_WIDTH = 120


def create_console(*, width: int = DEFAULT_WIDTH) -> Console:
    """A recording console whose live output is thrown away."""
    return Console(
        file=io.StringIO(),
        record=True,
        theme=MITHRIL_THEME,
        highlight=False,
        width=width,
    )


def get_output(console: Console) -> str:
    """Plain text of everything printed so far, trailing newlines stripped."""
    return console.export_text(styles=False).rstrip("\n")
