"""Command: validate a replay and dump the start of its payload."""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO

import click

from mithril.commands._base import MithrilCommand

if TYPE_CHECKING:
    from mithril.commands._context import AppContext


@click.command(
    cls=MithrilCommand,
    examples="""\
  mithril inspect match.dem
  cat match.dem | mithril inspect
  mithril inspect match.dem --head 64
  mithril --json inspect match.dem
  mithril -q inspect match.dem""",
)
@click.argument("source", type=click.File("rb"), default="-")
@click.option(
    "--head",
    type=click.IntRange(min=0),
    default=None,
    help="Payload bytes to show (default: [inspect] head_bytes, 32).",
)
@click.pass_obj
def inspect(app: AppContext, source: BinaryIO, head: int | None) -> None:
    """Check that SOURCE is a Source 2 replay and hex-dump its payload.

    SOURCE is a file path, or '-' (the default) for standard input.
    """
    from mithril.services.inspect import InspectService

    app.emit(InspectService(app.settings).inspect(source, head=head))
