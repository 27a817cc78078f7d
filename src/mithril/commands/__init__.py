"""Subcommand modules for mithril.

Provides register_commands() which uses deferred imports to keep
``mithril --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group."""
    from mithril.commands.inspect import inspect

    cli.add_command(inspect)
