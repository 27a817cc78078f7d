"""Root CLI group for mithril with global flags and command registration."""

from __future__ import annotations

import click

from mithril import __version__
from mithril.commands import register_commands
from mithril.commands._base import MithrilGroup
from mithril.commands._context import AppContext
from mithril.config.settings import MithrilSettings


@click.group(
    cls=MithrilGroup,
    invoke_without_command=True,
    examples="""\
  mithril inspect match.dem
  mithril --json inspect - < match.dem
  mithril -v --log-json inspect match.dem""",
)
@click.version_option(version=__version__, prog_name="mithril")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-c", "--config", "config_path", default=None, help="TOML file with [inspect] settings."
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """mithril: Source 2 replay inspection CLI."""
    settings = MithrilSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
