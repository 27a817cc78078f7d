from mithril.cli import cli

cli()
