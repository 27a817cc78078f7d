"""Click command classes that carry usage examples.

``--help`` stays short and ends with a pointer to ``--examples``, which
prints the examples given at declaration time and exits.
"""

from __future__ import annotations

import textwrap
from typing import Any

import click


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    examples = getattr(ctx.command, "examples", None) or ""
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(textwrap.indent(textwrap.dedent(examples).strip("\n"), "  "))
    ctx.exit(0)


class _ExamplesMixin:
    """Stores ``examples`` and exposes them through an eager flag."""

    examples: str | None

    def _attach_examples(self, examples: str | None) -> None:
        self.examples = examples
        if examples:
            self.params.append(  # type: ignore[attr-defined]
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_print_examples,
                    help="Show usage examples and exit.",
                )
            )

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        super().format_epilog(ctx, formatter)  # type: ignore[misc]
        if self.examples:
            formatter.write_paragraph()
            formatter.write_text(f"Run '{ctx.command_path} --examples' for usage examples.")


class MithrilCommand(_ExamplesMixin, click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._attach_examples(examples)


class MithrilGroup(_ExamplesMixin, click.Group):
    """Group whose subcommands default to :class:`MithrilCommand`."""

    command_class = MithrilCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._attach_examples(examples)
