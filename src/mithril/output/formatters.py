"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich tables and colors),
for scripts (--quiet) or for machines (--json). This module picks the
renderer for the requested output mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from mithril.output.renderers import DEFAULT_BYTES_PER_ROW, render_quiet, render_result

if TYPE_CHECKING:
    from mithril.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags, frozen after construction."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    bytes_per_row: int = DEFAULT_BYTES_PER_ROW


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    Priority: JSON, then quiet, then the Rich human renderer.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(
        result,
        verbose=settings.verbose,
        bytes_per_row=settings.bytes_per_row,
    )
