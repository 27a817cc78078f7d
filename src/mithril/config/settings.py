"""Resolved settings for one mithril invocation.

Two sources only, highest first:
  1. CLI flags passed by Click
  2. The TOML file named with ``--config``, if any

There is no discovery: without ``--config`` the code defaults apply.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import BaseModel, Field, ValidationError

from mithril.config.models import InspectConfig


def read_config_file(path: Path) -> dict[str, Any]:
    """Parse the TOML file at *path*.

    Raises:
        click.ClickException: The file is missing, unreadable or not TOML.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise click.ClickException(f"Cannot read config file {path}: {exc.strerror}") from exc
    try:
        return tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc


class MithrilSettings(BaseModel):
    """Output flags plus the ``[inspect]`` section, frozen once built.

    Attributes:
        config_path: The TOML file that was loaded, or None for defaults.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    inspect: InspectConfig = Field(default_factory=InspectConfig)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | Path | None = None,
        **cli_flags: Any,
    ) -> MithrilSettings:
        """Build settings from CLI flags layered over an optional TOML file.

        Flags set to their default (``False``) do not hide values from the file.
        """
        values: dict[str, Any] = {}
        path = Path(config_path) if config_path else None
        if path is not None:
            values.update(read_config_file(path))
            values["config_path"] = path
        values.update({name: flag for name, flag in cli_flags.items() if flag})
        try:
            return cls.model_validate(values)
        except ValidationError as exc:
            raise click.ClickException(f"Invalid settings in {path}:\n{exc}") from exc
