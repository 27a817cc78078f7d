"""Shared pytest fixtures and test helpers for mithril tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from mithril.config.settings import MithrilSettings
from mithril.domain.demo import SOURCE2_MAGIC

RESERVED = bytes([0xDE, 0xAD, 0xC0, 0xDE, 0xDE, 0xAD, 0xC0, 0xDE])
PAYLOAD = bytes([0xDE, 0xAD, 0xBE, 0xEF])


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings() -> MithrilSettings:
    """Code-default settings, no config file."""
    return MithrilSettings.from_cli()


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Write a TOML config file and return its path."""

    def _write(text: str) -> Path:
        path = tmp_path / "mithril.toml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_replay(payload: bytes = PAYLOAD, reserved: bytes = RESERVED) -> bytes:
    """Build replay bytes: signature, reserved block, payload."""
    return SOURCE2_MAGIC + reserved + payload


def write_replay(path: Path, payload: bytes = PAYLOAD) -> Path:
    """Write a valid replay to *path* and return it."""
    path.write_bytes(make_replay(payload))
    return path
