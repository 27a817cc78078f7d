"""Tests for the replay error taxonomy."""

from __future__ import annotations

import dataclasses

import pytest

from mithril.domain.demo import Demo
from mithril.domain.errors import InvalidFormat, IoFailure, is_error


class TestIoFailure:
    def test_wraps_cause(self) -> None:
        cause = OSError("disk on fire")
        err = IoFailure(cause)
        assert err.cause is cause
        assert err.code == "IO_FAILURE"
        assert "disk on fire" in err.message

    def test_frozen(self) -> None:
        err = IoFailure(EOFError("short"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            err.cause = OSError()  # type: ignore[misc]


class TestInvalidFormat:
    def test_code_and_message(self) -> None:
        err = InvalidFormat()
        assert err.code == "INVALID_FORMAT"
        assert "magic" in err.message

    def test_instances_are_equal(self) -> None:
        assert InvalidFormat() == InvalidFormat()


class TestIsError:
    def test_error_kinds(self) -> None:
        assert is_error(InvalidFormat())
        assert is_error(IoFailure(EOFError()))

    def test_demo_is_not_error(self) -> None:
        demo = Demo.try_from_bytes(b"PBDEMS2\x00")
        assert not is_error(demo)

    def test_other_values(self) -> None:
        assert not is_error(None)
        assert not is_error(OSError())
