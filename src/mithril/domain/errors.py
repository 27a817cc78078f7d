"""Error taxonomy for replay loading.

A closed union of two kinds. Constructors return one of these instead of
raising, so every call site can tell an I/O failure from a bad file.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class IoFailure:
    """Reading the replay failed, including a stream that ended too early."""

    code: ClassVar[str] = "IO_FAILURE"

    cause: OSError | EOFError

    @property
    def message(self) -> str:
        return f"Could not read replay: {self.cause}"


@dataclass(frozen=True)
class InvalidFormat:
    """The replay did not start with the recognized magic bytes."""

    code: ClassVar[str] = "INVALID_FORMAT"

    @property
    def message(self) -> str:
        return "Not a Source 2 replay (bad magic bytes)"


ErrorKind = IoFailure | InvalidFormat


def is_error(value: object) -> bool:
    """Whether *value* is one of the :data:`ErrorKind` variants."""
    return isinstance(value, (IoFailure, InvalidFormat))
