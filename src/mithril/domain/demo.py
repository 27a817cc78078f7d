"""The validated replay wrapper.

A :class:`Demo` holds the contents of a ``.dem`` file. Every constructor
checks the Source 2 magic signature first.

INVARIANT: A Demo only exists if its input passed validation.
Failed construction returns an :data:`ErrorKind`, never a Demo.

Two constructors, two owned ranges:
- ``try_from_bytes`` keeps the whole buffer, signature included.
- ``try_from_read`` drops the signature and the reserved block that
  follows it, keeping only the payload.
"""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

from mithril.domain.errors import ErrorKind, InvalidFormat, IoFailure

# All valid Dota 2 replays (Source 2 engine) start with these 8 bytes.
SOURCE2_MAGIC = b"PBDEMS2\x00"

# Unused block between the signature and the payload.
RESERVED_NBYTES = 8

HEADER_NBYTES = len(SOURCE2_MAGIC) + RESERVED_NBYTES


def _read_exact(source: BinaryIO, nbytes: int) -> bytes:
    """Read exactly *nbytes* from *source*, looping over partial reads.

    Raises:
        EOFError: The stream ended before *nbytes* were available.
    """
    chunks: list[bytes] = []
    remaining = nbytes
    while remaining:
        chunk = source.read(remaining)
        if not chunk:
            got = nbytes - remaining
            msg = f"expected {nbytes} bytes, stream ended after {got}"
            raise EOFError(msg)
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


class Demo:
    """Contents of a validated Source 2 replay.

    Do not instantiate directly; use :meth:`try_from_bytes`,
    :meth:`try_from_read` or :meth:`from_path`.
    """

    __slots__ = ("_data",)

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)

    @classmethod
    def try_from_bytes(cls, buffer: bytes | bytearray | memoryview) -> Demo | ErrorKind:
        """Validate an in-memory buffer, keeping all of it.

        Any length is accepted, including empty. Buffers shorter than the
        signature are :class:`InvalidFormat`.
        """
        data = bytes(buffer)
        if not data.startswith(SOURCE2_MAGIC):
            return InvalidFormat()
        return cls(data)

    @classmethod
    def try_from_read(cls, source: BinaryIO) -> Demo | ErrorKind:
        """Validate a binary stream, keeping only the payload.

        The signature is checked before the reserved block is read, so a
        wrong file is reported as :class:`InvalidFormat` even if it is
        shorter than the full header. The rest of the stream is buffered.
        """
        try:
            magic = _read_exact(source, len(SOURCE2_MAGIC))
        except (OSError, EOFError) as exc:
            return IoFailure(exc)

        if magic != SOURCE2_MAGIC:
            return InvalidFormat()

        try:
            _read_exact(source, RESERVED_NBYTES)
            payload = source.read()
        except (OSError, EOFError) as exc:
            return IoFailure(exc)

        return cls(payload)

    @classmethod
    def from_path(cls, path: str | Path) -> Demo | ErrorKind:
        """Open *path* in binary mode and validate it as a stream."""
        try:
            fh = Path(path).open("rb")
        except OSError as exc:
            return IoFailure(exc)
        with fh:
            return cls.try_from_read(fh)

    @property
    def data(self) -> bytes:
        """Read-only view of the owned bytes."""
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Demo):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f"Demo(nbytes={len(self._data)})"
