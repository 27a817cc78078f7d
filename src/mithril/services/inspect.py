"""InspectService: validate a replay stream and summarise its payload."""

from __future__ import annotations

import logging
import os
from typing import BinaryIO

from mithril.domain.demo import Demo
from mithril.services.base import BaseService
from mithril.services.result import ServiceResult

logger = logging.getLogger(__name__)

OP = "inspect_demo"


def source_name(source: BinaryIO) -> str:
    """Best-effort display name for an open stream."""
    name = getattr(source, "name", None)
    if isinstance(name, (str, os.PathLike)) and os.fspath(name) not in ("-", "<stdin>"):
        return os.fspath(name)
    return "<stdin>"


class InspectService(BaseService):
    """Load a replay from a stream and report on its payload."""

    def inspect(self, source: BinaryIO, *, head: int | None = None) -> ServiceResult:
        """Validate *source* and return the first *head* payload bytes as hex.

        Args:
            source: Binary stream positioned at the start of the replay.
            head: Number of payload bytes to include. Defaults to
                ``[inspect] head_bytes`` from the settings.
        """
        meta = {"source": source_name(source)}
        if head is None:
            head = self._settings.inspect.head_bytes
        if head < 0:
            return ServiceResult.failure(
                OP,
                "INVALID_ARGUMENT",
                f"head must be non-negative, got {head}",
                meta=meta,
            )

        demo = Demo.try_from_read(source)
        if not isinstance(demo, Demo):
            return self._failure(OP, demo, meta=meta)

        prefix = demo.data[:head]
        logger.debug("Loaded replay from %s: %d payload bytes", meta["source"], len(demo))
        return ServiceResult.success(
            OP,
            {
                "payload_nbytes": len(demo),
                "head_nbytes": len(prefix),
                "head": prefix.hex(),
            },
            meta=meta,
        )
