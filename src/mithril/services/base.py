"""BaseService: shared plumbing for mithril services.

Services receive the resolved :class:`MithrilSettings` and translate
domain error values into failed :class:`ServiceResult` objects.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from mithril.domain.errors import ErrorKind, IoFailure
from mithril.services.result import ServiceResult

if TYPE_CHECKING:
    from mithril.config.settings import MithrilSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes."""

    def __init__(self, settings: MithrilSettings) -> None:
        self._settings = settings

    @staticmethod
    def _failure(
        op: str,
        error: ErrorKind,
        *,
        meta: dict[str, Any] | None = None,
    ) -> ServiceResult:
        """Convert a domain error into a failed ServiceResult.

        Only :class:`IoFailure` has detail: the repr of its cause.
        """
        detail = {"cause": repr(error.cause)} if isinstance(error, IoFailure) else {}
        logger.debug("%s failed: %s", op, error.code)
        return ServiceResult.failure(op, error.code, error.message, detail=detail, meta=meta)
