"""BaseService — abstract foundation for all nowctl services.

Every service receives an :class:`ApiClient` at construction time and
converts client-side API errors (4xx) into ``ServiceResult`` failures.
Server faults (5xx after retries) propagate as :class:`APIError`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from nowctl.services.result import ServiceResult

if TYPE_CHECKING:
    from nowctl.infrastructure.api import APIError, ApiClient

logger = logging.getLogger(__name__)


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class ProjectService(BaseService):
            def add_domain(self, project: str, domain: str) -> ServiceResult:
                try:
                    body = self._client.fetch(...)
                except APIError as exc:
                    return self._api_failure("add_domain", exc)
                ...
    """

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    @staticmethod
    def _api_failure(op: str, exc: APIError) -> ServiceResult:
        """Convert a client-side APIError into a failed result.

        Re-raises *exc* when it is a server fault, so only answers the
        caller can act on travel as values.
        """
        if not exc.is_client_error:
            raise exc
        logger.debug("%s failed: %s %s", op, exc.status, exc.code)
        return ServiceResult.failure(
            op,
            exc.code or f"HTTP_{exc.status}",
            exc.message,
            detail=dict(exc.payload),
        )
