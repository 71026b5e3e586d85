"""ApiClient — thin httpx wrapper for the platform REST API.

Responsibilities:
- bearer-token auth and a stable User-Agent,
- team scoping (``teamId`` query parameter on every request),
- retrying 5xx responses and transport faults with exponential backoff,
- decoding JSON bodies and turning error bodies into :class:`APIError`.

4xx responses are never retried: they carry answers (conflicts, missing
permissions) that callers branch on.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

import httpx

from nowctl import __version__
from nowctl.infrastructure.api.errors import APIError

if TYPE_CHECKING:
    from nowctl.config.settings import NowSettings

logger = logging.getLogger(__name__)


class ApiClient:
    """Synchronous client for the platform API.

    Usage::

        with ApiClient(base_url="https://api.zeit.co", token="...") as client:
            user = client.fetch("/www/user")
    """

    def __init__(
        self,
        *,
        base_url: str,
        token: str,
        current_team: str | None = None,
        timeout: float = 30.0,
        max_retries: int = 3,
        backoff_factor: float = 0.5,
        debug: bool = False,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.current_team = current_team
        self.max_retries = max_retries
        self.backoff_factor = backoff_factor
        self.debug = debug
        self._http = httpx.Client(
            base_url=base_url,
            headers={
                "Authorization": f"Bearer {token}",
                "User-Agent": f"nowctl {__version__}",
                "Accept": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: NowSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> ApiClient:
        """Build a client from resolved CLI settings."""
        if not settings.token:
            msg = (
                "No API token found. Set NOWCTL_TOKEN, pass --token, "
                "or add `token` to nowctl.toml."
            )
            raise ValueError(msg)
        return cls(
            base_url=settings.api.url,
            token=settings.token,
            current_team=settings.current_team,
            timeout=settings.api.timeout,
            max_retries=settings.api.max_retries,
            backoff_factor=settings.api.backoff_factor,
            debug=settings.debug,
            transport=transport,
        )

    def __enter__(self) -> ApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def fetch(
        self,
        path: str,
        *,
        method: str = "GET",
        json: Any = None,
        params: dict[str, str] | None = None,
    ) -> Any:
        """Perform a request and return the decoded JSON body.

        Raises:
            APIError: On a non-2xx response (after retries for 5xx) or when
                the transport keeps failing.
        """
        query = dict(params or {})
        if self.current_team:
            query["teamId"] = self.current_team

        attempt = 0
        while True:
            logger.debug("%s %s (attempt %d)", method, path, attempt + 1)
            try:
                response = self._http.request(method, path, json=json, params=query)
            except httpx.TransportError as exc:
                if attempt >= self.max_retries:
                    raise APIError(0, f"Request to {path} failed: {exc}") from exc
                logger.debug("Transport error on %s %s: %s", method, path, exc)
            else:
                if response.status_code < 500 or attempt >= self.max_retries:
                    return self._handle(response)
                logger.debug("%s %s returned %d, retrying", method, path, response.status_code)

            self._sleep(attempt)
            attempt += 1

    def _sleep(self, attempt: int) -> None:
        delay = self.backoff_factor * (2**attempt)
        if delay > 0:
            time.sleep(delay)

    def _handle(self, response: httpx.Response) -> Any:
        """Decode *response* or raise :class:`APIError`."""
        body: Any = None
        if response.content:
            try:
                body = response.json()
            except ValueError:
                body = None

        logger.debug(
            "%s %s -> %d",
            response.request.method,
            response.request.url.path,
            response.status_code,
        )
        if self.debug and body is not None:
            logger.debug("Response body: %s", body)

        if response.is_success:
            return body
        raise APIError.from_response(response.status_code, body, response.reason_phrase)
