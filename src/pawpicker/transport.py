# Files client — HTTP client for the remote browse/read-file API.
# Created: 2026-10-19

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from pawpicker.errors import ApplicationError, ConnectivityError, HttpError, ReadError
from pawpicker.models import FileContent, Listing

logger = logging.getLogger(__name__)

_BROWSE_PATH = "/v1/files/browse"
_READ_FILE_PATH = "/v1/files/read-file"


class FilesClient:
    """Async client for the file server's two read-only endpoints.

    Every failure surfaces as one of the :mod:`pawpicker.errors` classes.
    Nothing is retried.

    Args:
        base_url: Server base, e.g. ``http://127.0.0.1:8888/api``.
        token: Optional bearer token.
        timeout: Per-request timeout in seconds; ``None`` waits forever.
        transport: Optional httpx transport (tests use ASGI/mock transports).
    """

    def __init__(
        self,
        base_url: str,
        *,
        token: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings=None, **kwargs: Any) -> FilesClient:
        """Build a client from :class:`pawpicker.config.Settings`."""
        if settings is None:
            from pawpicker.config import get_settings

            settings = get_settings()
        return cls(
            settings.server_url,
            token=settings.api_token,
            timeout=settings.request_timeout,
            **kwargs,
        )

    async def __aenter__(self) -> FilesClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _get(self, url: str, params: dict[str, str]) -> httpx.Response:
        try:
            return await self._http.get(url, params=params)
        except httpx.HTTPError as e:
            logger.info("GET %s failed: %s", url, e)
            raise ConnectivityError(str(e) or type(e).__name__) from e

    async def browse(self, path: str, mode: str = "all") -> Listing:
        """List *path* on the server.

        Raises:
            ConnectivityError: transport failure or unparseable body.
            HttpError: non-2xx status.
            ApplicationError: 2xx status with an ``error`` in the payload.
        """
        resp = await self._get(_BROWSE_PATH, {"path": path, "mode": mode})
        if not resp.is_success:
            logger.info("Browse %r returned HTTP %s", path, resp.status_code)
            raise HttpError(resp.status_code)

        try:
            listing = Listing.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise ConnectivityError(f"Malformed browse response: {e}") from e

        if listing.error is not None:
            raise ApplicationError(listing.error or "Server reported an error")
        return listing

    async def read_file(self, path: str) -> FileContent:
        """Fetch the text content of the file at *path*.

        Raises:
            ConnectivityError: transport failure or unparseable body.
            ReadError: non-2xx status; ``detail`` is the plain-text body.
        """
        resp = await self._get(_READ_FILE_PATH, {"path": path})
        if not resp.is_success:
            detail = resp.text.strip() or resp.reason_phrase
            logger.info("Read %r returned HTTP %s: %s", path, resp.status_code, detail)
            raise ReadError(detail, status=resp.status_code)

        try:
            return FileContent.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise ConnectivityError(f"Malformed read-file response: {e}") from e
