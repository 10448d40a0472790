"""httpx adapter for the airline availability endpoint."""

from __future__ import annotations

import logging

import httpx

from ..config import AVAILABILITY_HEADERS, get_settings

logger = logging.getLogger(__name__)


class AvailabilityApiAdapter:
    """
    Adapter issuing the availability POST to conform to AvailabilityApiProtocol.

    Response status codes are not interpreted: the airline answers failures
    with JSON documents of varying shape, and deciding what they mean is left
    to the decoder. Transport errors propagate to the caller unchanged.

    A fresh AsyncClient is opened per call unless one is injected, so
    concurrent searches share no connection state.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        """
        Initialize adapter.

        Args:
            client: Optional shared AsyncClient (caller owns its lifecycle)
            url: Availability endpoint, defaults to settings
            timeout: Request timeout in seconds, defaults to settings
        """
        settings = get_settings()
        self._client = client
        self._url = url if url is not None else settings.availability_url
        self._timeout = timeout if timeout is not None else settings.request_timeout

    @property
    def url(self) -> str:
        return self._url

    async def post_availability(self, body: bytes) -> bytes | None:
        """POST the serialized payload and return the raw response body."""
        if self._client is not None:
            return await self._send(self._client, body)

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            return await self._send(client, body)

    async def _send(self, client: httpx.AsyncClient, body: bytes) -> bytes | None:
        response = await client.post(
            self._url,
            content=body,
            headers=AVAILABILITY_HEADERS,
            timeout=self._timeout,
        )
        logger.debug(
            "availability response received",
            extra={"status_code": response.status_code, "size": len(response.content)},
        )
        if response.is_error:
            logger.warning(
                "availability endpoint returned error status",
                extra={"status_code": response.status_code},
            )
        return response.content or None
