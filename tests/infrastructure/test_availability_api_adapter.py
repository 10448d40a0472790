"""Tests for AvailabilityApiAdapter."""

from __future__ import annotations

import httpx
import pytest

from tripzi_search.config import AVAILABILITY_HEADERS, AVAILABILITY_URL
from tripzi_search.infrastructure.availability_api_adapter import AvailabilityApiAdapter


def _adapter(handler, captured: list[httpx.Request] | None = None) -> AvailabilityApiAdapter:
    def _record(request: httpx.Request) -> httpx.Response:
        if captured is not None:
            captured.append(request)
        return handler(request)

    client = httpx.AsyncClient(transport=httpx.MockTransport(_record))
    return AvailabilityApiAdapter(client=client, url=AVAILABILITY_URL)


@pytest.mark.asyncio
async def test_posts_body_with_fixed_headers() -> None:
    captured: list[httpx.Request] = []
    adapter = _adapter(lambda request: httpx.Response(200, content=b'{"success": true}'), captured)

    body = await adapter.post_availability(b'{"moduleType": "TICKETING"}')

    assert body == b'{"success": true}'
    request = captured[0]
    assert request.method == "POST"
    assert str(request.url) == "https://www.turkishairlines.com/api/v1/availability"
    assert request.url.query == b""
    assert request.content == b'{"moduleType": "TICKETING"}'
    for name, value in AVAILABILITY_HEADERS.items():
        assert request.headers[name] == value
    assert request.headers["X-Country"] == "int"
    assert request.headers["Content-Type"] == "application/json"


@pytest.mark.asyncio
async def test_empty_body_returns_none() -> None:
    adapter = _adapter(lambda request: httpx.Response(200))

    assert await adapter.post_availability(b"{}") is None


@pytest.mark.asyncio
async def test_error_status_still_returns_body(caplog) -> None:
    adapter = _adapter(
        lambda request: httpx.Response(503, content=b'{"success": false}')
    )

    with caplog.at_level("WARNING"):
        body = await adapter.post_availability(b"{}")

    assert body == b'{"success": false}'
    assert "error status" in caplog.text


@pytest.mark.asyncio
async def test_connection_error_propagates() -> None:
    def _refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    adapter = _adapter(_refuse)

    with pytest.raises(httpx.ConnectError):
        await adapter.post_availability(b"{}")


def test_defaults_come_from_settings() -> None:
    adapter = AvailabilityApiAdapter()

    assert adapter.url == AVAILABILITY_URL
