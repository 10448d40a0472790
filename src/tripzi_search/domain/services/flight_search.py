"""Application service orchestrating one flight search against the availability API."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from uuid import uuid4

from ...logging_config import SearchLogAdapter
from ..errors import (
    UNKNOWN_ERROR,
    BusinessError,
    DecodeError,
    EmptyResponseError,
    SearchResult,
    SerializationError,
    TransportError,
)
from ..models import SearchPayload, SearchResponse
from ..ports.availability_api import AvailabilityApiProtocol
from .codec import SearchCodec

logger = logging.getLogger(__name__)

CompletionCallback = Callable[[SearchResult], None]


class FlightSearchClient:
    """
    Build, send and decode a single availability search.

    Every outcome is returned as a SearchResult; no exception escapes
    search_flights. The client keeps no state between calls.
    """

    def __init__(
        self,
        availability_api: AvailabilityApiProtocol,
        codec: SearchCodec | None = None,
    ) -> None:
        self._availability_api = availability_api
        self._codec = codec or SearchCodec()

    async def search_flights(
        self, payload: SearchPayload, pid: str | None = None
    ) -> SearchResult:
        """Execute search and return the flattened options or a typed error."""
        process_id = pid or self._generate_pid()
        log = SearchLogAdapter(logger, {"pid": process_id})

        try:
            body = self._codec.encode_payload(payload)
        except Exception as e:
            log.error("payload serialization failed", exc_info=True)
            return SearchResult.failed(process_id, SerializationError(e))

        try:
            raw = await self._availability_api.post_availability(body)
        except Exception as e:
            log.error("availability request failed", exc_info=True)
            return SearchResult.failed(process_id, TransportError(e))

        if not raw:
            log.error("availability response has no body")
            return SearchResult.failed(process_id, EmptyResponseError())

        try:
            response = self._codec.decode_response(raw)
        except Exception as e:
            # Reported to users as "no flights"; the real cause is kept here.
            log.warning("availability response could not be decoded", exc_info=True)
            return SearchResult.failed(process_id, DecodeError(e))

        return self._to_result(process_id, response, log)

    def schedule_search(
        self,
        payload: SearchPayload,
        on_complete: CompletionCallback | None = None,
        pid: str | None = None,
    ) -> asyncio.Task[SearchResult]:
        """
        Start search in the background on the running loop.

        `on_complete` is invoked exactly once with the result. A cancelled
        task still completes the callback, with a TransportError.
        """
        process_id = pid or self._generate_pid()
        task = asyncio.get_running_loop().create_task(
            self.search_flights(payload, pid=process_id)
        )
        if on_complete is not None:

            def _done(finished: asyncio.Task[SearchResult]) -> None:
                if finished.cancelled():
                    result = SearchResult.failed(
                        process_id, TransportError(asyncio.CancelledError())
                    )
                else:
                    result = finished.result()
                on_complete(result)

            task.add_done_callback(_done)
        return task

    def _to_result(
        self,
        process_id: str,
        response: SearchResponse,
        log: SearchLogAdapter,
    ) -> SearchResult:
        if response.success and response.data is not None:
            options = self._codec.flatten_options(response.data)
            log.info(
                "search finished",
                extra={
                    "legs": len(response.data.origin_destination_information_list),
                    "options_count": len(options),
                },
            )
            return SearchResult.ok(process_id, options)

        code = self._first_detail_code(response)
        log.info("search rejected by endpoint", extra={"code": code, "success": response.success})
        return SearchResult.failed(process_id, BusinessError(code))

    @staticmethod
    def _first_detail_code(response: SearchResponse) -> str:
        if response.message is None or not response.message.detail:
            return UNKNOWN_ERROR
        return response.message.detail[0].code

    @staticmethod
    def _generate_pid() -> str:
        return uuid4().hex
