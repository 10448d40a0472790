"""API routes for the flight search service."""

from __future__ import annotations

import logging
from uuid import uuid4

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from tripzi_search.api.dependencies import get_flight_search_client
from tripzi_search.domain.errors import SearchResult
from tripzi_search.domain.models import FlightOption, SearchPayload
from tripzi_search.domain.services.flight_search import FlightSearchClient

logger = logging.getLogger(__name__)

router = APIRouter()


class SearchErrorBody(BaseModel):
    kind: str
    message: str


class SearchFlightsResponse(BaseModel):
    """Outcome of a search as seen by the presentation layer."""

    success: bool
    pid: str
    options: list[FlightOption]
    error: SearchErrorBody | None = None

    @classmethod
    def from_result(cls, result: SearchResult) -> SearchFlightsResponse:
        error = None
        if result.error is not None:
            error = SearchErrorBody(kind=result.error.kind, message=result.error.user_message)
        return cls(success=result.success, pid=result.pid, options=result.options, error=error)


@router.post(
    "/search_flights",
    response_model=SearchFlightsResponse,
    response_model_exclude_none=True,
    tags=["flights"],
)
async def search_flights(
    payload: SearchPayload,
    pid: str | None = Query(
        default=None,
        description="External process identifier"),
    client: FlightSearchClient = Depends(get_flight_search_client),
) -> SearchFlightsResponse:
    """
    Search the airline availability endpoint.

    Failures are reported in the body with a user-facing message, never as
    HTTP errors.
    """
    pid = pid or uuid4().hex
    logger.info("search_flights called", extra={"event": "call", "pid": pid})
    result = await client.search_flights(payload, pid=pid)

    logger.info(
        "search_flights finished",
        extra={
            "pid": result.pid,
            "success": result.success,
            "options_count": len(result.options),
            "error_kind": result.error.kind if result.error else None,
        },
    )
    return SearchFlightsResponse.from_result(result)
