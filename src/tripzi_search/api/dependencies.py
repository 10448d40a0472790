"""Dependency wiring for FastAPI endpoints."""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from tripzi_search.domain.ports.availability_api import AvailabilityApiProtocol
from tripzi_search.domain.services.codec import SearchCodec
from tripzi_search.domain.services.flight_search import FlightSearchClient
from tripzi_search.infrastructure.availability_api_adapter import AvailabilityApiAdapter


@lru_cache(maxsize=1)
def get_codec() -> SearchCodec:
    return SearchCodec()


def get_availability_api() -> AvailabilityApiProtocol:
    """Return httpx adapter for the availability endpoint."""
    return AvailabilityApiAdapter()


def get_flight_search_client(
    availability_api: AvailabilityApiProtocol = Depends(get_availability_api),
    codec: SearchCodec = Depends(get_codec),
) -> FlightSearchClient:
    """Assemble the domain service."""
    return FlightSearchClient(availability_api=availability_api, codec=codec)
