"""Flight search client for the airline availability endpoint."""

from tripzi_search.domain.errors import SearchError, SearchResult
from tripzi_search.domain.models import SearchPayload
from tripzi_search.domain.services.flight_search import FlightSearchClient
from tripzi_search.infrastructure.availability_api_adapter import AvailabilityApiAdapter

__all__ = [
    "AvailabilityApiAdapter",
    "FlightSearchClient",
    "SearchError",
    "SearchPayload",
    "SearchResult",
]
