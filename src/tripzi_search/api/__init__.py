"""HTTP API for the flight search client."""

from tripzi_search.api.routes import router

__all__ = ["router"]
