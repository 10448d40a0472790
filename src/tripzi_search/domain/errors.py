"""Typed outcomes of a flight search call."""

from __future__ import annotations

from dataclasses import dataclass, field

from .models import FlightOption

UNKNOWN_ERROR = "Unknown error"
NO_FLIGHTS_MESSAGE = (
    "We do not have any flights on the date and route you have selected "
    "or all our flights are sold out."
)


class SearchError(Exception):
    """Base class for every way a search can fail."""

    kind = "unknown"

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    @property
    def user_message(self) -> str:
        """Text safe to show to an end user."""
        return str(self)


class SerializationError(SearchError):
    """Payload could not be encoded; no request was sent."""

    kind = "serialization"

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Failed to serialize search payload: {cause}", cause)

    @property
    def user_message(self) -> str:
        return "Could not prepare the flight search request."


class TransportError(SearchError):
    """Network or I/O failure while talking to the availability endpoint."""

    kind = "transport"

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Availability request failed: {cause!r}", cause)

    @property
    def user_message(self) -> str:
        return "Could not reach the flight search service."


class EmptyResponseError(SearchError):
    """Transport succeeded but the response carried no body."""

    kind = "empty_response"

    def __init__(self) -> None:
        super().__init__("No data received")


class DecodeError(SearchError):
    """
    Response body did not match the schema.

    Upstream failures come back in many shapes, so users see the same
    message as an empty business result. The parse error stays on `cause`.
    """

    kind = "decode"

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Failed to decode availability response: {cause}", cause)

    @property
    def user_message(self) -> str:
        return NO_FLIGHTS_MESSAGE


class BusinessError(SearchError):
    """Endpoint reported failure, or success without a body."""

    kind = "business"

    def __init__(self, code: str) -> None:
        super().__init__(code)
        self.code = code

    @property
    def user_message(self) -> str:
        if self.code == UNKNOWN_ERROR:
            return NO_FLIGHTS_MESSAGE
        return self.code


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Single outcome of one search call: options or an error, never both."""

    pid: str
    options: list[FlightOption] = field(default_factory=list)
    error: SearchError | None = None

    @property
    def success(self) -> bool:
        return self.error is None

    def unwrap(self) -> list[FlightOption]:
        """Return the options or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.options

    @classmethod
    def ok(cls, pid: str, options: list[FlightOption]) -> SearchResult:
        return cls(pid=pid, options=options)

    @classmethod
    def failed(cls, pid: str, error: SearchError) -> SearchResult:
        return cls(pid=pid, error=error)
