"""Contracts for the external airline availability endpoint."""

from __future__ import annotations

from typing import Protocol


class AvailabilityApiProtocol(Protocol):
    """Port describing interactions with the availability endpoint."""

    async def post_availability(self, body: bytes) -> bytes | None:
        """
        Send one serialized search payload and return the raw response body.

        Returns None or b"" when the exchange succeeded without a body.
        Raises on any transport failure.
        """
