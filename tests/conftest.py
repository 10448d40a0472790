"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from copy import deepcopy
from typing import Any

import pytest

from tripzi_search.domain.models import SearchPayload


def _segment(origin: str, destination: str, number: str) -> dict[str, Any]:
    return {
        "departureAirportCode": origin,
        "arrivalAirportCode": destination,
        "departureDateTime": "2024-07-20T08:15:00",
        "arrivalDateTime": "2024-07-20T11:05:00",
        "flightCode": {"airlineCode": "TK", "flightNumber": number},
        "connected": False,
        "journeyDurationInMillis": 10200000,
        "equipmentCode": "32Q",
    }


BASE_RESPONSE: dict[str, Any] = {
    "data": {
        "originDestinationInformationList": [
            {
                "outboundFlightId": "OB-1",
                "departureDate": "20-07-2024",
                "originLocation": "IST",
                "destinationLocation": "TBS",
                "soldOutAllFlights": False,
                "originDestinationOptionList": [
                    {
                        "optionId": 1,
                        "segmentList": [_segment("IST", "TBS", "378")],
                        "startingPrice": {
                            "currencyCode": "USD",
                            "amount": 1592.5,
                            "currencySign": "$",
                            "decimalPlaces": 2,
                        },
                    },
                    {
                        "optionId": 2,
                        "segmentList": [
                            _segment("IST", "ESB", "2124"),
                            _segment("ESB", "TBS", "1310"),
                        ],
                    },
                ],
            },
            {
                "departureDate": "27-07-2024",
                "arrivalDate": "27-07-2024",
                "originLocation": "TBS",
                "destinationLocation": "IST",
                "soldOutAllFlights": False,
                "originDestinationOptionList": [
                    {
                        "optionId": 3,
                        "segmentList": [_segment("TBS", "IST", "379")],
                        "startingPrice": {"currencyCode": "USD", "amount": 120},
                    },
                ],
            },
        ]
    },
    "success": True,
}


@pytest.fixture
def response_builder() -> Callable[[], dict[str, Any]]:
    """Return a factory that produces independent copies of the sample response."""

    def _builder() -> dict[str, Any]:
        return deepcopy(BASE_RESPONSE)

    return _builder


@pytest.fixture
def response_body(response_builder) -> bytes:
    return json.dumps(response_builder()).encode("utf-8")


@pytest.fixture
def payload() -> SearchPayload:
    return SearchPayload.one_way("IST", "TBS", "20-07-2024", adults=2)
