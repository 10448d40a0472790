"""Request and response schema of the airline availability endpoint."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEPARTURE_DATE_FORMAT = "%d-%m-%Y"


class SchemaDecodeError(ValueError):
    """Raised when a JSON document does not match the schema."""

    def __init__(self, type_name: str, field: str | None, reason: str) -> None:
        self.type_name = type_name
        self.field = field
        self.reason = reason
        if field is None:
            message = f"{type_name}: {reason}"
        else:
            message = f"{type_name}.{field}: {reason}"
        super().__init__(message)


class WireModel(BaseModel):
    """Immutable model serialized with camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# Request


class OriginDestinationQuery(WireModel):
    origin_airport_code: str
    destination_airport_code: str
    destination_multi_port: bool
    departure_date: str


class PassengerCount(WireModel):
    code: str
    quantity: int = Field(ge=0)


class SearchPayload(WireModel):
    """Body of the availability POST request."""

    module_type: str
    origin_destination_information_list: list[OriginDestinationQuery] = Field(min_length=1)
    passenger_type_list: list[PassengerCount]
    selected_booker_search: str
    selected_cabin_class: str

    @classmethod
    def one_way(
        cls,
        origin: str,
        destination: str,
        departure_date: date | str,
        adults: int = 1,
        children: int = 0,
        infants: int = 0,
        cabin_class: str = "ECONOMY",
        date_format: str = DEPARTURE_DATE_FORMAT,
    ) -> SearchPayload:
        """Build a single-leg payload from user supplied search fields."""
        if isinstance(departure_date, date):
            departure_date = departure_date.strftime(date_format)

        passengers = [PassengerCount(code="ADULT", quantity=adults)]
        if children:
            passengers.append(PassengerCount(code="CHILD", quantity=children))
        if infants:
            passengers.append(PassengerCount(code="INFANT", quantity=infants))

        return cls(
            module_type="TICKETING",
            origin_destination_information_list=[
                OriginDestinationQuery(
                    origin_airport_code=origin.upper(),
                    destination_airport_code=destination.upper(),
                    destination_multi_port=False,
                    departure_date=departure_date,
                )
            ],
            passenger_type_list=passengers,
            selected_booker_search="O",
            selected_cabin_class=cabin_class,
        )


# Response


class FlightCode(WireModel):
    airline_code: str
    flight_number: str
    lease_code: str | None = None


class FlightSegment(WireModel):
    departure_airport_code: str
    arrival_airport_code: str
    departure_date_time: str
    arrival_date_time: str
    flight_code: FlightCode
    connected: bool | None = None
    rph: str | None = None
    code_share_ind: str | None = None
    journey_duration_in_millis: int
    equipment_code: str | None = None
    stop_count: int | None = None


class FlightPrice(WireModel):
    currency_code: str
    amount: float
    currency_sign: str | None = None
    decimal_places: int | None = None


class FlightOption(WireModel):
    """One priced, bookable combination of segments for a leg."""

    option_id: int
    segment_list: list[FlightSegment]
    starting_price: FlightPrice | None = None

    @property
    def departure_airport(self) -> str:
        return self.segment_list[0].departure_airport_code if self.segment_list else ""

    @property
    def arrival_airport(self) -> str:
        return self.segment_list[-1].arrival_airport_code if self.segment_list else ""

    @property
    def total_duration_millis(self) -> int:
        return sum(segment.journey_duration_in_millis for segment in self.segment_list)


class OriginDestinationResult(WireModel):
    outbound_flight_id: str | None = None
    departure_date: str
    arrival_date: str | None = None
    origin_location: str
    destination_location: str
    sold_out_all_flights: bool
    origin_destination_option_list: list[FlightOption]


class ResponseBody(WireModel):
    origin_destination_information_list: list[OriginDestinationResult]


class ResponseDetail(WireModel):
    code: str
    args: list[str] | None = None


class ResponseMessage(WireModel):
    detail: list[ResponseDetail]


class SearchResponse(WireModel):
    """Top-level document returned by the availability endpoint."""

    data: ResponseBody | None = None
    success: bool
    message: ResponseMessage | None = None
