"""Travel service: trips, their routes, train types and availability."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Iterable

from .client import ApiResponse, ResponseDecodeError, ServiceClient, json_object
from .route import Route
from .train import TrainType

_SERVICE = "/api/v1/travelservice"
_TRIPS = f"{_SERVICE}/trips"


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _number(value: Any) -> int:
    return int(value or 0)


@dataclass
class TravelInfo:
    """Request body describing a trip to create or update."""

    login_id: str = ""
    trip_id: str = ""
    train_type_name: str = ""
    route_id: str = ""
    start_station_name: str = ""
    stations_name: str = ""
    terminal_station_name: str = ""
    start_time: str = ""
    end_time: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "loginId": self.login_id,
            "tripId": self.trip_id,
            "trainTypeName": self.train_type_name,
            "routeId": self.route_id,
            "startStationName": self.start_station_name,
            "stationsName": self.stations_name,
            "terminalStationName": self.terminal_station_name,
            "startTime": self.start_time,
            "endTime": self.end_time,
        }

    @classmethod
    def from_dict(cls, payload: Any) -> "TravelInfo":
        fields = json_object(payload)
        return cls(
            login_id=_text(fields.get("loginId")),
            trip_id=_text(fields.get("tripId")),
            train_type_name=_text(fields.get("trainTypeName")),
            route_id=_text(fields.get("routeId")),
            start_station_name=_text(fields.get("startStationName")),
            stations_name=_text(fields.get("stationsName")),
            terminal_station_name=_text(fields.get("terminalStationName")),
            start_time=_text(fields.get("startTime")),
            end_time=_text(fields.get("endTime")),
        )


@dataclass
class TripInfo:
    """Where and when to look for trips with seats left."""

    start_place: str = ""
    end_place: str = ""
    departure_time: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "startPlace": self.start_place,
            "endPlace": self.end_place,
            "departureTime": self.departure_time,
        }


@dataclass
class TripDetailRequest:
    """Request body asking for the full details of one trip."""

    from_station: str = ""
    to_station: str = ""
    travel_date: str = ""
    trip_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "from": self.from_station,
            "to": self.to_station,
            "travelDate": self.travel_date,
            "tripId": self.trip_id,
        }


@dataclass
class TripId:
    """A trip id split into its train letter and number."""

    type: str = ""
    number: str = ""

    def __str__(self) -> str:
        return f"{self.type}{self.number}"

    @classmethod
    def from_dict(cls, payload: Any) -> "TripId":
        fields = json_object(payload)
        return cls(type=_text(fields.get("type")), number=_text(fields.get("number")))


@dataclass
class Trip:
    """A trip as stored by the travel service."""

    id: str = ""
    trip_id: TripId = field(default_factory=TripId)
    train_type_name: str = ""
    route_id: str = ""
    start_station_name: str = ""
    stations_name: str = ""
    terminal_station_name: str = ""
    start_time: str = ""
    end_time: str = ""

    @classmethod
    def from_dict(cls, payload: Any) -> "Trip":
        fields = json_object(payload)
        return cls(
            id=_text(fields.get("id")),
            trip_id=TripId.from_dict(fields.get("tripId")),
            train_type_name=_text(fields.get("trainTypeName")),
            route_id=_text(fields.get("routeId")),
            start_station_name=_text(fields.get("startStationName")),
            stations_name=_text(fields.get("stationsName")),
            terminal_station_name=_text(fields.get("terminalStationName")),
            start_time=_text(fields.get("startTime")),
            end_time=_text(fields.get("endTime")),
        )


@dataclass
class TripResponse(ApiResponse):
    data: Trip = field(default_factory=Trip)

    @classmethod
    def _parse_data(cls, raw: Any) -> Trip:
        return Trip.from_dict(raw)


@dataclass
class TripsResponse(ApiResponse):
    data: list[Trip] = field(default_factory=list)

    @classmethod
    def _parse_data(cls, raw: Any) -> list[Trip]:
        return [Trip.from_dict(item) for item in raw or []]


@dataclass
class TripSummary:
    """A trip with its seats left and prices per class."""

    trip_id: TripId = field(default_factory=TripId)
    train_type_name: str = ""
    start_station: str = ""
    terminal_station: str = ""
    start_time: str = ""
    end_time: str = ""
    economy_class: int = 0
    confort_class: int = 0
    price_for_economy_class: str = ""
    price_for_confort_class: str = ""

    @classmethod
    def from_dict(cls, payload: Any) -> "TripSummary":
        fields = json_object(payload)
        return cls(
            trip_id=TripId.from_dict(fields.get("tripId")),
            train_type_name=_text(fields.get("trainTypeName")),
            start_station=_text(fields.get("startStation")),
            terminal_station=_text(fields.get("terminalStation")),
            start_time=_text(fields.get("startTime")),
            end_time=_text(fields.get("endTime")),
            economy_class=_number(fields.get("economyClass")),
            confort_class=_number(fields.get("confortClass")),
            price_for_economy_class=_text(fields.get("priceForEconomyClass")),
            price_for_confort_class=_text(fields.get("priceForConfortClass")),
        )


@dataclass
class TripSummariesResponse(ApiResponse):
    data: list[TripSummary] = field(default_factory=list)

    @classmethod
    def _parse_data(cls, raw: Any) -> list[TripSummary]:
        return [TripSummary.from_dict(item) for item in raw or []]


@dataclass
class RouteByTripResponse(ApiResponse):
    data: Route = field(default_factory=Route)

    @classmethod
    def _parse_data(cls, raw: Any) -> Route:
        return Route.from_dict(raw)


@dataclass
class _TripDetail:
    trip_response: TripSummary = field(default_factory=TripSummary)
    trip: Trip = field(default_factory=Trip)

    @classmethod
    def from_dict(cls, payload: Any) -> "_TripDetail":
        fields = json_object(payload)
        return cls(
            trip_response=TripSummary.from_dict(fields.get("tripResponse")),
            trip=Trip.from_dict(fields.get("trip")),
        )


@dataclass
class TripDetailResponse(ApiResponse):
    data: _TripDetail = field(default_factory=_TripDetail)

    @classmethod
    def _parse_data(cls, raw: Any) -> _TripDetail:
        return _TripDetail.from_dict(raw)


@dataclass
class AdminTrip:
    """A trip together with its train type and route, as admins see it."""

    trip: Trip = field(default_factory=Trip)
    train_type: TrainType | None = None
    route: Route = field(default_factory=Route)

    @classmethod
    def from_dict(cls, payload: Any) -> "AdminTrip":
        fields = json_object(payload)
        train_type = fields.get("trainType")
        return cls(
            trip=Trip.from_dict(fields.get("trip")),
            train_type=None if train_type is None else TrainType.from_dict(train_type),
            route=Route.from_dict(fields.get("route")),
        )


@dataclass
class AdminTripsResponse(ApiResponse):
    data: list[AdminTrip] = field(default_factory=list)

    @classmethod
    def _parse_data(cls, raw: Any) -> list[AdminTrip]:
        return [AdminTrip.from_dict(item) for item in raw or []]


@dataclass
class _NestedListResponse(ApiResponse):
    data: list[list[Any]] = field(default_factory=list)

    @classmethod
    def _parse_data(cls, raw: Any) -> list[list[Any]]:
        result = []
        for item in raw or []:
            if item is None:
                result.append([])
            elif isinstance(item, list):
                result.append(list(item))
            else:
                raise TypeError(f"expected a JSON array, got {type(item).__name__}")
        return result


@dataclass
class _MessageResponse(ApiResponse):
    data: str = ""

    @classmethod
    def _parse_data(cls, raw: Any) -> str:
        if raw is None:
            return ""
        if not isinstance(raw, str):
            raise TypeError(f"expected a JSON string, got {type(raw).__name__}")
        return raw


@dataclass
class TravelService:
    """Operations of the travel service."""

    client: ServiceClient

    def get_train_type_by_trip_id(self, trip_id: str) -> ApiResponse:
        return self.client.call("GET", f"{_SERVICE}/train_types/{trip_id}", ApiResponse)

    def get_route_by_trip_id(self, trip_id: str) -> RouteByTripResponse:
        return self.client.call("GET", f"{_SERVICE}/routes/{trip_id}", RouteByTripResponse)

    def get_trips_by_route_ids(self, route_ids: Iterable[str]) -> _NestedListResponse:
        return self.client.call("POST", f"{_TRIPS}/routes", _NestedListResponse, list(route_ids))

    def create_trip(self, travel_info: TravelInfo) -> TripResponse:
        return self.client.call("POST", _TRIPS, TripResponse, travel_info)

    def retrieve_travel(self, trip_id: str) -> TravelInfo:
        raw = self.client.request("GET", f"{_TRIPS}/{trip_id}")
        try:
            return TravelInfo.from_dict(raw)
        except (TypeError, ValueError) as exc:
            raise ResponseDecodeError(str(exc), json.dumps(raw)) from exc

    def update_trip(self, travel_info: TravelInfo) -> TripResponse:
        return self.client.call("PUT", _TRIPS, TripResponse, travel_info)

    def delete_trip(self, trip_id: str) -> _MessageResponse:
        return self.client.call("DELETE", f"{_TRIPS}/{trip_id}", _MessageResponse)

    def query_info(self, trip_info: TripInfo) -> TripSummariesResponse:
        return self.client.call("POST", f"{_TRIPS}/left", TripSummariesResponse, trip_info)

    def query_info_in_parallel(self, trip_info: TripInfo) -> TripSummariesResponse:
        return self.client.call(
            "POST", f"{_TRIPS}/left_parallel", TripSummariesResponse, trip_info
        )

    def get_trip_all_detail_info(self, request: TripDetailRequest) -> TripDetailResponse:
        return self.client.call("POST", f"{_SERVICE}/trip_detail", TripDetailResponse, request)

    def query_all_trips(self) -> TripsResponse:
        return self.client.call("GET", _TRIPS, TripsResponse)

    def admin_query_all(self) -> AdminTripsResponse:
        return self.client.call("GET", f"{_SERVICE}/admin_trip", AdminTripsResponse)