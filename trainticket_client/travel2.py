"""Second travel service: trips served by the alternative travel backend."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from .client import ApiResponse, ServiceClient
from .travel import (
    AdminTripsResponse,
    RouteByTripResponse,
    TravelInfo,
    TripDetailResponse,
    TripInfo,
    TripResponse,
    TripsResponse,
    TripSummariesResponse,
)

_SERVICE = "/api/v1/travel2service"
_TRIPS = f"{_SERVICE}/trips"


@dataclass
class Trip2DetailRequest:
    """Request body asking for the full details of one trip."""

    trip_id: str = ""
    travel_date: str = ""
    from_station: str = ""
    to_station: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "tripId": self.trip_id,
            "travelDate": self.travel_date,
            "from": self.from_station,
            "to": self.to_station,
        }


@dataclass
class _TextResponse(ApiResponse):
    data: str = field(default="")

    @classmethod
    def _parse_data(cls, raw: Any) -> str:
        if raw is None:
            return ""
        if not isinstance(raw, str):
            raise TypeError(f"expected a JSON string, got {type(raw).__name__}")
        return raw


@dataclass
class Travel2Service:
    """Operations of the second travel service."""

    client: ServiceClient

    def get_train_type_by_trip_id(self, trip_id: str) -> ApiResponse:
        return self.client.call("GET", f"{_SERVICE}/train_types/{trip_id}", ApiResponse)

    def get_route_by_trip_id(self, trip_id: str) -> RouteByTripResponse:
        return self.client.call("GET", f"{_SERVICE}/routes/{trip_id}", RouteByTripResponse)

    def get_trips_by_route_ids(self, route_ids: Iterable[str]) -> _TextResponse:
        return self.client.call("POST", f"{_TRIPS}/routes", _TextResponse, list(route_ids))

    def create_trip(self, travel_info: TravelInfo) -> TripResponse:
        return self.client.call("POST", _TRIPS, TripResponse, travel_info)

    def retrieve_trip(self, trip_id: str) -> ApiResponse:
        return self.client.call("GET", f"{_TRIPS}/{trip_id}", ApiResponse)

    def update_trip(self, travel_info: TravelInfo) -> _TextResponse:
        return self.client.call("PUT", _TRIPS, _TextResponse, travel_info)

    def delete_trip(self, trip_id: str) -> _TextResponse:
        return self.client.call("DELETE", f"{_TRIPS}/{trip_id}", _TextResponse)

    def query_by_batch(self, trip_info: TripInfo) -> TripSummariesResponse:
        return self.client.call("POST", f"{_TRIPS}/left", TripSummariesResponse, trip_info)

    def get_trip_all_detail_info(self, request: Trip2DetailRequest) -> TripDetailResponse:
        return self.client.call("POST", f"{_SERVICE}/trip_detail", TripDetailResponse, request)

    def query_all(self) -> TripsResponse:
        return self.client.call("GET", _TRIPS, TripsResponse)

    def admin_query_all(self) -> AdminTripsResponse:
        return self.client.call("GET", f"{_SERVICE}/admin_trip", AdminTripsResponse)