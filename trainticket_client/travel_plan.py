"""Travel plan service: cheapest, quickest and fewest-stop itineraries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .client import ApiResponse, ServiceClient

_PLAN = "/api/v1/travelplanservice/travelPlan"


@dataclass
class TravelQuery:
    """Where and when a traveller wants to go."""

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
class TransferTravelQuery:
    """A journey that changes trains at a via station."""

    start_station: str = ""
    via_station: str = ""
    end_station: str = ""
    travel_date: str = ""
    train_type: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "startStation": self.start_station,
            "viaStation": self.via_station,
            "endStation": self.end_station,
            "travelDate": self.travel_date,
            "trainType": self.train_type,
        }


@dataclass
class TravelPlanService:
    """Operations of the travel plan service."""

    client: ServiceClient

    def get_by_cheapest(self, query: TravelQuery) -> ApiResponse:
        return self.client.call("POST", f"{_PLAN}/cheapest", ApiResponse, query)

    def get_by_min_station(self, query: TravelQuery) -> ApiResponse:
        return self.client.call("POST", f"{_PLAN}/minStation", ApiResponse, query)

    def get_by_quickest(self, query: TravelQuery) -> ApiResponse:
        return self.client.call("POST", f"{_PLAN}/quickest", ApiResponse, query)

    def transfer_result(self, query: TransferTravelQuery) -> ApiResponse:
        return self.client.call("POST", f"{_PLAN}/transferResult", ApiResponse, query)