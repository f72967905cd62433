"""Station food service: food stores found at stations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from .client import ApiResponse, ServiceClient, json_object

_STORES = "/api/v1/stationfoodservice/stationfoodstores"


@dataclass
class Food:
    """A food item and its price."""

    food_name: str = ""
    price: float = 0.0

    @classmethod
    def from_dict(cls, payload: Any) -> "Food":
        fields = json_object(payload)
        return cls(
            food_name=str(fields.get("foodName") or ""),
            price=float(fields.get("price") or 0.0),
        )


@dataclass
class StationFood:
    """A food store at a station."""

    id: str = ""
    station_name: str = ""
    store_name: str = ""
    telephone: str = ""
    business_time: str = ""
    delivery_fee: float = 0.0
    food_list: list[Food] = field(default_factory=list)

    @classmethod
    def from_dict(cls, payload: Any) -> "StationFood":
        fields = json_object(payload)
        return cls(
            id=str(fields.get("id") or ""),
            station_name=str(fields.get("stationName") or ""),
            store_name=str(fields.get("storeName") or ""),
            telephone=str(fields.get("telephone") or ""),
            business_time=str(fields.get("businessTime") or ""),
            delivery_fee=float(fields.get("deliveryFee") or 0.0),
            food_list=[Food.from_dict(item) for item in fields.get("foodList") or []],
        )


@dataclass
class StationFoodListResponse(ApiResponse):
    data: list[StationFood] = field(default_factory=list)

    @classmethod
    def _parse_data(cls, raw: Any) -> list[StationFood]:
        return [StationFood.from_dict(item) for item in raw or []]


@dataclass
class StationFoodResponse(ApiResponse):
    data: StationFood = field(default_factory=StationFood)

    @classmethod
    def _parse_data(cls, raw: Any) -> StationFood:
        return StationFood.from_dict(raw)


@dataclass
class StationFoodService:
    """Operations of the station food service."""

    client: ServiceClient

    def get_all(self) -> StationFoodListResponse:
        return self.client.call("GET", _STORES, StationFoodListResponse)

    def get_by_name(self, station_name: str) -> StationFoodListResponse:
        return self.client.call("GET", f"{_STORES}/{station_name}", StationFoodListResponse)

    def get_by_names(self, station_names: Iterable[str]) -> StationFoodListResponse:
        return self.client.call("POST", _STORES, StationFoodListResponse, list(station_names))

    def get_by_id(self, store_id: str) -> StationFoodResponse:
        return self.client.call("GET", f"{_STORES}/bystoreid/{store_id}", StationFoodResponse)