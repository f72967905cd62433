"""Train food service: food served on trips."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .client import ApiResponse, ServiceClient, json_object
from .station_food import Food

_TRAIN_FOODS = "/api/v1/trainfoodservice/trainfoods"


@dataclass
class TrainFood:
    """The food list offered on one trip."""

    id: str = ""
    trip_id: str = ""
    food_list: list[Food] = field(default_factory=list)

    @classmethod
    def from_dict(cls, payload: Any) -> "TrainFood":
        fields = json_object(payload)
        return cls(
            id=str(fields.get("id") or ""),
            trip_id=str(fields.get("tripId") or ""),
            food_list=[Food.from_dict(item) for item in fields.get("foodList") or []],
        )


@dataclass
class TrainFoodListResponse(ApiResponse):
    data: list[TrainFood] = field(default_factory=list)

    @classmethod
    def _parse_data(cls, raw: Any) -> list[TrainFood]:
        return [TrainFood.from_dict(item) for item in raw or []]


@dataclass
class TripFoodResponse(ApiResponse):
    data: list[Food] = field(default_factory=list)

    @classmethod
    def _parse_data(cls, raw: Any) -> list[Food]:
        return [Food.from_dict(item) for item in raw or []]


@dataclass
class TrainFoodService:
    """Operations of the train food service."""

    client: ServiceClient

    def get_all(self) -> TrainFoodListResponse:
        return self.client.call("GET", _TRAIN_FOODS, TrainFoodListResponse)

    def get_by_trip_id(self, trip_id: str) -> TripFoodResponse:
        return self.client.call("GET", f"{_TRAIN_FOODS}/{trip_id}", TripFoodResponse)