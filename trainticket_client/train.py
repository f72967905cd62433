"""Train service: train types with their capacity and speed."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Iterable

from .client import ApiResponse, ResponseDecodeError, ServiceClient, json_object

_TRAINS = "/api/v1/trainservice/trains"


@dataclass
class TrainType:
    """A train type: seat counts per class and average speed."""

    id: str = ""
    name: str = ""
    confort_class: int = 0
    average_speed: int = 0
    economy_class: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "confortClass": self.confort_class,
            "averageSpeed": self.average_speed,
            "economyClass": self.economy_class,
        }

    @classmethod
    def from_dict(cls, payload: Any) -> "TrainType":
        fields = json_object(payload)
        return cls(
            id=str(fields.get("id") or ""),
            name=str(fields.get("name") or ""),
            confort_class=int(fields.get("confortClass") or 0),
            average_speed=int(fields.get("averageSpeed") or 0),
            economy_class=int(fields.get("economyClass") or 0),
        )


@dataclass
class TrainTypeResponse(ApiResponse):
    data: TrainType = field(default_factory=TrainType)

    @classmethod
    def _parse_data(cls, raw: Any) -> TrainType:
        return TrainType.from_dict(raw)


@dataclass
class TrainTypesResponse(ApiResponse):
    data: list[TrainType] = field(default_factory=list)

    @classmethod
    def _parse_data(cls, raw: Any) -> list[TrainType]:
        return [TrainType.from_dict(item) for item in raw or []]


@dataclass
class _FlagResponse(ApiResponse):
    data: bool = False

    @classmethod
    def _parse_data(cls, raw: Any) -> bool:
        if raw is None:
            return False
        if not isinstance(raw, bool):
            raise ResponseDecodeError("expected a JSON boolean", json.dumps(raw))
        return raw


@dataclass
class TrainService:
    """Operations of the train service."""

    client: ServiceClient

    def create(self, train_type: TrainType) -> TrainTypeResponse:
        return self.client.call("POST", _TRAINS, TrainTypeResponse, train_type)

    def retrieve(self, train_id: str) -> ApiResponse:
        return self.client.call("GET", f"{_TRAINS}/{train_id}", ApiResponse)

    def retrieve_by_name(self, name: str) -> TrainTypeResponse:
        return self.client.call("GET", f"{_TRAINS}/byName/{name}", TrainTypeResponse)

    def retrieve_by_names(self, names: Iterable[str]) -> TrainTypesResponse:
        return self.client.call("POST", f"{_TRAINS}/byNames", TrainTypesResponse, list(names))

    def update(self, train_type: TrainType) -> _FlagResponse:
        return self.client.call("PUT", _TRAINS, _FlagResponse, train_type)

    def delete(self, train_id: str) -> _FlagResponse:
        return self.client.call("DELETE", f"{_TRAINS}/{train_id}", _FlagResponse)

    def query_all(self) -> TrainTypesResponse:
        return self.client.call("GET", _TRAINS, TrainTypesResponse)