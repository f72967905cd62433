"""Station service: stations and name/id lookups."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from .client import ApiResponse, ServiceClient, json_object

_STATIONS = "/api/v1/stationservice/stations"


@dataclass
class Station:
    """A station with the time trains stay there."""

    id: str = ""
    name: str = ""
    stay_time: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "stayTime": self.stay_time}

    @classmethod
    def from_dict(cls, payload: Any) -> "Station":
        fields = json_object(payload)
        return cls(
            id=str(fields.get("id") or ""),
            name=str(fields.get("name") or ""),
            stay_time=int(fields.get("stayTime") or 0),
        )


@dataclass
class StationResponse(ApiResponse):
    data: Station = field(default_factory=Station)

    @classmethod
    def _parse_data(cls, raw: Any) -> Station:
        return Station.from_dict(raw)


@dataclass
class StationsResponse(ApiResponse):
    data: list[Station] = field(default_factory=list)

    @classmethod
    def _parse_data(cls, raw: Any) -> list[Station]:
        return [Station.from_dict(item) for item in raw or []]


@dataclass
class _TextResponse(ApiResponse):
    data: str = ""

    @classmethod
    def _parse_data(cls, raw: Any) -> str:
        if raw is None:
            return ""
        if not isinstance(raw, str):
            raise TypeError(f"expected a JSON string, got {type(raw).__name__}")
        return raw


@dataclass
class _TextListResponse(ApiResponse):
    data: list[str] = field(default_factory=list)

    @classmethod
    def _parse_data(cls, raw: Any) -> list[str]:
        return [str(item) for item in raw or []]


@dataclass
class _TextMapResponse(ApiResponse):
    data: dict[str, str] = field(default_factory=dict)

    @classmethod
    def _parse_data(cls, raw: Any) -> dict[str, str]:
        return {str(key): str(value) for key, value in json_object(raw).items()}


@dataclass
class StationService:
    """Operations of the station service."""

    client: ServiceClient

    def query_stations(self) -> StationsResponse:
        return self.client.call("GET", _STATIONS, StationsResponse)

    def create_station(self, station: Station) -> StationResponse:
        return self.client.call("POST", _STATIONS, StationResponse, station)

    def update_station(self, station: Station) -> StationResponse:
        return self.client.call("PUT", _STATIONS, StationResponse, station)

    def delete_station(self, station_id: str) -> StationResponse:
        return self.client.call("DELETE", f"{_STATIONS}/{station_id}", StationResponse)

    def query_id_by_name(self, name: str) -> _TextResponse:
        return self.client.call("GET", f"{_STATIONS}/id/{name}", _TextResponse)

    def query_ids_by_names(self, names: Iterable[str]) -> _TextMapResponse:
        return self.client.call("POST", f"{_STATIONS}/idlist", _TextMapResponse, list(names))

    def query_name_by_id(self, station_id: str) -> _TextResponse:
        return self.client.call("GET", f"{_STATIONS}/name/{station_id}", _TextResponse)

    def query_names_by_ids(self, station_ids: Iterable[str]) -> _TextListResponse:
        return self.client.call("POST", f"{_STATIONS}/namelist", _TextListResponse, list(station_ids))