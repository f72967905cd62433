"""Route service: routes made of stations and distances."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from .client import ApiResponse, ServiceClient, json_object

_ROUTES = "/api/v1/routeservice/routes"


@dataclass
class RouteInfo:
    """Request body for creating or modifying a route."""

    id: str = ""
    start_station: str = ""
    end_station: str = ""
    station_list: str = ""
    distance_list: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "startStation": self.start_station,
            "endStation": self.end_station,
            "stationList": self.station_list,
            "distanceList": self.distance_list,
        }


@dataclass
class Route:
    """A route as returned by the service."""

    id: str = ""
    stations: list[str] = field(default_factory=list)
    distances: list[int] = field(default_factory=list)
    start_station: str = ""
    end_station: str = ""

    @classmethod
    def from_dict(cls, payload: Any) -> "Route":
        fields = json_object(payload)
        return cls(
            id=str(fields.get("id") or ""),
            stations=[str(s) for s in fields.get("stations") or []],
            distances=[int(d) for d in fields.get("distances") or []],
            start_station=str(fields.get("startStation") or ""),
            end_station=str(fields.get("endStation") or ""),
        )


@dataclass
class RouteResponse(ApiResponse):
    data: Route = field(default_factory=Route)

    @classmethod
    def _parse_data(cls, raw: Any) -> Route:
        return Route.from_dict(raw)


@dataclass
class RoutesResponse(ApiResponse):
    data: list[Route] = field(default_factory=list)

    @classmethod
    def _parse_data(cls, raw: Any) -> list[Route]:
        return [Route.from_dict(item) for item in raw or []]


@dataclass
class RouteService:
    """Operations of the route service."""

    client: ServiceClient

    def create_and_modify_route(self, route: RouteInfo) -> RouteResponse:
        return self.client.call("POST", _ROUTES, RouteResponse, route)

    def delete_route(self, route_id: str) -> ApiResponse:
        return self.client.call("DELETE", f"{_ROUTES}/{route_id}", ApiResponse)

    def query_route_by_id(self, route_id: str) -> RouteResponse:
        return self.client.call("GET", f"{_ROUTES}/{route_id}", RouteResponse)

    def query_routes_by_ids(self, route_ids: Iterable[str]) -> RoutesResponse:
        return self.client.call("POST", f"{_ROUTES}/byIds", RoutesResponse, list(route_ids))

    def query_all_routes(self) -> RoutesResponse:
        return self.client.call("GET", _ROUTES, RoutesResponse)

    def query_routes_by_start_and_end(self, start: str, end: str) -> RoutesResponse:
        return self.client.call("GET", f"{_ROUTES}/{start}/{end}", RoutesResponse)