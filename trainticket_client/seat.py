"""Seat service: seat assignment and remaining tickets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .client import ApiResponse, ServiceClient, json_object

_SEATS = "/api/v1/seatservice/seats"


@dataclass
class SeatRequest:
    """Request body describing a train, date and seat class."""

    travel_date: str = ""
    train_number: str = ""
    dest_station: str = ""
    seat_type: int = 0
    total_num: int = 0
    stations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "travelDate": self.travel_date,
            "trainNumber": self.train_number,
            "destStation": self.dest_station,
            "seatType": self.seat_type,
            "totalNum": self.total_num,
            "stations": list(self.stations),
        }


@dataclass
class Seat:
    """A seat handed out by the service."""

    seat_no: int = 0
    start_station: str = ""
    dest_station: str = ""

    @classmethod
    def from_dict(cls, payload: Any) -> "Seat":
        fields = json_object(payload)
        return cls(
            seat_no=int(fields.get("seatNo") or 0),
            start_station=str(fields.get("startStation") or ""),
            dest_station=str(fields.get("destStation") or ""),
        )


@dataclass
class SeatResponse(ApiResponse):
    data: Seat = field(default_factory=Seat)

    @classmethod
    def _parse_data(cls, raw: Any) -> Seat:
        return Seat.from_dict(raw)


@dataclass
class TicketLeftResponse(ApiResponse):
    data: int = 0

    @classmethod
    def _parse_data(cls, raw: Any) -> int:
        return int(raw or 0)


@dataclass
class SeatService:
    """Operations of the seat service."""

    client: ServiceClient

    def create_seat(self, request: SeatRequest) -> SeatResponse:
        return self.client.call("POST", _SEATS, SeatResponse, request)

    def get_ticket_left(self, request: SeatRequest) -> TicketLeftResponse:
        return self.client.call("POST", f"{_SEATS}/left_tickets", TicketLeftResponse, request)