"""Wait order service: orders waiting for a free seat."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .client import ApiResponse, ServiceClient

_SERVICE = "/api/v1/waitorderservice"


@dataclass
class WaitOrder:
    """Request body for placing an order on the waiting list."""

    account_id: str = ""
    contacts_id: str = ""
    trip_id: str = ""
    seat_type: int = 0
    date: str = ""
    from_station: str = ""
    to_station: str = ""
    price: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "accountId": self.account_id,
            "contactsId": self.contacts_id,
            "tripId": self.trip_id,
            "seatType": self.seat_type,
            "date": self.date,
            "from": self.from_station,
            "to": self.to_station,
            "price": self.price,
        }


@dataclass
class WaitOrderService:
    """Operations of the wait order service."""

    client: ServiceClient

    def create(self, order: WaitOrder) -> ApiResponse:
        return self.client.call("POST", f"{_SERVICE}/order", ApiResponse, order)

    def get_all(self) -> ApiResponse:
        return self.client.call("GET", f"{_SERVICE}/orders", ApiResponse)

    def get_wait_list(self) -> ApiResponse:
        return self.client.call("GET", f"{_SERVICE}/waitlistorders", ApiResponse)