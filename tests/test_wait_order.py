import json

import pytest
import responses

from trainticket_client.client import ResponseDecodeError, ServiceClient
from trainticket_client.wait_order import WaitOrder, WaitOrderService

BASE = "http://gateway.test"
SERVICE = BASE + "/api/v1/waitorderservice"


@pytest.fixture
def service():
    return WaitOrderService(ServiceClient(BASE))


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


def test_create_sends_order(service, mocked):
    order = WaitOrder(
        account_id="acc-1",
        contacts_id="contact-1",
        trip_id="trip-1",
        seat_type=1,
        date="2024-07-01",
        from_station="nanjing",
        to_station="taiyuan",
        price="5.5",
    )
    mocked.add(responses.POST, SERVICE + "/order", json={"status": 1, "msg": "Success", "data": None})
    result = service.create(order)
    assert json.loads(mocked.calls[0].request.body) == {
        "accountId": "acc-1",
        "contactsId": "contact-1",
        "tripId": "trip-1",
        "seatType": 1,
        "date": "2024-07-01",
        "from": "nanjing",
        "to": "taiyuan",
        "price": "5.5",
    }
    assert result.status == 1
    assert result.msg == "Success"


def test_get_all(service, mocked):
    orders = [{"id": "o1"}, {"id": "o2"}]
    mocked.add(responses.GET, SERVICE + "/orders", json={"status": 1, "msg": "ok", "data": orders})
    result = service.get_all()
    assert result.data == orders


def test_get_wait_list(service, mocked):
    mocked.add(responses.GET, SERVICE + "/waitlistorders", json={"status": 0, "msg": "empty", "data": []})
    result = service.get_wait_list()
    assert result.status == 0
    assert result.msg == "empty"
    assert result.data == []


def test_bad_body_raises(service, mocked):
    mocked.add(responses.GET, SERVICE + "/orders", body="nope")
    with pytest.raises(ResponseDecodeError):
        service.get_all()