import pytest
import responses

from trainticket_client.client import ResponseDecodeError, ServiceClient
from trainticket_client.station_food import Food
from trainticket_client.train_food import TrainFood, TrainFoodService

BASE = "http://gateway.test"
URL = BASE + "/api/v1/trainfoodservice/trainfoods"

FOODS = [{"foodName": "Rice", "price": 8.0}, {"foodName": "Soup", "price": 4.5}]


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def service():
    return TrainFoodService(ServiceClient(BASE))


def test_get_all_then_by_trip(mocked, service):
    mocked.add(
        responses.GET,
        URL,
        json={"status": 1, "msg": "ok", "data": [{"id": "f1", "tripId": "G1234", "foodList": FOODS}]},
    )
    mocked.add(responses.GET, URL + "/G1234", json={"status": 1, "msg": "ok", "data": FOODS})

    resp = service.get_all()
    assert resp.status == 1
    assert resp.data == [TrainFood(id="f1", trip_id="G1234", food_list=[Food("Rice", 8.0), Food("Soup", 4.5)])]
    for train in resp.data:
        foods = service.get_by_trip_id(train.trip_id)
        assert foods.status == 1
        assert foods.data == train.food_list


def test_missing_food_list(mocked, service):
    mocked.add(responses.GET, URL, json={"status": 1, "msg": "ok", "data": [{"id": "f2", "tripId": "D1"}]})
    assert service.get_all().data[0].food_list == []


def test_wrong_shape_raises(mocked, service):
    mocked.add(responses.GET, URL + "/Z1", json={"status": 1, "msg": "ok", "data": "nothing"})
    with pytest.raises(ResponseDecodeError):
        service.get_by_trip_id("Z1")