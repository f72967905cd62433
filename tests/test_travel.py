import json

import pytest
import responses

from trainticket_client.client import ResponseDecodeError, ServiceClient
from trainticket_client.travel import (
    TravelInfo,
    TravelService,
    TripDetailRequest,
    TripId,
    TripInfo,
)
from trainticket_client.utils import middle_elements, to_lower_and_remove_spaces

BASE = "http://gateway.example.com"
SERVICE = f"{BASE}/api/v1/travelservice"


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def service():
    return TravelService(ServiceClient(BASE))


def _trip_json(**overrides):
    trip = {
        "id": "trip-1",
        "tripId": {"type": "G", "number": "1234"},
        "trainTypeName": "GaoTieOne",
        "routeId": "route-1",
        "startStationName": "shanghai",
        "stationsName": "suzhou,nanjing",
        "terminalStationName": "taiyuan",
        "startTime": "2025-05-04 09:00:00",
        "endTime": "2025-05-04 15:00:00",
    }
    trip.update(overrides)
    return trip


def _sent_body(rsps):
    return json.loads(rsps.calls[0].request.body)


def test_trip_id_str_joins_type_and_number():
    assert str(TripId(type="G", number="1234")) == "G1234"


def test_create_trip_sends_body_and_matches_input(mocked, service):
    info = TravelInfo(
        login_id="login-1",
        trip_id="G1234",
        train_type_name="GaoTieOne",
        route_id="route-1",
        start_station_name="Shang Hai",
        stations_name=middle_elements("shanghai,suzhou,nanjing,taiyuan"),
        terminal_station_name="Tai Yuan",
        start_time="2025-05-04 09:00:00",
        end_time="2025-05-04 15:00:00",
    )
    mocked.add(
        responses.POST,
        f"{SERVICE}/trips",
        json={"status": 1, "msg": "Create trip:G1234.", "data": _trip_json()},
    )
    resp = service.create_trip(info)
    body = _sent_body(mocked)
    assert body["loginId"] == "login-1"
    assert body["stationsName"] == "suzhou,nanjing"
    assert body["terminalStationName"] == "Tai Yuan"
    assert resp.status == 1
    assert resp.data.stations_name == to_lower_and_remove_spaces(info.stations_name)
    assert resp.data.start_station_name == to_lower_and_remove_spaces(info.start_station_name)
    assert resp.data.terminal_station_name == to_lower_and_remove_spaces(
        info.terminal_station_name
    )
    assert resp.data.start_time == info.start_time
    assert resp.data.route_id == info.route_id
    assert str(resp.data.trip_id) == "G1234"


def test_update_trip_uses_put(mocked, service):
    mocked.add(
        responses.PUT,
        f"{SERVICE}/trips",
        json={"status": 1, "msg": "Update trip", "data": _trip_json(terminalStationName="beijing")},
    )
    resp = service.update_trip(TravelInfo(trip_id="G1234", terminal_station_name="beijing"))
    assert _sent_body(mocked)["tripId"] == "G1234"
    assert resp.data.terminal_station_name == "beijing"
    assert resp.data.id == "trip-1"


def test_query_all_trips_parses_list(mocked, service):
    mocked.add(
        responses.GET,
        f"{SERVICE}/trips",
        json={"status": 1, "msg": "Success", "data": [_trip_json(), _trip_json(id="trip-2")]},
    )
    resp = service.query_all_trips()
    assert resp.status == 1
    assert [trip.id for trip in resp.data] == ["trip-1", "trip-2"]


def test_admin_query_all_handles_missing_train_type(mocked, service):
    mocked.add(
        responses.GET,
        f"{SERVICE}/admin_trip",
        json={
            "status": 1,
            "msg": "Success",
            "data": [
                {
                    "trip": _trip_json(tripId={"type": None, "number": "77"}),
                    "trainType": None,
                    "route": {
                        "id": "route-1",
                        "stations": ["shanghai", "taiyuan"],
                        "distances": [0, 1200],
                        "startStation": "shanghai",
                        "endStation": "taiyuan",
                    },
                },
                {
                    "trip": _trip_json(id="trip-2"),
                    "trainType": {
                        "id": "tt-1",
                        "name": "GaoTieOne",
                        "economyClass": 100,
                        "confortClass": 50,
                        "averageSpeed": 250,
                    },
                    "route": None,
                },
            ],
        },
    )
    resp = service.admin_query_all()
    first, second = resp.data
    assert first.train_type is None
    assert str(first.trip.trip_id) == "77"
    assert first.route.distances == [0, 1200]
    assert second.train_type.average_speed == 250
    assert second.route.id == ""


def test_get_train_type_by_trip_id_keeps_raw_data(mocked, service):
    mocked.add(
        responses.GET,
        f"{SERVICE}/train_types/G1234",
        json={"status": 1, "msg": "Success", "data": {"name": "GaoTieOne"}},
    )
    resp = service.get_train_type_by_trip_id("G1234")
    assert resp.data == {"name": "GaoTieOne"}


def test_get_route_by_trip_id(mocked, service):
    mocked.add(
        responses.GET,
        f"{SERVICE}/routes/G1234",
        json={
            "status": 1,
            "msg": "Success",
            "data": {"id": "route-1", "stations": ["a", "b"], "startStation": "a"},
        },
    )
    resp = service.get_route_by_trip_id("G1234")
    assert resp.data.id == "route-1"
    assert resp.data.stations == ["a", "b"]
    assert resp.data.end_station == ""


def test_get_trips_by_route_ids(mocked, service):
    mocked.add(
        responses.POST,
        f"{SERVICE}/trips/routes",
        json={"status": 1, "msg": "Success", "data": [[{"id": "trip-1"}], None]},
    )
    resp = service.get_trips_by_route_ids(["route-1", "route-2"])
    assert _sent_body(mocked) == ["route-1", "route-2"]
    assert resp.data == [[{"id": "trip-1"}], []]


def test_get_trips_by_route_ids_rejects_non_array_items(mocked, service):
    mocked.add(
        responses.POST,
        f"{SERVICE}/trips/routes",
        json={"status": 1, "msg": "Success", "data": ["not a list"]},
    )
    with pytest.raises(ResponseDecodeError):
        service.get_trips_by_route_ids(["route-1"])


@pytest.mark.parametrize(
    "method_name, path",
    [("query_info", "trips/left"), ("query_info_in_parallel", "trips/left_parallel")],
)
def test_query_info_variants(mocked, service, method_name, path):
    mocked.add(
        responses.POST,
        f"{SERVICE}/{path}",
        json={
            "status": 1,
            "msg": "Success",
            "data": [
                {
                    "tripId": {"type": "D", "number": "1345"},
                    "trainTypeName": "DongCheOne",
                    "startStation": "shanghai",
                    "terminalStation": "taiyuan",
                    "economyClass": 1073741823,
                    "confortClass": 1073741823,
                    "priceForEconomyClass": "95.0",
                    "priceForConfortClass": "120.0",
                }
            ],
        },
    )
    query = TripInfo("shanghai", "taiyuan", "2025-05-04 15:00:00")
    resp = getattr(service, method_name)(query)
    assert _sent_body(mocked) == {
        "startPlace": "shanghai",
        "endPlace": "taiyuan",
        "departureTime": "2025-05-04 15:00:00",
    }
    summary = resp.data[0]
    assert str(summary.trip_id) == "D1345"
    assert summary.economy_class == 1073741823
    assert summary.price_for_confort_class == "120.0"


def test_get_trip_all_detail_info(mocked, service):
    mocked.add(
        responses.POST,
        f"{SERVICE}/trip_detail",
        json={
            "status": 1,
            "msg": "Success",
            "data": {
                "tripResponse": {"tripId": {"type": "G", "number": "1234"}, "confortClass": 5},
                "trip": _trip_json(),
            },
        },
    )
    request = TripDetailRequest(
        from_station="shanghai",
        to_station="taiyuan",
        travel_date="2025-05-04 09:00:00",
        trip_id="G1234",
    )
    resp = service.get_trip_all_detail_info(request)
    assert _sent_body(mocked) == {
        "from": "shanghai",
        "to": "taiyuan",
        "travelDate": "2025-05-04 09:00:00",
        "tripId": "G1234",
    }
    assert resp.data.trip_response.confort_class == 5
    assert resp.data.trip.route_id == "route-1"


def test_retrieve_travel_decodes_body_directly(mocked, service):
    mocked.add(
        responses.GET,
        f"{SERVICE}/trips/G1234",
        json={"tripId": "G1234", "routeId": "route-1", "startTime": "09:00"},
    )
    info = service.retrieve_travel("G1234")
    assert info == TravelInfo(trip_id="G1234", route_id="route-1", start_time="09:00")


def test_retrieve_travel_rejects_non_object(mocked, service):
    mocked.add(responses.GET, f"{SERVICE}/trips/G1234", json=[1, 2])
    with pytest.raises(ResponseDecodeError):
        service.retrieve_travel("G1234")


def test_delete_trip(mocked, service):
    mocked.add(
        responses.DELETE,
        f"{SERVICE}/trips/G1234",
        json={"status": 1, "msg": "Delete trip:G1234.", "data": "G1234"},
    )
    resp = service.delete_trip("G1234")
    assert resp.status == 1
    assert resp.data == "G1234"


def test_delete_trip_rejects_non_string_data(mocked, service):
    mocked.add(
        responses.DELETE,
        f"{SERVICE}/trips/G1234",
        json={"status": 1, "msg": "Delete", "data": {"id": "G1234"}},
    )
    with pytest.raises(ResponseDecodeError):
        service.delete_trip("G1234")


def test_invalid_json_body_raises(mocked, service):
    mocked.add(responses.GET, f"{SERVICE}/trips", body="<html>bad gateway</html>")
    with pytest.raises(ResponseDecodeError) as excinfo:
        service.query_all_trips()
    assert excinfo.value.body == "<html>bad gateway</html>"