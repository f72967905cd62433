# trainticket-client

A Python client for the REST APIs of a train-ticket booking system built
from many small services, together with helpers that produce random test
data. You can use it to send requests to a running deployment and to check
the individual services against it.

## What is covered

Each service of the booking system has its own client class. Every class is
a dataclass that holds one shared `ServiceClient`. That client keeps the base
URL, the default headers (`DEFAULT_HEADERS`) and a `requests.Session`, and it
decodes the JSON answers.

| Module                            | Class                      | Endpoints under                            |
|-----------------------------------|----------------------------|--------------------------------------------|
| `trainticket_client.client`       | `VerificationCodeService`  | `/api/v1/verifycode`                       |
| `trainticket_client.route`        | `RouteService`             | `/api/v1/routeservice/routes`              |
| `trainticket_client.seat`         | `SeatService`              | `/api/v1/seatservice/seats`                |
| `trainticket_client.security`     | `SecurityService`          | `/api/v1/securityservice/securityConfigs`  |
| `trainticket_client.station`      | `StationService`           | `/api/v1/stationservice/stations`          |
| `trainticket_client.station_food` | `StationFoodService`       | `/api/v1/stationfoodservice`               |
| `trainticket_client.train_food`   | `TrainFoodService`         | `/api/v1/trainfoodservice/trainfoods`      |
| `trainticket_client.train`        | `TrainService`             | `/api/v1/trainservice/trains`              |
| `trainticket_client.user`         | `UserService`              | `/api/v1/userservice/users`                |
| `trainticket_client.travel_plan`  | `TravelPlanService`        | `/api/v1/travelplanservice/travelPlan`     |
| `trainticket_client.wait_order`   | `WaitOrderService`         | `/api/v1/waitorderservice`                 |
| `trainticket_client.travel`       | `TravelService`            | `/api/v1/travelservice`                    |
| `trainticket_client.travel2`      | `Travel2Service`           | `/api/v1/travel2service`                   |

Request bodies are dataclasses such as `RouteInfo`, `SeatRequest`, `Station`,
`TrainType`, `User`, `TravelInfo` or `WaitOrder`. They are sent as JSON with
the service's camel-case field names. Most answers are decoded into an
`ApiResponse` envelope or one of its subclasses, which has `status`, `msg` and
`data` attributes. There are two exceptions. `VerificationCodeService.verify_code`
returns a plain `bool`. `TravelService.retrieve_travel` returns a `TravelInfo`.

## Configuration

The deployment to talk to is given by the `BASE_URL` environment variable,
for example `http://127.0.0.1:8080`. `ServiceClient.from_env` reads that
variable, from `os.environ` or from any mapping you pass in. If the variable
is missing or empty, it raises `ValueError`. You can also construct
`ServiceClient` directly with a base URL and, optionally, your own headers
and session. The client is a context manager, and leaving the `with` block
closes its session.

```python
from trainticket_client.client import ServiceClient
from trainticket_client.station import Station, StationService

with ServiceClient.from_env() as client:
    stations = StationService(client)
    created = stations.create_station(Station(id="s1", name="Shanghai", stay_time=5))
    print(created.status, created.msg, created.data.name)

    all_stations = stations.query_stations()
    print([station.name for station in all_stations.data])
```

`ServiceClient.request(method, path, payload)` sends a request and returns
the decoded JSON body. `ServiceClient.call(method, path, response_type, payload)`
does the same and then decodes the body into the given `ApiResponse` type.

## Errors

Transport failures are not caught. They propagate as the exceptions that
`requests` raises. A body that is not JSON, or that does not match the shape
the call expects, raises `ResponseDecodeError`, a subclass of `ValueError`.
Its message includes the raw body, which is also available as its `body`
attribute. A response with a non-success `status` is not an error. It is
returned unchanged, so check `status` and `msg` yourself.

## Test-data helpers

`trainticket_client.utils` has small helpers for building request data and
for comparing answers with what was sent:

```python
from trainticket_client.utils import (
    comma_separated_to_bracketed,
    int_list_to_string,
    int_slice_to_string,
    list_to_string,
    middle_elements,
    string_slice_to_string,
    string_to_list,
    to_lower_and_remove_spaces,
)

comma_separated_to_bracketed(" a, b ,c ")   # "[a b c]"
string_slice_to_string(["a", "b", "c"])     # "[a b c]"
int_slice_to_string([1, 2, 3])              # "[1 2 3]"
string_to_list("a, b ,c")                   # ["a", "b", "c"]
list_to_string(["a", "b"])                  # "Stations[0] a, Stations[1] b"
int_list_to_string([1, 2])                  # "Numbers[0] 1, Numbers[1] 2"
middle_elements("a,b,c,d")                  # "b,c"
to_lower_and_remove_spaces("New York")      # "newyork"
```

The module also has random generators:

- `generate_trip_id()`: a letter from `ZTKGD` followed by a number of at least three digits.
- `random_train_type_name()`: a train type name.
- `train_type_for_trip(trip_id)`: a train type name that matches the trip id's first letter. It raises `ValueError` for an empty id.
- `generate_verify_code()`: a six-character code of letters and digits.
- `random_datetime(start_time=None)`: a `YYYY-MM-DD HH:MM:SS` timestamp. It is 1–24 hours after a valid `start_time`, otherwise 1–30 days from now.
- `random_clock_time()`: a time of day as `HH:MM:SS`.
- `random_number_string()`: ten random digits.
- `generate_description()`: a text such as `Max in 3.4 hour`.
- `generate_document_number()`: `DocumentNumber_One` or `DocumentNumber_Two`.
- `random_select(options)`: a random element of a non-empty sequence. It raises `ValueError` if the sequence is empty.

The known train type names are listed in the `TrainTypeName` enum.

## What this package does not do

This package is a library only. It has no command-line program. It has no
loop that keeps sending requests, no concurrency control, and no collection
or display of request statistics. You have to drive the service classes from
your own code. There are also no clients for logging in, for ordinary
orders, for prices or for contacts. Only the services in the table above are
covered.