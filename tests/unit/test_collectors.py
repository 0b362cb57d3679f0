"""Tests for the HTTP collectors."""

from unittest.mock import Mock, patch

import pytest
import requests

from config.config import HTTP_TIMEOUT_SEC, STATION_INDEX_URL, TRAINS_URL
from data_pipeline.collectors import (
    TrainsCollector,
    fetch_metrics,
    title_case,
    validate_metrics_document,
)
from data_pipeline.collectors.trains_collector import Train
from utils.errors import FetchError, ParseError

URL = "https://example.test/metrics"


def _session(payload=None, status_error=None, json_error=None):
    response = Mock()
    response.raise_for_status.side_effect = status_error
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    session = Mock()
    session.get.return_value = response
    return session


def _train(destination="Sintra", delay=None, etd=None):
    return {
        "delay": delay,
        "trainOrigin": {"code": "94-30007", "designation": "Lisboa - Rossio"},
        "trainDestination": {"code": "94-2006", "designation": destination},
        "departureTime": "10:15",
        "arrivalTime": "10:55",
        "trainNumber": 18211,
        "trainService": {"code": "U", "designation": "Urbano"},
        "platform": "3",
        "occupancy": 1,
        "eta": None,
        "etd": etd,
    }


def test_fetch_metrics_returns_document():
    session = _session({"data": {"_cm_today_valid_count": 10}, "timestamp_resource": 1})

    document = fetch_metrics(URL, session=session)

    assert document == {"data": {"_cm_today_valid_count": 10}, "timestamp_resource": 1}
    session.get.assert_called_once_with(URL, params=None, timeout=HTTP_TIMEOUT_SEC)


def test_module_requests_used_without_session():
    with patch("data_pipeline.collectors.base.requests.get") as get:
        get.return_value.json.return_value = {"data": {}, "timestamp_resource": 1}
        fetch_metrics(URL)
    get.assert_called_once_with(URL, params=None, timeout=HTTP_TIMEOUT_SEC)


def test_http_error_is_fetch_error():
    session = _session(status_error=requests.HTTPError("503 Server Error"))
    with pytest.raises(FetchError) as exc:
        fetch_metrics(URL, session=session)
    assert exc.value.url == URL
    assert "503" in exc.value.reason


def test_connection_error_is_fetch_error():
    session = Mock()
    session.get.side_effect = requests.ConnectionError("refused")
    with pytest.raises(FetchError):
        fetch_metrics(URL, session=session)


def test_invalid_json_is_parse_error():
    session = _session(json_error=ValueError("Expecting value"))
    with pytest.raises(ParseError):
        fetch_metrics(URL, session=session)


@pytest.mark.parametrize("payload", [
    [],
    {"timestamp_resource": 1},
    {"data": [], "timestamp_resource": 1},
    {"data": {}},
    {"data": {}, "timestamp_resource": None},
])
def test_bad_envelope_is_parse_error(payload):
    with pytest.raises(ParseError):
        validate_metrics_document(payload)


def test_get_trains_sends_station_id():
    session = _session([_train(), _train("Cascais", delay=5, etd="10:20")])

    trains = TrainsCollector(session=session).get_trains("94-30007")

    session.get.assert_called_once_with(
        TRAINS_URL, params={"stationId": "94-30007"}, timeout=HTTP_TIMEOUT_SEC
    )
    assert [t.destination.designation for t in trains] == ["Sintra", "Cascais"]
    assert trains[0].shown_departure == "10:15"
    assert trains[1].shown_departure == "10:20"


def test_get_trains_requires_list():
    with pytest.raises(ParseError):
        TrainsCollector(session=_session({"trains": []})).get_trains("1")


def test_malformed_train_is_parse_error():
    with pytest.raises(ParseError):
        Train.from_payload({"delay": None})


def test_get_stations_title_cases_names():
    session = _session({"lisboa - santa apolónia": "94-30007", "cais do sodré": 9469007})

    stations = TrainsCollector(session=session).get_stations()

    session.get.assert_called_once_with(STATION_INDEX_URL, params=None, timeout=HTTP_TIMEOUT_SEC)
    assert [(s.id, s.name) for s in stations] == [
        ("94-30007", "Lisboa - Santa Apolónia"),
        ("9469007", "Cais Do Sodré"),
    ]


def test_title_case():
    assert title_case("são joão do estoril") == "São João Do Estoril"
