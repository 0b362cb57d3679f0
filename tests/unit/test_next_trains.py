"""Tests for the next trains panel."""

from unittest.mock import Mock

import pytest

from config.config import TRAINS_LINK_URL, TRAINS_LOGO_URL
from dashboard.components.next_trains import (
    PRIMARY,
    render_next_trains,
    render_trains_panel,
)
from dashboard.surface import Widget
from data_pipeline.collectors import Station, TrainsCollector
from data_pipeline.collectors.trains_collector import StationRef, Train
from tests.helpers import texts
from utils.errors import FetchError, InvalidParameterError

STATION = Station(id="94-30007", name="Lisboa - Santa Apolónia")


def _train(destination, departure, delay=None, etd=None):
    ref = StationRef(code="", designation="")
    return Train(
        delay=delay,
        origin=ref,
        destination=StationRef(code="x", designation=destination),
        departure_time=departure,
        arrival_time="",
        train_number=None,
        service=ref,
        platform=None,
        occupancy=None,
        eta=None,
        etd=etd,
    )


TRAINS = [
    _train("Sintra", "10:15"),
    _train("Cascais", "10:20", delay=5, etd="10:25"),
    _train("Azambuja", "10:30"),
    _train("Tomar", "10:45"),
]


def _collector(trains=TRAINS, stations=(STATION,)):
    collector = Mock(spec=TrainsCollector)
    collector.get_trains.return_value = list(trains)
    collector.get_stations.return_value = list(stations)
    return collector


def test_header_and_rows():
    widget = Widget("medium")
    render_next_trains(widget, STATION, TRAINS)

    header = widget.children[0]
    title, name = header.children[0].children
    assert title.text == "PROXIMOS COMBOIOS"
    assert title.text_color == PRIMARY
    assert name.text == STATION.name
    assert name.text_opacity == 0.75
    logo = header.children[-1]
    assert logo.source == TRAINS_LOGO_URL
    assert logo.image_size.width == 20

    assert texts(widget.to_dict())[2:] == [
        "DESTINO", "HORA",
        "Sintra", "10:15", "",
        "Cascais", "10:25", "  (+5m)",
        "Azambuja", "10:30", "",
    ]


def test_fewer_trains_than_rows():
    widget = Widget("medium")
    render_next_trains(widget, STATION, TRAINS[:1])
    assert "Sintra" in texts(widget.to_dict())
    assert "Cascais" not in texts(widget.to_dict())


def test_panel_fetches_trains_and_station():
    collector = _collector()

    widget = render_trains_panel(" 94-30007 ", collector=collector)

    collector.get_trains.assert_called_once_with("94-30007")
    assert widget.presentation == "medium"
    assert widget.url == TRAINS_LINK_URL
    assert "Lisboa - Santa Apolónia" in texts(widget.to_dict())


def test_unknown_station_renders_error_card():
    widget = render_trains_panel("123", collector=_collector())
    assert texts(widget.to_dict()) == ['O argumento "123" não é válido.', "ERROR", ""]


@pytest.mark.parametrize("station_id", [None, "", "   "])
def test_missing_station_id(station_id):
    collector = _collector()
    with pytest.raises(InvalidParameterError):
        render_trains_panel(station_id, collector=collector)
    collector.get_trains.assert_not_called()


def test_fetch_error_propagates():
    collector = _collector()
    collector.get_trains.side_effect = FetchError("https://example.test", "timeout")
    with pytest.raises(FetchError):
        render_trains_panel("94-30007", collector=collector)
