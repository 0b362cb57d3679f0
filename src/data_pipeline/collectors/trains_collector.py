"""Fetchers for station departures and the station index."""

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

from config.config import STATION_INDEX_URL, TRAINS_URL
from config.schemas import StationIndex, TrainPayload, TrainsResponse
from data_pipeline.collectors.base import BaseCollector
from utils.errors import ParseError
from utils.logging import get_logger

logger = get_logger(__name__)

_WORD_START = re.compile(r"\b[\w'-]")


@dataclass(frozen=True)
class StationRef:
    code: str
    designation: str


@dataclass(frozen=True)
class Train:
    """One upcoming departure as published by the train service."""
    delay: Optional[int]  # minutes
    origin: StationRef
    destination: StationRef
    departure_time: str
    arrival_time: str
    train_number: Optional[int]
    service: StationRef
    platform: Optional[str]
    occupancy: Optional[int]
    eta: Optional[str]
    etd: Optional[str]

    @property
    def shown_departure(self) -> str:
        """Estimated departure when the train runs late, scheduled otherwise."""
        if self.delay and self.etd:
            return self.etd
        return self.departure_time

    @classmethod
    def from_payload(cls, data: TrainPayload) -> "Train":
        try:
            return cls(
                delay=data.get("delay"),
                origin=_station_ref(data["trainOrigin"]),
                destination=_station_ref(data["trainDestination"]),
                departure_time=data["departureTime"],
                arrival_time=data.get("arrivalTime", ""),
                train_number=data.get("trainNumber"),
                service=_station_ref(data.get("trainService") or {}),
                platform=data.get("platform"),
                occupancy=data.get("occupancy"),
                eta=data.get("eta"),
                etd=data.get("etd"),
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise ParseError(f"Malformed train entry: {e}") from e


@dataclass(frozen=True)
class Station:
    id: str
    name: str

    @classmethod
    def from_index_entry(cls, name: str, station_id: Any) -> "Station":
        return cls(id=str(station_id), name=title_case(name))


def _station_ref(data: Dict[str, Any]) -> StationRef:
    return StationRef(code=data.get("code", ""), designation=data.get("designation", ""))


def title_case(name: str) -> str:
    """Uppercase the first character of every word, keeping the rest as is."""
    return _WORD_START.sub(lambda m: m.group(0).upper(), name)


class TrainsCollector(BaseCollector):
    def __init__(self, session: Optional[requests.Session] = None, **kwargs):
        super().__init__("trains", session=session, **kwargs)

    def get_trains(self, station_id: str) -> List[Train]:
        payload: TrainsResponse = self.fetch_json(TRAINS_URL, params={"stationId": station_id})
        if not isinstance(payload, list):
            raise ParseError(f"Trains for station {station_id} are not a JSON list")
        trains = [Train.from_payload(entry) for entry in payload]
        logger.info(f"[{self.source_name}] {len(trains)} trains for station {station_id}")
        return trains

    def get_stations(self) -> List[Station]:
        payload: StationIndex = self.fetch_json(STATION_INDEX_URL)
        if not isinstance(payload, dict):
            raise ParseError("Station index is not a JSON object")
        return [Station.from_index_entry(name, sid) for name, sid in payload.items()]
