"""Schema definitions for the JSON payloads returned by the remote services."""

from typing import Dict, List, Optional, TypedDict, Union


class RawMetricsDocument(TypedDict):
    data: Dict[str, float]  # "_<code>_<suffix>_count" -> counter
    timestamp_resource: Union[int, str]  # epoch millis or ISO8601


class StationRef(TypedDict):
    code: str
    designation: str


class TrainPayload(TypedDict, total=False):
    delay: Optional[int]  # minutes
    trainOrigin: StationRef
    trainDestination: StationRef
    departureTime: str
    arrivalTime: str
    trainNumber: int
    trainService: StationRef
    platform: str
    occupancy: Optional[int]
    eta: str
    etd: str


TrainsResponse = List[TrainPayload]

StationIndex = Dict[str, str]  # station name -> station id
