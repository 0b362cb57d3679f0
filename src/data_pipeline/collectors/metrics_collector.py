"""Fetcher for the videowall metrics endpoints."""

from collections.abc import Mapping
from typing import Optional

import requests

from config.schemas import RawMetricsDocument
from data_pipeline.collectors.base import BaseCollector
from utils.errors import ParseError
from utils.logging import get_logger

logger = get_logger(__name__)


class MetricsCollector(BaseCollector):
    """Retrieves one ``RawMetricsDocument`` per call."""

    def __init__(self, session: Optional[requests.Session] = None, **kwargs):
        super().__init__("metrics", session=session, **kwargs)

    def fetch(self, url: str) -> RawMetricsDocument:
        payload = self.fetch_json(url)
        document = validate_metrics_document(payload, url)
        logger.info(
            f"[{self.source_name}] Loaded {len(document['data'])} counters from {url}"
        )
        return document


def validate_metrics_document(payload, url: str = "<payload>") -> RawMetricsDocument:
    """Check the envelope of a metrics response.

    Raises:
        ParseError: If ``data`` is not a mapping or ``timestamp_resource`` is absent.
    """
    if not isinstance(payload, Mapping):
        raise ParseError(f"Metrics from {url} are not a JSON object")
    data = payload.get("data")
    if not isinstance(data, Mapping):
        raise ParseError(f"Metrics from {url} have no 'data' object")
    if payload.get("timestamp_resource") is None:
        raise ParseError(f"Metrics from {url} have no 'timestamp_resource'")
    return RawMetricsDocument(
        data=dict(data),
        timestamp_resource=payload["timestamp_resource"],
    )


def fetch_metrics(url: str, session: Optional[requests.Session] = None) -> RawMetricsDocument:
    """Fetch and validate one metrics document."""
    return MetricsCollector(session=session).fetch(url)
