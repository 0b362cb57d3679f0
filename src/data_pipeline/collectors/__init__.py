"""Data collectors for the remote metrics and train services."""

from .base import BaseCollector
from .metrics_collector import MetricsCollector, fetch_metrics, validate_metrics_document
from .trains_collector import Station, Train, TrainsCollector, title_case

__all__ = [
    "BaseCollector",
    "MetricsCollector",
    "fetch_metrics",
    "validate_metrics_document",
    "Station",
    "Train",
    "TrainsCollector",
    "title_case",
]
