"""Processors that turn raw counters into displayable metrics."""

from .derivation import DerivedMetric, counter_name, derive_all, derive_metric, get_counter

__all__ = ["DerivedMetric", "counter_name", "derive_all", "derive_metric", "get_counter"]
