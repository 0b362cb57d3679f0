"""Sentiment classification of derived ratios against a configured rule."""

import math

from config.models import Sentiment, ThresholdRule
from data_pipeline.processors.derivation import DerivedMetric
from utils.errors import InvalidMetricError


def classify(ratio: float, rule: ThresholdRule, code: str = "?") -> Sentiment:
    """Map ``ratio`` to a sentiment.

    The comparison is strict, so a ratio equal to the threshold always
    falls to ``rule.otherwise``.

    Raises:
        InvalidMetricError: If ``ratio`` is NaN or infinite.
    """
    if not math.isfinite(ratio):
        raise InvalidMetricError(code, f"ratio {ratio!r} cannot be classified")

    if rule.comparison == "gt":
        hit = ratio > rule.threshold
    else:
        hit = ratio < rule.threshold
    return rule.when_true if hit else rule.otherwise


def classify_metric(metric: DerivedMetric, rule: ThresholdRule, code: str = "?") -> Sentiment:
    return classify(metric.ratio, rule, code)
