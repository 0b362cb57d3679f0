"""Tests for sentiment classification."""

import math

import pytest

from config.dashboards import DELAY_RULE, VALIDATION_RULE
from config.models import Sentiment, ThresholdRule
from data_pipeline.processors.derivation import DerivedMetric
from metrics.sentiment import classify, classify_metric
from utils.errors import InvalidMetricError


@pytest.mark.parametrize("ratio,expected", [
    (0.0, Sentiment.GOOD),
    (0.05, Sentiment.GOOD),
    (0.095, Sentiment.GOOD),
    (0.0951, Sentiment.BAD),
    (0.1, Sentiment.BAD),
    (1.0, Sentiment.BAD),
])
def test_delay_rule(ratio, expected):
    assert classify(ratio, DELAY_RULE) == expected


@pytest.mark.parametrize("ratio,expected", [
    (0.0, Sentiment.NORMAL),
    (0.9, Sentiment.NORMAL),
    (0.9999, Sentiment.NORMAL),
    (1.0, Sentiment.GOOD),
    (1.25, Sentiment.GOOD),
])
def test_validation_rule(ratio, expected):
    assert classify(ratio, VALIDATION_RULE) == expected


def test_each_rule_reaches_two_levels_only():
    ratios = [i / 100 for i in range(0, 201)]
    delay_levels = {classify(r, DELAY_RULE) for r in ratios}
    validation_levels = {classify(r, VALIDATION_RULE) for r in ratios}

    assert delay_levels == {Sentiment.GOOD, Sentiment.BAD}
    assert validation_levels == {Sentiment.GOOD, Sentiment.NORMAL}


def test_classification_is_deterministic():
    assert all(classify(0.2, DELAY_RULE) == Sentiment.BAD for _ in range(10))


@pytest.mark.parametrize("ratio", [math.nan, math.inf, -math.inf])
def test_non_finite_ratio_raises(ratio):
    with pytest.raises(InvalidMetricError):
        classify(ratio, DELAY_RULE, code="41")


def test_classify_metric_uses_ratio():
    metric = DerivedMetric(
        ratio=0.9, primary_value=900, primary_display="900",
        secondary_value=0.9, secondary_display="90%",
    )
    assert classify_metric(metric, VALIDATION_RULE) == Sentiment.NORMAL


def test_rule_rejects_unknown_comparison():
    with pytest.raises(ValueError):
        ThresholdRule(threshold=1.0, comparison="ge", when_true=Sentiment.BAD)
