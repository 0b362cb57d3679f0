"""Tests for derived metrics."""

import math

import pytest

from config.models import DerivationMode, MetricKind
from data_pipeline.processors.derivation import (
    counter_name,
    derive_all,
    derive_metric,
    get_counter,
)
from tests.helpers import delays, make_document, validations
from utils.errors import InvalidMetricError

NBSP = " "


def test_counter_name():
    assert counter_name("41", MetricKind.DELAYED) == "_41_delayed_for_more_than_five_minutes_count"
    assert counter_name("cm", MetricKind.LAST_WEEK_VALID) == "_cm_last_week_valid_count"


def test_delay_ratio_at_threshold():
    metric = derive_metric(delays(19, 200), "cm", DerivationMode.DELAY_RATIO)

    assert metric.ratio == 19 / 200
    assert metric.primary_value == metric.ratio
    assert metric.primary_display == "10%"
    assert metric.secondary_value == 19
    assert metric.secondary_display == "(19)"


def test_delay_ratio_grouped_secondary():
    metric = derive_metric(delays(12345, 200000), "cm", DerivationMode.DELAY_RATIO)
    assert metric.primary_display == "6%"
    assert metric.secondary_display == f"(12{NBSP}345)"


def test_validation_mode_displays():
    metric = derive_metric(validations(900, 1000), "cm", DerivationMode.VALIDATION)

    assert metric.ratio == 0.9
    assert metric.primary_value == 900
    assert metric.primary_display == "900"
    assert metric.secondary_value == 0.9
    assert metric.secondary_display == "90%"


def test_validation_mode_trims_to_two_decimals():
    metric = derive_metric(validations(123456, 120000), "cm", DerivationMode.VALIDATION)
    assert metric.primary_display == f"123{NBSP}456"
    assert metric.secondary_display == "102.88%"


@pytest.mark.parametrize("numerator,denominator", [(1, 3), (2, 7), (19, 200), (0, 5), (7, 7)])
def test_ratio_is_exact_division(numerator, denominator):
    metric = derive_metric(delays(numerator, denominator), "cm", DerivationMode.DELAY_RATIO)
    assert metric.ratio == numerator / denominator


@pytest.mark.parametrize("document,mode", [
    (delays(5, 0), DerivationMode.DELAY_RATIO),
    (validations(1000, 0), DerivationMode.VALIDATION),
    (validations(0, 0), DerivationMode.VALIDATION),
])
def test_zero_denominator_is_invalid(document, mode):
    with pytest.raises(InvalidMetricError) as exc:
        derive_metric(document, "cm", mode)
    assert exc.value.code == "cm"
    assert "zero" in str(exc.value)


def test_missing_counter_is_invalid():
    document = make_document({"cm": {"total_until_now": 100}})
    with pytest.raises(InvalidMetricError) as exc:
        derive_metric(document, "cm", DerivationMode.DELAY_RATIO)
    assert "_cm_delayed_for_more_than_five_minutes_count" in str(exc.value)


def test_unknown_category_is_invalid():
    with pytest.raises(InvalidMetricError):
        derive_metric(delays(1, 2), "41", DerivationMode.DELAY_RATIO)


@pytest.mark.parametrize("value", ["12", True, None, math.nan, math.inf])
def test_non_numeric_counter_is_invalid(value):
    document = {"data": {"_cm_today_valid_count": value}, "timestamp_resource": 0}
    with pytest.raises(InvalidMetricError):
        get_counter(document, "cm", MetricKind.TODAY_VALID)


def test_derive_all_keeps_order(delays_document):
    derived = derive_all(delays_document, ["44", "cm", "41"], DerivationMode.DELAY_RATIO)
    assert [code for code, _ in derived] == ["44", "cm", "41"]
    assert derived[1][1].ratio == 190 / 2000
