"""Turn raw counter pairs into derived ratio metrics.

Counters are looked up by category code and ``MetricKind`` rather than by
ad hoc string building, and every lookup fails closed: a missing counter or
a zero denominator raises ``InvalidMetricError`` instead of letting
``NaN``/``Infinity`` reach a card.
"""

import math
from dataclasses import dataclass
from numbers import Real
from typing import List, Sequence, Tuple

from config.config import COUNTER_TEMPLATE
from config.models import DerivationMode, MetricKind
from config.schemas import RawMetricsDocument
from utils.errors import InvalidMetricError
from utils.formatting import (
    format_count,
    format_parenthesized_count,
    format_percent,
    format_trimmed_percent,
)


@dataclass(frozen=True)
class DerivedMetric:
    ratio: float  # numerator / denominator, fed to the classifier
    primary_value: float
    primary_display: str
    secondary_value: float
    secondary_display: str


def counter_name(code: str, kind: MetricKind) -> str:
    return COUNTER_TEMPLATE.format(code=code, suffix=kind.value)


def get_counter(document: RawMetricsDocument, code: str, kind: MetricKind) -> float:
    """Return one counter of ``document`` for category ``code``.

    Raises:
        InvalidMetricError: If the counter is absent, not a number or not finite.
    """
    name = counter_name(code, kind)
    value = document["data"].get(name)
    if value is None:
        raise InvalidMetricError(code, f"counter '{name}' is missing")
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidMetricError(code, f"counter '{name}' is not a number: {value!r}")
    if not math.isfinite(value):
        raise InvalidMetricError(code, f"counter '{name}' is not finite")
    return value


def derive_metric(
    document: RawMetricsDocument, code: str, mode: DerivationMode
) -> DerivedMetric:
    """Derive the ratio metric of one category under ``mode``."""
    numerator = get_counter(document, code, mode.numerator)
    denominator = get_counter(document, code, mode.denominator)
    if denominator == 0:
        raise InvalidMetricError(
            code, f"'{counter_name(code, mode.denominator)}' is zero"
        )

    ratio = numerator / denominator
    percent = numerator * 100 / denominator

    if mode is DerivationMode.DELAY_RATIO:
        return DerivedMetric(
            ratio=ratio,
            primary_value=ratio,
            primary_display=format_percent(percent),
            secondary_value=numerator,
            secondary_display=format_parenthesized_count(numerator),
        )

    # Validation mode: today's count first, week-over-week ratio second
    return DerivedMetric(
        ratio=ratio,
        primary_value=numerator,
        primary_display=format_count(numerator),
        secondary_value=ratio,
        secondary_display=format_trimmed_percent(percent),
    )


def derive_all(
    document: RawMetricsDocument, codes: Sequence[str], mode: DerivationMode
) -> List[Tuple[str, DerivedMetric]]:
    """Derive every category in order; the first invalid one aborts."""
    return [(code, derive_metric(document, code, mode)) for code in codes]
