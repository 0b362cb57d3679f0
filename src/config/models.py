"""Configuration models and value types shared by every widget."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

from config.config import (
    BACKGROUND_HEX,
    CARD_BORDER_WIDTH,
    CATEGORY_CODES,
    NETWORK_CODE,
    PALETTE_HEX,
    TEXT_MUTED_HEX,
    TEXT_STRONG_HEX,
)
from utils.io import maybe_load_yaml


@dataclass(frozen=True)
class Size:
    """Width and height in logical units."""
    width: float
    height: float


@dataclass(frozen=True)
class DynamicColor:
    """Colour pair resolved by the host for light and dark appearance."""
    light: str
    dark: str

    @classmethod
    def of(cls, pair: Tuple[str, str]) -> "DynamicColor":
        return cls(light=pair[0], dark=pair[1])

    def resolve(self, scheme: str = "light") -> str:
        return self.dark if scheme == "dark" else self.light


@dataclass(frozen=True)
class FontSpec:
    weight: str  # "regular" | "medium" | "semibold" | "bold"
    size: int


@dataclass(frozen=True)
class FontSet:
    title: FontSpec
    subtitle: FontSpec
    text: FontSpec


class Sentiment(Enum):
    GOOD = "good"
    NORMAL = "normal"
    BAD = "bad"


@dataclass(frozen=True)
class SentimentPalette:
    """Colours of one sentiment: border/value, secondary text, background tint."""
    strong: DynamicColor
    medium: DynamicColor
    soft: DynamicColor


def _palette(name: str) -> SentimentPalette:
    shades = PALETTE_HEX[name]
    return SentimentPalette(
        strong=DynamicColor.of(shades["strong"]),
        medium=DynamicColor.of(shades["medium"]),
        soft=DynamicColor.of(shades["soft"]),
    )


SENTIMENT_PALETTES: Mapping[Sentiment, SentimentPalette] = {
    Sentiment.GOOD: _palette("green"),
    Sentiment.NORMAL: _palette("blue"),
    Sentiment.BAD: _palette("orange"),
}


@dataclass(frozen=True)
class ThresholdRule:
    """Two-level rule: ``when_true`` if ``ratio <comparison> threshold``, else ``otherwise``."""
    threshold: float
    comparison: str  # "gt" | "lt"
    when_true: Sentiment
    otherwise: Sentiment = Sentiment.GOOD

    def __post_init__(self):
        if self.comparison not in ("gt", "lt"):
            raise ValueError(f"Unsupported comparison: {self.comparison!r}")


class MetricKind(Enum):
    """Counter suffixes published by the metrics endpoints."""
    DELAYED = "delayed_for_more_than_five_minutes"
    TOTAL = "total_until_now"
    TODAY_VALID = "today_valid"
    LAST_WEEK_VALID = "last_week_valid"


class DerivationMode(Enum):
    """Which counters form the ratio of a derived metric."""
    DELAY_RATIO = (MetricKind.DELAYED, MetricKind.TOTAL)
    VALIDATION = (MetricKind.TODAY_VALID, MetricKind.LAST_WEEK_VALID)

    def __init__(self, numerator: MetricKind, denominator: MetricKind):
        self.numerator = numerator
        self.denominator = denominator


@dataclass(frozen=True)
class DashboardConfig:
    """Everything that distinguishes one dashboard variant from another.

    Built once per run and passed to every component.
    """
    name: str
    endpoint: str
    mode: DerivationMode
    rule: ThresholdRule
    breakpoint: float
    headline_size: Size
    area_size: Size
    headline_title: str
    area_title_template: str
    fonts: FontSet
    categories: Tuple[str, ...] = CATEGORY_CODES
    network_code: str = NETWORK_CODE
    border_width: int = CARD_BORDER_WIDTH
    subtitle: Optional[str] = None
    presentation: str = "large"
    link_url: Optional[str] = None
    palette: Mapping[Sentiment, SentimentPalette] = field(
        default_factory=lambda: dict(SENTIMENT_PALETTES)
    )
    text_strong: DynamicColor = DynamicColor.of(TEXT_STRONG_HEX)
    text_muted: DynamicColor = DynamicColor.of(TEXT_MUTED_HEX)
    background: DynamicColor = DynamicColor.of(BACKGROUND_HEX)

    def title_for(self, code: str) -> str:
        """Card title for a category code; areas drop the leading network digit."""
        if code == self.network_code:
            return self.headline_title
        return self.area_title_template.format(area=code[1:])

    @classmethod
    def from_yaml(cls, yaml_path: Optional[str], base: "DashboardConfig") -> "DashboardConfig":
        """Return ``base`` with overrides from the ``dashboard`` section of a YAML file."""
        yaml_config = maybe_load_yaml(yaml_path)
        section = yaml_config.get("dashboard", {}) if isinstance(yaml_config, dict) else {}
        if not isinstance(section, dict) or not section:
            return base
        return base.with_overrides(section)

    def with_overrides(self, overrides: Dict[str, Any]) -> "DashboardConfig":
        changes: Dict[str, Any] = {}
        for key in ("endpoint", "headline_title", "area_title_template", "subtitle",
                    "presentation", "link_url", "network_code"):
            if key in overrides:
                changes[key] = overrides[key]
        if "breakpoint" in overrides:
            changes["breakpoint"] = float(overrides["breakpoint"])
        if "border_width" in overrides:
            changes["border_width"] = int(overrides["border_width"])
        if "categories" in overrides:
            changes["categories"] = tuple(str(c).lower() for c in overrides["categories"])
        for key in ("headline_size", "area_size"):
            if key in overrides:
                width, height = overrides[key]
                changes[key] = Size(float(width), float(height))
        if "threshold" in overrides:
            changes["rule"] = replace(self.rule, threshold=float(overrides["threshold"]))
        return replace(self, **changes)
