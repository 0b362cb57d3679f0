"""
Shared layout helpers for dashboard components.

Provides the sentiment-coloured card used by every metrics widget and a few
small drawing helpers, all issued as layout intents on a parent stack.
"""

from dataclasses import dataclass
from typing import Mapping, Optional

from config.config import (
    CARD_CORNER_RADIUS,
    CARD_PADDING,
    CARD_TITLE_SPACING,
    ERROR_TITLE_TEMPLATE,
    ERROR_VALUE,
    SECONDARY_GAP,
)
from config.models import (
    DashboardConfig,
    DynamicColor,
    FontSet,
    Sentiment,
    SentimentPalette,
    Size,
)
from dashboard.surface import Stack


@dataclass(frozen=True)
class CardSpec:
    sentiment: Sentiment
    title: str
    primary_value: str
    secondary_value: str
    size: Size
    subtitle: Optional[str] = None
    footnote: Optional[str] = None


@dataclass(frozen=True)
class CardStyle:
    """Renderer settings that depend on the dashboard's grid density."""
    breakpoint: float
    fonts: FontSet
    palette: Mapping[Sentiment, SentimentPalette]
    text_strong: DynamicColor
    text_muted: DynamicColor
    border_width: int

    @classmethod
    def from_config(cls, config: DashboardConfig) -> "CardStyle":
        return cls(
            breakpoint=config.breakpoint,
            fonts=config.fonts,
            palette=config.palette,
            text_strong=config.text_strong,
            text_muted=config.text_muted,
            border_width=config.border_width,
        )


def sentiment_colors(sentiment: Sentiment, palette: Mapping[Sentiment, SentimentPalette]) -> SentimentPalette:
    """Look up the colour triple of a sentiment."""
    try:
        return palette[sentiment]
    except KeyError:
        raise ValueError(f"No palette for sentiment {sentiment!r}") from None


def is_wide(size: Size, breakpoint: float) -> bool:
    """True when primary and secondary values fit side by side (inclusive)."""
    return size.width >= breakpoint


def render_card(parent: Stack, spec: CardSpec, style: CardStyle) -> Stack:
    """
    Append one sentiment-coloured card to ``parent``.

    Args:
        parent: Container receiving the card
        spec: Card contents and target size
        style: Breakpoint, fonts and colours of the dashboard

    Returns:
        The card container
    """
    colors = sentiment_colors(spec.sentiment, style.palette)
    wide = is_wide(spec.size, style.breakpoint)

    card = parent.add_stack()
    card.set_size(spec.size)
    card.set_corner_radius(CARD_CORNER_RADIUS)
    card.set_border(style.border_width, colors.strong)
    card.set_background_color(colors.soft)
    card.set_padding(CARD_PADDING, CARD_PADDING, CARD_PADDING, CARD_PADDING)
    card.layout_vertically()

    title = card.add_text(spec.title)
    title.set_font(style.fonts.subtitle)
    title.set_text_color(style.text_strong)

    if spec.subtitle is not None:
        subtitle = card.add_text(spec.subtitle)
        subtitle.set_font(style.fonts.text)
        subtitle.set_text_color(style.text_muted)

    card.add_spacer(CARD_TITLE_SPACING)

    values = card.add_stack()
    if wide:
        values.layout_horizontally()
    else:
        values.layout_vertically()
    values.bottom_align_content()

    primary = values.add_text(spec.primary_value)
    primary.set_font(style.fonts.title)
    primary.set_text_color(colors.strong)

    secondary_stack = values.add_stack()
    secondary_stack.layout_vertically()
    secondary_stack.bottom_align_content()
    if wide:
        secondary_stack.set_padding(0, SECONDARY_GAP, 0, 0)
    else:
        secondary_stack.set_padding(0, 0, 0, SECONDARY_GAP)

    secondary = secondary_stack.add_text(spec.secondary_value)
    secondary.set_font(style.fonts.subtitle)
    secondary.set_text_color(colors.medium)

    if spec.footnote is not None:
        card.add_spacer()
        footnote = card.add_text(spec.footnote)
        footnote.set_font(style.fonts.text)
        footnote.set_text_color(colors.medium)

    return card


def error_card_spec(code: str, size: Size, footnote: Optional[str] = None) -> CardSpec:
    """Card shown instead of the dashboard when its input cannot be rendered."""
    return CardSpec(
        sentiment=Sentiment.BAD,
        title=ERROR_TITLE_TEMPLATE.format(code=code),
        primary_value=ERROR_VALUE,
        secondary_value="",
        size=size,
        footnote=footnote,
    )


def render_error_card(
    parent: Stack,
    code: str,
    size: Size,
    style: CardStyle,
    footnote: Optional[str] = None,
) -> Stack:
    return render_card(parent, error_card_spec(code, size, footnote), style)


def render_hline(parent: Stack, color: DynamicColor, gap: float = 5) -> Stack:
    """Draw a one-unit horizontal rule with a small gap above and below."""
    parent.add_spacer(gap)
    line = parent.add_stack()
    line.set_size(Size(0, 1))
    line.set_background_color(color)
    line.add_spacer()
    parent.add_spacer(gap)
    return line
