"""
Grid composer for the metrics dashboards.

One full-width headline card, the remaining categories two per row, and a
footer carrying the resource timestamp.
"""

from typing import List, Sequence, Tuple, Union

from config.config import FOOTER_LEFT_PADDING, ROW_SPACING, WIDGET_SPACING
from config.models import DashboardConfig, Sentiment
from dashboard.components.layout import CardSpec, CardStyle, render_card
from dashboard.surface import Stack, TextNode, Widget
from data_pipeline.processors.derivation import DerivedMetric
from utils.datetime import normalize_timestamp
from utils.errors import LayoutError

ClassifiedItem = Tuple[str, DerivedMetric, Sentiment]


def pair_rows(items: Sequence[ClassifiedItem]) -> List[Sequence[ClassifiedItem]]:
    """Split area items into rows of two.

    Raises:
        LayoutError: If the number of items is odd.
    """
    if len(items) % 2:
        raise LayoutError(
            f"Area cards are laid out in pairs; got {len(items)} items"
        )
    return [items[i:i + 2] for i in range(0, len(items), 2)]


def _card_spec(item: ClassifiedItem, config: DashboardConfig, size) -> CardSpec:
    code, metric, sentiment = item
    return CardSpec(
        sentiment=sentiment,
        title=config.title_for(code),
        primary_value=metric.primary_display,
        secondary_value=metric.secondary_display,
        size=size,
    )


def render_footer(parent: Stack, timestamp: Union[int, float, str], config: DashboardConfig) -> TextNode:
    footer = parent.add_stack()
    footer.layout_horizontally()
    footer.bottom_align_content()
    footer.set_padding(0, FOOTER_LEFT_PADDING, 0, 0)

    updated_at = footer.add_text(normalize_timestamp(timestamp))
    updated_at.set_font(config.fonts.subtitle)
    updated_at.set_text_color(config.text_muted)
    return updated_at


def compose_grid(
    widget: Widget,
    items: Sequence[ClassifiedItem],
    timestamp: Union[int, float, str],
    config: DashboardConfig,
) -> None:
    """
    Lay out classified metrics as headline + paired rows + footer.

    Args:
        widget: Root container receiving the grid
        items: ``(code, metric, sentiment)`` in display order, headline first
        timestamp: Resource timestamp of the metrics document
        config: Dashboard sizes, fonts and colours
    """
    if not items:
        raise LayoutError("The grid needs at least the headline item")
    headline, areas = items[0], items[1:]
    rows = pair_rows(areas)
    # Parse the timestamp up front so a bad value leaves no partial grid
    normalize_timestamp(timestamp)

    style = CardStyle.from_config(config)
    widget.spacing = WIDGET_SPACING

    render_card(widget, _card_spec(headline, config, config.headline_size), style)

    for row_items in rows:
        row = widget.add_stack()
        row.layout_horizontally()
        row.bottom_align_content()
        row.spacing = ROW_SPACING
        for item in row_items:
            render_card(row, _card_spec(item, config, config.area_size), style)

    render_footer(widget, timestamp, config)
