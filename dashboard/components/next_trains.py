"""
Next trains panel component.

Shows the next departures at one rail station as a small table:
destination on the left, departure time on the right, with the delay
appended when the train runs late.
"""

from typing import List, Optional

from config.config import (
    TEXT_MUTED_HEX,
    TRAINS_BACKGROUND_HEX,
    TRAINS_DELAY_HEX,
    TRAINS_LINK_URL,
    TRAINS_LOGO_SIZE,
    TRAINS_LOGO_URL,
    TRAINS_PRIMARY_HEX,
    TRAINS_ROWS,
    TRAINS_TEXT_HEX,
)
from config.models import SENTIMENT_PALETTES, DynamicColor, FontSet, FontSpec, Size
from dashboard.components.layout import CardStyle, render_error_card, render_hline
from dashboard.surface import Stack, Widget
from data_pipeline.collectors.trains_collector import Station, Train, TrainsCollector
from utils.errors import InvalidParameterError
from utils.logging import get_logger

logger = get_logger(__name__)

PRIMARY = DynamicColor.of(TRAINS_PRIMARY_HEX)
TEXT = DynamicColor.of(TRAINS_TEXT_HEX)
BACKGROUND = DynamicColor.of(TRAINS_BACKGROUND_HEX)
DELAY = DynamicColor.of(TRAINS_DELAY_HEX)
# Table rule: text colour at half alpha
RULE = DynamicColor(light=TEXT.light + "80", dark=TEXT.dark + "80")

HEADER_FONT = FontSpec("medium", 16)
STATION_FONT = FontSpec("regular", 12)
COLUMN_FONT = FontSpec("semibold", 11)
DESTINATION_FONT = FontSpec("regular", 14)
TIME_FONT = FontSpec("bold", 14)
DELAY_FONT = FontSpec("regular", 12)

ERROR_STYLE = CardStyle(
    breakpoint=0,
    fonts=FontSet(title=FontSpec("semibold", 36), subtitle=FontSpec("regular", 16), text=FontSpec("regular", 12)),
    palette=SENTIMENT_PALETTES,
    text_strong=TEXT,
    text_muted=DynamicColor.of(TEXT_MUTED_HEX),
    border_width=5,
)
ERROR_SIZE = Size(330, 140)


def _delay_note(train: Train) -> str:
    return f"  (+{train.delay}m)" if train.delay else ""


def render_header(widget: Widget, station: Station) -> None:
    header = widget.add_stack()
    header.layout_horizontally()
    header.center_align_content()

    text_stack = header.add_stack()
    text_stack.layout_vertically()

    title = text_stack.add_text("PROXIMOS COMBOIOS")
    title.set_font(HEADER_FONT)
    title.set_text_color(PRIMARY)

    name = text_stack.add_text(station.name)
    name.set_font(STATION_FONT)
    name.set_text_color(TEXT)
    name.text_opacity = 0.75

    header.add_spacer()

    logo = header.add_image(TRAINS_LOGO_URL)
    logo.set_size(Size(TRAINS_LOGO_SIZE, TRAINS_LOGO_SIZE))
    logo.alignment = "left"


def render_table_header(table: Stack) -> None:
    row = table.add_stack()
    row.layout_horizontally()
    for i, label in enumerate(("DESTINO", "HORA")):
        if i:
            row.add_spacer()
        text = row.add_text(label)
        text.set_font(COLUMN_FONT)
        text.set_text_color(TEXT)
        text.text_opacity = 0.75


def render_row(table: Stack, train: Train) -> Stack:
    row = table.add_stack()
    row.layout_horizontally()
    row.set_padding(0, 0, 5, 0)

    destination = row.add_text(train.destination.designation)
    destination.set_font(DESTINATION_FONT)
    destination.set_text_color(TEXT)

    row.add_spacer()

    departure = row.add_stack()
    departure.layout_horizontally()

    time_text = departure.add_text(train.shown_departure)
    time_text.set_font(TIME_FONT)
    time_text.set_text_color(PRIMARY)

    delay = departure.add_text(_delay_note(train))
    delay.set_font(DELAY_FONT)
    delay.set_text_color(DELAY)
    return row


def render_next_trains(widget: Widget, station: Station, trains: List[Train], rows: int = TRAINS_ROWS) -> None:
    """Lay out header, rule and the first ``rows`` departures on ``widget``."""
    render_header(widget, station)
    render_hline(widget, PRIMARY)

    table = widget.add_stack()
    table.layout_vertically()

    render_table_header(table)
    render_hline(table, RULE)
    for train in trains[:rows]:
        render_row(table, train)


def render_trains_panel(
    station_id: Optional[str],
    *,
    collector: Optional[TrainsCollector] = None,
) -> Widget:
    """
    Render the next trains widget for one station.

    Raises:
        InvalidParameterError: If no station id is given.
    """
    if not station_id or not station_id.strip():
        raise InvalidParameterError(station_id or "")
    station_id = station_id.strip()

    collector = collector or TrainsCollector()
    widget = Widget("medium")
    widget.set_background_color(BACKGROUND)
    widget.url = TRAINS_LINK_URL

    trains = collector.get_trains(station_id)
    station = next((s for s in collector.get_stations() if s.id == station_id), None)
    if station is None:
        logger.warning(f"[trains] Unknown station id {station_id!r}")
        render_error_card(widget, station_id, ERROR_SIZE, ERROR_STYLE)
        return widget

    render_next_trains(widget, station, trains)
    return widget
