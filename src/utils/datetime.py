"""DateTime utilities for the widgets."""

from datetime import datetime, timezone, tzinfo
from typing import Optional, Union
from zoneinfo import ZoneInfo

from config.config import DISPLAY_TZ, UPDATED_AT_TEMPLATE
from utils.errors import FormatError


def parse_iso_timestamp(ts_iso: str) -> datetime:
    """Parse ISO timestamp string to datetime object.

    Naive values are taken as UTC.
    """
    dt = datetime.fromisoformat(ts_iso.replace('Z', '+00:00'))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def parse_resource_timestamp(value: Union[int, float, str, None]) -> datetime:
    """Parse a resource timestamp given as epoch millis or ISO-8601.

    Raises:
        FormatError: If the value is missing or cannot be parsed.
    """
    if value is None or isinstance(value, bool):
        raise FormatError(f"Unparsable timestamp: {value!r}")

    if isinstance(value, (int, float)):
        millis = float(value)
    else:
        text = str(value).strip()
        if text.isdigit():
            millis = float(text)
        else:
            try:
                return parse_iso_timestamp(text)
            except ValueError as e:
                raise FormatError(f"Unparsable timestamp: {value!r}") from e

    try:
        return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise FormatError(f"Timestamp out of range: {value!r}") from e


def normalize_timestamp(
    value: Union[int, float, str, None],
    tz: Optional[tzinfo] = None,
) -> str:
    """Format a resource timestamp as ``Atualizado às HH:MM`` (24h clock)."""
    dt = parse_resource_timestamp(value)
    local = dt.astimezone(tz or ZoneInfo(DISPLAY_TZ))
    return UPDATED_AT_TEMPLATE.format(time=local.strftime("%H:%M"))
