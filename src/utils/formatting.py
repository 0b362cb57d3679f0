"""Number formatting for the fixed pt-PT display locale."""

from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Union

from config.config import GROUP_SEPARATOR, MIN_GROUPING_DIGITS

Number = Union[int, float]


def _round_half_up(value: Number, places: int) -> Decimal:
    """Round half away from zero, the way browser number formatting does."""
    exponent = Decimal(1).scaleb(-places)
    number = Decimal(repr(float(value)))
    with localcontext() as ctx:
        # quantize needs every integer digit plus the kept decimals
        ctx.prec = max(ctx.prec, number.adjusted() + places + 2)
        return number.quantize(exponent, rounding=ROUND_HALF_UP)


def format_count(value: Number) -> str:
    """Format an integer count with pt-PT digit grouping.

    Groups are only inserted once the integer part reaches five digits,
    so ``1234`` stays ``"1234"`` and ``12345`` becomes ``"12 345"``.
    """
    rounded = int(_round_half_up(value, 0))
    digits = str(abs(rounded))
    if len(digits) >= 3 + MIN_GROUPING_DIGITS:
        digits = f"{abs(rounded):,}".replace(",", GROUP_SEPARATOR)
    return f"-{digits}" if rounded < 0 else digits


def format_percent(value: Number) -> str:
    """Format an already-multiplied percentage with no decimals, e.g. ``9.5 -> "10%"``."""
    return f"{format_count(value)}%"


def format_trimmed_percent(value: Number, places: int = 2) -> str:
    """Format a percentage with up to ``places`` decimals, trailing zeros removed."""
    text = f"{_round_half_up(value, places):f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return f"{text}%"


def format_parenthesized_count(value: Number) -> str:
    """Format a count wrapped in parentheses, e.g. ``"(1234)"``."""
    return f"({format_count(value)})"
