"""Display formatting and pagination helpers."""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}

DATE_FORMATS = {
    "en-US": "%b %d, %Y",
    "en-GB": "%d %b %Y",
}

_CENTS = Decimal("0.01")
_Y_AXIS_STEP = 1000


def to_major_units(amount: int | Decimal) -> Decimal:
    """Convert an amount in minor units (cents) to major units."""

    return (Decimal(amount) / 100).quantize(_CENTS, rounding=ROUND_HALF_UP)


def format_currency(amount: int | Decimal, currency: str = "USD") -> str:
    """Format an amount given in minor units, e.g. ``5000 -> "$50.00"``."""

    value = to_major_units(amount)
    sign = "-" if value < 0 else ""
    digits = f"{abs(value):,.2f}"
    symbol = CURRENCY_SYMBOLS.get(currency.upper())
    if symbol is None:
        return f"{sign}{currency.upper()} {digits}"
    return f"{sign}{symbol}{digits}"


def format_date_to_local(value: dt.date | str, locale: str = "en-US") -> str:
    """Format a date for display, e.g. ``2024-01-05 -> "Jan 5, 2024"``.

    Raises ``ValueError`` for locales without a known date pattern.
    """

    pattern = DATE_FORMATS.get(locale)
    if pattern is None:
        raise ValueError(f"Unsupported locale: {locale}")
    if isinstance(value, str):
        value = dt.date.fromisoformat(value[:10])
    rendered = value.strftime(pattern)
    if rendered.startswith("0"):
        rendered = rendered[1:]
    return rendered.replace(" 0", " ")


def generate_y_axis(revenue: Iterable[object]) -> tuple[list[str], int]:
    """Return chart labels in thousands and the top label value.

    ``revenue`` holds records exposing a ``revenue`` attribute.
    """

    highest = max((int(getattr(record, "revenue")) for record in revenue), default=0)
    top_label = -(-highest // _Y_AXIS_STEP) * _Y_AXIS_STEP
    labels = [f"${value // _Y_AXIS_STEP}K" for value in range(top_label, -1, -_Y_AXIS_STEP)]
    return labels, top_label


def generate_pagination(current_page: int, total_pages: int) -> list[int | str]:
    """Return the page-number strip, using ``"..."`` for elided ranges."""

    if total_pages <= 7:
        return list(range(1, total_pages + 1))

    if current_page <= 3:
        return [1, 2, 3, "...", total_pages - 1, total_pages]

    if current_page >= total_pages - 2:
        return [1, 2, "...", total_pages - 2, total_pages - 1, total_pages]

    return [
        1,
        "...",
        current_page - 1,
        current_page,
        current_page + 1,
        "...",
        total_pages,
    ]


__all__ = [
    "CURRENCY_SYMBOLS",
    "DATE_FORMATS",
    "format_currency",
    "format_date_to_local",
    "generate_pagination",
    "generate_y_axis",
    "to_major_units",
]
