"""Unit tests for display formatting and pagination helpers."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from dashboard.backend.src.schemas.dashboard import RevenueRecord
from dashboard.backend.src.services.formatting import (
    format_currency,
    format_date_to_local,
    generate_pagination,
    generate_y_axis,
    to_major_units,
)


@pytest.mark.parametrize(
    ("amount", "expected"),
    [
        (0, "$0.00"),
        (5, "$0.05"),
        (2500, "$25.00"),
        (5000, "$50.00"),
        (123456, "$1,234.56"),
        (100000000, "$1,000,000.00"),
    ],
)
def test_format_currency_converts_minor_units(amount: int, expected: str) -> None:
    assert format_currency(amount) == expected


def test_format_currency_uses_currency_symbol_or_code() -> None:
    assert format_currency(1234, "EUR") == "€12.34"
    assert format_currency(1234, "gbp") == "£12.34"
    assert format_currency(1234, "CAD") == "CAD 12.34"


def test_to_major_units() -> None:
    assert to_major_units(2550) == Decimal("25.50")
    assert to_major_units(1) == Decimal("0.01")


def test_format_date_to_local() -> None:
    assert format_date_to_local(date(2024, 1, 5)) == "Jan 5, 2024"
    assert format_date_to_local("2023-12-25") == "Dec 25, 2023"
    assert format_date_to_local(date(2024, 1, 5), locale="en-GB") == "5 Jan 2024"


def test_format_date_to_local_rejects_unknown_locale() -> None:
    with pytest.raises(ValueError, match="Unsupported locale"):
        format_date_to_local(date(2024, 1, 5), locale="xx-XX")


@pytest.mark.parametrize(
    ("current", "total", "expected"),
    [
        (1, 0, []),
        (1, 3, [1, 2, 3]),
        (4, 7, [1, 2, 3, 4, 5, 6, 7]),
        (2, 10, [1, 2, 3, "...", 9, 10]),
        (9, 10, [1, 2, "...", 8, 9, 10]),
        (5, 10, [1, "...", 4, 5, 6, "...", 10]),
    ],
)
def test_generate_pagination(current: int, total: int, expected: list[int | str]) -> None:
    assert generate_pagination(current, total) == expected


def test_generate_y_axis_rounds_up_to_next_thousand() -> None:
    revenue = [
        RevenueRecord(month="Jan", revenue=2000),
        RevenueRecord(month="Feb", revenue=4800),
    ]

    labels, top_label = generate_y_axis(revenue)

    assert top_label == 5000
    assert labels == ["$5K", "$4K", "$3K", "$2K", "$1K", "$0K"]


def test_generate_y_axis_without_revenue() -> None:
    assert generate_y_axis([]) == (["$0K"], 0)
