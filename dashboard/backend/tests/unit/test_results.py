"""Unit tests for query result handling."""

from __future__ import annotations

import pytest

from dashboard.backend.src.core.errors import DashboardDataError, DataFetchError
from dashboard.backend.src.services.results import QueryResult


def test_success_result_returns_value() -> None:
    result = QueryResult.success("fetch_customers", ["a"])

    assert result.ok
    assert result.unwrap() == ["a"]
    assert result.unwrap_or([]) == ["a"]


def test_failure_result_falls_back_to_default() -> None:
    result: QueryResult[list[str]] = QueryResult.failure(
        "fetch_customers", ConnectionError("down")
    )

    assert not result.ok
    assert result.unwrap_or([]) == []


def test_failure_result_raises_with_fixed_message() -> None:
    cause = ConnectionError("password authentication failed for user dashboard")
    result: QueryResult[int] = QueryResult.failure("fetch_invoices_pages", cause)

    with pytest.raises(DataFetchError) as excinfo:
        result.unwrap("Failed to fetch total number of invoices.")

    assert str(excinfo.value) == "Failed to fetch total number of invoices."
    assert excinfo.value.__cause__ is cause
    assert isinstance(excinfo.value, DashboardDataError)


def test_failure_result_default_message_names_operation() -> None:
    result: QueryResult[int] = QueryResult.failure("fetch_revenue", OSError("reset"))

    with pytest.raises(DataFetchError, match="fetch_revenue failed"):
        result.unwrap()
