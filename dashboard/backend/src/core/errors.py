"""Exceptions raised by the dashboard data layer."""

from __future__ import annotations


class DashboardDataError(RuntimeError):
    """Base error for failures surfaced by the data layer."""


class DataFetchError(DashboardDataError):
    """Raised when a query whose failure must be visible to the caller fails."""


__all__ = ["DashboardDataError", "DataFetchError"]
