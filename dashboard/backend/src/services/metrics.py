"""Prometheus metric definitions for dashboard queries."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

query_total = Counter(
    "dashboard_queries_total",
    "Total dashboard queries by operation and outcome.",
    labelnames=["operation", "status"],
)

query_failures_total = Counter(
    "dashboard_query_failures_total",
    "Dashboard queries that failed with a database error.",
    labelnames=["operation"],
)

query_duration_seconds = Histogram(
    "dashboard_query_duration_seconds",
    "Time spent executing a dashboard query operation.",
    labelnames=["operation"],
)

__all__ = [
    "query_duration_seconds",
    "query_failures_total",
    "query_total",
]
