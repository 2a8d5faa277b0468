"""API routers."""

from . import customers, dashboard, health, invoices

__all__ = ["customers", "dashboard", "health", "invoices"]
