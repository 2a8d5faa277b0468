"""Dashboard overview schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RevenueRecord(BaseModel):
    """Monthly revenue figure."""

    month: str
    revenue: int

    model_config = ConfigDict(from_attributes=True)


class CardData(BaseModel):
    """Summary counts and totals shown on the dashboard cards."""

    number_of_invoices: int
    number_of_customers: int
    total_paid_invoices: str
    total_pending_invoices: str


class RevenueChart(BaseModel):
    """Revenue records paired with y-axis labels for charting."""

    revenue: list[RevenueRecord]
    y_axis_labels: list[str]
    top_label: int


__all__ = ["CardData", "RevenueChart", "RevenueRecord"]
