"""Dashboard overview endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from dashboard.backend.src.schemas.dashboard import CardData, RevenueChart
from dashboard.backend.src.schemas.invoice import LatestInvoice
from dashboard.backend.src.services import queries
from dashboard.backend.src.services.formatting import generate_y_axis

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/revenue", response_model=RevenueChart)
async def get_revenue() -> RevenueChart:
    """Return monthly revenue with chart axis labels."""

    revenue = await queries.fetch_revenue()
    labels, top_label = generate_y_axis(revenue)
    return RevenueChart(revenue=revenue, y_axis_labels=labels, top_label=top_label)


@router.get("/latest-invoices", response_model=list[LatestInvoice])
async def get_latest_invoices() -> list[LatestInvoice]:
    return await queries.fetch_latest_invoices()


@router.get("/cards", response_model=CardData)
async def get_card_data() -> CardData:
    return await queries.fetch_card_data()
