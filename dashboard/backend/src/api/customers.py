"""Customer endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Query

from dashboard.backend.src.schemas.customer import CustomerField, CustomersTableRow
from dashboard.backend.src.services import queries

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("", response_model=list[CustomerField])
async def list_customers() -> list[CustomerField]:
    return await queries.fetch_customers()


@router.get("/filtered", response_model=list[CustomersTableRow])
async def list_filtered_customers(query: str = Query(default="")) -> list[CustomersTableRow]:
    """Return customers matching ``query`` with their invoice totals."""

    return await queries.fetch_filtered_customers(query)
