"""Invoice related endpoints."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, HTTPException, Query

from dashboard.backend.src.core.errors import DataFetchError
from dashboard.backend.src.schemas.invoice import InvoiceForm, InvoicesPage
from dashboard.backend.src.services import queries
from dashboard.backend.src.services.formatting import generate_pagination

LOGGER = structlog.get_logger(__name__)

router = APIRouter(prefix="/invoices", tags=["invoices"])


@router.get("", response_model=InvoicesPage)
async def list_invoices(
    query: str = Query(default=""),
    page: int = Query(default=1),
) -> InvoicesPage:
    """Return one page of invoices matching ``query`` with pagination details."""

    try:
        total_pages = await queries.fetch_invoices_pages(query)
        invoices = await queries.fetch_filtered_invoices(query, page)
    except DataFetchError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    current_page = max(page, 1)
    return InvoicesPage(
        query=query,
        page=current_page,
        total_pages=total_pages,
        pagination=generate_pagination(current_page, total_pages),
        invoices=invoices,
    )


@router.get("/{invoice_id}", response_model=InvoiceForm)
async def get_invoice(invoice_id: str) -> InvoiceForm:
    invoice = await queries.fetch_invoice_by_id(invoice_id)
    if invoice is None:
        LOGGER.info("invoice_not_found", invoice_id=invoice_id)
        raise HTTPException(status_code=404, detail="Invoice not found")
    return invoice
