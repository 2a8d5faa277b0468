"""Read-only queries backing the invoicing dashboard.

Every public ``fetch_*`` coroutine has a ``fetch_*_result`` counterpart that
returns a :class:`~dashboard.backend.src.services.results.QueryResult`. The
plain variants apply the caller-facing policy on top of it: most fall back to
an empty or zeroed value, while the invoice search operations raise
:class:`~dashboard.backend.src.core.errors.DataFetchError`.

All amounts are handled in minor units and only formatted at the boundary.
"""

from __future__ import annotations

import asyncio
import math
from collections.abc import Awaitable, Callable
from time import perf_counter
from typing import TypeVar

import structlog
from sqlalchemy import ColumnElement, String, case, cast, func, or_, select
from sqlalchemy.exc import SQLAlchemyError

from dashboard.backend.src.core.config import get_settings
from dashboard.backend.src.db import get_session
from dashboard.backend.src.models import Customer, Invoice, Revenue
from dashboard.backend.src.models.invoice import INVOICE_STATUS_PAID, INVOICE_STATUS_PENDING
from dashboard.backend.src.schemas.customer import CustomerField, CustomersTableRow
from dashboard.backend.src.schemas.dashboard import CardData, RevenueRecord
from dashboard.backend.src.schemas.invoice import InvoiceForm, InvoicesTableRow, LatestInvoice
from dashboard.backend.src.services.formatting import format_currency
from dashboard.backend.src.services.metrics import (
    query_duration_seconds,
    query_failures_total,
    query_total,
)
from dashboard.backend.src.services.results import QueryResult

LOGGER = structlog.get_logger(__name__)

T = TypeVar("T")

ITEMS_PER_PAGE = 6
LATEST_INVOICES_LIMIT = 5
DATABASE_ERRORS = (SQLAlchemyError, OSError)

FETCH_INVOICES_ERROR = "Failed to fetch invoices."
FETCH_INVOICES_PAGES_ERROR = "Failed to fetch total number of invoices."


async def _run(operation: str, query: Callable[[], Awaitable[T]]) -> QueryResult[T]:
    """Execute ``query`` and capture database failures as a failed result."""

    started = perf_counter()
    try:
        value = await query()
    except DATABASE_ERRORS as exc:
        LOGGER.error("database_error", operation=operation, error=str(exc))
        query_failures_total.labels(operation=operation).inc()
        query_total.labels(operation=operation, status="error").inc()
        return QueryResult.failure(operation, exc)
    finally:
        query_duration_seconds.labels(operation=operation).observe(perf_counter() - started)

    query_total.labels(operation=operation, status="ok").inc()
    return QueryResult.success(operation, value)


def _currency(amount: int | None) -> str:
    return format_currency(amount or 0, get_settings().currency)


def _normalize_page(current_page: int) -> int:
    if current_page < 1:
        LOGGER.warning("invalid_page_clamped", requested_page=current_page)
        return 1
    return current_page


def _invoice_search_clause(query: str) -> ColumnElement[bool]:
    """Case-insensitive substring match across customer and invoice columns."""

    return or_(
        Customer.name.icontains(query, autoescape=True),
        Customer.email.icontains(query, autoescape=True),
        cast(Invoice.amount, String).icontains(query, autoescape=True),
        cast(Invoice.date, String).icontains(query, autoescape=True),
        Invoice.status.icontains(query, autoescape=True),
    )


def _customer_search_clause(query: str) -> ColumnElement[bool]:
    return or_(
        Customer.name.icontains(query, autoescape=True),
        Customer.email.icontains(query, autoescape=True),
    )


# --------------------------------------------------------------------------
# Revenue
# --------------------------------------------------------------------------
async def fetch_revenue_result() -> QueryResult[list[RevenueRecord]]:
    async def query() -> list[RevenueRecord]:
        async with get_session() as session:
            rows = (await session.execute(select(Revenue.month, Revenue.revenue))).all()
        return [RevenueRecord.model_validate(row) for row in rows]

    return await _run("fetch_revenue", query)


async def fetch_revenue() -> list[RevenueRecord]:
    """Return every row of the revenue view, or ``[]`` on failure."""

    LOGGER.debug("fetching_revenue")
    result = await fetch_revenue_result()
    return result.unwrap_or([])


# --------------------------------------------------------------------------
# Latest invoices
# --------------------------------------------------------------------------
async def fetch_latest_invoices_result() -> QueryResult[list[LatestInvoice]]:
    async def query() -> list[LatestInvoice]:
        statement = (
            select(
                Invoice.id,
                Invoice.amount,
                Invoice.date,
                Invoice.status,
                Customer.name,
                Customer.email,
                Customer.image_url,
            )
            .join(Customer, Invoice.customer_id == Customer.id)
            .order_by(Invoice.date.desc())
            .limit(LATEST_INVOICES_LIMIT)
        )
        async with get_session() as session:
            rows = (await session.execute(statement)).mappings().all()
        return [
            LatestInvoice.model_validate({**row, "amount": _currency(row["amount"])})
            for row in rows
        ]

    return await _run("fetch_latest_invoices", query)


async def fetch_latest_invoices() -> list[LatestInvoice]:
    """Return the five most recent invoices, or ``[]`` on failure."""

    result = await fetch_latest_invoices_result()
    return result.unwrap_or([])


# --------------------------------------------------------------------------
# Dashboard cards
# --------------------------------------------------------------------------
async def _count_invoices() -> int:
    async with get_session() as session:
        count = await session.scalar(select(func.count()).select_from(Invoice))
    return int(count or 0)


async def _count_customers() -> int:
    async with get_session() as session:
        count = await session.scalar(select(func.count()).select_from(Customer))
    return int(count or 0)


async def _sum_invoices_by_status() -> tuple[int, int]:
    statement = select(
        func.coalesce(
            func.sum(case((Invoice.status == INVOICE_STATUS_PAID, Invoice.amount), else_=0)),
            0,
        ).label("paid"),
        func.coalesce(
            func.sum(case((Invoice.status == INVOICE_STATUS_PENDING, Invoice.amount), else_=0)),
            0,
        ).label("pending"),
    )
    async with get_session() as session:
        row = (await session.execute(statement)).one()
    return int(row.paid or 0), int(row.pending or 0)


def _empty_card_data() -> CardData:
    return CardData(
        number_of_invoices=0,
        number_of_customers=0,
        total_paid_invoices=_currency(0),
        total_pending_invoices=_currency(0),
    )


async def fetch_card_data_result() -> QueryResult[CardData]:
    async def query() -> CardData:
        # Each sub-query runs on its own session; a session cannot be shared
        # between concurrent tasks.
        tasks = [
            asyncio.ensure_future(_count_invoices()),
            asyncio.ensure_future(_count_customers()),
            asyncio.ensure_future(_sum_invoices_by_status()),
        ]
        try:
            invoice_count, customer_count, (paid, pending) = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            # Sibling sessions must be closed before the failure is reported.
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        return CardData(
            number_of_invoices=invoice_count,
            number_of_customers=customer_count,
            total_paid_invoices=_currency(paid),
            total_pending_invoices=_currency(pending),
        )

    return await _run("fetch_card_data", query)


async def fetch_card_data() -> CardData:
    """Return dashboard card totals, zeroed if any sub-query fails."""

    result = await fetch_card_data_result()
    return result.unwrap_or(_empty_card_data())


# --------------------------------------------------------------------------
# Invoice search
# --------------------------------------------------------------------------
async def fetch_filtered_invoices_result(
    query: str, current_page: int
) -> QueryResult[list[InvoicesTableRow]]:
    offset = (_normalize_page(current_page) - 1) * ITEMS_PER_PAGE

    async def run_query() -> list[InvoicesTableRow]:
        statement = (
            select(
                Invoice.id,
                Invoice.customer_id,
                Invoice.amount,
                Invoice.date,
                Invoice.status,
                Customer.name,
                Customer.email,
                Customer.image_url,
            )
            .join(Customer, Invoice.customer_id == Customer.id)
            .where(_invoice_search_clause(query))
            .order_by(Invoice.date.desc(), Invoice.id)
            .limit(ITEMS_PER_PAGE)
            .offset(offset)
        )
        async with get_session() as session:
            rows = (await session.execute(statement)).mappings().all()
        return [InvoicesTableRow.model_validate(dict(row)) for row in rows]

    return await _run("fetch_filtered_invoices", run_query)


async def fetch_filtered_invoices(query: str, current_page: int) -> list[InvoicesTableRow]:
    """Return one page of invoices matching ``query``.

    Raises :class:`DataFetchError` when the database query fails.
    """

    result = await fetch_filtered_invoices_result(query, current_page)
    return result.unwrap(FETCH_INVOICES_ERROR)  # type: ignore[return-value]


async def fetch_invoices_pages_result(query: str) -> QueryResult[int]:
    async def run_query() -> int:
        statement = (
            select(func.count())
            .select_from(Invoice)
            .join(Customer, Invoice.customer_id == Customer.id)
            .where(_invoice_search_clause(query))
        )
        async with get_session() as session:
            count = await session.scalar(statement)
        return math.ceil(int(count or 0) / ITEMS_PER_PAGE)

    return await _run("fetch_invoices_pages", run_query)


async def fetch_invoices_pages(query: str) -> int:
    """Return the number of result pages for ``query``.

    Raises :class:`DataFetchError` when the database query fails.
    """

    result = await fetch_invoices_pages_result(query)
    return result.unwrap(FETCH_INVOICES_PAGES_ERROR)  # type: ignore[return-value]


# --------------------------------------------------------------------------
# Single invoice
# --------------------------------------------------------------------------
async def fetch_invoice_by_id_result(invoice_id: str) -> QueryResult[InvoiceForm | None]:
    async def query() -> InvoiceForm | None:
        statement = select(
            Invoice.id, Invoice.customer_id, Invoice.amount, Invoice.status
        ).where(Invoice.id == invoice_id)
        async with get_session() as session:
            row = (await session.execute(statement)).mappings().first()
        if row is None:
            return None
        return InvoiceForm.model_validate(dict(row))

    return await _run("fetch_invoice_by_id", query)


async def fetch_invoice_by_id(invoice_id: str) -> InvoiceForm | None:
    """Return the invoice with ``invoice_id``; ``None`` if absent or on failure."""

    result = await fetch_invoice_by_id_result(invoice_id)
    return result.unwrap_or(None)


# --------------------------------------------------------------------------
# Customers
# --------------------------------------------------------------------------
async def fetch_customers_result() -> QueryResult[list[CustomerField]]:
    async def query() -> list[CustomerField]:
        statement = select(Customer.id, Customer.name).order_by(Customer.name.asc())
        async with get_session() as session:
            rows = (await session.execute(statement)).all()
        return [CustomerField.model_validate(row) for row in rows]

    return await _run("fetch_customers", query)


async def fetch_customers() -> list[CustomerField]:
    result = await fetch_customers_result()
    return result.unwrap_or([])


async def fetch_filtered_customers_result(query: str) -> QueryResult[list[CustomersTableRow]]:
    async def run_query() -> list[CustomersTableRow]:
        statement = (
            select(
                Customer.id,
                Customer.name,
                Customer.email,
                Customer.image_url,
                func.count(Invoice.id).label("total_invoices"),
                func.coalesce(
                    func.sum(
                        case((Invoice.status == INVOICE_STATUS_PENDING, Invoice.amount), else_=0)
                    ),
                    0,
                ).label("total_pending"),
                func.coalesce(
                    func.sum(
                        case((Invoice.status == INVOICE_STATUS_PAID, Invoice.amount), else_=0)
                    ),
                    0,
                ).label("total_paid"),
            )
            .outerjoin(Invoice, Customer.id == Invoice.customer_id)
            .where(_customer_search_clause(query))
            .group_by(Customer.id, Customer.name, Customer.email, Customer.image_url)
            .order_by(Customer.name.asc())
        )
        async with get_session() as session:
            rows = (await session.execute(statement)).mappings().all()
        return [
            CustomersTableRow(
                id=row["id"],
                name=row["name"],
                email=row["email"],
                image_url=row["image_url"],
                total_invoices=int(row["total_invoices"]),
                total_pending=_currency(row["total_pending"]),
                total_paid=_currency(row["total_paid"]),
            )
            for row in rows
        ]

    return await _run("fetch_filtered_customers", run_query)


async def fetch_filtered_customers(query: str) -> list[CustomersTableRow]:
    """Return customers matching ``query`` with invoice totals, ``[]`` on failure."""

    result = await fetch_filtered_customers_result(query)
    return result.unwrap_or([])


__all__ = [
    "FETCH_INVOICES_ERROR",
    "FETCH_INVOICES_PAGES_ERROR",
    "ITEMS_PER_PAGE",
    "fetch_card_data",
    "fetch_card_data_result",
    "fetch_customers",
    "fetch_customers_result",
    "fetch_filtered_customers",
    "fetch_filtered_customers_result",
    "fetch_filtered_invoices",
    "fetch_filtered_invoices_result",
    "fetch_invoice_by_id",
    "fetch_invoice_by_id_result",
    "fetch_invoices_pages",
    "fetch_invoices_pages_result",
    "fetch_latest_invoices",
    "fetch_latest_invoices_result",
    "fetch_revenue",
    "fetch_revenue_result",
]
