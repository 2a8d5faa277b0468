"""Invoice record schemas returned to page-rendering code."""

from __future__ import annotations

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, computed_field

from dashboard.backend.src.services.formatting import format_date_to_local, to_major_units


class LatestInvoice(BaseModel):
    """Recent invoice joined with its customer, amount formatted for display."""

    id: str
    name: str
    email: str
    image_url: str
    amount: str
    date: dt.date
    status: str

    model_config = ConfigDict(from_attributes=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def display_date(self) -> str:
        return format_date_to_local(self.date)


class InvoicesTableRow(BaseModel):
    """Invoice search result row with customer details."""

    id: str
    customer_id: str
    name: str
    email: str
    image_url: str
    date: dt.date
    amount: int
    status: str

    model_config = ConfigDict(from_attributes=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def display_date(self) -> str:
        return format_date_to_local(self.date)


class InvoiceForm(BaseModel):
    """Invoice fields needed to populate an edit form."""

    id: str
    customer_id: str
    amount: int
    status: str

    model_config = ConfigDict(from_attributes=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def amount_major(self) -> Decimal:
        """Return ``amount`` converted from minor to major currency units."""

        return to_major_units(self.amount)


class InvoicesPage(BaseModel):
    """One page of invoice search results."""

    query: str
    page: int
    total_pages: int
    pagination: list[int | str]
    invoices: list[InvoicesTableRow]


__all__ = ["InvoiceForm", "InvoicesPage", "InvoicesTableRow", "LatestInvoice"]
