"""Customer record schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CustomerField(BaseModel):
    """Customer option for select inputs."""

    id: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class CustomersTableRow(BaseModel):
    """Customer with invoice totals, amounts formatted for display."""

    id: str
    name: str
    email: str
    image_url: str
    total_invoices: int
    total_pending: str
    total_paid: str


__all__ = ["CustomerField", "CustomersTableRow"]
