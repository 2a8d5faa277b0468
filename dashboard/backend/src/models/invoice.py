"""Invoice model."""

from __future__ import annotations

import datetime as dt
from uuid import uuid4

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dashboard.backend.src.db.base import Base

INVOICE_STATUS_PENDING = "pending"
INVOICE_STATUS_PAID = "paid"


class Invoice(Base):
    """Represents an invoice issued to a customer.

    ``amount`` is stored in minor currency units (cents).
    """

    __tablename__ = "invoices"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid4())
    )
    customer_id: Mapped[str] = mapped_column(
        ForeignKey("customers.id"), nullable=False, index=True
    )
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(
        String(32), nullable=False, default=INVOICE_STATUS_PENDING
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)

    customer: Mapped["Customer"] = relationship("Customer", back_populates="invoices")


__all__ = [
    "INVOICE_STATUS_PAID",
    "INVOICE_STATUS_PENDING",
    "Invoice",
]
