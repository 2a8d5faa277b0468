"""Utilities for seeding development data."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.backend.src.models import Customer, Invoice, Revenue

PLACEHOLDER_CUSTOMERS = [
    ("d6e15727-9fe1-4961-8c5b-ea44a9bd81aa", "Evil Rabbit", "evil@rabbit.com", "/customers/evil-rabbit.png"),
    ("3958dc9e-712f-4377-85e9-fec4b6a6442a", "Delba de Oliveira", "delba@oliveira.com", "/customers/delba-de-oliveira.png"),
    ("3958dc9e-742f-4377-85e9-fec4b6a6442a", "Lee Robinson", "lee@robinson.com", "/customers/lee-robinson.png"),
    ("76d65c26-f784-44a2-ac19-586678f7c2f2", "Michael Novotny", "michael@novotny.com", "/customers/michael-novotny.png"),
    ("cc27c14a-0acf-4f4a-a6c9-d45682c144b9", "Amy Burns", "amy@burns.com", "/customers/amy-burns.png"),
    ("13d07535-c59e-4157-a011-f8d2ef4e0cbb", "Balazs Orban", "balazs@orban.com", "/customers/balazs-orban.png"),
]

# (customer index, amount in cents, status, date)
PLACEHOLDER_INVOICES = [
    (0, 15795, "pending", date(2022, 12, 6)),
    (1, 20348, "pending", date(2022, 11, 14)),
    (4, 3040, "paid", date(2022, 10, 29)),
    (3, 44800, "paid", date(2023, 9, 10)),
    (5, 34577, "pending", date(2023, 8, 5)),
    (2, 54246, "pending", date(2023, 7, 16)),
    (0, 666, "pending", date(2023, 6, 27)),
    (3, 32545, "paid", date(2023, 6, 9)),
    (4, 1250, "paid", date(2023, 6, 17)),
    (5, 8546, "paid", date(2023, 6, 7)),
    (1, 500, "paid", date(2023, 8, 19)),
    (5, 8945, "paid", date(2023, 6, 3)),
    (2, 1000, "paid", date(2022, 6, 5)),
]

PLACEHOLDER_REVENUE = [
    ("Jan", 2000),
    ("Feb", 1800),
    ("Mar", 2200),
    ("Apr", 2500),
    ("May", 2300),
    ("Jun", 3200),
    ("Jul", 3500),
    ("Aug", 3700),
    ("Sep", 2500),
    ("Oct", 2800),
    ("Nov", 3000),
    ("Dec", 4800),
]


@dataclass
class SeedResult:
    """Counts of rows inserted by :func:`seed_placeholder_data`."""

    customers: int
    invoices: int
    revenue: int

    @property
    def seeded(self) -> bool:
        return bool(self.customers or self.invoices or self.revenue)


async def seed_placeholder_data(session: AsyncSession) -> SeedResult:
    """Insert placeholder dashboard data when the tables are empty.

    Existing data is left untouched; each table is only seeded if it has no
    rows yet.
    """

    result = SeedResult(customers=0, invoices=0, revenue=0)

    customer_count = await session.scalar(select(func.count()).select_from(Customer))
    if not customer_count:
        session.add_all(
            Customer(id=customer_id, name=name, email=email, image_url=image_url)
            for customer_id, name, email, image_url in PLACEHOLDER_CUSTOMERS
        )
        await session.flush()
        result.customers = len(PLACEHOLDER_CUSTOMERS)

    invoice_count = await session.scalar(select(func.count()).select_from(Invoice))
    if not invoice_count and result.customers:
        session.add_all(
            Invoice(
                customer_id=PLACEHOLDER_CUSTOMERS[index][0],
                amount=amount,
                status=status,
                date=issued_on,
            )
            for index, amount, status, issued_on in PLACEHOLDER_INVOICES
        )
        result.invoices = len(PLACEHOLDER_INVOICES)

    revenue_count = await session.scalar(select(func.count()).select_from(Revenue))
    if not revenue_count:
        session.add_all(Revenue(month=month, revenue=value) for month, value in PLACEHOLDER_REVENUE)
        result.revenue = len(PLACEHOLDER_REVENUE)

    await session.flush()
    return result


__all__ = ["SeedResult", "seed_placeholder_data"]
