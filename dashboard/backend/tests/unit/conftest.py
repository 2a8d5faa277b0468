"""Shared fixtures for the dashboard data layer tests."""

from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from datetime import date, timedelta
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[4]))

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test_dashboard.db")
os.environ.setdefault("LOG_JSON", "false")

import pytest
from sqlalchemy.exc import OperationalError

from dashboard.backend.src.db import session_scope
from dashboard.backend.src.models import Customer, Invoice, Revenue

CUSTOMER_ALICE = "c0000000-0000-0000-0000-000000000001"
CUSTOMER_BOB = "c0000000-0000-0000-0000-000000000002"
CUSTOMER_CAROL = "c0000000-0000-0000-0000-000000000003"
CUSTOMER_DANA = "c0000000-0000-0000-0000-000000000004"


async def insert_card_scenario() -> None:
    """Two invoices (one paid, one pending) and a customer without invoices."""

    async with session_scope() as session:
        session.add_all(
            [
                Customer(
                    id=CUSTOMER_ALICE,
                    name="Alice Archer",
                    email="alice@example.com",
                    image_url="/customers/alice.png",
                ),
                Customer(
                    id=CUSTOMER_BOB,
                    name="Bob Baker",
                    email="bob@example.com",
                    image_url="/customers/bob.png",
                ),
                Customer(
                    id=CUSTOMER_CAROL,
                    name="Carol Cooper",
                    email="carol@example.com",
                    image_url="/customers/carol.png",
                ),
            ]
        )
        await session.flush()
        session.add_all(
            [
                Invoice(
                    id="1",
                    customer_id=CUSTOMER_ALICE,
                    amount=5000,
                    status="paid",
                    date=date(2024, 1, 10),
                ),
                Invoice(
                    id="2",
                    customer_id=CUSTOMER_BOB,
                    amount=2500,
                    status="pending",
                    date=date(2024, 2, 15),
                ),
            ]
        )


async def insert_search_scenario() -> None:
    """Ten paid invoices on consecutive March days plus three pending in April."""

    async with session_scope() as session:
        session.add(
            Customer(
                id=CUSTOMER_DANA,
                name="Dana Dorsey",
                email="dana@example.com",
                image_url="/customers/dana.png",
            )
        )
        await session.flush()
        session.add_all(
            Invoice(
                id=f"paid-{index:02d}",
                customer_id=CUSTOMER_DANA,
                amount=1000 + index,
                status="paid",
                date=date(2024, 3, 1) + timedelta(days=index - 1),
            )
            for index in range(1, 11)
        )
        session.add_all(
            Invoice(
                id=f"pending-{index:02d}",
                customer_id=CUSTOMER_DANA,
                amount=2000 + index,
                status="pending",
                date=date(2024, 4, index),
            )
            for index in range(1, 4)
        )


async def insert_revenue() -> None:
    async with session_scope() as session:
        session.add_all(
            [
                Revenue(month="Jan", revenue=2000),
                Revenue(month="Feb", revenue=1800),
                Revenue(month="Mar", revenue=4800),
            ]
        )


@pytest.fixture()
def failing_session() -> Callable[[], object]:
    """Return a session factory that fails like an unreachable database."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[object]:
        raise OperationalError("SELECT 1", {}, ConnectionRefusedError("database unavailable"))
        yield  # pragma: no cover

    return factory
