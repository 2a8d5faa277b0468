"""Unit tests for development data seeding."""

from __future__ import annotations

import pytest
import pytest_asyncio

from dashboard.backend.src.db import create_all, drop_all, session_scope
from dashboard.backend.src.services import queries
from dashboard.backend.src.services.seed import (
    PLACEHOLDER_CUSTOMERS,
    PLACEHOLDER_INVOICES,
    PLACEHOLDER_REVENUE,
    seed_placeholder_data,
)


@pytest_asyncio.fixture(autouse=True)
async def setup_database() -> None:  # type: ignore[misc]
    await drop_all()
    await create_all()
    yield
    await drop_all()


@pytest.mark.asyncio
async def test_seed_populates_empty_tables() -> None:
    async with session_scope() as session:
        result = await seed_placeholder_data(session)

    assert result.seeded
    assert result.customers == len(PLACEHOLDER_CUSTOMERS)
    assert result.invoices == len(PLACEHOLDER_INVOICES)
    assert result.revenue == len(PLACEHOLDER_REVENUE)

    cards = await queries.fetch_card_data()
    assert cards.number_of_customers == len(PLACEHOLDER_CUSTOMERS)
    assert cards.number_of_invoices == len(PLACEHOLDER_INVOICES)
    assert len(await queries.fetch_revenue()) == len(PLACEHOLDER_REVENUE)


@pytest.mark.asyncio
async def test_seed_is_a_no_op_when_data_exists() -> None:
    async with session_scope() as session:
        await seed_placeholder_data(session)

    async with session_scope() as session:
        result = await seed_placeholder_data(session)

    assert not result.seeded
    assert (await queries.fetch_card_data()).number_of_invoices == len(PLACEHOLDER_INVOICES)
