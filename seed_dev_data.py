"""Seed the development database with placeholder dashboard data."""

import asyncio

from dashboard.backend.src.db import create_all, get_engine, session_scope
from dashboard.backend.src.services.seed import seed_placeholder_data


async def main() -> None:
    """Create tables (if needed) and insert placeholder rows into empty tables."""

    await create_all()

    async with session_scope() as session:
        result = await seed_placeholder_data(session)

    await get_engine().dispose()

    if result.seeded:
        print("✅ Development data ready!")
    else:
        print("Development data already present, nothing seeded.")
    print(
        f"Customers: {result.customers}, invoices: {result.invoices}, "
        f"revenue months: {result.revenue}"
    )


if __name__ == "__main__":
    asyncio.run(main())
