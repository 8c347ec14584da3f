"""
Root conftest for the pytest test suite.

This file contains the main fixtures that are used across the entire test suite.

This setup uses a manual, async-native approach to database initialization
to ensure that each test runs against a fresh, isolated in-memory database.

Key Fixtures:
- `initialize_test_db`: (autouse) Creates a fresh DB schema for each test.
- `client`: Provides an httpx AsyncClient talking to the app in-process.
- `merchant`: A merchant with two outlets, "Central" and "Harbour".
- `transaction_factory`: Records a transaction for an outlet at a given time.
"""

import datetime
from decimal import Decimal
from typing import AsyncGenerator

import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from tortoise import Tortoise

from reporting.features.transactions.models import Merchant, Outlet, Transaction

# Import the app
from reporting.main import app as actual_app


@pytest_asyncio.fixture(scope="function", autouse=True)
async def initialize_test_db() -> AsyncGenerator[None, None]:
    """
    Initializes the database for each test function.

    This async, autouse fixture creates a fresh in-memory database and schema
    for each test and tears it down afterwards.
    """
    test_db_config = {
        "connections": {"default": "sqlite://:memory:"},
        "apps": {
            "models": {
                "models": [
                    "reporting.features.transactions.models",
                    "aerich.models",
                ],
                "default_connection": "default",
            }
        },
        "use_tz": False,
        "timezone": "UTC",
    }
    await Tortoise.init(config=test_db_config)
    await Tortoise.generate_schemas()

    yield

    await Tortoise.close_connections()


@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """
    Provides an AsyncClient bound to the FastAPI app.

    ASGITransport does not run the lifespan, so the app uses the database
    prepared by `initialize_test_db`.
    """
    transport = ASGITransport(app=actual_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture(scope="function")
async def merchant() -> Merchant:
    merchant = await Merchant.create(name="Warung Sederhana")
    await Outlet.create(merchant=merchant, name="Central")
    await Outlet.create(merchant=merchant, name="Harbour")
    return merchant


@pytest_asyncio.fixture(scope="function")
async def transaction_factory():
    """A factory to record transactions."""

    async def _factory(outlet: Outlet, amount: str, transacted_at: datetime.datetime) -> Transaction:
        return await Transaction.create(
            merchant_id=outlet.merchant_id,
            outlet=outlet,
            bill_total=Decimal(amount),
            transacted_at=transacted_at,
        )

    return _factory
