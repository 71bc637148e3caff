"""Pytest configuration and fixtures for flowquery.

Uses app.main:app for HTTP tests and app.infrastructure.persistence.database
for DB-dependent fixtures. All imports use app.*.

DATABASE_URL defaults to an in-memory SQLite database (aiosqlite); set it
to a Postgres URL to run the same tests against Postgres.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from app.application.dtos.execution import VariableToSet  # noqa: E402
from app.core.config import get_settings  # noqa: E402
from app.infrastructure.persistence import database  # noqa: E402
from app.infrastructure.persistence.repositories.execution_repo import (  # noqa: E402
    ExecutionRepository,
)

get_settings.cache_clear()

from app.main import app  # noqa: E402


@pytest.fixture
async def database_ready() -> None:
    """Create tables before the test; drop them and dispose the engine after.

    The in-memory SQLite database lives as long as the engine, so every test
    starts from an empty schema.
    """
    await database.create_all()
    yield
    assert database.engine is not None
    async with database.engine.begin() as conn:
        await conn.run_sync(database.Base.metadata.drop_all)
    await database.dispose_engine()


@pytest.fixture
async def client(database_ready) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_session(database_ready) -> AsyncSession:
    """Database session for repository/query tests. Rolls back after test."""
    assert database.AsyncSessionLocal is not None
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def seeded(database_ready) -> dict[str, str]:
    """Commit a small process landscape and return ids by label.

    inv1: invoice-approval instance, business key INV-1, vars amount=100,
          currency="EUR"; subscribed to message "invoicePaid".
    inv1_child: child of inv1 at approveInvoice, var approver="Kermit";
          subscribed to signal "cancelAll".
    inv2: invoice-approval instance, business key INV-2, vars amount=2500,
          currency="usd".
    vac: vacation-request instance, business key VAC-7, var employee="Fozzie".
    """
    assert database.AsyncSessionLocal is not None
    async with database.AsyncSessionLocal() as session:
        async with session.begin():
            repo = ExecutionRepository(session)
            inv1 = await repo.create_execution(
                process_definition_id="invoice-approval:1:4",
                process_definition_key="invoice-approval",
                business_key="INV-1",
                activity_id="reviewInvoice",
                execution_id="exec-inv1",
            )
            child = await repo.create_execution(
                process_definition_id="invoice-approval:1:4",
                process_definition_key="invoice-approval",
                process_instance_id=inv1.id,
                parent_id=inv1.id,
                activity_id="approveInvoice",
                execution_id="exec-inv1-child",
            )
            inv2 = await repo.create_execution(
                process_definition_id="invoice-approval:1:4",
                process_definition_key="invoice-approval",
                business_key="INV-2",
                activity_id="reviewInvoice",
                execution_id="exec-inv2",
            )
            vac = await repo.create_execution(
                process_definition_id="vacation-request:2:12",
                process_definition_key="vacation-request",
                business_key="VAC-7",
                activity_id="handleRequest",
                execution_id="exec-vac",
            )
            await repo.add_event_subscription(inv1.id, "message", "invoicePaid")
            await repo.add_event_subscription(child.id, "signal", "cancelAll")

            await repo.set_variables(
                inv1.id,
                [
                    VariableToSet(name="amount", type="integer", value=100),
                    VariableToSet(name="currency", type="string", value="EUR"),
                ],
            )
            await repo.set_variables(
                child.id, [VariableToSet(name="approver", type="string", value="Kermit")]
            )
            await repo.set_variables(
                inv2.id,
                [
                    VariableToSet(name="amount", type="integer", value=2500),
                    VariableToSet(name="currency", type="string", value="usd"),
                ],
            )
            await repo.set_variables(
                vac.id, [VariableToSet(name="employee", type="string", value="Fozzie")]
            )
    return {
        "inv1": inv1.id,
        "inv1_child": child.id,
        "inv2": inv2.id,
        "vac": vac.id,
    }
