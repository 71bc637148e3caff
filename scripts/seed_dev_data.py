"""Seed dev data from scripts/seed-data.json into the configured database.

Creates process instances (with optional child executions), their message
and signal subscriptions, and variables. Variables go through the same
VariableValueResolver as the API, so "type" works as in requests.

Usage:
    uv run python -m scripts.seed_dev_data [path/to/seed-data.json]

Default path: scripts/seed-data.json (relative to project root).
Requires: DATABASE_URL. Tables are created if missing.
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from app.application.dtos.execution import VariableToSet
from app.application.services.variable_value_resolver import VariableValueResolver
from app.application.use_cases.executions.execution_operations import (
    infer_variable_type,
)
from app.infrastructure.persistence import database
from app.infrastructure.persistence.repositories.execution_repo import (
    ExecutionRepository,
)


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_* when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


def _variables(raw: list[dict[str, Any]], resolver: VariableValueResolver) -> list[VariableToSet]:
    out: list[VariableToSet] = []
    for item in raw:
        value = resolver.resolve(item["value"], item.get("type"))
        var_type = item.get("type") or infer_variable_type(value).value
        out.append(VariableToSet(name=item["name"], type=var_type, value=value))
    return out


async def _seed_execution(
    repo: ExecutionRepository,
    resolver: VariableValueResolver,
    entry: dict[str, Any],
    definition: dict[str, Any],
    process_instance_id: str | None = None,
    parent_id: str | None = None,
) -> str:
    created = await repo.create_execution(
        process_definition_id=definition["process_definition_id"],
        process_definition_key=definition["process_definition_key"],
        process_instance_id=process_instance_id,
        parent_id=parent_id,
        business_key=entry.get("business_key") if process_instance_id is None else None,
        activity_id=entry.get("activity_id"),
    )
    for sub in entry.get("subscriptions", []):
        await repo.add_event_subscription(created.id, sub["event_type"], sub["event_name"])
    if entry.get("variables"):
        await repo.set_variables(created.id, _variables(entry["variables"], resolver))
    for child in entry.get("children", []):
        await _seed_execution(
            repo,
            resolver,
            child,
            definition,
            process_instance_id=created.process_instance_id,
            parent_id=created.id,
        )
    return created.id


async def run(path: Path) -> None:
    _load_env()
    data = json.loads(path.read_text(encoding="utf-8"))
    await database.create_all()
    assert database.AsyncSessionLocal is not None
    resolver = VariableValueResolver()

    async with database.AsyncSessionLocal() as session:
        async with session.begin():
            repo = ExecutionRepository(session)
            for instance in data.get("process_instances", []):
                instance_id = await _seed_execution(repo, resolver, instance, instance)
                print(
                    f"  Process instance {instance['process_definition_key']} "
                    f"({instance.get('business_key') or '-'}) -> {instance_id}"
                )

    await database.dispose_engine()
    print("Seed completed.")


def main() -> None:
    root = _project_root()
    path_arg = sys.argv[1] if len(sys.argv) > 1 else None
    path = Path(path_arg) if path_arg else root / "scripts" / "seed-data.json"
    if not path.is_absolute():
        path = (root / path).resolve()
    asyncio.run(run(path))


if __name__ == "__main__":
    main()
