"""Base repository: lookup by primary key, existence check, create with post-create hook."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.database import Base


class BaseRepository[ModelType: Base]:
    """Generic reads and inserts for one model with a string id.

    Subclasses override _on_after_create to log or emit events.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_by_id(self, entity_id: str) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def exists(self, entity_id: str) -> bool:
        """Return True if a record with this primary key exists (no row load)."""
        model: Any = self.model
        stmt = select(select(model.id).where(model.id == entity_id).exists())
        result = await self.db.execute(stmt)
        return bool(result.scalar())

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record, refresh server defaults, run _on_after_create."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        await self._on_after_create(obj)
        return obj

    async def _on_after_create(self, obj: ModelType) -> None:
        """Hook after create; no-op by default."""
