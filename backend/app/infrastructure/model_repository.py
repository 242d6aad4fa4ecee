"""Model Repository: SQLAlchemy implementation of the ModelRepository protocol.

Invariants:
    - Bound to one AsyncSession (one request / one unit of work)
    - save() flushes, so generated ids are visible on the returned object
    - find_all() orders by id: insertion order for an autoincrement key
    - Never commits on its own; commit happens when transaction() exits cleanly
    - delete() is a single DELETE statement and reports whether a row matched

Design Decisions:
    - No caching: every call goes to the session, which reflects the store
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import ModelId
from app.models.model import Model


class SqlModelRepository:
    """Model persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all(self) -> list[Model]:
        result = await self.db.execute(select(Model).order_by(Model.id))
        return list(result.scalars().all())

    async def find_one(self, model_id: ModelId) -> Model | None:
        return await self.db.get(Model, model_id)

    async def save(self, model: Model) -> Model:
        """Insert when id is unset, otherwise overwrite the stored row."""
        if model.id is not None and model not in self.db:
            model = await self.db.merge(model)
        else:
            self.db.add(model)
        await self.db.flush()
        return model

    async def save_all(self, models: Sequence[Model]) -> list[Model]:
        return [await self.save(m) for m in models]

    async def delete(self, model_id: ModelId) -> bool:
        """Remove the row with model_id; True when a row was removed."""
        result = await self.db.execute(delete(Model).where(Model.id == model_id))
        return result.rowcount > 0

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[None, None]:
        """Commit on clean exit, roll back and re-raise otherwise."""
        try:
            yield
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
