"""Model Service: existence-checked create/update/delete over a ModelRepository.

Invariants:
    - Domain failures are RETURNED as ServiceResult errors, never raised
    - Each mutation runs in one repository transaction: the existence check and
      the write commit together or not at all
    - update() replaces only the name; the id never changes
    - Payloads reaching this layer are already validated (api/routes/models.py)

Design Decisions:
    - Repository injected at construction: the service never opens sessions itself
"""

import logging

from app.core.domain_types import ModelId
from app.core.errors import ServiceResult, model_not_found
from app.core.repository_protocols import ModelRepository
from app.models.model import Model

logger = logging.getLogger(__name__)


class ModelService:
    """Business rules around Model persistence."""

    def __init__(self, repository: ModelRepository):
        self.repository = repository

    async def list_all(self) -> ServiceResult[list[Model]]:
        models = await self.repository.find_all()
        return ServiceResult.success(models)

    async def get(self, model_id: ModelId) -> ServiceResult[Model]:
        found = await self.repository.find_one(model_id)
        if found is None:
            return model_not_found()
        return ServiceResult.success(found)

    async def create(self, name: str) -> ServiceResult[Model]:
        """Persist a new Model; the store assigns its id."""
        async with self.repository.transaction():
            created = await self.repository.save(Model(name=name))
        logger.debug(
            f"Model created: {created!r}", extra={"model_id": created.id},
        )
        return ServiceResult.success(created)

    async def update(self, model_id: ModelId, name: str) -> ServiceResult[Model]:
        """Replace the name of an existing Model."""
        async with self.repository.transaction():
            found = await self.repository.find_one(model_id)
            if found is None:
                return model_not_found()
            found.name = name
            updated = await self.repository.save(found)
        logger.debug(
            f"Model updated: {updated!r}", extra={"model_id": model_id},
        )
        return ServiceResult.success(updated)

    async def delete(self, model_id: ModelId) -> ServiceResult[None]:
        async with self.repository.transaction():
            if not await self.repository.delete(model_id):
                return model_not_found()
        logger.debug("Model deleted", extra={"model_id": model_id})
        return ServiceResult.success()
