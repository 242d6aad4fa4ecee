"""Demo Data Seeding: inserts the demo Model records at process start.

Invariants:
    - Inserts DEMO_MODEL_NAMES in order, in one transaction
    - Runs on every boot without checking existing rows: against a persistent
      database each restart adds another model1/model2 pair
"""

import logging

from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.model_repository import SqlModelRepository
from app.models.model import Model

logger = logging.getLogger(__name__)

DEMO_MODEL_NAMES: tuple[str, ...] = ("model1", "model2")


async def seed_demo_models(db_manager: DatabaseSessionManager) -> list[Model]:
    async with db_manager.session() as db:
        repository = SqlModelRepository(db)
        async with repository.transaction():
            seeded = await repository.save_all(
                [Model(name=name) for name in DEMO_MODEL_NAMES],
            )
    logger.info("Demo models seeded", extra={"count": len(seeded)})
    return seeded
