"""Request Dependencies: wires a request-scoped ModelService for route handlers.

Invariants:
    - One AsyncSession, one repository, one service per request
    - The session comes from the app's DatabaseSessionManager (via get_db)
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.database import get_db
from app.infrastructure.model_repository import SqlModelRepository
from app.services.model_service import ModelService


async def get_model_service(db: AsyncSession = Depends(get_db)) -> ModelService:
    return ModelService(SqlModelRepository(db))
