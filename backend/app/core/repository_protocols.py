"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - transaction() is part of the contract so the service owns the boundary
      of each unit of work without touching the ORM session
"""

from contextlib import AbstractAsyncContextManager
from typing import Protocol, Sequence

from app.core.domain_types import ModelId


class ModelLike(Protocol):
    """Structural contract for Model records passed between layers."""
    id: int | None
    name: str


class ModelRepository(Protocol):
    """Contract for Model persistence: implemented by shell."""
    async def find_all(self) -> list[ModelLike]: ...
    async def find_one(self, model_id: ModelId) -> ModelLike | None: ...
    async def save(self, model: ModelLike) -> ModelLike: ...
    async def save_all(self, models: Sequence[ModelLike]) -> list[ModelLike]: ...
    async def delete(self, model_id: ModelId) -> bool: ...
    def transaction(self) -> AbstractAsyncContextManager[None]: ...
