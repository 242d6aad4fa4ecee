"""SQL Model Repository: persistence semantics over an in-memory SQLite store.

Tests cover:
    - save assigns an id on insert and overwrites on update
    - find_all returns rows in insertion order
    - delete reports whether a row was removed; an absent id is a no-op
    - transaction() commits on success and rolls back on exception
    - SQLAlchemy failures surface as DatabaseError from the session manager
"""

import pytest
from sqlalchemy import text

from app.core.domain_types import ModelId
from app.core.errors import DatabaseError
from app.infrastructure.model_repository import SqlModelRepository
from app.models.model import Model


async def test_save_assigns_id_on_insert(db_manager):
    async with db_manager.session() as db:
        repo = SqlModelRepository(db)
        async with repo.transaction():
            saved = await repo.save(Model(name="fresh"))

    assert saved.id is not None

    async with db_manager.session() as db:
        found = await SqlModelRepository(db).find_one(ModelId(saved.id))
    assert found.name == "fresh"


async def test_save_detached_model_with_id_overwrites(db_manager):
    async with db_manager.session() as db:
        repo = SqlModelRepository(db)
        async with repo.transaction():
            saved = await repo.save(Model(name="v1"))

    async with db_manager.session() as db:
        repo = SqlModelRepository(db)
        async with repo.transaction():
            await repo.save(Model(id=saved.id, name="v2"))

    async with db_manager.session() as db:
        rows = await SqlModelRepository(db).find_all()
    assert [(m.id, m.name) for m in rows] == [(saved.id, "v2")]


async def test_find_all_orders_by_insertion(db_manager):
    async with db_manager.session() as db:
        repo = SqlModelRepository(db)
        async with repo.transaction():
            await repo.save_all([Model(name=n) for n in ("c", "a", "b")])

    async with db_manager.session() as db:
        rows = await SqlModelRepository(db).find_all()
    assert [m.name for m in rows] == ["c", "a", "b"]


async def test_find_one_absent_returns_none(db_manager):
    async with db_manager.session() as db:
        assert await SqlModelRepository(db).find_one(ModelId(404)) is None


async def test_delete_absent_is_noop(db_manager):
    async with db_manager.session() as db:
        repo = SqlModelRepository(db)
        async with repo.transaction():
            assert await repo.delete(ModelId(404)) is False


async def test_delete_existing_reports_removal(db_manager):
    async with db_manager.session() as db:
        repo = SqlModelRepository(db)
        async with repo.transaction():
            saved = await repo.save(Model(name="doomed"))

    async with db_manager.session() as db:
        repo = SqlModelRepository(db)
        async with repo.transaction():
            assert await repo.delete(ModelId(saved.id)) is True

    async with db_manager.session() as db:
        assert await SqlModelRepository(db).find_one(ModelId(saved.id)) is None


async def test_transaction_rolls_back_on_exception(db_manager):
    async with db_manager.session() as db:
        repo = SqlModelRepository(db)
        with pytest.raises(RuntimeError):
            async with repo.transaction():
                await repo.save(Model(name="never"))
                raise RuntimeError("abort")

    async with db_manager.session() as db:
        assert await SqlModelRepository(db).find_all() == []


async def test_session_maps_sqlalchemy_errors_to_database_error(db_manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with db_manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))

    assert exc_info.value.operation == "execute"
    assert exc_info.value.code == "DATABASE_ERROR"
