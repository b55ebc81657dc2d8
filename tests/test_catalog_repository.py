from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from sqlalchemy import inspect
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import IntegrityError, OperationalError

from ecospace.engine import default_registry, normalize_query
from ecospace.engine.entities import PEST, PEST_TYPE, PLANT
from ecospace.errors import ConflictError, InternalError
from ecospace.models import Disease, PathogenType, Pest, PestType, Plant
from ecospace.services.catalog_repository import CatalogRepository


def _compiled(statement) -> str:
    return str(statement.compile(dialect=postgresql.dialect()))


def _session(result: MagicMock | None = None) -> MagicMock:
    session = MagicMock()
    session.execute = AsyncMock(return_value=result or MagicMock())
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.delete = AsyncMock()
    return session


@pytest.mark.asyncio
async def test_get_for_update_locks_the_row() -> None:
    result = MagicMock()
    result.scalar_one_or_none.return_value = None
    session = _session(result)
    repository = CatalogRepository(session, Plant, PLANT.soft_delete)

    assert await repository.get(uuid4(), for_update=True) is None

    statement = session.execute.await_args.args[0]
    assert "FOR UPDATE" in _compiled(statement)


@pytest.mark.asyncio
async def test_fetch_page_orders_with_id_tie_break_and_hides_inactive() -> None:
    result = MagicMock()
    result.scalars.return_value.all.return_value = []
    session = _session(result)
    repository = CatalogRepository(session, PestType, PEST_TYPE.soft_delete)
    descriptor = normalize_query(
        PEST_TYPE.query, default_registry(), page="2", limit="5", sort_by="name", sort_order="desc"
    )

    await repository.fetch_page(descriptor)

    sql = _compiled(session.execute.await_args.args[0])
    assert "pest_types.is_active IS true" in sql
    assert "ORDER BY pest_types.name DESC, pest_types.id ASC" in sql
    assert "LIMIT" in sql and "OFFSET" in sql


@pytest.mark.asyncio
async def test_count_applies_filters_and_timestamp_visibility() -> None:
    result = MagicMock()
    result.scalar_one.return_value = 4
    session = _session(result)
    repository = CatalogRepository(session, Pest, PEST.soft_delete)
    descriptor = normalize_query(
        PEST.query, default_registry(), filters={"pest_type_id": str(uuid4())}
    )

    assert await repository.count(descriptor) == 4

    sql = _compiled(session.execute.await_args.args[0])
    assert "pests.deleted_at IS NULL" in sql
    assert "pests.pest_type_id =" in sql


@pytest.mark.asyncio
async def test_include_inactive_drops_visibility_clause() -> None:
    result = MagicMock()
    result.scalar_one.return_value = 0
    session = _session(result)
    repository = CatalogRepository(session, Pest, PEST.soft_delete)
    descriptor = normalize_query(PEST.query, default_registry())

    await repository.count(descriptor, include_inactive=True)

    assert "deleted_at" not in _compiled(session.execute.await_args.args[0])


@pytest.mark.asyncio
async def test_unique_violation_becomes_conflict() -> None:
    session = _session()
    session.flush.side_effect = IntegrityError(
        "INSERT INTO plants ...",
        {},
        Exception('duplicate key value violates unique constraint "plants_name_key"'),
    )
    repository = CatalogRepository(session, Plant, PLANT.soft_delete)

    with pytest.raises(ConflictError) as exc_info:
        await repository.add({"name": "Tomato"})

    assert exc_info.value.message == "Plant with the same unique value already exists"


@pytest.mark.asyncio
async def test_driver_failure_becomes_internal_error() -> None:
    session = _session()
    session.execute.side_effect = OperationalError("SELECT 1", {}, Exception("connection reset"))
    repository = CatalogRepository(session, Plant, PLANT.soft_delete)

    with pytest.raises(InternalError) as exc_info:
        await repository.get(uuid4())

    assert "connection reset" not in exc_info.value.message


@pytest.mark.parametrize("model", [PestType, Pest, PathogenType, Disease])
def test_reference_models_map_plain_foreign_keys(model) -> None:
    mapper = inspect(model)

    assert list(mapper.relationships) == []
    assert {column.key for column in mapper.column_attrs} >= {"id", "name", "created_at"}
