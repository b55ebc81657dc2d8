"""Shared pytest fixtures — in-memory catalog store, async test client."""

from __future__ import annotations

import uuid
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from ecospace.database import get_db
from ecospace.engine import CatalogEngine, QueryDescriptor, SoftDeletePolicy, build_default_engine
from ecospace.main import app
from ecospace.routes import catalog as catalog_routes
from ecospace.services.catalog_service import CatalogService


class FakeAsyncSession:
	def __init__(self) -> None:
		self.commit = AsyncMock()
		self.rollback = AsyncMock()
		self.close = AsyncMock()
		self.execute = AsyncMock()
		self.flush = AsyncMock()


class FakeRepository:
	"""In-memory stand-in for CatalogRepository with the same async surface."""

	def __init__(self, policy: SoftDeletePolicy) -> None:
		self.policy = policy
		self.records: dict[uuid.UUID, SimpleNamespace] = {}
		self.locked: list[uuid.UUID] = []
		self.fetch_calls = 0

	def seed(self, **values: Any) -> SimpleNamespace:
		now = datetime.now(UTC)
		fields: dict[str, Any] = {"id": uuid.uuid4(), "created_at": now, "updated_at": now}
		if self.policy.flag_field:
			fields[self.policy.flag_field] = True
		if self.policy.timestamp_field:
			fields[self.policy.timestamp_field] = None
		fields.update(values)
		record = SimpleNamespace(**fields)
		self.records[record.id] = record
		return record

	def _matching(self, descriptor: QueryDescriptor, include_inactive: bool) -> list[SimpleNamespace]:
		return [
			record
			for record in self.records.values()
			if self.policy.is_visible(record, include_inactive)
			and all(getattr(record, key) == value for key, value in descriptor.filters.items())
		]

	async def count(self, descriptor: QueryDescriptor, include_inactive: bool = False) -> int:
		return len(self._matching(descriptor, include_inactive))

	async def fetch_page(self, descriptor: QueryDescriptor, include_inactive: bool = False) -> list[Any]:
		self.fetch_calls += 1
		rows = sorted(
			self._matching(descriptor, include_inactive),
			key=lambda record: (getattr(record, descriptor.sort_field), str(record.id)),
			reverse=descriptor.sort_order == "desc",
		)
		return rows[descriptor.offset : descriptor.offset + descriptor.limit]

	async def get(
		self,
		record_id: uuid.UUID,
		include_inactive: bool = False,
		for_update: bool = False,
	) -> Any | None:
		if for_update:
			self.locked.append(record_id)
		record = self.records.get(record_id)
		if record is None or not self.policy.is_visible(record, include_inactive):
			return None
		return record

	async def add(self, values: dict[str, Any]) -> Any:
		return self.seed(**values)

	async def update(self, record: Any, values: dict[str, Any]) -> Any:
		for key, value in values.items():
			setattr(record, key, value)
		record.updated_at = datetime.now(UTC)
		return record

	async def delete(self, record: Any) -> None:
		del self.records[record.id]

	async def deactivate(self, record: Any, now: datetime | None = None) -> Any:
		return await self.update(record, self.policy.deactivation_values(now or datetime.now(UTC)))

	@staticmethod
	def to_mapping(record: Any) -> dict[str, Any]:
		return dict(vars(record))


class FakeCatalogStore:
	"""One FakeRepository per entity kind, usable as a repository factory."""

	def __init__(self, engine: CatalogEngine) -> None:
		self.engine = engine
		self.repositories = {
			kind: FakeRepository(engine.spec(kind).soft_delete) for kind in engine.kinds()
		}

	def repository(self, kind: str) -> FakeRepository:
		return self.repositories[kind]

	def service(self, kind: str) -> CatalogService:
		return CatalogService(None, kind, engine=self.engine, repository_factory=self.repository)


@pytest.fixture
def catalog_engine() -> CatalogEngine:
	return build_default_engine()


@pytest.fixture
def catalog_store(catalog_engine: CatalogEngine) -> FakeCatalogStore:
	return FakeCatalogStore(catalog_engine)


@pytest.fixture
def fake_db_session() -> FakeAsyncSession:
	"""A lightweight async-session stub for dependency overrides in API tests."""
	return FakeAsyncSession()


@pytest.fixture
async def client(
	fake_db_session: FakeAsyncSession,
	catalog_store: FakeCatalogStore,
	monkeypatch: pytest.MonkeyPatch,
) -> AsyncGenerator[AsyncClient, None]:
	"""HTTPX async client with lifespan disabled and persistence held in memory."""

	async def override_get_db() -> AsyncGenerator[Any, None]:
		yield fake_db_session

	def service_factory(db: Any, kind: str) -> CatalogService:
		return CatalogService(
			db,
			kind,
			engine=catalog_store.engine,
			repository_factory=catalog_store.repository,
		)

	monkeypatch.setattr(catalog_routes, "CatalogService", service_factory)
	app.dependency_overrides[get_db] = override_get_db
	original_lifespan = app.router.lifespan_context

	@asynccontextmanager
	async def noop_lifespan(_: Any) -> AsyncGenerator[None, None]:
		yield

	app.router.lifespan_context = noop_lifespan

	transport = ASGITransport(app=app)
	async with AsyncClient(transport=transport, base_url="http://test") as test_client:
		yield test_client

	app.router.lifespan_context = original_lifespan
	app.dependency_overrides.clear()


@pytest.fixture
def now_utc() -> datetime:
	return datetime.now(UTC)
