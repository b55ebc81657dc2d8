"""Catalog CRUD service — one instance per request and entity kind.

The service owns the order of operations; the engine owns the rules and the
repository owns the SQL.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from functools import lru_cache
from typing import Any

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from ecospace.engine import CatalogEngine, build_default_engine
from ecospace.errors import FieldError, NotFoundError, ValidationError
from ecospace.services.catalog_repository import MODEL_BY_KIND, CatalogRepository

_logger = structlog.get_logger("ecospace.catalog")

RepositoryFactory = Callable[[str], Any]


@lru_cache
def get_catalog_engine() -> CatalogEngine:
	return build_default_engine()


class CatalogService:
	"""List, read, create, patch and delete records of a single catalog entity."""

	def __init__(
		self,
		db: AsyncSession | None,
		kind: str,
		engine: CatalogEngine | None = None,
		repository_factory: RepositoryFactory | None = None,
	):
		self.db = db
		self.kind = kind
		self.engine = engine or get_catalog_engine()
		self.spec = self.engine.spec(kind)
		self._repository_factory = repository_factory or self._default_repository
		self.repository = self._repository_factory(kind)

	def _default_repository(self, kind: str) -> CatalogRepository:
		return CatalogRepository(self.db, MODEL_BY_KIND[kind], self.engine.spec(kind).soft_delete)

	@property
	def label(self) -> str:
		return self.kind.replace("_", " ").capitalize()

	async def list_records(
		self,
		*,
		page: Any = None,
		limit: Any = None,
		sort_by: Any = None,
		sort_order: Any = None,
		filters: Mapping[str, Any] | None = None,
		include_inactive: bool = False,
	) -> dict[str, Any]:
		descriptor = self.engine.normalize_query(
			self.kind,
			page=page,
			limit=limit,
			sort_by=sort_by,
			sort_order=sort_order,
			filters=filters,
		)
		total = await self.repository.count(descriptor, include_inactive)
		pagination = self.engine.paginate(total, descriptor)
		rows: list[Any] = []
		# past the last page there is nothing to read
		if total and not pagination.has_exceeded_page:
			rows = await self.repository.fetch_page(descriptor, include_inactive)
		return self.engine.assemble(rows, pagination)

	async def get_record(self, record_id: uuid.UUID, include_inactive: bool = False) -> Any:
		record = await self.repository.get(record_id, include_inactive=include_inactive)
		if record is None:
			raise NotFoundError(f"{self.label} not found")
		return record

	async def create_record(self, payload: Mapping[str, Any]) -> Any:
		values = self.engine.prepare_create(self.kind, payload)
		await self._check_references(values)
		record = await self.repository.add(values)
		_logger.info("catalog_created", entity=self.kind, record_id=str(record.id))
		return record

	async def update_record(self, record_id: uuid.UUID, payload: Mapping[str, Any]) -> Any:
		# row lock: the prior bounds used for range checks cannot change under us
		record = await self.repository.get(record_id, for_update=True)
		if record is None:
			raise NotFoundError(f"{self.label} not found")
		prior = self.repository.to_mapping(record)
		values = self.engine.prepare_update(self.kind, payload, prior)
		await self._check_references(values)
		record = await self.repository.update(record, values)
		_logger.info(
			"catalog_updated",
			entity=self.kind,
			record_id=str(record.id),
			fields=sorted(values),
		)
		return record

	async def delete_record(self, record_id: uuid.UUID) -> None:
		record = await self.repository.get(record_id, for_update=True)
		if record is None:
			raise NotFoundError(f"{self.label} not found")
		if self.spec.soft_delete.is_soft:
			await self.repository.deactivate(record, datetime.now(UTC))
		else:
			await self.repository.delete(record)
		_logger.info(
			"catalog_deleted",
			entity=self.kind,
			record_id=str(record_id),
			soft=self.spec.soft_delete.is_soft,
		)

	async def _check_references(self, values: Mapping[str, Any]) -> None:
		errors: list[FieldError] = []
		for field_name, target_kind in self.spec.references.items():
			target_id = values.get(field_name)
			if target_id is None:
				continue
			target = await self._repository_factory(target_kind).get(target_id)
			if target is None:
				errors.append(
					FieldError(
						field_name,
						f"{field_name} must reference an existing {target_kind.replace('_', ' ')}",
					)
				)
		if errors:
			raise ValidationError(errors)
