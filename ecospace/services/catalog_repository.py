"""Persistence access for catalog entities.

Every database round trip of the catalog goes through CatalogRepository.
Driver errors never leave this module untranslated:
    - IntegrityError  -> ConflictError (unique / foreign-key violation)
    - SQLAlchemyError -> InternalError (logged, generic message)
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime
from typing import Any

import structlog
from sqlalchemy import ColumnElement, func, inspect, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ecospace.engine import QueryDescriptor, SoftDeletePolicy
from ecospace.errors import ConflictError, InternalError
from ecospace.models import Base, Disease, GrowthStage, PathogenType, Pest, PestType, Plant, Soil

_logger = structlog.get_logger("ecospace.repository")

MODEL_BY_KIND: dict[str, type[Base]] = {
	"plant": Plant,
	"soil": Soil,
	"growth_stage": GrowthStage,
	"pest_type": PestType,
	"pathogen_type": PathogenType,
	"pest": Pest,
	"disease": Disease,
}


class CatalogRepository:
	"""Count, page, load and write rows of one catalog model."""

	def __init__(self, db: AsyncSession, model: type[Base], policy: SoftDeletePolicy):
		self.db = db
		self.model = model
		self.policy = policy

	@property
	def label(self) -> str:
		return self.model.__name__

	# ── Reads ───────────────────────────────────────────────────────────────

	async def count(self, descriptor: QueryDescriptor, include_inactive: bool = False) -> int:
		stmt = (
			select(func.count())
			.select_from(self.model)
			.where(*self._where(descriptor.filters, include_inactive))
		)
		result = await self._execute(stmt, "count")
		return int(result.scalar_one())

	async def fetch_page(self, descriptor: QueryDescriptor, include_inactive: bool = False) -> list[Any]:
		column = getattr(self.model, descriptor.sort_field)
		ordering = column.desc() if descriptor.sort_order == "desc" else column.asc()
		stmt = (
			select(self.model)
			.where(*self._where(descriptor.filters, include_inactive))
			# id tie-break keeps pages stable when the sort column has duplicates
			.order_by(ordering, self.model.id.asc())
			.offset(descriptor.offset)
			.limit(descriptor.limit)
		)
		result = await self._execute(stmt, "fetch_page")
		return list(result.scalars().all())

	async def get(
		self,
		record_id: uuid.UUID,
		include_inactive: bool = False,
		for_update: bool = False,
	) -> Any | None:
		stmt = select(self.model).where(
			self.model.id == record_id,
			*self._visibility(include_inactive),
		)
		if for_update:
			stmt = stmt.with_for_update()
		result = await self._execute(stmt, "get")
		return result.scalar_one_or_none()

	# ── Writes ──────────────────────────────────────────────────────────────

	async def add(self, values: dict[str, Any]) -> Any:
		record = self.model(**values)
		self.db.add(record)
		await self._flush("add")
		await self.db.refresh(record)
		return record

	async def update(self, record: Any, values: dict[str, Any]) -> Any:
		for key, value in values.items():
			setattr(record, key, value)
		await self._flush("update")
		await self.db.refresh(record)
		return record

	async def delete(self, record: Any) -> None:
		await self.db.delete(record)
		await self._flush("delete")

	async def deactivate(self, record: Any, now: datetime | None = None) -> Any:
		values = self.policy.deactivation_values(now or datetime.now(UTC))
		return await self.update(record, values)

	@staticmethod
	def to_mapping(record: Any) -> dict[str, Any]:
		"""Column values of a loaded row, used as prior state for validation."""
		mapper = inspect(record).mapper
		return {attr.key: getattr(record, attr.key) for attr in mapper.column_attrs}

	# ── Internals ───────────────────────────────────────────────────────────

	def _visibility(self, include_inactive: bool) -> list[ColumnElement[bool]]:
		if include_inactive:
			return []
		if self.policy.flag_field:
			return [getattr(self.model, self.policy.flag_field).is_(True)]
		if self.policy.timestamp_field:
			return [getattr(self.model, self.policy.timestamp_field).is_(None)]
		return []

	def _where(self, filters: Any, include_inactive: bool) -> list[ColumnElement[bool]]:
		clauses = self._visibility(include_inactive)
		for name, value in filters.items():
			clauses.append(getattr(self.model, name) == value)
		return clauses

	async def _execute(self, stmt: Any, operation: str) -> Any:
		try:
			return await self.db.execute(stmt)
		except SQLAlchemyError as exc:
			_logger.error(
				"catalog_query_failed",
				entity=self.label,
				operation=operation,
				error=str(exc),
			)
			raise InternalError(f"Failed to read {self.label} records") from exc

	async def _flush(self, operation: str) -> None:
		try:
			await self.db.flush()
		except IntegrityError as exc:
			_logger.warning(
				"catalog_integrity_violation",
				entity=self.label,
				operation=operation,
				error=str(exc.orig),
			)
			raise ConflictError(_conflict_message(self.label, exc)) from exc
		except SQLAlchemyError as exc:
			_logger.error(
				"catalog_write_failed",
				entity=self.label,
				operation=operation,
				error=str(exc),
			)
			raise InternalError(f"Failed to write {self.label} record") from exc


def _conflict_message(label: str, exc: IntegrityError) -> str:
	detail = str(exc.orig).lower()
	if "foreign key" in detail:
		if "still referenced" in detail or "update or delete" in detail:
			return f"{label} is still referenced by other records"
		return f"{label} references a record that does not exist"
	return f"{label} with the same unique value already exists"
