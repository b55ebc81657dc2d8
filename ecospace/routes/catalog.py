"""Router factory for catalog resources.

Each resource module builds its router here so that every catalog endpoint
shares one list/get/create/patch/delete contract.  Domain errors are not
mapped in the handlers; they propagate to the handlers registered in
``ecospace.error_handlers``.
"""

import uuid
from typing import Any

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from ecospace.database import get_db
from ecospace.schemas.common import ErrorRead, PageRead
from ecospace.services.catalog_service import CatalogService, get_catalog_engine

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
	status.HTTP_400_BAD_REQUEST: {"model": ErrorRead},
	status.HTTP_404_NOT_FOUND: {"model": ErrorRead},
	status.HTTP_409_CONFLICT: {"model": ErrorRead},
}

# path segment under the API prefix -> entity kind, filled as routers are built
RESOURCE_KINDS: dict[str, str] = {}


def _filters_from_request(request: Request, filterable: Any) -> dict[str, str]:
	return {key: value for key, value in request.query_params.items() if key in filterable}


def build_catalog_router(
	*,
	kind: str,
	prefix: str,
	tag: str,
	create_schema: type[BaseModel],
	update_schema: type[BaseModel],
	read_schema: type[BaseModel],
) -> APIRouter:
	"""Wire the five catalog operations of ``kind`` onto a new APIRouter."""
	spec = get_catalog_engine().spec(kind)
	filterable = spec.query.filterable_fields
	RESOURCE_KINDS[prefix.strip("/")] = kind
	router = APIRouter(prefix=prefix, tags=[tag], responses=_ERROR_RESPONSES)

	def _to_read(record: Any) -> BaseModel:
		return read_schema.model_validate(record)

	@router.get(
		"",
		response_model=PageRead[read_schema],
		response_model_exclude_unset=True,
		summary=f"List {tag}",
		description=(
			"Paginated, sorted list. Filterable fields: "
			+ (", ".join(sorted(filterable)) or "none")
			+ ". Sortable fields: "
			+ ", ".join(spec.query.allowed_sort_fields)
			+ "."
		),
	)
	async def list_records(
		request: Request,
		page: str | None = None,
		limit: str | None = None,
		sort_by: str | None = None,
		sort_order: str | None = None,
		include_inactive: bool = False,
		db: AsyncSession = Depends(get_db),
	) -> dict[str, Any]:
		service = CatalogService(db, kind)
		envelope = await service.list_records(
			page=page,
			limit=limit,
			sort_by=sort_by,
			sort_order=sort_order,
			filters=_filters_from_request(request, filterable),
			include_inactive=include_inactive,
		)
		return {
			"data": [_to_read(record) for record in envelope["data"]],
			"pagination": envelope["pagination"],
		}

	@router.get("/{record_id}", response_model=read_schema, summary=f"Get one of {tag}")
	async def get_record(
		record_id: uuid.UUID,
		include_inactive: bool = False,
		db: AsyncSession = Depends(get_db),
	) -> BaseModel:
		service = CatalogService(db, kind)
		record = await service.get_record(record_id, include_inactive=include_inactive)
		return _to_read(record)

	@router.post(
		"",
		response_model=read_schema,
		status_code=status.HTTP_201_CREATED,
		summary=f"Create one of {tag}",
	)
	async def create_record(
		payload: create_schema,  # type: ignore[valid-type]
		db: AsyncSession = Depends(get_db),
	) -> BaseModel:
		service = CatalogService(db, kind)
		record = await service.create_record(payload.model_dump(exclude_none=True))
		return _to_read(record)

	@router.patch("/{record_id}", response_model=read_schema, summary=f"Update one of {tag}")
	async def update_record(
		record_id: uuid.UUID,
		payload: update_schema,  # type: ignore[valid-type]
		db: AsyncSession = Depends(get_db),
	) -> BaseModel:
		service = CatalogService(db, kind)
		record = await service.update_record(record_id, payload.model_dump(exclude_none=True))
		return _to_read(record)

	@router.delete(
		"/{record_id}",
		status_code=status.HTTP_204_NO_CONTENT,
		response_class=Response,
		summary=f"Delete one of {tag}",
	)
	async def delete_record(
		record_id: uuid.UUID,
		db: AsyncSession = Depends(get_db),
	) -> Response:
		service = CatalogService(db, kind)
		await service.delete_record(record_id)
		return Response(status_code=status.HTTP_204_NO_CONTENT)

	return router
