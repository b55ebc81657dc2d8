"""Pest-type taxonomy routes (soft delete via ``is_active``)."""

from ecospace.routes.catalog import build_catalog_router
from ecospace.schemas.pest import PestTypeCreate, PestTypeRead, PestTypeUpdate

router = build_catalog_router(
	kind="pest_type",
	prefix="/pest-types",
	tag="pest-types",
	create_schema=PestTypeCreate,
	update_schema=PestTypeUpdate,
	read_schema=PestTypeRead,
)
