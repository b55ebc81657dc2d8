"""Pathogen-type taxonomy routes."""

from ecospace.routes.catalog import build_catalog_router
from ecospace.schemas.disease import PathogenTypeCreate, PathogenTypeRead, PathogenTypeUpdate

router = build_catalog_router(
	kind="pathogen_type",
	prefix="/pathogen-types",
	tag="pathogen-types",
	create_schema=PathogenTypeCreate,
	update_schema=PathogenTypeUpdate,
	read_schema=PathogenTypeRead,
)
