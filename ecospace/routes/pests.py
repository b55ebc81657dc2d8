"""Pest catalog routes."""

from ecospace.routes.catalog import build_catalog_router
from ecospace.schemas.pest import PestCreate, PestRead, PestUpdate

router = build_catalog_router(
	kind="pest",
	prefix="/pests",
	tag="pests",
	create_schema=PestCreate,
	update_schema=PestUpdate,
	read_schema=PestRead,
)
