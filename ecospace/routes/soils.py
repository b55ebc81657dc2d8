"""Soil catalog routes."""

from ecospace.routes.catalog import build_catalog_router
from ecospace.schemas.soil import SoilCreate, SoilRead, SoilUpdate

router = build_catalog_router(
	kind="soil",
	prefix="/soils",
	tag="soils",
	create_schema=SoilCreate,
	update_schema=SoilUpdate,
	read_schema=SoilRead,
)
