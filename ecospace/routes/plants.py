"""Plant catalog routes."""

from ecospace.routes.catalog import build_catalog_router
from ecospace.schemas.plant import PlantCreate, PlantRead, PlantUpdate

router = build_catalog_router(
	kind="plant",
	prefix="/plants",
	tag="plants",
	create_schema=PlantCreate,
	update_schema=PlantUpdate,
	read_schema=PlantRead,
)
