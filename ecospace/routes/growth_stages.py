"""Growth-stage catalog routes."""

from ecospace.routes.catalog import build_catalog_router
from ecospace.schemas.plant import GrowthStageCreate, GrowthStageRead, GrowthStageUpdate

router = build_catalog_router(
	kind="growth_stage",
	prefix="/growth-stages",
	tag="growth-stages",
	create_schema=GrowthStageCreate,
	update_schema=GrowthStageUpdate,
	read_schema=GrowthStageRead,
)
