"""Disease catalog routes."""

from ecospace.routes.catalog import build_catalog_router
from ecospace.schemas.disease import DiseaseCreate, DiseaseRead, DiseaseUpdate

router = build_catalog_router(
	kind="disease",
	prefix="/diseases",
	tag="diseases",
	create_schema=DiseaseCreate,
	update_schema=DiseaseUpdate,
	read_schema=DiseaseRead,
)
