"""ORM model registry — importing this module registers every table on Base.metadata.

Alembic ``env.py`` imports ``Base`` from here (not from ``base.py``) so that
autogenerate sees all tables.  Application code can also do::

    from ecospace.models import Plant, Soil, GrowthStage, ...
"""

# ── Base & Mixins ───────────────────────────────────────────────────────────
from ecospace.models.base import (
    Base,
    SoftDeleteMixin,
    TimestampMixin,
    UUIDPrimaryKeyMixin,
)

# ── Disease reference ───────────────────────────────────────────────────────
from ecospace.models.disease import Disease, PathogenType

# ── Enums ───────────────────────────────────────────────────────────────────
from ecospace.models.enums import (
    GrowthStageEnum,
    PathogenTypeEnum,
    PestTypeEnum,
    PlantCategoryEnum,
    PlantGrowthCycleEnum,
    PlantGrowthHabitEnum,
    PlantPurposeEnum,
    SeasonEnum,
    SoilDrainageEnum,
    SoilLevelEnum,
    SoilPhTypeEnum,
    SoilTextureEnum,
    SoilTypeEnum,
)

# ── Pest reference ──────────────────────────────────────────────────────────
from ecospace.models.pest import Pest, PestType

# ── Plant & growth stages ───────────────────────────────────────────────────
from ecospace.models.plant import GrowthStage, Plant

# ── Soil ────────────────────────────────────────────────────────────────────
from ecospace.models.soil import Soil

__all__ = [
    # Base & mixins
    "Base",
    # Catalog entities
    "Disease",
    "GrowthStage",
    # Enums
    "GrowthStageEnum",
    "PathogenType",
    "PathogenTypeEnum",
    "Pest",
    "PestType",
    "PestTypeEnum",
    "Plant",
    "PlantCategoryEnum",
    "PlantGrowthCycleEnum",
    "PlantGrowthHabitEnum",
    "PlantPurposeEnum",
    "SeasonEnum",
    "SoftDeleteMixin",
    "Soil",
    "SoilDrainageEnum",
    "SoilLevelEnum",
    "SoilPhTypeEnum",
    "SoilTextureEnum",
    "SoilTypeEnum",
    "TimestampMixin",
    "UUIDPrimaryKeyMixin",
]
