"""Closed vocabularies for every categorical catalog field.

Each StrEnum maps 1:1 to a PostgreSQL CREATE TYPE ... AS ENUM and is also
registered with the engine's EnumRegistry (see ``ecospace.engine.registry``),
which is what request validation and list filtering consult.  Member names
equal their values so SQLAlchemy ``Enum`` columns accept plain strings.
"""

from enum import StrEnum

# ── Plant enums ─────────────────────────────────────────────────────────────


class PlantCategoryEnum(StrEnum):
    """Broad plant classification."""

    crop = "crop"
    plant = "plant"


class PlantGrowthCycleEnum(StrEnum):
    """Life span of a plant."""

    annual = "annual"
    biennial = "biennial"
    perennial = "perennial"


class PlantGrowthHabitEnum(StrEnum):
    """Physical growth form."""

    climber = "climber"
    creeper = "creeper"
    herb = "herb"
    herbaceous = "herbaceous"
    grass = "grass"
    shrub = "shrub"
    tree = "tree"


class PlantPurposeEnum(StrEnum):
    """Primary use of a plant."""

    flower = "flower"
    fodder = "fodder"
    fruit = "fruit"
    herb = "herb"
    medicine = "medicine"
    spice = "spice"
    vegetable = "vegetable"


class GrowthStageEnum(StrEnum):
    """Growth stage vocabulary shared by GrowthStage.name and Plant.growth_stages."""

    budding = "budding"
    flowering = "flowering"
    fruiting = "fruiting"
    germination = "germination"
    harvesting = "harvesting"
    seedling = "seedling"
    vegetative = "vegetative"


class SeasonEnum(StrEnum):
    autumn = "autumn"
    monsoon = "monsoon"
    spring = "spring"
    summer = "summer"
    winter = "winter"


# ── Soil enums ──────────────────────────────────────────────────────────────


class SoilDrainageEnum(StrEnum):
    excessive = "excessive"
    good = "good"
    moderate = "moderate"
    poor = "poor"


class SoilLevelEnum(StrEnum):
    """Shared low/medium/high scale for nutrient, organic matter and water retention."""

    high = "high"
    medium = "medium"
    low = "low"


class SoilTextureEnum(StrEnum):
    chalky = "chalky"
    clayey = "clayey"
    loamy = "loamy"
    peaty = "peaty"
    sandy = "sandy"
    silty = "silty"


class SoilTypeEnum(StrEnum):
    alluvial = "alluvial"
    black = "black"
    desert = "desert"
    forest = "forest"
    laterite = "laterite"
    mountain = "mountain"
    red = "red"


class SoilPhTypeEnum(StrEnum):
    """Derived from ph_min / ph_max, never supplied by clients."""

    acidic = "acidic"
    neutral = "neutral"
    alkaline = "alkaline"


# ── Pest & disease taxonomies ───────────────────────────────────────────────


class PestTypeEnum(StrEnum):
    bird = "bird"
    insect = "insect"
    mite = "mite"
    nematode = "nematode"
    rodent = "rodent"
    slug = "slug"
    snail = "snail"


class PathogenTypeEnum(StrEnum):
    bacteria = "bacteria"
    fungi = "fungi"
    insect = "insect"
    nematode = "nematode"
    oomycete = "oomycete"
    phytoplasma = "phytoplasma"
    protozoa = "protozoa"
    virus = "virus"
