"""Per-entity engine configuration: query contract, rule table, delete policy.

Adding a resource means adding one EntitySpec here; no engine component
changes.
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ecospace.engine.query import EntityQueryConfig, FilterField
from ecospace.engine.soft_delete import SoftDeletePolicy
from ecospace.engine.validator import DerivedField, EntityRules, RangeRule
from ecospace.models.enums import SoilPhTypeEnum

NEUTRAL_PH = 7


@dataclass(frozen=True, slots=True)
class EntitySpec:
    kind: str
    query: EntityQueryConfig
    rules: EntityRules
    soft_delete: SoftDeletePolicy
    patchable_fields: frozenset[str]
    # field -> entity kind whose visible record the field must reference
    references: Mapping[str, str] = field(default_factory=dict)


def derive_ph_type(state: Mapping[str, Any]) -> str | None:
    """alkaline if ph_max > 7, acidic if ph_min < 7, else neutral; needs both bounds."""
    ph_min = state.get("ph_min")
    ph_max = state.get("ph_max")
    if ph_min is None or ph_max is None:
        return None
    if ph_max > NEUTRAL_PH:
        return SoilPhTypeEnum.alkaline.value
    if ph_min < NEUTRAL_PH:
        return SoilPhTypeEnum.acidic.value
    return SoilPhTypeEnum.neutral.value


_UUID_FILTER = FilterField(coerce=lambda raw: uuid.UUID(str(raw)), description="a valid UUID")
_NAME_SORT = ("name", "created_at")

PLANT = EntitySpec(
    kind="plant",
    query=EntityQueryConfig(
        allowed_sort_fields=_NAME_SORT,
        default_sort_field="created_at",
        default_limit=10,
        max_limit=100,
        filterable_fields={
            "category": FilterField(kind="plant_category"),
            "growth_cycle": FilterField(kind="plant_growth_cycle"),
            "growth_habit": FilterField(kind="plant_growth_habit"),
            "ideal_season": FilterField(kind="season"),
            "purpose": FilterField(kind="plant_purpose"),
        },
    ),
    rules=EntityRules(
        enum_fields={
            "category": "plant_category",
            "growth_cycle": "plant_growth_cycle",
            "growth_habit": "plant_growth_habit",
            "ideal_season": "season",
            "purpose": "plant_purpose",
        },
        enum_list_fields={"growth_stages": "growth_stage"},
        string_list_fields=(
            "common_names",
            "common_pests",
            "compatible_plants",
            "recommended_fertilizers",
            "region_compatibility",
            "tags",
        ),
    ),
    soft_delete=SoftDeletePolicy.hard(),
    patchable_fields=frozenset(
        {
            "name",
            "scientific_name",
            "category",
            "growth_cycle",
            "growth_habit",
            "ideal_season",
            "purpose",
            "common_names",
            "common_pests",
            "compatible_plants",
            "growth_stages",
            "recommended_fertilizers",
            "region_compatibility",
            "tags",
        }
    ),
)

SOIL = EntitySpec(
    kind="soil",
    query=EntityQueryConfig(
        allowed_sort_fields=_NAME_SORT,
        default_sort_field="created_at",
        default_limit=10,
        max_limit=50,
        filterable_fields={
            "drainage": FilterField(kind="soil_drainage"),
            "nutrient_level": FilterField(kind="soil_level"),
            "organic_matter_level": FilterField(kind="soil_level"),
            "water_retention_level": FilterField(kind="soil_level"),
            "texture": FilterField(kind="soil_texture"),
            "type": FilterField(kind="soil_type"),
            "ph_type": FilterField(kind="soil_ph_type"),
        },
    ),
    rules=EntityRules(
        enum_fields={
            "drainage": "soil_drainage",
            "nutrient_level": "soil_level",
            "organic_matter_level": "soil_level",
            "water_retention_level": "soil_level",
            "texture": "soil_texture",
            "type": "soil_type",
        },
        ranges=(
            RangeRule(
                lower="ph_min",
                upper="ph_max",
                allow_equal=True,
                lower_message="ph_min is greater than ph_max",
                upper_message="ph_max is lesser than ph_min",
            ),
        ),
        derived=(DerivedField("ph_type", ("ph_min", "ph_max"), derive_ph_type),),
    ),
    soft_delete=SoftDeletePolicy.hard(),
    patchable_fields=frozenset(
        {
            "name",
            "color",
            "description",
            "drainage",
            "nutrient_level",
            "organic_matter_level",
            "water_retention_level",
            "texture",
            "type",
            "ph_min",
            "ph_max",
        }
    ),
)

GROWTH_STAGE = EntitySpec(
    kind="growth_stage",
    query=EntityQueryConfig(
        allowed_sort_fields=("order", "name", "created_at"),
        default_sort_field="order",
        filterable_fields={"name": FilterField(kind="growth_stage")},
    ),
    rules=EntityRules(
        enum_fields={"name": "growth_stage"},
        ranges=(
            RangeRule(
                lower="min_days",
                upper="max_days",
                allow_equal=False,
                lower_message="min_days must be lesser than max_days",
                upper_message="max_days must be greater than min_days",
            ),
        ),
    ),
    soft_delete=SoftDeletePolicy.hard(),
    patchable_fields=frozenset({"description", "image_url", "min_days", "max_days"}),
)

PEST_TYPE = EntitySpec(
    kind="pest_type",
    query=EntityQueryConfig(
        allowed_sort_fields=_NAME_SORT,
        default_sort_field="name",
        filterable_fields={"name": FilterField(kind="pest_type")},
    ),
    rules=EntityRules(enum_fields={"name": "pest_type"}),
    soft_delete=SoftDeletePolicy.by_flag("is_active"),
    patchable_fields=frozenset({"name", "description"}),
)

PATHOGEN_TYPE = EntitySpec(
    kind="pathogen_type",
    query=EntityQueryConfig(
        allowed_sort_fields=_NAME_SORT,
        default_sort_field="name",
        filterable_fields={"name": FilterField(kind="pathogen_type")},
    ),
    rules=EntityRules(enum_fields={"name": "pathogen_type"}),
    soft_delete=SoftDeletePolicy.by_timestamp("deleted_at"),
    patchable_fields=frozenset({"name", "description"}),
)

PEST = EntitySpec(
    kind="pest",
    query=EntityQueryConfig(
        allowed_sort_fields=_NAME_SORT,
        default_sort_field="created_at",
        filterable_fields={"pest_type_id": _UUID_FILTER},
    ),
    rules=EntityRules(),
    soft_delete=SoftDeletePolicy.by_timestamp("deleted_at"),
    patchable_fields=frozenset(
        {
            "name",
            "scientific_name",
            "control_methods",
            "damage_symptoms",
            "seasonality",
            "description",
            "life_cycle",
            "pest_type_id",
        }
    ),
    references={"pest_type_id": "pest_type"},
)

DISEASE = EntitySpec(
    kind="disease",
    query=EntityQueryConfig(
        allowed_sort_fields=_NAME_SORT,
        default_sort_field="created_at",
        filterable_fields={"pathogen_type_id": _UUID_FILTER},
    ),
    rules=EntityRules(),
    soft_delete=SoftDeletePolicy.by_timestamp("deleted_at"),
    patchable_fields=frozenset(
        {
            "name",
            "control_methods",
            "damage_symptoms",
            "seasonality",
            "description",
            "life_cycle",
            "spread_method",
            "pathogen_type_id",
        }
    ),
    references={"pathogen_type_id": "pathogen_type"},
)

DEFAULT_ENTITIES: dict[str, EntitySpec] = {
    spec.kind: spec
    for spec in (PLANT, SOIL, GROWTH_STAGE, PEST_TYPE, PATHOGEN_TYPE, PEST, DISEASE)
}
