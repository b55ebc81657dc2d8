"""initial_catalog_schema

Revision ID: 3c1e9a7b5d20
Revises:
Create Date: 2026-10-19 00:00:00.000000

Creates the seven catalog tables and their PostgreSQL enum types.  Enables
the uuid-ossp extension used by the ``uuid_generate_v4()`` server defaults.
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "3c1e9a7b5d20"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

# ── Enum type names (PostgreSQL CREATE TYPE) ────────────────────────────────
ENUM_PLANT_CATEGORY = postgresql.ENUM(
    "crop", "plant", name="plant_category", create_type=False
)
ENUM_PLANT_GROWTH_CYCLE = postgresql.ENUM(
    "annual", "biennial", "perennial", name="plant_growth_cycle", create_type=False
)
ENUM_PLANT_GROWTH_HABIT = postgresql.ENUM(
    "climber",
    "creeper",
    "herb",
    "herbaceous",
    "grass",
    "shrub",
    "tree",
    name="plant_growth_habit",
    create_type=False,
)
ENUM_PLANT_PURPOSE = postgresql.ENUM(
    "flower",
    "fodder",
    "fruit",
    "herb",
    "medicine",
    "spice",
    "vegetable",
    name="plant_purpose",
    create_type=False,
)
ENUM_SEASON = postgresql.ENUM(
    "autumn", "monsoon", "spring", "summer", "winter", name="season", create_type=False
)
ENUM_GROWTH_STAGE_NAME = postgresql.ENUM(
    "budding",
    "flowering",
    "fruiting",
    "germination",
    "harvesting",
    "seedling",
    "vegetative",
    name="growth_stage_name",
    create_type=False,
)
ENUM_SOIL_DRAINAGE = postgresql.ENUM(
    "excessive", "good", "moderate", "poor", name="soil_drainage", create_type=False
)
ENUM_SOIL_LEVEL = postgresql.ENUM(
    "high", "medium", "low", name="soil_level", create_type=False
)
ENUM_SOIL_TEXTURE = postgresql.ENUM(
    "chalky",
    "clayey",
    "loamy",
    "peaty",
    "sandy",
    "silty",
    name="soil_texture",
    create_type=False,
)
ENUM_SOIL_TYPE = postgresql.ENUM(
    "alluvial",
    "black",
    "desert",
    "forest",
    "laterite",
    "mountain",
    "red",
    name="soil_type",
    create_type=False,
)
ENUM_SOIL_PH_TYPE = postgresql.ENUM(
    "acidic", "neutral", "alkaline", name="soil_ph_type", create_type=False
)
ENUM_PEST_TYPE = postgresql.ENUM(
    "bird",
    "insect",
    "mite",
    "nematode",
    "rodent",
    "slug",
    "snail",
    name="pest_type",
    create_type=False,
)
ENUM_PATHOGEN_TYPE = postgresql.ENUM(
    "bacteria",
    "fungi",
    "insect",
    "nematode",
    "oomycete",
    "phytoplasma",
    "protozoa",
    "virus",
    name="pathogen_type",
    create_type=False,
)

_ALL_ENUMS = (
    ENUM_PLANT_CATEGORY,
    ENUM_PLANT_GROWTH_CYCLE,
    ENUM_PLANT_GROWTH_HABIT,
    ENUM_PLANT_PURPOSE,
    ENUM_SEASON,
    ENUM_GROWTH_STAGE_NAME,
    ENUM_SOIL_DRAINAGE,
    ENUM_SOIL_LEVEL,
    ENUM_SOIL_TEXTURE,
    ENUM_SOIL_TYPE,
    ENUM_SOIL_PH_TYPE,
    ENUM_PEST_TYPE,
    ENUM_PATHOGEN_TYPE,
)


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        postgresql.UUID(as_uuid=True),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _timestamp_columns() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def _string_array_column(name: str, length: int = 100) -> sa.Column:
    return sa.Column(
        name,
        postgresql.ARRAY(sa.String(length)),
        server_default=sa.text("'{}'"),
        nullable=False,
    )


def upgrade() -> None:
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ── 1. Create enum types ────────────────────────────────────────────
    for enum_type in _ALL_ENUMS:
        enum_type.create(op.get_bind(), checkfirst=True)

    # ── 2. Plants & growth stages ───────────────────────────────────────
    op.create_table(
        "plants",
        _id_column(),
        sa.Column("name", sa.String(20), nullable=False),
        sa.Column("scientific_name", sa.String(50), nullable=True),
        sa.Column("category", ENUM_PLANT_CATEGORY, nullable=False),
        sa.Column("growth_cycle", ENUM_PLANT_GROWTH_CYCLE, nullable=False),
        sa.Column("growth_habit", ENUM_PLANT_GROWTH_HABIT, nullable=False),
        sa.Column("ideal_season", ENUM_SEASON, nullable=False),
        sa.Column("purpose", ENUM_PLANT_PURPOSE, nullable=False),
        _string_array_column("common_names"),
        _string_array_column("common_pests"),
        _string_array_column("compatible_plants"),
        _string_array_column("growth_stages", 20),
        _string_array_column("recommended_fertilizers"),
        _string_array_column("region_compatibility"),
        _string_array_column("tags"),
        *_timestamp_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
        sa.UniqueConstraint("scientific_name"),
    )

    op.create_table(
        "growth_stages",
        _id_column(),
        sa.Column("name", ENUM_GROWTH_STAGE_NAME, nullable=False),
        sa.Column("order", sa.Integer(), nullable=False),
        sa.Column("min_days", sa.Integer(), nullable=True),
        sa.Column("max_days", sa.Integer(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("image_url", sa.String(2048), nullable=True),
        *_timestamp_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("order"),
        sa.CheckConstraint('"order" >= 1', name="ck_growth_stages_order_positive"),
        sa.CheckConstraint("min_days >= 0", name="ck_growth_stages_min_days"),
        sa.CheckConstraint("max_days >= 1", name="ck_growth_stages_max_days"),
        sa.CheckConstraint(
            "min_days IS NULL OR max_days IS NULL OR min_days < max_days",
            name="ck_growth_stages_day_range",
        ),
    )

    # ── 3. Soils ────────────────────────────────────────────────────────
    op.create_table(
        "soils",
        _id_column(),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("color", sa.String(20), nullable=True),
        sa.Column("description", sa.String(255), nullable=True),
        sa.Column("drainage", ENUM_SOIL_DRAINAGE, nullable=False),
        sa.Column("nutrient_level", ENUM_SOIL_LEVEL, nullable=False),
        sa.Column("organic_matter_level", ENUM_SOIL_LEVEL, nullable=False),
        sa.Column("water_retention_level", ENUM_SOIL_LEVEL, nullable=False),
        sa.Column("texture", ENUM_SOIL_TEXTURE, nullable=False),
        sa.Column("type", ENUM_SOIL_TYPE, nullable=False),
        sa.Column("ph_min", sa.Float(), nullable=True),
        sa.Column("ph_max", sa.Float(), nullable=True),
        sa.Column("ph_type", ENUM_SOIL_PH_TYPE, nullable=True),
        *_timestamp_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
        sa.CheckConstraint(
            "ph_min IS NULL OR (ph_min >= 0 AND ph_min <= 14)", name="ck_soils_ph_min"
        ),
        sa.CheckConstraint(
            "ph_max IS NULL OR (ph_max >= 0 AND ph_max <= 14)", name="ck_soils_ph_max"
        ),
        sa.CheckConstraint(
            "ph_min IS NULL OR ph_max IS NULL OR ph_min <= ph_max",
            name="ck_soils_ph_range",
        ),
    )

    # ── 4. Pest & pathogen taxonomies ───────────────────────────────────
    op.create_table(
        "pest_types",
        _id_column(),
        sa.Column("name", ENUM_PEST_TYPE, nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "is_active",
            sa.Boolean(),
            server_default=sa.text("true"),
            nullable=False,
        ),
        *_timestamp_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    op.create_table(
        "pathogen_types",
        _id_column(),
        sa.Column("name", ENUM_PATHOGEN_TYPE, nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamp_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_index("ix_pathogen_types_deleted_at", "pathogen_types", ["deleted_at"])

    # ── 5. Pests & diseases ─────────────────────────────────────────────
    op.create_table(
        "pests",
        _id_column(),
        sa.Column("name", sa.String(20), nullable=False),
        sa.Column("scientific_name", sa.String(50), nullable=True),
        sa.Column("control_methods", sa.String(500), nullable=False),
        sa.Column("damage_symptoms", sa.String(500), nullable=False),
        sa.Column("seasonality", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("life_cycle", sa.String(500), nullable=True),
        sa.Column("pest_type_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamp_columns(),
        sa.ForeignKeyConstraint(["pest_type_id"], ["pest_types.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
        sa.UniqueConstraint("scientific_name"),
    )
    op.create_index("ix_pests_pest_type_id", "pests", ["pest_type_id"])
    op.create_index("ix_pests_deleted_at", "pests", ["deleted_at"])

    op.create_table(
        "diseases",
        _id_column(),
        sa.Column("name", sa.String(30), nullable=False),
        sa.Column("control_methods", sa.String(500), nullable=False),
        sa.Column("damage_symptoms", sa.String(500), nullable=False),
        sa.Column("seasonality", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("life_cycle", sa.String(500), nullable=True),
        sa.Column("spread_method", sa.String(500), nullable=True),
        sa.Column("pathogen_type_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamp_columns(),
        sa.ForeignKeyConstraint(
            ["pathogen_type_id"], ["pathogen_types.id"], ondelete="RESTRICT"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_index("ix_diseases_pathogen_type_id", "diseases", ["pathogen_type_id"])
    op.create_index("ix_diseases_deleted_at", "diseases", ["deleted_at"])


def downgrade() -> None:
    # ── Drop tables in reverse dependency order ─────────────────────────
    op.drop_table("diseases")
    op.drop_table("pests")
    op.drop_table("pathogen_types")
    op.drop_table("pest_types")
    op.drop_table("soils")
    op.drop_table("growth_stages")
    op.drop_table("plants")

    # ── Drop enum types ─────────────────────────────────────────────────
    for enum_type in reversed(_ALL_ENUMS):
        enum_type.drop(op.get_bind(), checkfirst=True)
