"""Plant and GrowthStage ORM models.

Both are hard-deleted.  ``Plant.growth_stages`` stores growth-stage names
(not foreign keys) as a PostgreSQL VARCHAR[]; membership in the growth-stage
vocabulary is enforced by the engine before persistence.
"""

from __future__ import annotations

from sqlalchemy import CheckConstraint, Enum, Integer, String, Text, text
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from ecospace.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin
from ecospace.models.enums import (
    GrowthStageEnum,
    PlantCategoryEnum,
    PlantGrowthCycleEnum,
    PlantGrowthHabitEnum,
    PlantPurposeEnum,
    SeasonEnum,
)


def _string_array() -> ARRAY:
    return ARRAY(String(100))


# ═══════════════════════════════════════════════════════════════════════════
# Plant
# ═══════════════════════════════════════════════════════════════════════════


class Plant(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """A cultivated plant or crop — root entity of the horticulture catalog."""

    __tablename__ = "plants"

    name: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    scientific_name: Mapped[str | None] = mapped_column(
        String(50), unique=True, nullable=True
    )
    category: Mapped[PlantCategoryEnum] = mapped_column(
        Enum(
            PlantCategoryEnum,
            name="plant_category",
            create_constraint=False,
            native_enum=True,
        ),
        nullable=False,
    )
    growth_cycle: Mapped[PlantGrowthCycleEnum] = mapped_column(
        Enum(
            PlantGrowthCycleEnum,
            name="plant_growth_cycle",
            create_constraint=False,
            native_enum=True,
        ),
        nullable=False,
    )
    growth_habit: Mapped[PlantGrowthHabitEnum] = mapped_column(
        Enum(
            PlantGrowthHabitEnum,
            name="plant_growth_habit",
            create_constraint=False,
            native_enum=True,
        ),
        nullable=False,
    )
    ideal_season: Mapped[SeasonEnum] = mapped_column(
        Enum(
            SeasonEnum,
            name="season",
            create_constraint=False,
            native_enum=True,
        ),
        nullable=False,
    )
    purpose: Mapped[PlantPurposeEnum] = mapped_column(
        Enum(
            PlantPurposeEnum,
            name="plant_purpose",
            create_constraint=False,
            native_enum=True,
        ),
        nullable=False,
    )

    # ── String-set attributes ────────────────────────────────────────────
    common_names: Mapped[list[str]] = mapped_column(
        _string_array(), nullable=False, default=list, server_default=text("'{}'")
    )
    common_pests: Mapped[list[str]] = mapped_column(
        _string_array(), nullable=False, default=list, server_default=text("'{}'")
    )
    compatible_plants: Mapped[list[str]] = mapped_column(
        _string_array(), nullable=False, default=list, server_default=text("'{}'")
    )
    growth_stages: Mapped[list[str]] = mapped_column(
        ARRAY(String(20)), nullable=False, default=list, server_default=text("'{}'")
    )
    recommended_fertilizers: Mapped[list[str]] = mapped_column(
        _string_array(), nullable=False, default=list, server_default=text("'{}'")
    )
    region_compatibility: Mapped[list[str]] = mapped_column(
        _string_array(), nullable=False, default=list, server_default=text("'{}'")
    )
    tags: Mapped[list[str]] = mapped_column(
        _string_array(), nullable=False, default=list, server_default=text("'{}'")
    )

    def __repr__(self) -> str:
        return f"<Plant id={self.id} name={self.name!r} category={self.category}>"


# ═══════════════════════════════════════════════════════════════════════════
# GrowthStage
# ═══════════════════════════════════════════════════════════════════════════


class GrowthStage(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """A ranked stage of plant development with an optional duration window.

    ``order`` is the unique rank (1 = first stage).  ``min_days < max_days``
    is enforced by the engine and backed by a CHECK constraint.
    """

    __tablename__ = "growth_stages"
    __table_args__ = (
        CheckConstraint('"order" >= 1', name="ck_growth_stages_order_positive"),
        CheckConstraint("min_days >= 0", name="ck_growth_stages_min_days"),
        CheckConstraint("max_days >= 1", name="ck_growth_stages_max_days"),
        CheckConstraint(
            "min_days IS NULL OR max_days IS NULL OR min_days < max_days",
            name="ck_growth_stages_day_range",
        ),
    )

    name: Mapped[GrowthStageEnum] = mapped_column(
        Enum(
            GrowthStageEnum,
            name="growth_stage_name",
            create_constraint=False,
            native_enum=True,
        ),
        nullable=False,
    )
    order: Mapped[int] = mapped_column(Integer, unique=True, nullable=False)
    min_days: Mapped[int | None] = mapped_column(Integer, nullable=True)
    max_days: Mapped[int | None] = mapped_column(Integer, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)

    def __repr__(self) -> str:
        return f"<GrowthStage id={self.id} name={self.name} order={self.order}>"
