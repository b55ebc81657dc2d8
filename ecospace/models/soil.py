"""Soil ORM model — hard-deleted reference data with a derived pH class."""

from __future__ import annotations

from sqlalchemy import CheckConstraint, Enum, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from ecospace.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin
from ecospace.models.enums import (
    SoilDrainageEnum,
    SoilLevelEnum,
    SoilPhTypeEnum,
    SoilTextureEnum,
    SoilTypeEnum,
)


def _level_enum(name: str) -> Enum:
    # nutrient / organic matter / water retention share one PG type
    return Enum(SoilLevelEnum, name=name, create_constraint=False, native_enum=True)


class Soil(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """A soil profile.

    ``ph_type`` is derived by the engine from ``ph_min``/``ph_max`` and is
    never written from client input.
    """

    __tablename__ = "soils"
    __table_args__ = (
        CheckConstraint("ph_min IS NULL OR (ph_min >= 0 AND ph_min <= 14)", name="ck_soils_ph_min"),
        CheckConstraint("ph_max IS NULL OR (ph_max >= 0 AND ph_max <= 14)", name="ck_soils_ph_max"),
        CheckConstraint(
            "ph_min IS NULL OR ph_max IS NULL OR ph_min <= ph_max",
            name="ck_soils_ph_range",
        ),
    )

    name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    color: Mapped[str | None] = mapped_column(String(20), nullable=True)
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)
    drainage: Mapped[SoilDrainageEnum] = mapped_column(
        Enum(
            SoilDrainageEnum,
            name="soil_drainage",
            create_constraint=False,
            native_enum=True,
        ),
        nullable=False,
    )
    nutrient_level: Mapped[SoilLevelEnum] = mapped_column(
        _level_enum("soil_level"), nullable=False
    )
    organic_matter_level: Mapped[SoilLevelEnum] = mapped_column(
        _level_enum("soil_level"), nullable=False
    )
    water_retention_level: Mapped[SoilLevelEnum] = mapped_column(
        _level_enum("soil_level"), nullable=False
    )
    texture: Mapped[SoilTextureEnum] = mapped_column(
        Enum(
            SoilTextureEnum,
            name="soil_texture",
            create_constraint=False,
            native_enum=True,
        ),
        nullable=False,
    )
    type: Mapped[SoilTypeEnum] = mapped_column(
        Enum(
            SoilTypeEnum,
            name="soil_type",
            create_constraint=False,
            native_enum=True,
        ),
        nullable=False,
    )
    ph_min: Mapped[float | None] = mapped_column(Float, nullable=True)
    ph_max: Mapped[float | None] = mapped_column(Float, nullable=True)
    ph_type: Mapped[SoilPhTypeEnum | None] = mapped_column(
        Enum(
            SoilPhTypeEnum,
            name="soil_ph_type",
            create_constraint=False,
            native_enum=True,
        ),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Soil id={self.id} name={self.name!r} ph_type={self.ph_type}>"
