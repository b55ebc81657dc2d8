"""PathogenType and Disease ORM models — both soft-deleted via ``deleted_at``."""

from __future__ import annotations

import uuid

from sqlalchemy import Enum, ForeignKey, Index, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from ecospace.models.base import Base, SoftDeleteMixin, TimestampMixin, UUIDPrimaryKeyMixin
from ecospace.models.enums import PathogenTypeEnum


class PathogenType(Base, UUIDPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin):
    """Pathogen taxonomy entry (bacteria, fungi, virus, …)."""

    __tablename__ = "pathogen_types"

    name: Mapped[PathogenTypeEnum] = mapped_column(
        Enum(
            PathogenTypeEnum,
            name="pathogen_type",
            create_constraint=False,
            native_enum=True,
        ),
        unique=True,
        nullable=False,
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<PathogenType id={self.id} name={self.name}>"


class Disease(Base, UUIDPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin):
    """A plant disease caused by a pathogen type."""

    __tablename__ = "diseases"
    __table_args__ = (Index("ix_diseases_pathogen_type_id", "pathogen_type_id"),)

    name: Mapped[str] = mapped_column(String(30), unique=True, nullable=False)
    control_methods: Mapped[str] = mapped_column(String(500), nullable=False)
    damage_symptoms: Mapped[str] = mapped_column(String(500), nullable=False)
    seasonality: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    life_cycle: Mapped[str | None] = mapped_column(String(500), nullable=True)
    spread_method: Mapped[str | None] = mapped_column(String(500), nullable=True)
    pathogen_type_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("pathogen_types.id", ondelete="RESTRICT"),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Disease id={self.id} name={self.name!r} pathogen={self.pathogen_type_id}>"
