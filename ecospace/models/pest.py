"""PestType and Pest ORM models.

PestType is soft-deleted through ``is_active``; Pest through ``deleted_at``.
Pests keep referencing a deactivated PestType — the row is never removed.
"""

from __future__ import annotations

import uuid

from sqlalchemy import Enum, ForeignKey, Index, String, Text, text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from ecospace.models.base import Base, SoftDeleteMixin, TimestampMixin, UUIDPrimaryKeyMixin
from ecospace.models.enums import PestTypeEnum


class PestType(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """Pest taxonomy entry (bird, insect, mite, …)."""

    __tablename__ = "pest_types"

    name: Mapped[PestTypeEnum] = mapped_column(
        Enum(
            PestTypeEnum,
            name="pest_type",
            create_constraint=False,
            native_enum=True,
        ),
        unique=True,
        nullable=False,
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(
        default=True,
        server_default=text("true"),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<PestType id={self.id} name={self.name} active={self.is_active}>"


class Pest(Base, UUIDPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin):
    """A pest species with its damage profile and control methods."""

    __tablename__ = "pests"
    __table_args__ = (Index("ix_pests_pest_type_id", "pest_type_id"),)

    name: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    scientific_name: Mapped[str | None] = mapped_column(
        String(50), unique=True, nullable=True
    )
    control_methods: Mapped[str] = mapped_column(String(500), nullable=False)
    damage_symptoms: Mapped[str] = mapped_column(String(500), nullable=False)
    seasonality: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    life_cycle: Mapped[str | None] = mapped_column(String(500), nullable=True)
    pest_type_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("pest_types.id", ondelete="RESTRICT"),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Pest id={self.id} name={self.name!r} type={self.pest_type_id}>"
