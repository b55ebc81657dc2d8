"""Soft-delete policy — visibility of logically deleted records.

An entity is soft-deletable through exactly one of:
    - a boolean flag column (``is_active``), cleared on delete
    - a nullable timestamp column (``deleted_at``), stamped on delete
Entities with neither are hard-deleted.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any


def _read(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


@dataclass(frozen=True, slots=True)
class SoftDeletePolicy:
    flag_field: str | None = None
    timestamp_field: str | None = None

    def __post_init__(self) -> None:
        if self.flag_field and self.timestamp_field:
            raise ValueError("a soft-delete policy uses either a flag or a timestamp, not both")

    @classmethod
    def hard(cls) -> SoftDeletePolicy:
        return cls()

    @classmethod
    def by_flag(cls, field_name: str = "is_active") -> SoftDeletePolicy:
        return cls(flag_field=field_name)

    @classmethod
    def by_timestamp(cls, field_name: str = "deleted_at") -> SoftDeletePolicy:
        return cls(timestamp_field=field_name)

    @property
    def is_soft(self) -> bool:
        return bool(self.flag_field or self.timestamp_field)

    def is_active(self, record: Any) -> bool:
        if self.flag_field:
            return bool(_read(record, self.flag_field))
        if self.timestamp_field:
            return _read(record, self.timestamp_field) is None
        return True

    def is_visible(self, record: Any, include_inactive: bool = False) -> bool:
        return include_inactive or self.is_active(record)

    def deactivation_values(self, now: datetime) -> dict[str, Any]:
        """Column values that move a record into the deleted state."""
        if self.flag_field:
            return {self.flag_field: False}
        if self.timestamp_field:
            return {self.timestamp_field: now}
        raise ValueError("hard-delete entities have no deactivation state")
