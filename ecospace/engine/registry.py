"""Enum registry — closed sets of allowed tokens per categorical field kind."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import StrEnum
from typing import Any

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

_DEFAULT_VOCABULARIES: dict[str, type[StrEnum]] = {
    "plant_category": PlantCategoryEnum,
    "plant_growth_cycle": PlantGrowthCycleEnum,
    "plant_growth_habit": PlantGrowthHabitEnum,
    "plant_purpose": PlantPurposeEnum,
    "season": SeasonEnum,
    "growth_stage": GrowthStageEnum,
    "soil_drainage": SoilDrainageEnum,
    "soil_level": SoilLevelEnum,
    "soil_texture": SoilTextureEnum,
    "soil_type": SoilTypeEnum,
    "soil_ph_type": SoilPhTypeEnum,
    "pest_type": PestTypeEnum,
    "pathogen_type": PathogenTypeEnum,
}


class EnumRegistry:
    """Immutable lookup of field kind -> ordered allowed tokens.

    Membership is case-insensitive after trimming; stored tokens are
    normalized to lowercase on registration.
    """

    def __init__(self, vocabularies: Mapping[str, Iterable[str]]):
        self._values: dict[str, tuple[str, ...]] = {}
        self._members: dict[str, frozenset[str]] = {}
        for kind, values in vocabularies.items():
            ordered: list[str] = []
            for value in values:
                token = self.normalize(str(value))
                if token and token not in ordered:
                    ordered.append(token)
            self._values[kind] = tuple(ordered)
            self._members[kind] = frozenset(ordered)

    @staticmethod
    def normalize(value: str) -> str:
        return value.strip().lower()

    def kinds(self) -> tuple[str, ...]:
        return tuple(self._values)

    def values_of(self, kind: str) -> tuple[str, ...]:
        try:
            return self._values[kind]
        except KeyError:
            raise KeyError(f"unknown enum kind: {kind}") from None

    def is_member(self, kind: str, candidate: Any) -> bool:
        members = self._members.get(kind)
        if members is None:
            raise KeyError(f"unknown enum kind: {kind}")
        if not isinstance(candidate, str):
            return False
        return self.normalize(candidate) in members

    def describe(self, kind: str) -> str:
        return ", ".join(self.values_of(kind))

    def __contains__(self, kind: object) -> bool:
        return kind in self._values


def default_registry() -> EnumRegistry:
    """Registry built from the StrEnum vocabularies in ``ecospace.models.enums``."""
    return EnumRegistry(
        {kind: [member.value for member in enum_cls] for kind, enum_cls in _DEFAULT_VOCABULARIES.items()}
    )
