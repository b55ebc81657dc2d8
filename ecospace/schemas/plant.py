"""Pydantic request/response schemas for plants and growth stages.

Categorical fields are plain strings here; closed-set membership and
normalization belong to the catalog engine so that every violation is
reported in one response.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

# list columns are ARRAY(VARCHAR(100))
StringList = list[Annotated[str, Field(max_length=100)]]


class PlantCreate(BaseModel):
	model_config = ConfigDict(str_strip_whitespace=True)

	name: str = Field(min_length=1, max_length=20)
	scientific_name: str | None = Field(default=None, min_length=1, max_length=50)
	category: str
	growth_cycle: str
	growth_habit: str
	ideal_season: str
	purpose: str
	common_names: StringList | None = None
	common_pests: StringList | None = None
	compatible_plants: StringList | None = None
	growth_stages: StringList | None = None
	recommended_fertilizers: StringList | None = None
	region_compatibility: StringList | None = None
	tags: StringList | None = None


class PlantUpdate(BaseModel):
	model_config = ConfigDict(str_strip_whitespace=True)

	name: str | None = Field(default=None, min_length=1, max_length=20)
	scientific_name: str | None = Field(default=None, min_length=1, max_length=50)
	category: str | None = None
	growth_cycle: str | None = None
	growth_habit: str | None = None
	ideal_season: str | None = None
	purpose: str | None = None
	common_names: StringList | None = None
	common_pests: StringList | None = None
	compatible_plants: StringList | None = None
	growth_stages: StringList | None = None
	recommended_fertilizers: StringList | None = None
	region_compatibility: StringList | None = None
	tags: StringList | None = None


class PlantRead(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: uuid.UUID
	name: str
	scientific_name: str | None = None
	category: str
	growth_cycle: str
	growth_habit: str
	ideal_season: str
	purpose: str
	common_names: list[str] = Field(default_factory=list)
	common_pests: list[str] = Field(default_factory=list)
	compatible_plants: list[str] = Field(default_factory=list)
	growth_stages: list[str] = Field(default_factory=list)
	recommended_fertilizers: list[str] = Field(default_factory=list)
	region_compatibility: list[str] = Field(default_factory=list)
	tags: list[str] = Field(default_factory=list)
	created_at: datetime
	updated_at: datetime


class GrowthStageCreate(BaseModel):
	model_config = ConfigDict(str_strip_whitespace=True)

	name: str
	order: int = Field(ge=1)
	min_days: int | None = Field(default=None, ge=0)
	max_days: int | None = Field(default=None, ge=1)
	description: str | None = None
	image_url: str | None = Field(default=None, max_length=2048)


class GrowthStageUpdate(BaseModel):
	model_config = ConfigDict(str_strip_whitespace=True)

	min_days: int | None = Field(default=None, ge=0)
	max_days: int | None = Field(default=None, ge=1)
	description: str | None = None
	image_url: str | None = Field(default=None, max_length=2048)


class GrowthStageRead(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: uuid.UUID
	name: str
	order: int
	min_days: int | None = None
	max_days: int | None = None
	description: str | None = None
	image_url: str | None = None
	created_at: datetime
	updated_at: datetime
