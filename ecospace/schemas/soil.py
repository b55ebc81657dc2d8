"""Pydantic request/response schemas for soils.

``ph_type`` is read-only: it is not declared on the write schemas, so a
client-supplied value is dropped during parsing and recomputed by the engine.
"""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SoilCreate(BaseModel):
	model_config = ConfigDict(str_strip_whitespace=True)

	name: str = Field(min_length=1, max_length=50)
	color: str | None = Field(default=None, max_length=20)
	description: str | None = Field(default=None, max_length=255)
	drainage: str
	nutrient_level: str
	organic_matter_level: str
	water_retention_level: str
	texture: str
	type: str
	ph_min: float | None = Field(default=None, ge=0, le=14)
	ph_max: float | None = Field(default=None, ge=0, le=14)


class SoilUpdate(BaseModel):
	model_config = ConfigDict(str_strip_whitespace=True)

	name: str | None = Field(default=None, min_length=1, max_length=50)
	color: str | None = Field(default=None, max_length=20)
	description: str | None = Field(default=None, max_length=255)
	drainage: str | None = None
	nutrient_level: str | None = None
	organic_matter_level: str | None = None
	water_retention_level: str | None = None
	texture: str | None = None
	type: str | None = None
	ph_min: float | None = Field(default=None, ge=0, le=14)
	ph_max: float | None = Field(default=None, ge=0, le=14)


class SoilRead(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: uuid.UUID
	name: str
	color: str | None = None
	description: str | None = None
	drainage: str
	nutrient_level: str
	organic_matter_level: str
	water_retention_level: str
	texture: str
	type: str
	ph_min: float | None = None
	ph_max: float | None = None
	ph_type: str | None = None
	created_at: datetime
	updated_at: datetime
