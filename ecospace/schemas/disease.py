"""Pydantic request/response schemas for pathogen types and diseases."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PathogenTypeCreate(BaseModel):
	model_config = ConfigDict(str_strip_whitespace=True)

	name: str
	description: str | None = None


class PathogenTypeUpdate(BaseModel):
	model_config = ConfigDict(str_strip_whitespace=True)

	name: str | None = None
	description: str | None = None


class PathogenTypeRead(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: uuid.UUID
	name: str
	description: str | None = None
	deleted_at: datetime | None = None
	created_at: datetime
	updated_at: datetime


class DiseaseCreate(BaseModel):
	model_config = ConfigDict(str_strip_whitespace=True)

	name: str = Field(min_length=1, max_length=30)
	control_methods: str = Field(min_length=1, max_length=500)
	damage_symptoms: str = Field(min_length=1, max_length=500)
	seasonality: str = Field(min_length=1, max_length=100)
	description: str | None = None
	life_cycle: str | None = Field(default=None, max_length=500)
	spread_method: str | None = Field(default=None, max_length=500)
	pathogen_type_id: uuid.UUID


class DiseaseUpdate(BaseModel):
	model_config = ConfigDict(str_strip_whitespace=True)

	name: str | None = Field(default=None, min_length=1, max_length=30)
	control_methods: str | None = Field(default=None, min_length=1, max_length=500)
	damage_symptoms: str | None = Field(default=None, min_length=1, max_length=500)
	seasonality: str | None = Field(default=None, min_length=1, max_length=100)
	description: str | None = None
	life_cycle: str | None = Field(default=None, max_length=500)
	spread_method: str | None = Field(default=None, max_length=500)
	pathogen_type_id: uuid.UUID | None = None


class DiseaseRead(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: uuid.UUID
	name: str
	control_methods: str
	damage_symptoms: str
	seasonality: str
	description: str | None = None
	life_cycle: str | None = None
	spread_method: str | None = None
	pathogen_type_id: uuid.UUID
	deleted_at: datetime | None = None
	created_at: datetime
	updated_at: datetime
