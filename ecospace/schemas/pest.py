"""Pydantic request/response schemas for pest types and pests."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PestTypeCreate(BaseModel):
	model_config = ConfigDict(str_strip_whitespace=True)

	name: str
	description: str | None = None


class PestTypeUpdate(BaseModel):
	model_config = ConfigDict(str_strip_whitespace=True)

	name: str | None = None
	description: str | None = None


class PestTypeRead(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: uuid.UUID
	name: str
	description: str | None = None
	is_active: bool
	created_at: datetime
	updated_at: datetime


class PestCreate(BaseModel):
	model_config = ConfigDict(str_strip_whitespace=True)

	name: str = Field(min_length=1, max_length=20)
	scientific_name: str | None = Field(default=None, min_length=1, max_length=50)
	control_methods: str = Field(min_length=1, max_length=500)
	damage_symptoms: str = Field(min_length=1, max_length=500)
	seasonality: str = Field(min_length=1, max_length=100)
	description: str | None = None
	life_cycle: str | None = Field(default=None, max_length=500)
	pest_type_id: uuid.UUID


class PestUpdate(BaseModel):
	model_config = ConfigDict(str_strip_whitespace=True)

	name: str | None = Field(default=None, min_length=1, max_length=20)
	scientific_name: str | None = Field(default=None, min_length=1, max_length=50)
	control_methods: str | None = Field(default=None, min_length=1, max_length=500)
	damage_symptoms: str | None = Field(default=None, min_length=1, max_length=500)
	seasonality: str | None = Field(default=None, min_length=1, max_length=100)
	description: str | None = None
	life_cycle: str | None = Field(default=None, max_length=500)
	pest_type_id: uuid.UUID | None = None


class PestRead(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: uuid.UUID
	name: str
	scientific_name: str | None = None
	control_methods: str
	damage_symptoms: str
	seasonality: str
	description: str | None = None
	life_cycle: str | None = None
	pest_type_id: uuid.UUID
	deleted_at: datetime | None = None
	created_at: datetime
	updated_at: datetime
