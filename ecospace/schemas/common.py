"""Shared response schemas: the list envelope and its pagination block."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

RecordT = TypeVar("RecordT")


class PaginationRead(BaseModel):
	current_page: int
	page_size: int
	total_items: int
	total_pages: int
	has_previous_page: bool
	has_next_page: bool
	# only present when meaningful; list routes serialize with exclude_unset
	has_exceeded_page: bool | None = None
	max_limit_applied: bool | None = None


class PageRead(BaseModel, Generic[RecordT]):
	data: list[RecordT] = Field(default_factory=list)
	pagination: PaginationRead


class ErrorDetail(BaseModel):
	field: str
	message: str


class ErrorRead(BaseModel):
	message: str
	errors: list[ErrorDetail] | None = None
