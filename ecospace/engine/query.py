"""Query normalizer — raw page/limit/sort/filter inputs to a bounded descriptor.

Pagination and sorting degrade gracefully (bad values fall back to
defaults); filters do not (every invalid filter is reported at once).
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Literal

from ecospace.engine.registry import EnumRegistry
from ecospace.errors import FieldError, ValidationError

SortOrder = Literal["asc", "desc"]

DEFAULT_PAGE = 1
DEFAULT_SORT_ORDER: SortOrder = "asc"


@dataclass(frozen=True, slots=True)
class FilterField:
    """A filterable column: ``kind`` names a registry vocabulary, None means free."""

    kind: str | None = None
    coerce: Callable[[str], Any] | None = None
    description: str = "a valid value"


@dataclass(frozen=True, slots=True)
class EntityQueryConfig:
    allowed_sort_fields: tuple[str, ...]
    default_sort_field: str
    default_limit: int = 10
    max_limit: int = 50
    filterable_fields: Mapping[str, FilterField] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.default_sort_field not in self.allowed_sort_fields:
            raise ValueError("default_sort_field must be one of allowed_sort_fields")
        if not 1 <= self.default_limit <= self.max_limit:
            raise ValueError("default_limit must lie within [1, max_limit]")


@dataclass(frozen=True, slots=True)
class QueryDescriptor:
    page: int
    limit: int
    offset: int
    sort_field: str
    sort_order: SortOrder
    filters: Mapping[str, Any]
    max_limit: int


def _parse_int(raw: Any) -> int | None:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except ValueError:
        return None


def normalize_page(raw: Any) -> int:
    page = _parse_int(raw)
    if page is None or page < 1:
        return DEFAULT_PAGE
    return page


def normalize_limit(raw: Any, default_limit: int, max_limit: int) -> int:
    limit = _parse_int(raw)
    if limit is None:
        return default_limit
    return max(1, min(limit, max_limit))


def normalize_sort(
    sort_by: Any,
    sort_order: Any,
    allowed_sort_fields: tuple[str, ...],
    default_sort_field: str,
) -> tuple[str, SortOrder]:
    field_name = sort_by.strip() if isinstance(sort_by, str) else None
    if field_name not in allowed_sort_fields:
        field_name = default_sort_field

    order = sort_order.strip().lower() if isinstance(sort_order, str) else None
    if order not in ("asc", "desc"):
        order = DEFAULT_SORT_ORDER
    return field_name, order  # type: ignore[return-value]


def normalize_filters(
    raw_filters: Mapping[str, Any],
    filterable_fields: Mapping[str, FilterField],
    registry: EnumRegistry,
) -> dict[str, Any]:
    filters: dict[str, Any] = {}
    errors: list[FieldError] = []

    # Keys that are not declared filterable are ignored, not rejected.
    for name, spec in filterable_fields.items():
        if name not in raw_filters:
            continue
        raw = raw_filters[name]

        if spec.kind is not None:
            if not registry.is_member(spec.kind, raw):
                errors.append(
                    FieldError(name, f"{name} must be one of {registry.describe(spec.kind)}")
                )
                continue
            filters[name] = registry.normalize(raw)
            continue

        value = raw.strip() if isinstance(raw, str) else raw
        if spec.coerce is not None:
            try:
                value = spec.coerce(value)
            except (TypeError, ValueError):
                errors.append(FieldError(name, f"{name} must be {spec.description}"))
                continue
        filters[name] = value

    if errors:
        raise ValidationError(errors, message="Invalid query parameters")
    return filters


def normalize_query(
    config: EntityQueryConfig,
    registry: EnumRegistry,
    *,
    page: Any = None,
    limit: Any = None,
    sort_by: Any = None,
    sort_order: Any = None,
    filters: Mapping[str, Any] | None = None,
) -> QueryDescriptor:
    """Build a QueryDescriptor; raises ValidationError only for invalid filters."""
    normalized_filters = normalize_filters(filters or {}, config.filterable_fields, registry)
    current_page = normalize_page(page)
    page_size = normalize_limit(limit, config.default_limit, config.max_limit)
    sort_field, order = normalize_sort(
        sort_by,
        sort_order,
        config.allowed_sort_fields,
        config.default_sort_field,
    )
    return QueryDescriptor(
        page=current_page,
        limit=page_size,
        offset=(current_page - 1) * page_size,
        sort_field=sort_field,
        sort_order=order,
        filters=MappingProxyType(normalized_filters),
        max_limit=config.max_limit,
    )
