"""CatalogEngine — one facade over the engine components, configured per entity.

The engine is synchronous, stateless after construction and safe to share
between concurrent request handlers.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from ecospace.engine.assembler import assemble
from ecospace.engine.entities import DEFAULT_ENTITIES, EntitySpec
from ecospace.engine.pagination import PaginationMeta, calculate_pagination
from ecospace.engine.query import QueryDescriptor, normalize_query
from ecospace.engine.registry import EnumRegistry, default_registry
from ecospace.engine.validator import InvariantValidator
from ecospace.errors import FieldError, ValidationError


class CatalogEngine:
    def __init__(self, registry: EnumRegistry, entities: Mapping[str, EntitySpec]):
        self.registry = registry
        self.validator = InvariantValidator(registry)
        self._entities = dict(entities)
        self._check_vocabularies()

    def spec(self, kind: str) -> EntitySpec:
        try:
            return self._entities[kind]
        except KeyError:
            raise KeyError(f"unknown entity kind: {kind}") from None

    def kinds(self) -> tuple[str, ...]:
        return tuple(self._entities)

    # ── Read path ───────────────────────────────────────────────────────────

    def normalize_query(
        self,
        kind: str,
        *,
        page: Any = None,
        limit: Any = None,
        sort_by: Any = None,
        sort_order: Any = None,
        filters: Mapping[str, Any] | None = None,
    ) -> QueryDescriptor:
        return normalize_query(
            self.spec(kind).query,
            self.registry,
            page=page,
            limit=limit,
            sort_by=sort_by,
            sort_order=sort_order,
            filters=filters,
        )

    @staticmethod
    def paginate(total_items: int, descriptor: QueryDescriptor) -> PaginationMeta:
        return calculate_pagination(total_items, descriptor)

    @staticmethod
    def assemble(rows: Iterable[Any], pagination: PaginationMeta) -> dict[str, Any]:
        return assemble(rows, pagination)

    def is_visible(self, kind: str, record: Any, include_inactive: bool = False) -> bool:
        return self.spec(kind).soft_delete.is_visible(record, include_inactive)

    # ── Write path ──────────────────────────────────────────────────────────

    def validate(
        self,
        kind: str,
        payload: Mapping[str, Any],
        prior: Mapping[str, Any] | None = None,
    ) -> list[FieldError]:
        return self.validator.validate(self.spec(kind).rules, payload, prior)

    def prepare_create(self, kind: str, payload: Mapping[str, Any]) -> dict[str, Any]:
        return self.validator.clean(self.spec(kind).rules, payload)

    def prepare_update(
        self,
        kind: str,
        payload: Mapping[str, Any],
        prior: Mapping[str, Any],
    ) -> dict[str, Any]:
        """Restrict to patchable fields, then validate against the prior state."""
        spec = self.spec(kind)
        patch = {key: value for key, value in payload.items() if key in spec.patchable_fields}
        if not patch:
            raise ValidationError(
                [FieldError("body", f"expected at least one of {', '.join(sorted(spec.patchable_fields))}")],
                message="No details to update",
            )
        return self.validator.clean(spec.rules, patch, prior)

    def _check_vocabularies(self) -> None:
        for spec in self._entities.values():
            kinds = [
                *spec.rules.enum_fields.values(),
                *spec.rules.enum_list_fields.values(),
                *(item.kind for item in spec.query.filterable_fields.values() if item.kind),
            ]
            missing = [kind for kind in kinds if kind not in self.registry]
            if missing:
                raise ValueError(f"{spec.kind}: unregistered vocabularies {sorted(set(missing))}")
            for target in spec.references.values():
                if target not in self._entities:
                    raise ValueError(f"{spec.kind}: reference to unknown entity {target}")


def build_default_engine() -> CatalogEngine:
    return CatalogEngine(default_registry(), DEFAULT_ENTITIES)
