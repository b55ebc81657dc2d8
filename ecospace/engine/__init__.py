"""Catalog query & invariant engine.

    from ecospace.engine import build_default_engine

    engine = build_default_engine()
    descriptor = engine.normalize_query("plant", page="2", limit="500")
"""

from ecospace.engine.assembler import assemble
from ecospace.engine.catalog import CatalogEngine, build_default_engine
from ecospace.engine.entities import DEFAULT_ENTITIES, EntitySpec, derive_ph_type
from ecospace.engine.pagination import PaginationMeta, calculate_pagination
from ecospace.engine.query import (
    EntityQueryConfig,
    FilterField,
    QueryDescriptor,
    normalize_query,
)
from ecospace.engine.registry import EnumRegistry, default_registry
from ecospace.engine.soft_delete import SoftDeletePolicy
from ecospace.engine.validator import (
    DerivedField,
    EntityRules,
    InvariantValidator,
    RangeRule,
    sanitize_string_list,
)

__all__ = [
    "DEFAULT_ENTITIES",
    "CatalogEngine",
    "DerivedField",
    "EntityQueryConfig",
    "EntityRules",
    "EntitySpec",
    "EnumRegistry",
    "FilterField",
    "InvariantValidator",
    "PaginationMeta",
    "QueryDescriptor",
    "RangeRule",
    "SoftDeletePolicy",
    "assemble",
    "build_default_engine",
    "calculate_pagination",
    "default_registry",
    "derive_ph_type",
    "normalize_query",
    "sanitize_string_list",
]
