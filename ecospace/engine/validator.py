"""Invariant validator — declarative per-entity rules checked before persistence.

Invariants:
    - Pure: no I/O, never mutates the caller's payload
    - Aggregated: every violated field is reported, never fail-fast
    - Derived fields are computed here and never accepted from the payload
    - Uniqueness is NOT checked here (needs a store round-trip)

Normalization policy, applied uniformly:
    - categorical values: trimmed + lowercased, must be registry members
    - string lists: trimmed, blanks dropped, deduplicated case-insensitively
      keeping the first spelling; a supplied list may not end up empty
    - free text: left to the request schemas (trimmed, never lowercased)
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from ecospace.engine.registry import EnumRegistry
from ecospace.errors import FieldError, ValidationError


@dataclass(frozen=True, slots=True)
class RangeRule:
    """Ordering constraint between two optional numeric fields."""

    lower: str
    upper: str
    allow_equal: bool
    lower_message: str
    upper_message: str

    def violated(self, low: Any, high: Any) -> bool:
        if low is None or high is None:
            return False
        return low > high if self.allow_equal else low >= high


@dataclass(frozen=True, slots=True)
class DerivedField:
    """A field computed from ``sources`` over the merged (prior + payload) state."""

    name: str
    sources: tuple[str, ...]
    compute: Callable[[Mapping[str, Any]], Any]


@dataclass(frozen=True, slots=True)
class EntityRules:
    enum_fields: Mapping[str, str] = field(default_factory=dict)
    enum_list_fields: Mapping[str, str] = field(default_factory=dict)
    string_list_fields: tuple[str, ...] = ()
    ranges: tuple[RangeRule, ...] = ()
    derived: tuple[DerivedField, ...] = ()


def sanitize_string_list(values: list[str]) -> list[str]:
    """Trim, drop blanks, dedupe case-insensitively keeping the first spelling."""
    seen: set[str] = set()
    cleaned: list[str] = []
    for value in values:
        token = value.strip()
        if not token:
            continue
        key = token.casefold()
        if key in seen:
            continue
        seen.add(key)
        cleaned.append(token)
    return cleaned


class InvariantValidator:
    def __init__(self, registry: EnumRegistry):
        self.registry = registry

    def validate(
        self,
        rules: EntityRules,
        payload: Mapping[str, Any],
        prior: Mapping[str, Any] | None = None,
    ) -> list[FieldError]:
        _, errors = self._run(rules, payload, prior)
        return errors

    def clean(
        self,
        rules: EntityRules,
        payload: Mapping[str, Any],
        prior: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return the normalized payload with derived fields, or raise ValidationError."""
        cleaned, errors = self._run(rules, payload, prior)
        if errors:
            raise ValidationError(errors)
        return cleaned

    def _run(
        self,
        rules: EntityRules,
        payload: Mapping[str, Any],
        prior: Mapping[str, Any] | None,
    ) -> tuple[dict[str, Any], list[FieldError]]:
        derived_names = {item.name for item in rules.derived}
        cleaned = {key: value for key, value in payload.items() if key not in derived_names}
        errors: list[FieldError] = []

        for name, kind in rules.enum_fields.items():
            if name not in cleaned or cleaned[name] is None:
                continue
            value = cleaned[name]
            if not self.registry.is_member(kind, value):
                errors.append(
                    FieldError(name, f"{name} must be one of {self.registry.describe(kind)}")
                )
                continue
            cleaned[name] = self.registry.normalize(value)

        for name, kind in rules.enum_list_fields.items():
            if name not in cleaned or cleaned[name] is None:
                continue
            result = self._clean_enum_list(name, kind, cleaned[name])
            if isinstance(result, FieldError):
                errors.append(result)
            else:
                cleaned[name] = result

        for name in rules.string_list_fields:
            if name not in cleaned or cleaned[name] is None:
                continue
            result = self._clean_string_list(name, cleaned[name])
            if isinstance(result, FieldError):
                errors.append(result)
            else:
                cleaned[name] = result

        range_errors = self._check_ranges(rules.ranges, cleaned, prior or {})
        errors.extend(range_errors)

        if not errors:
            self._derive(rules.derived, cleaned, prior)
        return cleaned, errors

    def _clean_enum_list(self, name: str, kind: str, values: Any) -> list[str] | FieldError:
        if not isinstance(values, list) or not all(isinstance(value, str) for value in values):
            return FieldError(name, f"{name} must be a list of strings")

        invalid = [value for value in values if value.strip() and not self.registry.is_member(kind, value)]
        if invalid:
            return FieldError(
                name,
                f"{name} contains invalid value(s): {', '.join(invalid)}; "
                f"allowed: {self.registry.describe(kind)}",
            )

        cleaned: list[str] = []
        for value in values:
            token = self.registry.normalize(value)
            if token and token not in cleaned:
                cleaned.append(token)
        if not cleaned:
            return FieldError(name, f"{name} must contain at least one value")
        return cleaned

    @staticmethod
    def _clean_string_list(name: str, values: Any) -> list[str] | FieldError:
        if not isinstance(values, list) or not all(isinstance(value, str) for value in values):
            return FieldError(name, f"{name} must be a list of strings")
        cleaned = sanitize_string_list(values)
        if not cleaned:
            return FieldError(name, f"{name} must contain at least one non-empty value")
        return cleaned

    @staticmethod
    def _check_ranges(
        ranges: tuple[RangeRule, ...],
        payload: Mapping[str, Any],
        prior: Mapping[str, Any],
    ) -> list[FieldError]:
        errors: list[FieldError] = []
        for rule in ranges:
            low = payload.get(rule.lower)
            high = payload.get(rule.upper)
            has_low = low is not None
            has_high = high is not None

            if has_low and has_high:
                if rule.violated(low, high):
                    errors.append(FieldError(rule.lower, rule.lower_message))
            elif has_low:
                if rule.violated(low, prior.get(rule.upper)):
                    errors.append(FieldError(rule.lower, rule.lower_message))
            elif has_high:
                if rule.violated(prior.get(rule.lower), high):
                    errors.append(FieldError(rule.upper, rule.upper_message))
        return errors

    @staticmethod
    def _derive(
        derived: tuple[DerivedField, ...],
        cleaned: dict[str, Any],
        prior: Mapping[str, Any] | None,
    ) -> None:
        is_create = prior is None
        for item in derived:
            if not is_create and not any(source in cleaned for source in item.sources):
                continue
            merged = {**(prior or {}), **cleaned}
            cleaned[item.name] = item.compute(merged)
