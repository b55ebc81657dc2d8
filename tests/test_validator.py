from __future__ import annotations

import pytest

from ecospace.engine import InvariantValidator, default_registry, derive_ph_type, sanitize_string_list
from ecospace.engine.entities import GROWTH_STAGE, PLANT, SOIL
from ecospace.errors import FieldError, ValidationError


@pytest.fixture
def validator() -> InvariantValidator:
    return InvariantValidator(default_registry())


def _soil(**overrides):
    payload = {
        "name": "Red loam",
        "drainage": "good",
        "nutrient_level": "medium",
        "organic_matter_level": "low",
        "water_retention_level": "medium",
        "texture": "loamy",
        "type": "red",
    }
    payload.update(overrides)
    return payload


# ── Derived pH type ─────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    ("ph_min", "ph_max", "expected"),
    [
        (5.5, 6.5, "acidic"),
        (6.0, 8.0, "alkaline"),
        (7.0, 7.0, "neutral"),
        (7.0, 7.5, "alkaline"),
        (6.5, 7.0, "acidic"),
    ],
)
def test_ph_type_is_derived_on_create(validator, ph_min, ph_max, expected) -> None:
    cleaned = validator.clean(SOIL.rules, _soil(ph_min=ph_min, ph_max=ph_max))

    assert cleaned["ph_type"] == expected


def test_ph_type_needs_both_bounds() -> None:
    assert derive_ph_type({"ph_min": 5.0}) is None
    assert derive_ph_type({"ph_max": 9.0, "ph_min": None}) is None


def test_client_supplied_ph_type_is_discarded(validator) -> None:
    cleaned = validator.clean(SOIL.rules, _soil(ph_min=5.0, ph_max=6.0, ph_type="alkaline"))

    assert cleaned["ph_type"] == "acidic"


def test_create_rejects_inverted_ph_range(validator) -> None:
    errors = validator.validate(SOIL.rules, _soil(ph_min=8.0, ph_max=6.0))

    assert errors == [FieldError("ph_min", "ph_min is greater than ph_max")]


def test_partial_update_checks_against_stored_bound(validator) -> None:
    prior = {"ph_min": 6.0, "ph_max": 7.0, "ph_type": "acidic"}

    assert validator.validate(SOIL.rules, {"ph_min": 7.5}, prior) == [
        FieldError("ph_min", "ph_min is greater than ph_max")
    ]
    assert validator.validate(SOIL.rules, {"ph_max": 5.0}, prior) == [
        FieldError("ph_max", "ph_max is lesser than ph_min")
    ]


def test_partial_update_recomputes_ph_type_from_merged_state(validator) -> None:
    prior = {"ph_min": 5.5, "ph_max": 6.5, "ph_type": "acidic"}

    cleaned = validator.clean(SOIL.rules, {"ph_max": 8.0}, prior)

    assert cleaned == {"ph_max": 8.0, "ph_type": "alkaline"}


def test_update_without_ph_fields_leaves_ph_type_alone(validator) -> None:
    prior = {"ph_min": 5.5, "ph_max": 6.5, "ph_type": "acidic"}

    cleaned = validator.clean(SOIL.rules, {"name": "Laterite"}, prior)

    assert "ph_type" not in cleaned


# ── Growth stage day ranges ─────────────────────────────────────────────────


def test_growth_stage_create_rejects_inverted_days(validator) -> None:
    errors = validator.validate(
        GROWTH_STAGE.rules, {"name": "seedling", "order": 2, "min_days": 10, "max_days": 5}
    )

    assert errors == [FieldError("min_days", "min_days must be lesser than max_days")]


def test_growth_stage_rejects_equal_days(validator) -> None:
    errors = validator.validate(
        GROWTH_STAGE.rules, {"name": "seedling", "order": 2, "min_days": 5, "max_days": 5}
    )

    assert [error.field for error in errors] == ["min_days"]


def test_growth_stage_patch_against_stored_bounds(validator) -> None:
    prior = {"min_days": 5, "max_days": 10}

    assert validator.validate(GROWTH_STAGE.rules, {"max_days": 3}, prior) == [
        FieldError("max_days", "max_days must be greater than min_days")
    ]
    assert validator.validate(GROWTH_STAGE.rules, {"min_days": 12}, prior) == [
        FieldError("min_days", "min_days must be lesser than max_days")
    ]
    assert validator.validate(GROWTH_STAGE.rules, {"min_days": 7}, prior) == []


def test_missing_opposite_bound_is_not_an_error(validator) -> None:
    assert validator.validate(GROWTH_STAGE.rules, {"max_days": 3}, {"min_days": None}) == []


# ── Enum closure and lists ──────────────────────────────────────────────────


def _plant(**overrides):
    payload = {
        "name": "Tomato",
        "category": "crop",
        "growth_cycle": "annual",
        "growth_habit": "herb",
        "ideal_season": "summer",
        "purpose": "vegetable",
    }
    payload.update(overrides)
    return payload


def test_categorical_values_are_trimmed_and_lowercased(validator) -> None:
    cleaned = validator.clean(PLANT.rules, _plant(category=" CROP ", purpose="Vegetable"))

    assert cleaned["category"] == "crop"
    assert cleaned["purpose"] == "vegetable"
    assert cleaned["name"] == "Tomato"


def test_string_list_is_sanitized_keeping_first_spelling(validator) -> None:
    cleaned = validator.clean(PLANT.rules, _plant(common_names=["  Tomato ", "tomato", ""]))

    assert cleaned["common_names"] == ["Tomato"]


def test_string_list_that_sanitizes_to_nothing_is_rejected(validator) -> None:
    errors = validator.validate(PLANT.rules, _plant(tags=["", "   "]))

    assert errors == [FieldError("tags", "tags must contain at least one non-empty value")]


def test_string_list_must_hold_strings(validator) -> None:
    errors = validator.validate(PLANT.rules, _plant(common_pests=[1, 2]))

    assert errors == [FieldError("common_pests", "common_pests must be a list of strings")]


def test_growth_stage_list_is_normalized_and_deduplicated(validator) -> None:
    cleaned = validator.clean(
        PLANT.rules, _plant(growth_stages=["Seedling", "seedling", " vegetative "])
    )

    assert cleaned["growth_stages"] == ["seedling", "vegetative"]


def test_growth_stage_list_names_offending_values(validator) -> None:
    errors = validator.validate(PLANT.rules, _plant(growth_stages=["seedling", "moonlight"]))

    assert len(errors) == 1
    assert errors[0].field == "growth_stages"
    assert "moonlight" in errors[0].message
    assert "vegetative" in errors[0].message


def test_errors_are_aggregated_not_fail_fast(validator) -> None:
    errors = validator.validate(
        PLANT.rules, _plant(category="tree", purpose="not_a_purpose", common_names=[""])
    )

    assert sorted(error.field for error in errors) == ["category", "common_names", "purpose"]
    purpose_error = next(error for error in errors if error.field == "purpose")
    assert purpose_error.message == (
        "purpose must be one of flower, fodder, fruit, herb, medicine, spice, vegetable"
    )


def test_clean_raises_with_every_field_error(validator) -> None:
    with pytest.raises(ValidationError) as exc_info:
        validator.clean(SOIL.rules, _soil(texture="siltly", ph_min=9.0, ph_max=3.0))

    assert sorted(error.field for error in exc_info.value.errors) == ["ph_min", "texture"]


def test_validate_does_not_mutate_payload(validator) -> None:
    payload = _plant(category=" CROP ", common_names=[" Tomato "])
    snapshot = {key: (list(value) if isinstance(value, list) else value) for key, value in payload.items()}

    validator.validate(PLANT.rules, payload)

    assert payload == snapshot


def test_sanitize_string_list_helper() -> None:
    assert sanitize_string_list([" Neem oil", "NEEM OIL", "Compost ", ""]) == ["Neem oil", "Compost"]
