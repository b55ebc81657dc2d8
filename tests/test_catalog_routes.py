from __future__ import annotations

from uuid import uuid4

import pytest
from httpx import AsyncClient

from ecospace.errors import ConflictError


def _plant_body(**overrides: object) -> dict[str, object]:
    body: dict[str, object] = {
        "name": "Tomato",
        "category": " Crop ",
        "growth_cycle": "annual",
        "growth_habit": "herb",
        "ideal_season": "summer",
        "purpose": "vegetable",
    }
    body.update(overrides)
    return body


@pytest.mark.asyncio
async def test_create_plant_normalizes_payload(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/plants",
        json=_plant_body(common_names=["  Tomato ", "tomato", ""], growth_stages=["Seedling"]),
    )

    assert response.status_code == 201
    body = response.json()
    assert body["category"] == "crop"
    assert body["common_names"] == ["Tomato"]
    assert body["growth_stages"] == ["seedling"]
    assert body["scientific_name"] is None


@pytest.mark.asyncio
async def test_create_plant_with_invalid_purpose_returns_field_errors(client: AsyncClient) -> None:
    response = await client.post("/api/v1/plants", json=_plant_body(purpose="not_a_purpose"))

    assert response.status_code == 400
    assert response.json() == {
        "message": "Validation error",
        "errors": [
            {
                "field": "purpose",
                "message": "purpose must be one of flower, fodder, fruit, herb, medicine, spice, vegetable",
            }
        ],
    }


@pytest.mark.asyncio
async def test_malformed_body_uses_same_error_envelope(client: AsyncClient) -> None:
    body = _plant_body()
    body.pop("name")

    response = await client.post("/api/v1/plants", json=body)

    assert response.status_code == 400
    payload = response.json()
    assert payload["message"] == "Validation error"
    assert [error["field"] for error in payload["errors"]] == ["name"]


@pytest.mark.asyncio
async def test_list_plants_envelope(client: AsyncClient, catalog_store) -> None:
    repository = catalog_store.repository("plant")
    for index in range(3):
        repository.seed(**{**_plant_body(name=f"Plant {index}"), "category": "crop"})

    response = await client.get("/api/v1/plants", params={"limit": "2", "sort_by": "name"})

    assert response.status_code == 200
    body = response.json()
    assert [row["name"] for row in body["data"]] == ["Plant 0", "Plant 1"]
    assert body["pagination"] == {
        "current_page": 1,
        "page_size": 2,
        "total_items": 3,
        "total_pages": 2,
        "has_previous_page": False,
        "has_next_page": True,
        "has_exceeded_page": False,
    }


@pytest.mark.asyncio
async def test_list_reports_max_limit_applied(client: AsyncClient) -> None:
    response = await client.get("/api/v1/plants", params={"limit": "500", "page": "nope"})

    assert response.status_code == 200
    pagination = response.json()["pagination"]
    assert pagination["page_size"] == 100
    assert pagination["current_page"] == 1
    assert pagination["max_limit_applied"] is True
    assert "has_exceeded_page" not in pagination


@pytest.mark.asyncio
async def test_list_with_invalid_filter_is_rejected(client: AsyncClient) -> None:
    response = await client.get("/api/v1/plants", params={"purpose": "not_a_purpose"})

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Invalid query parameters"
    assert body["errors"][0]["field"] == "purpose"


@pytest.mark.asyncio
async def test_get_missing_record_is_404(client: AsyncClient) -> None:
    response = await client.get(f"/api/v1/plants/{uuid4()}")

    assert response.status_code == 404
    assert response.json() == {"message": "Plant not found"}


@pytest.mark.asyncio
async def test_soil_ph_type_is_server_derived(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/soils",
        json={
            "name": "Black cotton",
            "drainage": "poor",
            "nutrient_level": "high",
            "organic_matter_level": "medium",
            "water_retention_level": "high",
            "texture": "clayey",
            "type": "black",
            "ph_min": 6.0,
            "ph_max": 8.0,
            "ph_type": "acidic",
        },
    )

    assert response.status_code == 201
    assert response.json()["ph_type"] == "alkaline"


@pytest.mark.asyncio
async def test_soil_ph_out_of_bounds_is_rejected(client: AsyncClient) -> None:
    response = await client.patch(f"/api/v1/soils/{uuid4()}", json={"ph_max": 15})

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "ph_max"


@pytest.mark.asyncio
async def test_growth_stage_patch_against_stored_min(client: AsyncClient, catalog_store) -> None:
    stage = catalog_store.repository("growth_stage").seed(
        name="seedling", order=2, min_days=5, max_days=10
    )

    response = await client.patch(f"/api/v1/growth-stages/{stage.id}", json={"max_days": 3})

    assert response.status_code == 400
    assert response.json()["errors"] == [
        {"field": "max_days", "message": "max_days must be greater than min_days"}
    ]


@pytest.mark.asyncio
async def test_empty_patch_has_no_details_to_update(client: AsyncClient, catalog_store) -> None:
    stage = catalog_store.repository("growth_stage").seed(name="budding", order=4)

    response = await client.patch(f"/api/v1/growth-stages/{stage.id}", json={})

    assert response.status_code == 400
    assert response.json()["message"] == "No details to update"


@pytest.mark.asyncio
async def test_pest_type_soft_delete_flow(client: AsyncClient, catalog_store) -> None:
    pest_type = catalog_store.repository("pest_type").seed(name="mite")

    delete_response = await client.delete(f"/api/v1/pest-types/{pest_type.id}")
    hidden = await client.get(f"/api/v1/pest-types/{pest_type.id}")
    shown = await client.get(
        f"/api/v1/pest-types/{pest_type.id}", params={"include_inactive": "true"}
    )
    listing = await client.get("/api/v1/pest-types", params={"include_inactive": "true"})

    assert delete_response.status_code == 204
    assert hidden.status_code == 404
    assert shown.status_code == 200
    assert shown.json()["is_active"] is False
    assert listing.json()["pagination"]["total_items"] == 1


@pytest.mark.asyncio
async def test_disease_requires_existing_pathogen_type(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/diseases",
        json={
            "name": "Late blight",
            "control_methods": "Copper sprays",
            "damage_symptoms": "Dark lesions",
            "seasonality": "Monsoon",
            "pathogen_type_id": str(uuid4()),
        },
    )

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "pathogen_type_id"


@pytest.mark.asyncio
async def test_duplicate_maps_to_conflict(
    client: AsyncClient,
    catalog_store,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    async def raise_conflict(values: dict[str, object]) -> object:
        raise ConflictError("Plant with the same unique value already exists")

    monkeypatch.setattr(catalog_store.repository("plant"), "add", raise_conflict)

    response = await client.post("/api/v1/plants", json=_plant_body())

    assert response.status_code == 409
    assert response.json() == {"message": "Plant with the same unique value already exists"}


@pytest.mark.asyncio
async def test_invalid_path_id_is_a_validation_error(client: AsyncClient) -> None:
    response = await client.get("/api/v1/pests/not-a-uuid")

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "record_id"


@pytest.mark.asyncio
async def test_overlong_tag_is_a_field_error(client: AsyncClient, catalog_store) -> None:
    response = await client.post("/api/v1/plants", json=_plant_body(tags=["x" * 101]))

    assert response.status_code == 400
    payload = response.json()
    assert payload["message"] == "Validation error"
    assert [error["field"] for error in payload["errors"]] == ["tags.0"]
    assert "100" in payload["errors"][0]["message"]
    assert catalog_store.repository("plant").records == {}


@pytest.mark.asyncio
async def test_tag_at_column_width_is_accepted(client: AsyncClient) -> None:
    response = await client.post("/api/v1/plants", json=_plant_body(tags=["x" * 100]))

    assert response.status_code == 201
    assert response.json()["tags"] == ["x" * 100]


@pytest.mark.asyncio
async def test_deleted_pest_type_leaves_default_listing(client: AsyncClient) -> None:
    created = await client.post("/api/v1/pest-types", json={"name": "mite"})
    pest_type_id = created.json()["id"]

    delete_response = await client.delete(f"/api/v1/pest-types/{pest_type_id}")
    default_listing = await client.get("/api/v1/pest-types")
    full_listing = await client.get("/api/v1/pest-types", params={"include_inactive": "true"})

    assert created.status_code == 201
    assert delete_response.status_code == 204
    assert default_listing.json()["data"] == []
    assert default_listing.json()["pagination"]["total_items"] == 0
    assert [row["id"] for row in full_listing.json()["data"]] == [pest_type_id]
    assert full_listing.json()["data"][0]["is_active"] is False
