"""
Brand API endpoint tests
"""
from datetime import datetime, timedelta, timezone

import pytest
from bson import ObjectId
from httpx import AsyncClient


MISSING_ID = str(ObjectId())


@pytest.mark.asyncio
class TestBrandsAPI:
    """Brand CRUD endpoints"""

    async def test_create_brand(self, client: AsyncClient, sample_brand):
        response = await client.post("/api/v1/brands", json=sample_brand)

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Toyota"
        assert data["logoUrl"] == sample_brand["logoUrl"]
        assert len(data["id"]) == 24
        assert data["createdAt"] is not None
        assert data["updatedAt"] is not None

    async def test_create_brand_trims_name(self, client: AsyncClient, sample_brand):
        response = await client.post("/api/v1/brands", json={**sample_brand, "name": "  Honda  "})

        assert response.status_code == 201
        assert response.json()["name"] == "Honda"

    @pytest.mark.parametrize("payload", [
        {"logoUrl": "https://example.com/logo.png"},
        {"name": "Mazda"},
        {"name": "   ", "logoUrl": "https://example.com/logo.png"},
        {},
    ])
    async def test_create_brand_requires_name_and_logo(self, client: AsyncClient, payload):
        response = await client.post("/api/v1/brands", json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == "Brand name and logo are required"

    async def test_create_duplicate_brand_ignores_case(self, client: AsyncClient, brand, sample_brand):
        response = await client.post("/api/v1/brands", json={**sample_brand, "name": "TOYOTA"})

        assert response.status_code == 409
        data = response.json()
        assert data["error"] == "Brand already exists"
        assert data["details"] == 'A brand with the name "Toyota" already exists'

    async def test_brand_name_with_regex_characters_is_literal(self, client: AsyncClient, sample_brand):
        first = await client.post("/api/v1/brands", json={**sample_brand, "name": "A+B (EU)"})
        second = await client.post("/api/v1/brands", json={**sample_brand, "name": "AB EU"})

        assert first.status_code == 201
        assert second.status_code == 201

    async def test_list_brands_newest_first(self, client: AsyncClient, mongo_db):
        now = datetime.now(timezone.utc)
        await mongo_db["brands"].insert_many([
            {"name": "Older", "logoUrl": "https://example.com/a.png", "createdAt": now - timedelta(days=1), "updatedAt": now},
            {"name": "Newer", "logoUrl": "https://example.com/b.png", "createdAt": now, "updatedAt": now},
        ])

        response = await client.get("/api/v1/brands")

        assert response.status_code == 200
        assert [b["name"] for b in response.json()] == ["Newer", "Older"]

    async def test_list_brands_empty(self, client: AsyncClient):
        response = await client.get("/api/v1/brands")

        assert response.status_code == 200
        assert response.json() == []

    async def test_get_brand(self, client: AsyncClient, brand):
        response = await client.get(f"/api/v1/brands/{brand['id']}")

        assert response.status_code == 200
        assert response.json()["name"] == "Toyota"

    async def test_get_brand_invalid_id(self, client: AsyncClient):
        response = await client.get("/api/v1/brands/not-an-id")

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid brand ID"

    async def test_get_missing_brand(self, client: AsyncClient):
        response = await client.get(f"/api/v1/brands/{MISSING_ID}")

        assert response.status_code == 404
        assert response.json()["error"] == "Brand not found"

    async def test_update_brand(self, client: AsyncClient, brand):
        response = await client.put(
            f"/api/v1/brands/{brand['id']}",
            json={"name": "Toyota Motor", "logoUrl": "https://example.com/new.png"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Toyota Motor"
        assert data["logoUrl"] == "https://example.com/new.png"
        assert data["id"] == brand["id"]

    async def test_update_brand_keeps_own_name_in_other_case(self, client: AsyncClient, brand):
        response = await client.put(
            f"/api/v1/brands/{brand['id']}",
            json={"name": "toyota", "logoUrl": brand["logoUrl"]},
        )

        assert response.status_code == 200
        assert response.json()["name"] == "toyota"

    async def test_update_brand_to_existing_name(self, client: AsyncClient, brand, sample_brand):
        other = await client.post("/api/v1/brands", json={**sample_brand, "name": "Nissan"})

        response = await client.put(
            f"/api/v1/brands/{other.json()['id']}",
            json={"name": "TOYOTA", "logoUrl": sample_brand["logoUrl"]},
        )

        assert response.status_code == 409
        assert response.json()["error"] == "Brand already exists"

    async def test_update_brand_requires_both_fields(self, client: AsyncClient, brand):
        response = await client.put(f"/api/v1/brands/{brand['id']}", json={"name": "Toyota"})

        assert response.status_code == 400
        assert response.json()["error"] == "Brand name and logo are required"

    async def test_update_missing_brand(self, client: AsyncClient, sample_brand):
        response = await client.put(f"/api/v1/brands/{MISSING_ID}", json=sample_brand)

        assert response.status_code == 404
        assert response.json()["error"] == "Brand not found"

    async def test_delete_brand(self, client: AsyncClient, brand):
        response = await client.delete(f"/api/v1/brands/{brand['id']}/delete")

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Brand deleted successfully"
        assert data["brand"]["id"] == brand["id"]

        response = await client.get(f"/api/v1/brands/{brand['id']}")
        assert response.status_code == 404

    async def test_delete_brand_keeps_its_models(self, client: AsyncClient, brand, car_model):
        await client.delete(f"/api/v1/brands/{brand['id']}/delete")

        response = await client.get(f"/api/v1/brands/{brand['id']}/models")

        assert response.status_code == 200
        assert [m["id"] for m in response.json()] == [car_model["id"]]
        assert response.json()[0]["brandId"] == brand["id"]

        response = await client.get(f"/api/v1/brands/{brand['id']}/models/{car_model['id']}")
        assert response.status_code == 200
        assert response.json()["brandId"] == brand["id"]

    async def test_delete_missing_brand(self, client: AsyncClient):
        response = await client.delete(f"/api/v1/brands/{MISSING_ID}/delete")

        assert response.status_code == 404

    async def test_delete_brand_invalid_id(self, client: AsyncClient):
        response = await client.delete("/api/v1/brands/123/delete")

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid brand ID"

    async def test_malformed_body_is_bad_request(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/brands",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request"
