"""
Flavorbase Backend: Ingredient and Category Route Tests
=========================================================

What:  /ingredient, /ingredients and /ingredientCategories against the
       seeded database (five ingredients, three categories).
"""

import pytest


class TestIngredientLookup:

    @pytest.mark.asyncio
    async def test_includes_category(self, test_client):
        response = await test_client.get("/ingredient/1")

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Propylene Glycol"
        assert body["ingredient_category"] == {"id": 1, "name": "Base", "ordinal": 1}

    @pytest.mark.asyncio
    async def test_zero_id_is_no_content(self, test_client):
        response = await test_client.get("/ingredient/0")
        assert response.status_code == 204

    @pytest.mark.asyncio
    async def test_bad_id_is_bad_request(self, test_client):
        response = await test_client.get("/ingredient/pg")
        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "id"


class TestIngredientList:

    @pytest.mark.asyncio
    async def test_default_page_in_id_order(self, test_client):
        response = await test_client.get("/ingredients")

        assert response.status_code == 200
        rows = response.json()
        assert [row["id"] for row in rows] == [1, 2, 3, 4, 5]
        assert rows[3]["ingredient_category"]["name"] == "Additive"

    @pytest.mark.asyncio
    async def test_trailing_slash(self, test_client):
        response = await test_client.get("/ingredients/")
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_limit(self, test_client):
        response = await test_client.get("/ingredients", params={"limit": 2})
        assert [row["id"] for row in response.json()] == [1, 2]

    @pytest.mark.asyncio
    async def test_offset_is_one_based(self, test_client):
        response = await test_client.get("/ingredients", params={"offset": 3, "limit": 2})
        assert [row["id"] for row in response.json()] == [3, 4]

    @pytest.mark.asyncio
    async def test_fractional_paging_values_are_truncated(self, test_client):
        response = await test_client.get("/ingredients", params={"offset": "2.9", "limit": "1.5"})
        assert [row["id"] for row in response.json()] == [2]

    @pytest.mark.asyncio
    async def test_non_positive_limit_uses_default_page(self, test_client):
        response = await test_client.get("/ingredients", params={"limit": 0})
        assert len(response.json()) == 5

    @pytest.mark.asyncio
    async def test_offset_past_end_is_empty_list(self, test_client):
        response = await test_client.get("/ingredients", params={"offset": 800000})

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_non_numeric_limit_is_bad_request(self, test_client):
        response = await test_client.get("/ingredients", params={"limit": "stop"})

        assert response.status_code == 400
        assert response.json() == {
            "errors": [
                {"location": "query", "field": "limit", "message": "Invalid value", "value": "stop"}
            ]
        }

    @pytest.mark.asyncio
    async def test_limit_beyond_integer_range_is_bad_request(self, test_client):
        response = await test_client.get("/ingredients", params={"limit": "99999999999"})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_both_paging_errors_reported_in_order(self, test_client):
        response = await test_client.get("/ingredients", params={"offset": "x", "limit": "y"})
        assert [e["field"] for e in response.json()["errors"]] == ["offset", "limit"]

    @pytest.mark.asyncio
    async def test_count(self, test_client):
        response = await test_client.get("/ingredients/count")

        assert response.status_code == 200
        assert response.json() == 5


class TestIngredientCategories:

    @pytest.mark.asyncio
    async def test_list_in_id_order(self, test_client):
        response = await test_client.get("/ingredientCategories")

        assert response.status_code == 200
        assert [row["name"] for row in response.json()] == ["Base", "Nicotine", "Additive"]

    @pytest.mark.asyncio
    async def test_page(self, test_client):
        response = await test_client.get("/ingredientCategories/", params={"offset": 2, "limit": 1})
        assert [row["id"] for row in response.json()] == [2]

    @pytest.mark.asyncio
    async def test_offset_past_end_is_empty_list(self, test_client):
        response = await test_client.get("/ingredientCategories", params={"offset": 4})

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_count(self, test_client):
        response = await test_client.get("/ingredientCategories/count")
        assert response.json() == 3
