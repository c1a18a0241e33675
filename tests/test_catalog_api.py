import uuid


class TestSpots:
    async def test_list_all_sorted_by_name(self, client, catalog):
        resp = await client.get("/api/spots")
        assert resp.status_code == 200
        names = [s["name"] for s in resp.json()]
        assert names == sorted(names)
        assert len(names) == 5

    async def test_search_by_name_or_municipality(self, client, catalog):
        resp = await client.get("/api/spots", params={"q": "camalig"})
        assert {s["name"] for s in resp.json()} == {"Sumlang Lake", "Hoyop-Hoyopan Cave"}

        resp = await client.get("/api/spots", params={"q": "MAYON"})
        assert [s["name"] for s in resp.json()] == ["Mayon Volcano"]

    async def test_filter_by_category_exact(self, client, catalog):
        resp = await client.get("/api/spots", params={"category": "Adventure"})
        assert {s["name"] for s in resp.json()} == {"Mayon Volcano", "Hoyop-Hoyopan Cave"}

        # Tags match whole elements only
        resp = await client.get("/api/spots", params={"category": "Adv"})
        assert resp.json() == []

    async def test_get_spot(self, client, catalog):
        spot = catalog["spots"]["Mayon Volcano"]
        resp = await client.get(f"/api/spots/{spot.id}")
        assert resp.status_code == 200
        assert resp.json()["category"] == ["Nature", "Adventure"]

    async def test_get_unknown_spot(self, client):
        resp = await client.get(f"/api/spots/{uuid.uuid4()}")
        assert resp.status_code == 404

    async def test_admin_crud(self, client, admin_headers):
        resp = await client.post("/api/spots", headers=admin_headers, json={
            "name": "Quitinday Green Hills",
            "location": "Camalig, Albay",
            "municipality": "Camalig",
            "category": ["Nature", "Hiking"],
            "is_hidden_gem": True,
        })
        assert resp.status_code == 201
        spot_id = resp.json()["id"]

        resp = await client.patch(f"/api/spots/{spot_id}", headers=admin_headers, json={"rating": 4.4})
        assert resp.status_code == 200
        assert resp.json()["rating"] == 4.4
        assert resp.json()["is_hidden_gem"] is True

        resp = await client.delete(f"/api/spots/{spot_id}", headers=admin_headers)
        assert resp.status_code == 204
        assert (await client.get(f"/api/spots/{spot_id}")).status_code == 404

    async def test_non_admin_cannot_write(self, client, auth_headers, catalog):
        spot = catalog["spots"]["Mayon Volcano"]
        resp = await client.post("/api/spots", headers=auth_headers, json={"name": "X", "location": "Y"})
        assert resp.status_code == 403
        resp = await client.delete(f"/api/spots/{spot.id}", headers=auth_headers)
        assert resp.status_code == 403

    async def test_rating_bounds(self, client, admin_headers):
        resp = await client.post("/api/spots", headers=admin_headers, json={
            "name": "Bad", "location": "Somewhere", "rating": 7,
        })
        assert resp.status_code == 422


class TestAccommodations:
    async def test_all_categories_must_match(self, client, catalog):
        resp = await client.get("/api/accommodations", params=[("category", "Luxury")])
        assert [a["name"] for a in resp.json()] == ["The Oriental Legazpi"]

        resp = await client.get(
            "/api/accommodations", params=[("category", "Luxury"), ("category", "Business Hotel")]
        )
        assert [a["name"] for a in resp.json()] == ["The Oriental Legazpi"]

        resp = await client.get(
            "/api/accommodations", params=[("category", "Luxury"), ("category", "Budget")]
        )
        assert resp.json() == []

    async def test_search(self, client, catalog):
        resp = await client.get("/api/accommodations", params={"q": "tabaco"})
        assert [a["name"] for a in resp.json()] == ["Tabaco Inn"]

    async def test_admin_update(self, client, admin_headers, catalog):
        stay = catalog["accommodations"]["Tabaco Inn"]
        resp = await client.patch(
            f"/api/accommodations/{stay.id}", headers=admin_headers, json={"price_range": "₱800 - ₱1,500"}
        )
        assert resp.status_code == 200
        assert resp.json()["price_range"] == "₱800 - ₱1,500"


class TestRestaurants:
    async def test_filter_by_district(self, client, catalog):
        resp = await client.get("/api/restaurants", params={"district": "District 1"})
        assert [r["name"] for r in resp.json()] == ["Bigg's Diner"]

        resp = await client.get("/api/restaurants", params={"district": "District 2"})
        assert {r["name"] for r in resp.json()} == {"1st Colonial Grill", "Let's Cook"}

    async def test_list_all(self, client, catalog):
        resp = await client.get("/api/restaurants")
        assert len(resp.json()) == 3

    async def test_admin_create_and_delete(self, client, admin_headers):
        resp = await client.post("/api/restaurants", headers=admin_headers, json={
            "name": "Pinangat House", "location": "Camalig", "municipality": "Camalig", "food_type": "Bicolano",
        })
        assert resp.status_code == 201
        rid = resp.json()["id"]
        assert (await client.delete(f"/api/restaurants/{rid}", headers=admin_headers)).status_code == 204


class TestCategories:
    async def test_create_and_filter_subcategories(self, client, admin_headers):
        nature = (await client.post("/api/categories", headers=admin_headers, json={"name": "Nature", "icon": "🌳"})).json()
        food = (await client.post("/api/categories", headers=admin_headers, json={"name": "Food"})).json()

        for cat, name in [(nature, "Lakes"), (nature, "Waterfalls"), (food, "Cafes")]:
            resp = await client.post("/api/categories/subcategories", headers=admin_headers, json={
                "category_id": cat["id"], "name": name,
            })
            assert resp.status_code == 201

        resp = await client.get("/api/categories")
        assert [c["name"] for c in resp.json()] == ["Food", "Nature"]

        resp = await client.get("/api/categories/subcategories", params={"category": "Nature"})
        assert [s["name"] for s in resp.json()] == ["Lakes", "Waterfalls"]

        resp = await client.get("/api/categories/subcategories")
        assert len(resp.json()) == 3

    async def test_duplicate_category(self, client, admin_headers):
        await client.post("/api/categories", headers=admin_headers, json={"name": "Culture"})
        resp = await client.post("/api/categories", headers=admin_headers, json={"name": "Culture"})
        assert resp.status_code == 409

    async def test_subcategory_unknown_parent(self, client, admin_headers):
        resp = await client.post("/api/categories/subcategories", headers=admin_headers, json={
            "category_id": str(uuid.uuid4()), "name": "Orphan",
        })
        assert resp.status_code == 404

    async def test_vocabulary(self, client):
        resp = await client.get("/api/categories/vocabulary")
        body = resp.json()
        assert "Volcanoes" in body["spot_categories"]
        assert "Beach Resort" in body["accommodation_categories"]
        assert [d["name"] for d in body["districts"]] == ["District 1", "District 2", "District 3"]


class TestPartialUpdates:
    async def test_null_for_required_spot_fields(self, client, admin_headers, catalog):
        spot = catalog["spots"]["Mayon Volcano"]
        for field in ("name", "location", "category", "is_hidden_gem"):
            resp = await client.patch(f"/api/spots/{spot.id}", headers=admin_headers, json={field: None})
            assert resp.status_code == 422, field

        resp = await client.get(f"/api/spots/{spot.id}")
        assert resp.json()["name"] == "Mayon Volcano"

    async def test_null_clears_optional_spot_fields(self, client, admin_headers, catalog):
        spot = catalog["spots"]["Mayon Volcano"]
        resp = await client.patch(f"/api/spots/{spot.id}", headers=admin_headers, json={"rating": None})
        assert resp.status_code == 200
        assert resp.json()["rating"] is None

    async def test_null_for_required_accommodation_and_restaurant_fields(self, client, admin_headers, catalog):
        stay = catalog["accommodations"]["Tabaco Inn"]
        resp = await client.patch(f"/api/accommodations/{stay.id}", headers=admin_headers, json={"name": None})
        assert resp.status_code == 422

        restaurant = catalog["restaurants"]["Let's Cook"]
        resp = await client.patch(
            f"/api/restaurants/{restaurant.id}", headers=admin_headers, json={"location": None}
        )
        assert resp.status_code == 422
