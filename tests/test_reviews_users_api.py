import uuid


class TestReviews:
    async def test_post_and_list_newest_first(self, client, auth_headers, catalog):
        spot = catalog["spots"]["Cagsawa Ruins"]
        first = await client.post(
            f"/api/spots/{spot.id}/reviews", headers=auth_headers, json={"rating": 4, "comment": "Beautiful"}
        )
        assert first.status_code == 201
        assert first.json()["reviewer_name"] == "Maria Santos"

        await client.post(f"/api/spots/{spot.id}/reviews", headers=auth_headers, json={"rating": 5})

        resp = await client.get(f"/api/spots/{spot.id}/reviews")
        assert resp.status_code == 200
        reviews = resp.json()
        assert [r["rating"] for r in reviews] == [5, 4]
        assert all(r["reviewer_name"] == "Maria Santos" for r in reviews)

    async def test_rating_out_of_range(self, client, auth_headers, catalog):
        spot = catalog["spots"]["Cagsawa Ruins"]
        for rating in (0, 6):
            resp = await client.post(f"/api/spots/{spot.id}/reviews", headers=auth_headers, json={"rating": rating})
            assert resp.status_code == 422

    async def test_unknown_spot(self, client, auth_headers):
        missing = uuid.uuid4()
        resp = await client.post(f"/api/spots/{missing}/reviews", headers=auth_headers, json={"rating": 3})
        assert resp.status_code == 404
        assert (await client.get(f"/api/spots/{missing}/reviews")).status_code == 404

    async def test_requires_login(self, client, catalog):
        spot = catalog["spots"]["Cagsawa Ruins"]
        resp = await client.post(f"/api/spots/{spot.id}/reviews", json={"rating": 3})
        assert resp.status_code == 401


class TestProfile:
    async def test_update_profile(self, client, auth_headers):
        resp = await client.patch("/api/users/me", headers=auth_headers, json={"bio": "Bicol explorer"})
        assert resp.status_code == 200
        assert resp.json()["bio"] == "Bicol explorer"
        assert resp.json()["full_name"] == "Maria Santos"

    async def test_preferences_round_trip(self, client, auth_headers):
        resp = await client.put("/api/users/me/preferences", headers=auth_headers, json={
            "categories": ["Culture", "Food"],
            "subcategories": ["Churches"],
            "districts": ["District 1"],
            "travel_style": "budget",
            "travel_pace": "relaxed",
        })
        assert resp.status_code == 200
        assert resp.json()["onboarding_complete"] is True

        resp = await client.get("/api/users/me/preferences", headers=auth_headers)
        body = resp.json()
        assert body["categories"] == ["Culture", "Food"]
        assert body["districts"] == ["District 1"]
        assert body["travel_pace"] == "relaxed"


class TestFavorites:
    async def test_toggle_favorite(self, client, auth_headers, catalog):
        spot = catalog["spots"]["Mayon Volcano"]
        payload = {"item_id": str(spot.id), "item_type": "spot"}

        resp = await client.post("/api/users/me/favorites", headers=auth_headers, json=payload)
        assert resp.json()["active"] is True

        favorites = (await client.get("/api/users/me/favorites", headers=auth_headers)).json()
        assert [f["item_id"] for f in favorites] == [str(spot.id)]

        resp = await client.post("/api/users/me/favorites", headers=auth_headers, json=payload)
        assert resp.json()["active"] is False
        assert (await client.get("/api/users/me/favorites", headers=auth_headers)).json() == []

    async def test_mark_visited_is_idempotent(self, client, auth_headers, catalog):
        stay = catalog["accommodations"]["Tabaco Inn"]
        payload = {"item_id": str(stay.id), "item_type": "accommodation"}
        for _ in range(2):
            resp = await client.post("/api/users/me/visited", headers=auth_headers, json=payload)
            assert resp.json() == {"item_id": str(stay.id), "kind": "visited", "active": True}

        visited = (await client.get(
            "/api/users/me/favorites", headers=auth_headers, params={"kind": "visited"}
        )).json()
        assert len(visited) == 1
        assert visited[0]["item_type"] == "accommodation"

    async def test_unknown_item(self, client, auth_headers):
        resp = await client.post("/api/users/me/favorites", headers=auth_headers, json={
            "item_id": str(uuid.uuid4()), "item_type": "restaurant",
        })
        assert resp.status_code == 404
