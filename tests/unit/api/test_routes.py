"""HTTP route tests driven through the FastAPI test client."""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from community_market.api.http.app import create_app
from community_market.core.models.pagination import Pagination
from community_market.core.services import CommunityProductService, DbSessionService


@pytest.fixture
def client(db_service: DbSessionService) -> Generator[TestClient]:
    with TestClient(create_app(db_service)) as test_client:
        yield test_client


def _create_store(client: TestClient, slug: str = "woodcraft", **fields) -> dict:
    response = client.post("/stores", json={"name": "WoodCraft", "slug": slug, **fields})
    assert response.status_code == 201
    return response.json()


def _create_product(client: TestClient, store_id: str, **fields) -> dict:
    payload = {"store_id": store_id, "title": "Chair", "price": "10000", **fields}
    response = client.post("/products", json=payload)
    assert response.status_code == 201
    return response.json()


class TestHealthRoutes:
    def test_liveness(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_readiness(self, client):
        response = client.get("/health/ready")

        assert response.status_code == 200
        assert response.json()["checks"]["database"]["status"] == "healthy"

    def test_readiness_reports_database_outage(self, client, monkeypatch):
        monkeypatch.setattr(DbSessionService, "health_check", lambda self: False)

        response = client.get("/health/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "not_ready"

    def test_request_id_is_echoed(self, client):
        response = client.get("/health", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"


class TestProductRoutes:
    def test_create_product_is_synchronized(self, client):
        store = _create_store(client)

        product = _create_product(client, store["id"])

        assert product["synchronized"] is True
        assert client.get(f"/products/{product['id']}").json()["title"] == "Chair"

    def test_unknown_product_is_404(self, client):
        assert client.get("/products/missing").status_code == 404

    def test_image_routes(self, client):
        store = _create_store(client)
        product = _create_product(client, store["id"], images=["a.jpg"])
        base = f"/products/{product['id']}/images"

        added = client.post(base, json={"url": "b.jpg"})
        assert added.json()["images"] == ["a.jpg", "b.jpg"]

        reordered = client.put(f"{base}/order", json={"images": ["b.jpg", "a.jpg"]})
        assert reordered.json()["images"] == ["b.jpg", "a.jpg"]

        bad_order = client.put(f"{base}/order", json={"images": ["c.jpg"]})
        assert bad_order.status_code == 400

        removed = client.delete(base, params={"url": "b.jpg"})
        assert removed.json()["images"] == ["a.jpg"]

    def test_global_listing(self, client):
        store = _create_store(client)
        _create_product(client, store["id"], title="Lamp", category="home")
        _create_product(client, store["id"], title="Kite", category="toys")

        everything = client.get("/products").json()
        toys = client.get("/products", params={"category": "toys"}).json()

        assert everything["total_count"] == 2
        assert {item["title"] for item in everything["data"]} == {"Kite", "Lamp"}
        assert [item["title"] for item in toys["data"]] == ["Kite"]

    def test_negative_price_is_rejected(self, client):
        store = _create_store(client)

        response = client.post(
            "/products", json={"store_id": store["id"], "title": "Chair", "price": "-1"}
        )

        assert response.status_code == 422


class TestStoreRoutes:
    def test_duplicate_slug_is_409(self, client):
        _create_store(client, slug="woodcraft")

        response = client.post("/stores", json={"name": "Other", "slug": "WoodCraft"})

        assert response.status_code == 409

    def test_lookup_by_slug(self, client):
        store = _create_store(client, slug="woodcraft")

        response = client.get("/stores/by-slug/WOODCRAFT")

        assert response.json()["id"] == store["id"]

    def test_update_resyncs_products(self, client):
        store = _create_store(client)
        _create_product(client, store["id"])
        _create_product(client, store["id"], title="Table")

        response = client.put(
            f"/stores/{store['id']}", json={"name": "WoodCraft & Co", "slug": "woodcraft"}
        )

        assert response.status_code == 200
        assert response.json()["synchronized"] == 2
        assert response.json()["store"]["name"] == "WoodCraft & Co"


class TestCommunityRoutes:
    @pytest.fixture
    def community(self, client) -> dict:
        response = client.post(
            "/communities", json={"community_id": "barrio-norte", "name": "Norte"}
        )
        assert response.status_code == 201
        return response.json()

    def test_listing_shows_member_products(self, client, community):
        member = _create_store(client, slug="member")
        outsider = _create_store(client, slug="outsider")
        chair = _create_product(client, member["id"], category="home")
        _create_product(client, outsider["id"], category="home")
        membership = client.put(
            f"/communities/barrio-norte/stores/{member['id']}", json={"status": True}
        )
        assert membership.status_code == 200

        response = client.get("/communities/barrio-norte/products")

        body = response.json()
        assert response.status_code == 200
        assert body["total_count"] == 1
        assert body["total_pages"] == 1
        item = body["data"][0]
        assert item["product_id"] == chair["id"]
        assert item["store_slug"] == "member"

        detail = client.get(f"/community-products/{item['id']}")
        assert detail.json()["title"] == "Chair"

    def test_listing_pagination_and_category(self, client, community):
        store = _create_store(client)
        client.put(f"/communities/barrio-norte/stores/{store['id']}", json={})
        for n in range(3):
            _create_product(client, store["id"], title=f"Toy {n}", category="toys")
        _create_product(client, store["id"], category="home")

        first = client.get(
            "/communities/barrio-norte/products",
            params={"category": "toys", "page": 1, "page_size": 2},
        ).json()
        second = client.get(
            "/communities/barrio-norte/products",
            params={"category": "toys", "page": 2, "page_size": 2},
        ).json()

        assert first["total_count"] == second["total_count"] == 3
        assert len(first["data"]) == 2
        assert len(second["data"]) == 1

    def test_list_communities_by_scope(self, client, community):
        client.post(
            "/communities",
            json={"community_id": "barrio-sur", "name": "Sur", "visible": False},
        )

        all_ids = [c["community_id"] for c in client.get("/communities").json()]
        visible = client.get("/communities", params={"scope": "visible"}).json()

        assert sorted(all_ids) == ["barrio-norte", "barrio-sur"]
        assert [c["community_id"] for c in visible] == ["barrio-norte"]
        assert client.get("/communities", params={"scope": "hidden"}).status_code == 422

    def test_internal_validation_error_is_a_server_error(
        self, client, community, monkeypatch
    ):
        def broken_listing(self, *args, **kwargs):
            Pagination(page_number=0)

        monkeypatch.setattr(
            CommunityProductService, "list_by_community_paginated", broken_listing
        )

        response = client.get("/communities/barrio-norte/products")

        assert response.status_code == 500

    def test_unknown_community_lists_nothing(self, client):
        response = client.get("/communities/nowhere/products")

        assert response.status_code == 200
        assert response.json()["data"] == []

    def test_invalid_page_is_422(self, client):
        assert client.get("/communities/x/products", params={"page": 0}).status_code == 422

    def test_membership_for_unknown_store_is_404(self, client, community):
        response = client.put("/communities/barrio-norte/stores/missing", json={})

        assert response.status_code == 404

    def test_unknown_community_product_is_404(self, client):
        assert client.get("/community-products/missing").status_code == 404


class TestSyncRoutes:
    def test_sync_missing_product_is_404(self, client):
        assert client.post("/sync/products/missing").status_code == 404

    def test_sync_single_and_batch(self, client):
        store = _create_store(client)
        product = _create_product(client, store["id"])

        single = client.post(f"/sync/products/{product['id']}")
        assert single.json() == {"product_id": product["id"], "synchronized": True}

        batch = client.post("/sync/products")
        assert batch.json()["synchronized"] == 0

        by_store = client.post(f"/sync/stores/{store['id']}")
        assert by_store.json() == {"synchronized": 1, "store_id": store["id"]}
