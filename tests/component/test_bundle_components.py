"""
Component tests for bundle offers

Seeded offers: duo-set 10% (2 items), sparset-3 20% (3 items),
sparset-5 25% (5 items), winter-special inactive.
"""
from fastapi.testclient import TestClient


def add(client: TestClient, cart_id: str, item_id: str, variant_id: str):
    return client.post(
        f"/api/cart/{cart_id}/items",
        json={"item_id": item_id, "variant_id": variant_id},
    )


def fill_scenario_cart(client: TestClient, cart_id: str) -> None:
    """2x ald-001-50ml (44.99) + 1x ald-002-30ml (29.99) = 119.97"""
    add(client, cart_id, "ald-001", "ald-001-50ml")
    add(client, cart_id, "ald-001", "ald-001-50ml")
    add(client, cart_id, "ald-002", "ald-002-30ml")


class TestBundleCatalog:
    def test_list_active_bundles(self, test_client: TestClient):
        response = test_client.get("/api/bundles")

        assert response.status_code == 200
        ids = [b["id"] for b in response.json()]
        assert ids == ["duo-set", "sparset-3", "sparset-5"]

    def test_get_bundle(self, test_client: TestClient):
        response = test_client.get("/api/bundles/sparset-3")

        assert response.status_code == 200
        assert response.json()["discount_percent"] == 20
        assert response.json()["quantity_required"] == 3

    def test_inactive_bundle_hidden(self, test_client: TestClient):
        assert test_client.get("/api/bundles/winter-special").status_code == 404


class TestEligibleBundles:
    def test_empty_cart_has_no_offers(self, test_client: TestClient, cart_id: str):
        response = test_client.get(f"/api/cart/{cart_id}/bundles")

        data = response.json()
        assert data["item_count"] == 0
        assert data["bundles"] == []
        assert data["recommended"] is None

    def test_best_offer_first(self, test_client: TestClient, cart_id: str):
        fill_scenario_cart(test_client, cart_id)

        data = test_client.get(f"/api/cart/{cart_id}/bundles").json()

        assert data["item_count"] == 3
        assert [b["id"] for b in data["bundles"]] == ["sparset-3", "duo-set"]
        assert data["recommended"]["id"] == "sparset-3"


class TestApplyBundle:
    def test_scenario_with_bundle(self, test_client: TestClient, cart_id: str):
        fill_scenario_cart(test_client, cart_id)

        response = test_client.post(f"/api/cart/{cart_id}/bundle", json={"bundle_id": "sparset-3"})

        assert response.status_code == 200
        cart = response.json()["cart"]
        assert cart["subtotal"] == 11997
        assert cart["total"] == 9598
        assert cart["discount"] == 2399
        assert cart["applied_bundle"] == {"bundle_id": "sparset-3", "discount_percent": 20.0}

        # Removing ald-001 keeps the discount on the new subtotal
        response = test_client.put(
            f"/api/cart/{cart_id}/items/ald-001/ald-001-50ml",
            json={"quantity": 0},
        )
        cart = response.json()["cart"]
        assert cart["item_count"] == 1
        assert cart["subtotal"] == 2999
        assert cart["total"] == 2399
        assert cart["applied_bundle"]["bundle_id"] == "sparset-3"

    def test_discount_survives_add_without_compounding(self, test_client: TestClient, cart_id: str):
        add(test_client, cart_id, "ald-001", "ald-001-50ml")
        add(test_client, cart_id, "ald-002", "ald-002-30ml")
        test_client.post(f"/api/cart/{cart_id}/bundle", json={"bundle_id": "duo-set"})

        cart = add(test_client, cart_id, "ald-004", "ald-004-60ml").json()["cart"]

        # (4499 + 2999 + 3999) * 0.9 = 10347.3
        assert cart["subtotal"] == 11497
        assert cart["total"] == 10347

    def test_bundle_requires_enough_items(self, test_client: TestClient, cart_id: str):
        add(test_client, cart_id, "ald-001", "ald-001-50ml")

        response = test_client.post(f"/api/cart/{cart_id}/bundle", json={"bundle_id": "sparset-3"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Bundle requires 3 items; cart has 1 items"

    def test_unknown_or_inactive_bundle(self, test_client: TestClient, cart_id: str):
        fill_scenario_cart(test_client, cart_id)

        assert test_client.post(
            f"/api/cart/{cart_id}/bundle", json={"bundle_id": "nope"}
        ).status_code == 404
        assert test_client.post(
            f"/api/cart/{cart_id}/bundle", json={"bundle_id": "winter-special"}
        ).status_code == 404

    def test_replace_bundle(self, test_client: TestClient, cart_id: str):
        fill_scenario_cart(test_client, cart_id)
        test_client.post(f"/api/cart/{cart_id}/bundle", json={"bundle_id": "sparset-3"})

        response = test_client.post(f"/api/cart/{cart_id}/bundle", json={"bundle_id": "duo-set"})

        cart = response.json()["cart"]
        assert cart["applied_bundle"]["bundle_id"] == "duo-set"
        # 11997 * 0.9 = 10797.3
        assert cart["total"] == 10797

    def test_remove_bundle(self, test_client: TestClient, cart_id: str):
        fill_scenario_cart(test_client, cart_id)
        test_client.post(f"/api/cart/{cart_id}/bundle", json={"bundle_id": "sparset-3"})

        response = test_client.delete(f"/api/cart/{cart_id}/bundle")

        cart = response.json()["cart"]
        assert cart["applied_bundle"] is None
        assert cart["total"] == 11997
        assert cart["discount"] == 0
