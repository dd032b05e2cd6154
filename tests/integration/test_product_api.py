"""Integration tests for the Product API.

Covers:
- POST   /api/product          create (owner from token)
- GET    /api/product          public list with filtering
- GET    /api/product/{id}     public retrieve
- PUT    /api/product/{id}     full update, owner only
- PATCH  /api/product/{id}     partial update, owner only
- DELETE /api/product/{id}     owner only
"""

from __future__ import annotations

import uuid

import pytest

from modules.products.models import Product

pytestmark = pytest.mark.integration

BASE_URL = "/api/product"


def _detail(product_id) -> str:
    return f"{BASE_URL}/{product_id}"


class TestCreateProduct:
    def test_create_and_read_back(self, alice_client, api_client, alice):
        response = alice_client.post(BASE_URL, {"name": "Widget", "price": 120}, format="json")
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["name"] == "Widget"
        assert data["price"] == 120
        assert data["ownerId"] == str(alice.id)
        assert set(data) == {"id", "name", "price", "ownerId", "createdAt", "updatedAt"}

        fetched = api_client.get(_detail(data["id"]))
        assert fetched.status_code == 200
        assert fetched.json()["data"] == data

    def test_owner_in_body_is_ignored(self, alice_client, alice, bob):
        response = alice_client.post(
            BASE_URL, {"name": "Widget", "price": 5, "ownerId": str(bob.id)}, format="json"
        )
        assert response.status_code == 201
        assert response.json()["data"]["ownerId"] == str(alice.id)

    def test_validation_runs_before_store(self, alice_client):
        response = alice_client.post(BASE_URL, {"name": "W", "price": 0}, format="json")
        assert response.status_code == 400
        fields = {e["field"] for e in response.json()["error"]}
        assert fields == {"name", "price"}
        assert not Product.objects.exists()


class TestReadProducts:
    def test_list_is_public_and_unscoped(self, api_client, make_product, alice, bob):
        make_product(alice, name="Alpha")
        make_product(bob, name="Beta")
        response = api_client.get(BASE_URL)
        assert response.status_code == 200
        names = {p["name"] for p in response.json()["data"]}
        assert names == {"Alpha", "Beta"}

    def test_filter_by_owner(self, api_client, make_product, alice, bob):
        make_product(alice, name="Alpha")
        make_product(bob, name="Beta")
        response = api_client.get(BASE_URL, {"ownerId": str(bob.id)})
        assert [p["name"] for p in response.json()["data"]] == ["Beta"]

    def test_filter_by_price_range(self, api_client, make_product, alice):
        make_product(alice, name="Cheap", price=5)
        make_product(alice, name="Pricey", price=500)
        response = api_client.get(BASE_URL, {"minPrice": 100})
        assert [p["name"] for p in response.json()["data"]] == ["Pricey"]

    def test_unknown_id(self, api_client):
        response = api_client.get(_detail(uuid.uuid4()))
        assert response.status_code == 404
        assert response.json() == {"error": "Product not found"}

    def test_malformed_id(self, api_client):
        response = api_client.get(_detail("not-a-uuid"))
        assert response.status_code == 404


class TestMutateProducts:
    def test_put_requires_all_fields(self, alice_client, make_product, alice):
        product = make_product(alice)
        response = alice_client.put(_detail(product.id), {"name": "Renamed"}, format="json")
        assert response.status_code == 400

    def test_put_by_owner(self, alice_client, make_product, alice):
        product = make_product(alice)
        response = alice_client.put(
            _detail(product.id), {"name": "Renamed", "price": 999}, format="json"
        )
        assert response.status_code == 200
        product.refresh_from_db()
        assert (product.name, product.price) == ("Renamed", 999)

    def test_patch_by_owner(self, alice_client, make_product, alice):
        product = make_product(alice, price=10)
        response = alice_client.patch(_detail(product.id), {"price": 20}, format="json")
        assert response.status_code == 200
        assert response.json()["data"]["price"] == 20
        assert response.json()["data"]["name"] == "Widget"

    def test_put_on_foreign_product_is_hidden(self, bob_client, make_product, alice):
        product = make_product(alice, name="Original")
        response = bob_client.put(
            _detail(product.id), {"name": "Hijacked", "price": 1}, format="json"
        )
        assert response.status_code == 404
        assert response.json() == {"error": "Product not found"}
        product.refresh_from_db()
        assert product.name == "Original"

    def test_put_on_foreign_product_forbidden_when_revealed(
        self, bob_client, make_product, alice, settings
    ):
        settings.OWNERSHIP_POLICIES = {**settings.OWNERSHIP_POLICIES, "product": "reveal_forbidden"}
        product = make_product(alice)
        response = bob_client.put(
            _detail(product.id), {"name": "Hijacked", "price": 1}, format="json"
        )
        assert response.status_code == 403
        assert response.json() == {"error": "Not authorized to access this product"}

    def test_delete_by_owner_then_again(self, alice_client, make_product, alice):
        product = make_product(alice)
        first = alice_client.delete(_detail(product.id))
        assert first.status_code == 200
        assert first.json()["data"] == {
            "id": str(product.id),
            "message": "Product deleted successfully",
        }

        second = alice_client.delete(_detail(product.id))
        assert second.status_code == 404

    def test_delete_cascades_to_updates(self, alice_client, make_product, make_update, alice):
        product = make_product(alice)
        update = make_update(product)
        alice_client.delete(_detail(product.id))
        assert not type(update).objects.filter(id=update.id).exists()
