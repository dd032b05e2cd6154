"""Integration tests for signup, signin and bearer-token enforcement."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt as pyjwt
import pytest
from django.conf import settings

from modules.products.models import Product
from modules.users.models import User

pytestmark = pytest.mark.integration

USERS_URL = "/api/users"
SIGNIN_URL = "/api/session/signin"


class TestSignUp:
    def test_returns_user_and_token(self, api_client):
        response = api_client.post(
            USERS_URL, {"username": "alice", "password": "Secret123"}, format="json"
        )
        assert response.status_code == 201
        body = response.json()
        assert body["user"]["username"] == "alice"
        assert "password" not in body["user"]
        assert body["token"]

        stored = User.objects.get(username="alice")
        assert stored.password != "Secret123"

    def test_token_works_immediately(self, api_client):
        response = api_client.post(
            USERS_URL, {"username": "alice", "password": "Secret123"}, format="json"
        )
        token = response.json()["token"]
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
        assert api_client.get("/api/updates").status_code == 200

    def test_duplicate_username(self, api_client, alice):
        response = api_client.post(
            USERS_URL, {"username": "alice", "password": "Secret123"}, format="json"
        )
        assert response.status_code == 400
        assert response.json() == {"error": "username already exists"}
        assert User.objects.filter(username="alice").count() == 1

    def test_weak_password(self, api_client):
        response = api_client.post(
            USERS_URL, {"username": "alice", "password": "secret"}, format="json"
        )
        assert response.status_code == 400
        fields = {e["field"] for e in response.json()["error"]}
        assert fields == {"password"}
        assert not User.objects.exists()


class TestSignIn:
    def test_success(self, api_client, alice):
        response = api_client.post(
            SIGNIN_URL, {"username": "alice", "password": "Secret123"}, format="json"
        )
        assert response.status_code == 200
        body = response.json()
        assert body["user"]["id"] == str(alice.id)
        assert body["token"]

    def test_wrong_password(self, api_client, alice):
        response = api_client.post(
            SIGNIN_URL, {"username": "alice", "password": "Wrong123"}, format="json"
        )
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid credentials"}

    def test_unknown_user_looks_the_same(self, api_client):
        response = api_client.post(
            SIGNIN_URL, {"username": "ghost", "password": "Secret123"}, format="json"
        )
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid credentials"}

    def test_missing_fields(self, api_client):
        response = api_client.post(SIGNIN_URL, {}, format="json")
        assert response.status_code == 400


class TestBearerEnforcement:
    def test_missing_token(self, api_client):
        response = api_client.get("/api/updates")
        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized"}
        assert response["WWW-Authenticate"] == 'Bearer realm="api"'

    def test_malformed_header(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION="Token abc")
        response = api_client.get("/api/updates")
        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized"}

    def test_expired_token(self, api_client, alice):
        past = datetime.now(tz=timezone.utc) - timedelta(hours=3)
        token = pyjwt.encode(
            {
                "id": str(alice.id),
                "username": alice.username,
                "iat": past,
                "exp": past + timedelta(hours=1),
            },
            settings.JWT["SIGNING_KEY"],
            algorithm=settings.JWT["ALGORITHM"],
        )
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
        response = api_client.get("/api/updatePoints")
        assert response.status_code == 401

    def test_public_product_list(self, api_client):
        assert api_client.get("/api/product").status_code == 200

    def test_product_create_requires_token(self, api_client):
        response = api_client.post("/api/product", {"name": "Widget", "price": 10}, format="json")
        assert response.status_code == 401
        assert not Product.objects.exists()


class TestTokenlessMutations:
    """A 401 on a protected route leaves the stored record untouched."""

    def test_product_put_and_delete(self, api_client, alice, make_product):
        product = make_product(alice, name="Original", price=10)

        put = api_client.put(
            f"/api/product/{product.id}", {"name": "Changed", "price": 99}, format="json"
        )
        delete = api_client.delete(f"/api/product/{product.id}")

        assert (put.status_code, delete.status_code) == (401, 401)
        product.refresh_from_db()
        assert (product.name, product.price) == ("Original", 10)

    def test_update_put_and_delete(self, api_client, alice, make_product, make_update):
        update = make_update(make_product(alice))

        put = api_client.put(f"/api/updates/{update.id}", {"title": "Changed"}, format="json")
        delete = api_client.delete(f"/api/updates/{update.id}")

        assert (put.status_code, delete.status_code) == (401, 401)
        update.refresh_from_db()
        assert update.title == "First release"

    def test_point_create_with_bad_token(self, api_client, alice, make_product, make_update):
        update = make_update(make_product(alice))
        api_client.credentials(HTTP_AUTHORIZATION="Bearer not.a.jwt")

        response = api_client.post(
            "/api/updatePoints",
            {"name": "Login", "description": "New page", "updateId": str(update.id)},
            format="json",
        )

        assert response.status_code == 401
        assert not update.points.exists()


class TestUserAccount:
    def test_cannot_touch_other_account(self, alice_client, bob):
        response = alice_client.delete(f"{USERS_URL}/{bob.id}")
        assert response.status_code == 404
        assert User.objects.filter(id=bob.id).exists()

    def test_change_own_password(self, alice_client, api_client, alice):
        response = alice_client.put(
            f"{USERS_URL}/{alice.id}", {"password": "Changed99"}, format="json"
        )
        assert response.status_code == 200
        assert response.json()["data"]["username"] == "alice"

        signin = api_client.post(
            SIGNIN_URL, {"username": "alice", "password": "Changed99"}, format="json"
        )
        assert signin.status_code == 200

    def test_delete_own_account(self, alice_client, alice):
        response = alice_client.delete(f"{USERS_URL}/{alice.id}")
        assert response.status_code == 200
        assert response.json()["data"] == {
            "id": str(alice.id),
            "message": "User deleted successfully",
        }
        assert not User.objects.filter(id=alice.id).exists()

    def test_list_never_exposes_hashes(self, alice_client, bob):
        response = alice_client.get(USERS_URL)
        assert response.status_code == 200
        for user in response.json()["data"]:
            assert set(user) == {"id", "username", "createdAt", "updatedAt"}
