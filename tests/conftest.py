from __future__ import annotations

from typing import Callable

import pytest

from rest_framework.test import APIClient

from modules.core.security import create_token, hash_password
from modules.products.models import Product
from modules.update_points.models import UpdatePoint
from modules.updates.constants import UpdateStatus
from modules.updates.models import Update
from modules.users.models import User

DEFAULT_PASSWORD = "Secret123"


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


@pytest.fixture()
def make_user() -> Callable[..., User]:
    def _make(username: str = "alice", password: str = DEFAULT_PASSWORD) -> User:
        return User.objects.create(username=username, password=hash_password(password))

    return _make


@pytest.fixture()
def make_product() -> Callable[..., Product]:
    def _make(owner: User, name: str = "Widget", price: int = 100) -> Product:
        return Product.objects.create(owner=owner, name=name, price=price)

    return _make


@pytest.fixture()
def make_update() -> Callable[..., Update]:
    def _make(product: Product, **overrides) -> Update:
        fields = {
            "title": "First release",
            "body": "Initial public version.",
            "status": UpdateStatus.IN_PROGRESS,
            "version": "1.0.0",
        }
        fields.update(overrides)
        return Update.objects.create(product=product, **fields)

    return _make


@pytest.fixture()
def make_point() -> Callable[..., UpdatePoint]:
    def _make(update: Update, name: str = "Login", description: str = "New login page") -> UpdatePoint:
        return UpdatePoint.objects.create(update=update, name=name, description=description)

    return _make


@pytest.fixture()
def client_for() -> Callable[[User], APIClient]:
    """APIClient carrying a real bearer token for ``user``."""

    def _client(user: User) -> APIClient:
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {create_token(user)}")
        return client

    return _client


# ---------------------------------------------------------------------------
# Two users and their clients
# ---------------------------------------------------------------------------


@pytest.fixture()
def alice(make_user) -> User:
    return make_user("alice")


@pytest.fixture()
def bob(make_user) -> User:
    return make_user("bob")


@pytest.fixture()
def alice_client(client_for, alice) -> APIClient:
    return client_for(alice)


@pytest.fixture()
def bob_client(client_for, bob) -> APIClient:
    return client_for(bob)
