"""Unit tests for ownership chain authorization and its policies."""

from __future__ import annotations

import uuid
from unittest.mock import MagicMock

import pytest

from modules.core.authentication import Identity
from modules.core.errors import Forbidden, NotFound
from modules.core.ownership import (
    AuthorizationPolicy,
    OwnedRecord,
    Resource,
    authorize,
    policy_for,
    require_owned,
)

pytestmark = pytest.mark.unit


@pytest.fixture()
def identity():
    return Identity(id=uuid.uuid4(), username="alice")


@pytest.fixture()
def reveal_updates(settings):
    settings.OWNERSHIP_POLICIES = {
        **settings.OWNERSHIP_POLICIES,
        "update": AuthorizationPolicy.REVEAL_FORBIDDEN.value,
    }


class TestPolicyFor:
    def test_default_hides_existence(self):
        for resource in Resource:
            assert policy_for(resource) is AuthorizationPolicy.HIDE_EXISTENCE

    def test_missing_entry_hides_existence(self, settings):
        settings.OWNERSHIP_POLICIES = {}
        assert policy_for(Resource.PRODUCT) is AuthorizationPolicy.HIDE_EXISTENCE

    def test_configured_policy(self, reveal_updates):
        assert policy_for(Resource.UPDATE) is AuthorizationPolicy.REVEAL_FORBIDDEN
        assert policy_for(Resource.PRODUCT) is AuthorizationPolicy.HIDE_EXISTENCE


class TestAuthorize:
    def test_owner_gets_record(self, identity):
        record = object()
        assert authorize(Resource.UPDATE, OwnedRecord(record, identity.id), identity) is record

    def test_missing_record(self, identity):
        with pytest.raises(NotFound) as exc_info:
            authorize(Resource.UPDATE, None, identity)
        assert exc_info.value.detail == "Update not found"

    def test_foreign_record_is_hidden_by_default(self, identity):
        owned = OwnedRecord(object(), uuid.uuid4())
        with pytest.raises(NotFound) as exc_info:
            authorize(Resource.UPDATE, owned, identity)
        assert exc_info.value.detail == "Update not found"

    def test_foreign_record_is_forbidden_when_revealed(self, identity, reveal_updates):
        owned = OwnedRecord(object(), uuid.uuid4())
        with pytest.raises(Forbidden) as exc_info:
            authorize(Resource.UPDATE, owned, identity)
        assert exc_info.value.detail == "Not authorized to access this update"


class TestRequireOwned:
    def test_returns_matching_record(self):
        record = object()
        exists = MagicMock()
        assert require_owned(Resource.UPDATE, record, exists=exists) is record
        exists.assert_not_called()

    def test_hide_policy_never_probes_existence(self):
        exists = MagicMock(return_value=True)
        with pytest.raises(NotFound):
            require_owned(Resource.UPDATE, None, exists=exists)
        exists.assert_not_called()

    def test_reveal_policy_foreign_record(self, reveal_updates):
        with pytest.raises(Forbidden):
            require_owned(Resource.UPDATE, None, exists=lambda: True)

    def test_reveal_policy_missing_record(self, reveal_updates):
        with pytest.raises(NotFound) as exc_info:
            require_owned(Resource.UPDATE, None, exists=lambda: False)
        assert exc_info.value.detail == "Update not found"


def test_labels_are_human_readable():
    assert Resource.UPDATE_POINT.label == "update point"


class TestPolicyConfiguration:
    def test_reads_environment(self, monkeypatch):
        from config.settings import ownership_policy

        monkeypatch.setenv("OWNERSHIP_POLICY_PRODUCT", "reveal_forbidden")
        assert ownership_policy("product") == "reveal_forbidden"

    def test_defaults_to_hide_existence(self, monkeypatch):
        from config.settings import ownership_policy

        monkeypatch.delenv("OWNERSHIP_POLICY_UPDATE", raising=False)
        assert ownership_policy("update") == "hide_existence"

    def test_unknown_value_fails_fast(self, monkeypatch):
        from config.settings import ownership_policy

        monkeypatch.setenv("OWNERSHIP_POLICY_UPDATE_POINT", "hide")
        with pytest.raises(ValueError):
            ownership_policy("update_point")
