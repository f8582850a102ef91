"""Unit tests for core enums and exceptions."""

import pytest

from cumulus.openstack.core import (
    CloudError,
    HttpResponseError,
    ManifestIntegrityError,
    NotFoundError,
    NotFoundPolicy,
    ServiceType,
)


class TestNotFoundPolicy:
    @pytest.mark.parametrize(
        "policy,expected",
        [
            (NotFoundPolicy.FALSE, False),
            (NotFoundPolicy.NONE, None),
            (NotFoundPolicy.EMPTY, {}),
        ],
    )
    def test_fallback(self, policy, expected):
        assert policy.fallback() == expected

    def test_empty_fallback_is_fresh(self):
        first = NotFoundPolicy.EMPTY.fallback()
        first["k"] = "v"

        assert NotFoundPolicy.EMPTY.fallback() == {}


def test_service_type_values():
    assert ServiceType("object-store") is ServiceType.OBJECT_STORE


class TestExceptions:
    def test_not_found_is_http_error(self):
        error = NotFoundError("gone", url="https://x/queues/q")

        assert isinstance(error, HttpResponseError)
        assert isinstance(error, CloudError)
        assert error.status_code == 404
        assert error.url == "https://x/queues/q"

    def test_manifest_integrity_carries_etags(self):
        error = ManifestIntegrityError("mismatch", expected="abc", actual=None)

        assert error.expected == "abc"
        assert error.actual is None
        assert str(error) == "mismatch"
