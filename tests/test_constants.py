"""
Tests for static constants
"""
import pytest

from constants import (
    ENDPOINTS,
    SUCCESS_STATUS_CODES,
    PROVISION_SERVER_FIELDS,
)


class TestEndpointTable:
    """Test the fixed endpoint table."""

    def test_endpoint_table_contents(self):
        assert dict(ENDPOINTS) == {
            "ping": "ping",
            "servers": "servers",
            "locations": "locations",
            "profiles": "profiles",
            "images": "images",
            "pubkeys": "account/publicKeys",
            "scripts": "scripts",
            "hooks": "hooks",
            "events": "events",
        }

    def test_endpoint_table_is_read_only(self):
        with pytest.raises(TypeError):
            ENDPOINTS["servers"] = "other"  # type: ignore[index]


class TestStatusCodes:

    def test_success_codes(self):
        assert SUCCESS_STATUS_CODES == {200, 201, 202, 418}
        assert 204 not in SUCCESS_STATUS_CODES


def test_provision_required_fields():
    assert PROVISION_SERVER_FIELDS == ("name", "slug", "locationId", "profileSlug", "imageSlug")
