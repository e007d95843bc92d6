"""
Integration tests for the public delivery API.
"""

import pytest
from django.urls import reverse
from rest_framework import status

from inventory.infrastructure.models import Code as CodeModel

TEST_API_SECRET = "test-secret"


@pytest.mark.django_db
@pytest.mark.integration
class TestAuthentication:
    """Shared-secret checks in front of every API endpoint."""

    def test_missing_password(self, api_client):
        """Test request without any secret."""
        response = api_client.post(reverse("get-code"), {"product_id": "p1", "user": "u1"}, format="json")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["success"] is False
        assert response.json()["error"]["code"] == "UNAUTHORIZED"

    def test_wrong_password(self, api_client):
        """Test request with a wrong secret."""
        response = api_client.post(
            reverse("get-code"),
            {"product_id": "p1", "user": "u1", "password": "nope"},
            format="json",
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["error"]["message"] == "Wrong password"

    def test_header_secret(self, api_client, make_product, make_codes):
        """Test the secret supplied in the X-API-Secret header."""
        make_codes(make_product("p1"), "A")

        response = api_client.post(
            reverse("get-code"),
            {"product_id": "p1", "user": "u1"},
            format="json",
            HTTP_X_API_SECRET=TEST_API_SECRET,
        )

        assert response.status_code == status.HTTP_200_OK

    def test_preflight_needs_no_password(self, api_client):
        """Browsers send CORS preflights without the secret."""
        response = api_client.options(
            reverse("get-code"),
            HTTP_ORIGIN="https://shop.example.com",
            HTTP_ACCESS_CONTROL_REQUEST_METHOD="POST",
            HTTP_ACCESS_CONTROL_REQUEST_HEADERS="content-type",
        )

        assert response.status_code == status.HTTP_200_OK
        assert response["Access-Control-Allow-Origin"] == "*"
        assert "POST" in response["Access-Control-Allow-Methods"]

    def test_cors_header_on_response(self, api_client, make_product, make_codes):
        """Cross-origin calls get the allow-origin header."""
        make_codes(make_product("p1"), "A")

        response = api_client.post(
            reverse("get-code"),
            {"product_id": "p1", "user": "u1", "password": TEST_API_SECRET},
            format="json",
            HTTP_ORIGIN="https://shop.example.com",
        )

        assert response.status_code == status.HTTP_200_OK
        assert response["Access-Control-Allow-Origin"] == "*"

    def test_health_is_public(self, api_client):
        """Health endpoints need no secret."""
        response = api_client.get(reverse("health"))

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "healthy"


@pytest.mark.django_db
@pytest.mark.integration
class TestDeliverCodeAPI:
    """Tests for POST /api/get-code."""

    def _deliver(self, api_client, product_id, user):
        return api_client.post(
            reverse("get-code"),
            {"product_id": product_id, "user": user, "password": TEST_API_SECRET},
            format="json",
        )

    def test_deliver_code(self, api_client, make_product, make_codes):
        """Test handing out a fresh code."""
        make_codes(make_product("p1", max_per_user=2), "A", "B")

        response = self._deliver(api_client, "p1", "alice")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"success": True, "code": "A", "is_new": True, "count": 1, "max": 2}
        assert CodeModel.objects.get(code="A").assigned_to == "alice"

    def test_repeat_after_cap(self, api_client, make_product, make_codes):
        """A capped user gets their latest code back."""
        make_codes(make_product("p1"), "A", "B")

        first = self._deliver(api_client, "p1", "alice").json()
        again = self._deliver(api_client, "p1", "alice").json()

        assert first["is_new"] is True
        assert again == {"success": True, "code": first["code"], "is_new": False, "count": 1, "max": 1}

    def test_no_stock(self, api_client, make_product):
        """Test empty pool."""
        make_product("p1")

        response = self._deliver(api_client, "p1", "alice")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["error"]["code"] == "NO_STOCK"

    def test_capped_user_served_without_stock(self, api_client, make_product, make_codes):
        """The cap path does not need stock."""
        make_codes(make_product("p1"), "A")
        self._deliver(api_client, "p1", "alice")

        response = self._deliver(api_client, "p1", "alice")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["code"] == "A"

    def test_user_kept_verbatim(self, api_client, make_product, make_codes):
        """User identifiers are not trimmed."""
        make_codes(make_product("p1", max_per_user=2), "A", "B")

        self._deliver(api_client, "p1", " alice ")
        response = self._deliver(api_client, "p1", "alice")

        assert response.json()["is_new"] is True
        assert response.json()["count"] == 1
        assert CodeModel.objects.get(code="A").assigned_to == " alice "

    def test_unknown_product(self, api_client):
        """Test delivering from a product that does not exist."""
        response = self._deliver(api_client, "missing", "alice")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["error"]["code"] == "PRODUCT_NOT_FOUND"

    def test_inactive_product(self, api_client, make_product, make_codes):
        """Inactive products do not deliver."""
        make_codes(make_product("p1", status="inactive"), "A")

        response = self._deliver(api_client, "p1", "alice")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["error"]["code"] == "PRODUCT_NOT_FOUND"

    def test_missing_user(self, api_client):
        """Test request validation."""
        response = api_client.post(
            reverse("get-code"),
            {"product_id": "p1", "password": TEST_API_SECRET},
            format="json",
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert body["error"]["code"] == "VALIDATION_ERROR"
        assert "user" in body["error"]["details"]


@pytest.mark.django_db
@pytest.mark.integration
class TestLoadCodesAPI:
    """Tests for POST /api/upload-codes."""

    def _upload(self, api_client, product_id, codes):
        return api_client.post(
            reverse("upload-codes"),
            {"product_id": product_id, "codes": codes, "password": TEST_API_SECRET},
            format="json",
        )

    def test_upload_with_duplicates(self, api_client, make_product):
        """Repeated values are counted as duplicates."""
        make_product("p1")

        response = self._upload(api_client, "p1", ["A", "B", "A"])

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"success": True, "inserted": 2, "duplicates": 1}

        again = self._upload(api_client, "p1", ["A", "C"])
        assert again.json() == {"success": True, "inserted": 1, "duplicates": 1}
        assert CodeModel.objects.filter(product_id="p1").count() == 3

    def test_upload_keeps_whitespace(self, api_client, make_product):
        """Codes are opaque: edge whitespace makes a distinct code."""
        make_product("p1")

        response = self._upload(api_client, "p1", [" KEY-1 ", "KEY-1"])

        assert response.json() == {"success": True, "inserted": 2, "duplicates": 0}
        stored = set(CodeModel.objects.values_list("code", flat=True))
        assert stored == {" KEY-1 ", "KEY-1"}

    def test_upload_unknown_product(self, api_client):
        """Test upload into a missing product."""
        response = self._upload(api_client, "missing", ["A"])

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["error"]["code"] == "PRODUCT_NOT_FOUND"
        assert CodeModel.objects.count() == 0

    def test_upload_empty_list(self, api_client, make_product):
        """An empty list is rejected."""
        make_product("p1")

        response = self._upload(api_client, "p1", [])

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_upload_blank_code(self, api_client, make_product):
        """A blank value fails validation and nothing is written."""
        make_product("p1")

        response = self._upload(api_client, "p1", ["A", ""])

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert CodeModel.objects.count() == 0


@pytest.mark.django_db
@pytest.mark.integration
class TestInventoryStatusAPI:
    """Tests for GET /api/inventory/<product_id>."""

    def test_inventory_status(self, api_client, make_product, make_codes):
        """Counts reflect deliveries."""
        make_codes(make_product("p1"), "A", "B", "C")
        api_client.post(
            reverse("get-code"),
            {"product_id": "p1", "user": "alice", "password": TEST_API_SECRET},
            format="json",
        )

        response = api_client.get(
            reverse("inventory-status", args=["p1"]), {"password": TEST_API_SECRET}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"success": True, "product_id": "p1", "available": 2, "assigned": 1}

    def test_unknown_product_reports_zero(self, api_client):
        """Unknown products are not an error here."""
        response = api_client.get(
            reverse("inventory-status", args=["missing"]), {"password": TEST_API_SECRET}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["available"] == 0
        assert response.json()["assigned"] == 0
