"""
Integration tests for the admin API.
"""

import pytest
from django.urls import reverse
from rest_framework import status

from inventory.infrastructure.models import Code as CodeModel
from inventory.infrastructure.models import Delivery as DeliveryModel
from products.infrastructure.models import Product as ProductModel

TEST_API_SECRET = "test-secret"


@pytest.fixture
def admin_post(api_client):
    """Fixture posting an authenticated JSON body to an admin endpoint."""

    def _post(url_name, **data):
        return api_client.post(reverse(url_name), {"password": TEST_API_SECRET, **data}, format="json")

    return _post


@pytest.mark.django_db
@pytest.mark.integration
class TestProductAdminAPI:
    """Tests for the product management endpoints."""

    def test_requires_password(self, api_client):
        """Admin endpoints share the API secret."""
        response = api_client.post(reverse("admin-list-products"), {}, format="json")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_create_product(self, admin_post):
        """Test adding a product."""
        response = admin_post("admin-create-product", id="p1", name="First", max_per_user=3)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert data["id"] == "p1"
        assert data["max_per_user"] == 3
        assert data["status"] == "active"
        assert ProductModel.objects.filter(id="p1").exists()

    def test_create_product_defaults(self, admin_post):
        """Cap defaults to one code per user."""
        response = admin_post("admin-create-product", id="p1", name="First")

        assert response.json()["data"]["max_per_user"] == 1
        assert response.json()["data"]["description"] is None

    def test_create_duplicate_product(self, admin_post, make_product):
        """Test adding a product whose id is taken."""
        make_product("p1")

        response = admin_post("admin-create-product", id="p1", name="Again")

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["error"]["code"] == "PRODUCT_ALREADY_EXISTS"

    def test_list_products(self, admin_post, make_product):
        """Test listing products."""
        make_product("p1")
        make_product("p2", status="inactive")

        response = admin_post("admin-list-products")

        assert response.status_code == status.HTTP_200_OK
        assert {p["id"] for p in response.json()["data"]} == {"p1", "p2"}

    def test_update_product(self, admin_post, make_product):
        """Test a partial update."""
        make_product("p1", name="Old")

        response = admin_post("admin-update-product", id="p1", name="New", status="inactive")

        assert response.status_code == status.HTTP_200_OK
        row = ProductModel.objects.get(id="p1")
        assert (row.name, row.status, row.max_per_user) == ("New", "inactive", 1)

    def test_update_clears_description(self, admin_post, make_product):
        """A null description removes it."""
        ProductModel.objects.filter(id=make_product("p1").id).update(description="old")

        response = admin_post("admin-update-product", id="p1", description=None)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["data"]["description"] is None
        assert ProductModel.objects.get(id="p1").description is None

    def test_update_without_changes(self, admin_post, make_product):
        """An update carrying no field is rejected."""
        make_product("p1")

        response = admin_post("admin-update-product", id="p1")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"]["code"] == "INVALID_PRODUCT_UPDATE"

    def test_update_unknown_product(self, admin_post):
        """Test updating a product that does not exist."""
        response = admin_post("admin-update-product", id="missing", name="X")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_product(self, admin_post, make_product, make_codes):
        """Deleting a product removes its codes."""
        make_codes(make_product("p1"), "A", "B")

        response = admin_post("admin-delete-product", id="p1")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"success": True}
        assert CodeModel.objects.count() == 0

        again = admin_post("admin-delete-product", id="p1")
        assert again.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
@pytest.mark.integration
class TestCodeAdminAPI:
    """Tests for the code management endpoints."""

    def test_inventory(self, admin_post, make_product, make_codes):
        """Test the admin inventory counts."""
        make_codes(make_product("p1"), "A", "B")

        response = admin_post("admin-inventory", product_id="p1")

        assert response.json() == {"success": True, "product_id": "p1", "available": 2, "assigned": 0}

    def test_upload_codes(self, admin_post, make_product):
        """Test uploading codes from the console."""
        make_product("p1")

        response = admin_post("admin-upload-codes", product_id="p1", codes=["A", "B", "B"])

        assert response.json() == {"success": True, "inserted": 2, "duplicates": 1}

    def test_list_codes(self, admin_post, make_product, make_codes):
        """Codes are listed newest first and can be filtered."""
        product = make_product("p1")
        make_codes(product, "A", "B", "C")

        response = admin_post("admin-list-codes", product_id="p1", limit=2)

        assert response.status_code == status.HTTP_200_OK
        assert [c["code"] for c in response.json()["data"]] == ["C", "B"]

        filtered = admin_post("admin-list-codes", product_id="p1", status="assigned")
        assert filtered.json()["data"] == []

    def test_list_codes_bad_status(self, admin_post):
        """Test list request validation."""
        response = admin_post("admin-list-codes", product_id="p1", status="lost")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_delete_code(self, admin_post, make_product, make_codes):
        """Test deleting one code."""
        row = make_codes(make_product("p1"), "A")[0]

        response = admin_post("admin-delete-code", code_id=row.id)

        assert response.status_code == status.HTTP_200_OK
        assert not CodeModel.objects.filter(id=row.id).exists()

        again = admin_post("admin-delete-code", code_id=row.id)
        assert again.status_code == status.HTTP_404_NOT_FOUND
        assert again.json()["error"]["code"] == "CODE_NOT_FOUND"

    def test_assign_code(self, admin_post, make_product, make_codes):
        """Manual assignment records a delivery and ignores the cap."""
        product = make_product("p1")
        first, second = make_codes(product, "A", "B")

        assert admin_post("admin-assign-code", code_id=first.id, user="alice").json() == {
            "success": True,
            "code": "A",
        }
        response = admin_post("admin-assign-code", code_id=second.id, user="alice")

        assert response.status_code == status.HTTP_200_OK
        assert DeliveryModel.objects.filter(product_id="p1", user="alice").count() == 2

    def test_assign_taken_code(self, admin_post, make_product, make_codes):
        """Test assigning a code that is no longer available."""
        row = make_codes(make_product("p1"), "A")[0]
        admin_post("admin-assign-code", code_id=row.id, user="alice")

        response = admin_post("admin-assign-code", code_id=row.id, user="bob")

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["error"]["code"] == "CODE_ALREADY_ASSIGNED"
        assert CodeModel.objects.get(id=row.id).assigned_to == "alice"

    def test_assign_unknown_code(self, admin_post):
        """Test assigning a code id that does not exist."""
        response = admin_post("admin-assign-code", code_id=999, user="alice")

        assert response.status_code == status.HTTP_404_NOT_FOUND
