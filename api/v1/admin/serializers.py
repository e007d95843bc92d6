"""
Serializers for the admin API endpoints.
"""

from rest_framework import serializers

from api.v1.delivery.serializers import AuthenticatedRequestSerializer
from core.domain.value_objects import (
    MAX_PRODUCT_ID_LENGTH,
    MAX_USER_IDENTIFIER_LENGTH,
    CodeStatus,
    ProductStatus,
)
from inventory.application.queries.list_codes import DEFAULT_CODE_LIST_LIMIT


class ProductSerializer(serializers.Serializer):
    """Serializer for ProductDTO."""

    id = serializers.CharField()
    name = serializers.CharField()
    description = serializers.CharField(allow_null=True)
    max_per_user = serializers.IntegerField()
    status = serializers.CharField()
    created_at = serializers.DateTimeField()


class CreateProductRequestSerializer(AuthenticatedRequestSerializer):
    """Serializer for the add-product request."""

    id = serializers.CharField(max_length=MAX_PRODUCT_ID_LENGTH)
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    max_per_user = serializers.IntegerField(required=False, min_value=0, default=1)


class UpdateProductRequestSerializer(AuthenticatedRequestSerializer):
    """Serializer for the update-product request; omitted fields stay unchanged."""

    id = serializers.CharField(max_length=MAX_PRODUCT_ID_LENGTH)
    name = serializers.CharField(max_length=255, required=False)
    description = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    max_per_user = serializers.IntegerField(required=False, min_value=0)
    status = serializers.ChoiceField(choices=[s.value for s in ProductStatus], required=False)


class ProductIdRequestSerializer(AuthenticatedRequestSerializer):
    """Serializer for requests addressing one product by ``id``."""

    id = serializers.CharField(max_length=MAX_PRODUCT_ID_LENGTH)


class InventoryRequestSerializer(AuthenticatedRequestSerializer):
    """Serializer for the admin inventory request."""

    product_id = serializers.CharField(max_length=MAX_PRODUCT_ID_LENGTH, trim_whitespace=False)


class ListCodesRequestSerializer(AuthenticatedRequestSerializer):
    """Serializer for the list-codes request."""

    product_id = serializers.CharField(max_length=MAX_PRODUCT_ID_LENGTH, trim_whitespace=False)
    status = serializers.ChoiceField(choices=[s.value for s in CodeStatus], required=False)
    limit = serializers.IntegerField(
        required=False, min_value=1, max_value=1000, default=DEFAULT_CODE_LIST_LIMIT
    )


class CodeSerializer(serializers.Serializer):
    """Serializer for CodeDTO."""

    id = serializers.IntegerField()
    product_id = serializers.CharField()
    code = serializers.CharField()
    status = serializers.CharField()
    assigned_to = serializers.CharField(allow_null=True)
    assigned_at = serializers.DateTimeField(allow_null=True)
    created_at = serializers.DateTimeField(allow_null=True)


class CodeIdRequestSerializer(AuthenticatedRequestSerializer):
    """Serializer for requests addressing one code by ``code_id``."""

    code_id = serializers.IntegerField(min_value=1)


class AssignCodeRequestSerializer(CodeIdRequestSerializer):
    """Serializer for the manual assign request."""

    user = serializers.CharField(max_length=MAX_USER_IDENTIFIER_LENGTH, trim_whitespace=False)
