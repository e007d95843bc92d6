"""
Serializers for the public delivery API endpoints.
"""

from rest_framework import serializers

from core.domain.value_objects import (
    MAX_CODE_LENGTH,
    MAX_PRODUCT_ID_LENGTH,
    MAX_USER_IDENTIFIER_LENGTH,
)


class AuthenticatedRequestSerializer(serializers.Serializer):
    """Base for request bodies that carry the shared secret."""

    password = serializers.CharField(required=False, write_only=True, help_text="Shared API secret")


class DeliverCodeRequestSerializer(AuthenticatedRequestSerializer):
    """Serializer for the get-code request."""

    product_id = serializers.CharField(max_length=MAX_PRODUCT_ID_LENGTH, trim_whitespace=False)
    user = serializers.CharField(max_length=MAX_USER_IDENTIFIER_LENGTH, trim_whitespace=False)


class DeliverCodeResponseSerializer(serializers.Serializer):
    """Serializer for the get-code response."""

    code = serializers.CharField()
    is_new = serializers.BooleanField()
    count = serializers.IntegerField()
    max = serializers.IntegerField()


class LoadCodesRequestSerializer(AuthenticatedRequestSerializer):
    """Serializer for the upload-codes request."""

    product_id = serializers.CharField(max_length=MAX_PRODUCT_ID_LENGTH, trim_whitespace=False)
    codes = serializers.ListField(
        child=serializers.CharField(max_length=MAX_CODE_LENGTH, trim_whitespace=False),
        allow_empty=False,
    )


class LoadCodesResponseSerializer(serializers.Serializer):
    """Serializer for the upload-codes response."""

    inserted = serializers.IntegerField()
    duplicates = serializers.IntegerField()


class InventoryStatusResponseSerializer(serializers.Serializer):
    """Serializer for inventory counts."""

    product_id = serializers.CharField()
    available = serializers.IntegerField()
    assigned = serializers.IntegerField()
