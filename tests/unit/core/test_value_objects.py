"""
Unit tests for core value objects.
"""
import pytest

from core.domain.value_objects import (
    MAX_CODE_LENGTH,
    CodeStatus,
    CodeValue,
    ProductId,
    ProductStatus,
    UserIdentifier,
)


class TestProductId:
    """Tests for ProductId value object."""

    def test_valid_id(self):
        """Test valid product id."""
        assert str(ProductId("steam-key")) == "steam-key"

    def test_invalid_id_empty(self):
        """Test invalid empty id."""
        with pytest.raises(ValueError, match="cannot be empty"):
            ProductId("   ")

    def test_invalid_id_too_long(self):
        """Test id over the length limit."""
        with pytest.raises(ValueError, match="too long"):
            ProductId("p" * 101)


class TestUserIdentifier:
    """Tests for UserIdentifier value object."""

    def test_opaque_value_kept(self):
        """Identifiers are not normalized."""
        assert str(UserIdentifier("Alice@Example")) == "Alice@Example"

    def test_invalid_empty(self):
        """Test invalid empty identifier."""
        with pytest.raises(ValueError, match="cannot be empty"):
            UserIdentifier("")

    def test_invalid_type(self):
        """Test non-string identifier."""
        with pytest.raises(ValueError, match="must be a string"):
            UserIdentifier(42)


class TestCodeValue:
    """Tests for CodeValue value object."""

    def test_valid_code(self):
        """Test valid code."""
        code = CodeValue("ABCD-1234")
        assert code.value == "ABCD-1234"

    def test_max_length_accepted(self):
        """Test code at the length limit."""
        assert len(str(CodeValue("x" * MAX_CODE_LENGTH))) == MAX_CODE_LENGTH

    def test_too_long_rejected(self):
        """Test code over the length limit."""
        with pytest.raises(ValueError, match="longer than"):
            CodeValue("x" * (MAX_CODE_LENGTH + 1))

    def test_blank_rejected(self):
        """Test blank code."""
        with pytest.raises(ValueError, match="cannot be empty"):
            CodeValue(" ")

    def test_equality_by_value(self):
        """Value objects compare by value."""
        assert CodeValue("A") == CodeValue("A")
        assert CodeValue("A") != CodeValue("B")
        assert len({CodeValue("A"), CodeValue("A")}) == 1


class TestStatuses:
    """Tests for status enums."""

    def test_code_status_values(self):
        """Test code status enum values."""
        assert CodeStatus.AVAILABLE.value == "available"
        assert CodeStatus.ASSIGNED.value == "assigned"

    def test_product_status_str(self):
        """Test product status string form."""
        assert str(ProductStatus.INACTIVE) == "inactive"
