"""
Unit tests for Code entity.
"""
from datetime import datetime, timezone

import pytest

from core.domain.exceptions import CodeAlreadyAssignedError
from core.domain.value_objects import CodeStatus
from inventory.domain.code import Code


class TestCode:
    """Tests for Code entity."""

    def test_create_code(self):
        """New codes are available and unassigned."""
        code = Code.create("p1", "ABC-123")

        assert code.status == CodeStatus.AVAILABLE
        assert code.assigned_to is None
        assert code.assigned_at is None
        assert code.is_available()

    def test_assign(self):
        """Assigning records user and time."""
        at = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assigned = Code.create("p1", "ABC-123").assign("user-1", at=at)

        assert assigned.status == CodeStatus.ASSIGNED
        assert assigned.assigned_to == "user-1"
        assert assigned.assigned_at == at

    def test_assign_twice(self):
        """An assigned code cannot be assigned again."""
        assigned = Code.create("p1", "ABC-123").assign("user-1")
        with pytest.raises(CodeAlreadyAssignedError):
            assigned.assign("user-2")

    def test_assigned_requires_user_and_time(self):
        """Status and assignment fields must agree."""
        with pytest.raises(ValueError, match="must record user and time"):
            Code(
                id=1,
                product_id="p1",
                code="X",
                status=CodeStatus.ASSIGNED,
                assigned_to="u1",
                assigned_at=None,
            )

    def test_available_cannot_carry_assignment(self):
        """Available codes carry no assignment data."""
        with pytest.raises(ValueError, match="cannot carry assignment data"):
            Code(
                id=1,
                product_id="p1",
                code="X",
                status=CodeStatus.AVAILABLE,
                assigned_to="u1",
                assigned_at=None,
            )

    def test_empty_code_rejected(self):
        """Code strings must be non-empty."""
        with pytest.raises(ValueError):
            Code.create("p1", "")
