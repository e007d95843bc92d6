"""
Code administration commands.
"""

from dataclasses import dataclass


@dataclass
class AssignCodeCommand:
    """Command to assign a specific code to a user."""

    code_id: int
    user: str


@dataclass
class DeleteCodeCommand:
    """Command to remove a code from the pool."""

    code_id: int
