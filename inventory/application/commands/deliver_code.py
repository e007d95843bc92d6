"""
DeliverCodeCommand.

Command for handing a code to a user.
"""

from dataclasses import dataclass


@dataclass
class DeliverCodeCommand:
    """Command to deliver a code of a product to a user."""

    product_id: str
    user: str
