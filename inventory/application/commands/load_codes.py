"""
LoadCodesCommand.

Command for bulk loading codes into a product's pool.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class LoadCodesCommand:
    """Command to add codes to a product."""

    product_id: str
    codes: List[str] = field(default_factory=list)
