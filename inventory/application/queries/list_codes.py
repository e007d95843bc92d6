"""
ListCodesQuery.
"""

from dataclasses import dataclass
from typing import Optional

from core.domain.value_objects import CodeStatus

DEFAULT_CODE_LIST_LIMIT = 100


@dataclass
class ListCodesQuery:
    """Query for a product's newest codes."""

    product_id: str
    status: Optional[CodeStatus] = None
    limit: int = DEFAULT_CODE_LIST_LIMIT
