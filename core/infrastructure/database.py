"""
Database utilities: store error translation and optimistic retry policy.
"""

import asyncio
import functools
import logging
import random
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from django.conf import settings
from django.db import InterfaceError, OperationalError

from core.domain.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)

DEFAULT_CODE_DELIVERY_SETTINGS: Dict[str, Any] = {
    "MAX_ATTEMPTS": 5,
    "BACKOFF_BASE_SECONDS": 0.01,
    "BACKOFF_MAX_SECONDS": 0.25,
    "STRICT_USER_CAP": False,
}


def code_delivery_settings() -> Dict[str, Any]:
    """Return the CODE_DELIVERY settings merged over the defaults."""
    configured = getattr(settings, "CODE_DELIVERY", None) or {}
    return {**DEFAULT_CODE_DELIVERY_SETTINGS, **configured}


def translate_store_errors(func: Callable) -> Callable:
    """
    Translate database connectivity failures into StoreUnavailableError.

    Integrity errors and everything else pass through untouched; only the
    errors that mean the store itself is unreachable are translated.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (OperationalError, InterfaceError) as exc:
            logger.error("Store call %s failed: %s", func.__name__, exc, exc_info=True)
            raise StoreUnavailableError(f"Store unavailable: {exc}") from exc

    return wrapper


@dataclass(frozen=True)
class RetryPolicy:
    """
    Bounded retry with exponential backoff and full jitter.

    Attempt numbers start at 1; ``delay_for(n)`` is the pause taken after
    attempt ``n`` failed.
    """

    max_attempts: int = 5
    base_delay: float = 0.01
    max_delay: float = 0.25

    def __post_init__(self):
        """Validate policy."""
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.base_delay < 0 or self.max_delay < 0:
            raise ValueError("Backoff delays cannot be negative")

    @classmethod
    def from_settings(cls, overrides: Optional[Dict[str, Any]] = None) -> "RetryPolicy":
        """
        Build a policy from the CODE_DELIVERY setting.

        Args:
            overrides: Optional keys overriding the configured values

        Returns:
            RetryPolicy instance
        """
        config = {**code_delivery_settings(), **(overrides or {})}
        return cls(
            max_attempts=int(config["MAX_ATTEMPTS"]),
            base_delay=float(config["BACKOFF_BASE_SECONDS"]),
            max_delay=float(config["BACKOFF_MAX_SECONDS"]),
        )

    def delay_for(self, attempt: int) -> float:
        """Return a jittered delay for the given failed attempt."""
        ceiling = min(self.max_delay, self.base_delay * (2 ** (attempt - 1)))
        return random.uniform(0, ceiling)

    async def backoff(self, attempt: int) -> None:
        """Sleep before the next attempt."""
        delay = self.delay_for(attempt)
        if delay > 0:
            await asyncio.sleep(delay)
